#!/usr/bin/env python
"""Run diarize-transcribe from a source checkout."""

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from diarize_transcribe.cli import main


if __name__ == "__main__":
    sys.exit(main())
