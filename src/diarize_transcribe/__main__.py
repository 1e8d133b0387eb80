import sys

from diarize_transcribe.cli import main

sys.exit(main())
