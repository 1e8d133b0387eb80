"""Command line interface: diarize-transcribe <audio_file> [options]."""

import argparse
import sys
from typing import Any

from diarize_transcribe.config import deep_merge, load_config
from diarize_transcribe.core import DiarizeTranscribeError
from diarize_transcribe.output import format_transcript, save_transcript, to_json
from diarize_transcribe.pipeline import DiarizeTranscribePipeline
from diarize_transcribe.utils import get_logger, setup_logging

logger = get_logger(__name__)

EPILOG = """
Examples:
  # Basic usage
  diarize-transcribe podcast.mp3

  # Save to JSON file
  diarize-transcribe podcast.mp3 --output transcript.json

  # Smaller model with custom threshold
  diarize-transcribe podcast.mp3 --model-version small --threshold 0.8
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diarize-transcribe",
        description=(
            "Performs speaker diarization and speech recognition in one pass, "
            "producing a speaker-attributed transcript with timestamps."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("audio_file", help="Audio file to process")
    parser.add_argument("--threshold", type=float, help="Clustering threshold for speaker separation (default: 0.7)")
    parser.add_argument("--output", "-o", help="Save results to JSON file (default: print to stdout)")
    parser.add_argument("--model-version", help="ASR model size, e.g. large-v3, medium, small")
    parser.add_argument("--no-word-timings", action="store_true", help="Exclude word-level timings from output")
    parser.add_argument("--language", help="Language code (default: auto-detect)")
    parser.add_argument("--format", choices=["json", "text"], help="Stdout format (default: text)")
    parser.add_argument("--parallel", action="store_true", help="Run diarization and ASR concurrently")
    parser.add_argument("--cpu", action="store_true", help="Force CPU mode")
    parser.add_argument("--config", help="Extra YAML config file")
    parser.add_argument("--env", "-e", help="Environment config to load (e.g. development)")
    parser.add_argument("--config-dir", "-c", default="configs", help="Config directory")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command line flags into config overrides."""
    overrides: dict[str, Any] = {}
    if args.threshold is not None:
        overrides = deep_merge(overrides, {"diarization": {"clustering_threshold": args.threshold}})
    if args.model_version:
        overrides = deep_merge(overrides, {"asr": {"model_size": args.model_version.lower()}})
    if args.language:
        overrides = deep_merge(overrides, {"asr": {"language": args.language}})
    if args.no_word_timings:
        overrides = deep_merge(overrides, {"output": {"include_word_timings": False}})
    if args.format:
        overrides = deep_merge(overrides, {"output": {"format": args.format}})
    if args.parallel:
        overrides["parallel_stages"] = True
    if args.cpu:
        overrides = deep_merge(overrides, {
            "asr": {"device": "cpu", "compute_type": "int8"},
            "diarization": {"device": "cpu"},
        })
    if args.log_level:
        overrides["log_level"] = args.log_level
    return overrides


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            config_path=args.config,
            env=args.env,
            config_dir=args.config_dir,
            overrides=overrides_from_args(args),
        )
    except DiarizeTranscribeError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(level=config.log_level, format_style=config.log_format)

    logger.info(f"Processing audio file: {args.audio_file}")
    logger.info(f"   Clustering threshold: {config.diarization.clustering_threshold}")
    logger.info(f"   Model version: {config.asr.model_size}")

    try:
        with DiarizeTranscribePipeline(config) as pipeline:
            transcript = pipeline.process(args.audio_file)

        if args.output:
            save_transcript(transcript, args.output, indent=config.output.json_indent)
        elif config.output.format == "json":
            print(to_json(transcript, indent=config.output.json_indent))
        else:
            print(format_transcript(transcript))

    except DiarizeTranscribeError as e:
        logger.error(f"Failed to process audio: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
