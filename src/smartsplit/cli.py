"""Command-line interface for sentence splitting."""

import argparse
import sys
from pathlib import Path

from smartsplit.config.loader import load_config, ConfigLoadError
from smartsplit.config.schema import SplitConfig
from smartsplit.core.util import safe_json
from smartsplit.runtime.analyzer import TextAnalyzer


def _read_text(args) -> str:
    """Text from the positional argument, or stdin when it is omitted."""
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _resolve_config(args) -> SplitConfig:
    """Config file values, overridden by --min-words when given."""
    config = load_config(args.config) if args.config else SplitConfig()
    if args.min_words is not None:
        config = SplitConfig(min_words_per_sentence=args.min_words)
    return config


def split_command(args):
    """Split text into sentences, one per line."""
    try:
        config = _resolve_config(args)
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1

    analysis = TextAnalyzer(config=config).analyze(_read_text(args))

    if args.json:
        print(safe_json(analysis.sentences))
    else:
        for sentence in analysis.sentences:
            print(sentence)

    return 0


def analyze_command(args):
    """Split text and report word counts per sentence."""
    try:
        config = _resolve_config(args)
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1

    analysis = TextAnalyzer(config=config).analyze(_read_text(args))

    if args.json:
        print(safe_json({
            "sentences": analysis.sentences,
            "word_counts": analysis.word_counts,
            "summary": analysis.summary(),
        }))
        return 0

    for i, (sentence, words) in enumerate(zip(analysis.sentences, analysis.word_counts), 1):
        print(f"{i:>3}. [{words} words] {sentence}")

    summary = analysis.summary()
    print(f"\nSentences: {analysis.sentence_count}, words: {analysis.total_words}")
    if summary:
        print(f"Words per sentence: avg={summary['avg_words']:.1f}, "
              f"min={summary['min_words']:.0f}, max={summary['max_words']:.0f}")

    return 0


def validate_config_command(args):
    """Validate a splitter config file."""
    config_path = Path(args.config_file)
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return 1

    try:
        print(f"Validating config: {config_path}")
        config = load_config(config_path)
    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}", file=sys.stderr)
        return 1

    print("✅ Config validation successful!")
    print(f"   min_words_per_sentence: {config.min_words_per_sentence}")
    return 0


def info_command(args):
    """Display version and system information."""
    print("Smart Sentence Splitter CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("smart-sentence-splitter")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def _add_text_arguments(parser):
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to split (default: read from stdin)"
    )
    parser.add_argument(
        "-m", "--min-words",
        type=int,
        help="Minimum words per sentence (overrides the config file)"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a YAML splitter config"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of plain text"
    )


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="smartsplit",
        description="Rule-based sentence splitting for transcripts and TTS requests"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    split_parser = subparsers.add_parser(
        "split",
        help="Split text into sentences"
    )
    _add_text_arguments(split_parser)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Split text and report word counts"
    )
    _add_text_arguments(analyze_parser)

    validate_parser = subparsers.add_parser(
        "validate-config",
        help="Validate a splitter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )

    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "analyze":
        return analyze_command(args)
    elif args.command == "validate-config":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
