import argparse
import logging
import sys
from pathlib import Path

from kdi_align.alignment.assembler import AlignedModel, assemble, check_references
from kdi_align.alignment.errors import AlignmentError
from kdi_align.data.config import AlignConfig, get_align_config
from kdi_align.data.sources import load_sources
from kdi_align.data.writer import ModelWriter

logger = logging.getLogger(__name__)


def build_model(config: AlignConfig, verify_references: bool = True) -> AlignedModel:
    """Load every source named by the configuration and assemble the model."""
    sources = load_sources(config)
    return assemble(
        sources,
        config.agency_email,
        strict=config.strict_references,
        verify_references=verify_references,
    )


def run_align(config: AlignConfig) -> None:
    """Run a full alignment and write the JSON files."""
    model = build_model(config)
    counts = ModelWriter(config.output_dir).write(model)

    print("\nAlignment complete. Entity counts:")
    for name, count in counts.items():
        print(f"  {name}: {count:,}")


def run_check(config: AlignConfig) -> int:
    """Build the model without writing it and report dangling references."""
    model = build_model(config, verify_references=False)

    print("\nEntity counts:")
    for name, count in model.counts().items():
        print(f"  {name}: {count:,}")

    problems = check_references(model)
    print(f"\n{len(problems):,} dangling references")
    for problem in problems:
        print(f"  {problem}")
    return 1 if problems else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kdi-align",
        description="Align the urban and extra-urban transit feeds into open-data JSON files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -v is also accepted after the subcommand; SUPPRESS keeps a top-level -v
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose logging",
    )

    # align command
    align_parser = subparsers.add_parser(
        "align",
        parents=[common],
        help="Build the merged model and write it as JSON",
    )
    align_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: KDI_OUTPUT_DIR or ./alignment)",
    )

    # check command
    subparsers.add_parser(
        "check",
        parents=[common],
        help="Build the merged model and report dangling references without writing",
    )

    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = get_align_config()
    try:
        if args.command == "check":
            return run_check(config)
        # Default: align
        if getattr(args, "output", None) is not None:
            config = config.model_copy(update={"output_dir": args.output})
        run_align(config)
    except AlignmentError as e:
        logger.error(f"Alignment aborted: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
