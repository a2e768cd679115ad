"""CLI entrypoint for goboilr."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import load_config, resolve_input
from .errors import ConfigurationError, GenerationError, ParseError, PathResolutionError
from .logging import configure_logging
from .orchestrator import Orchestrator, RunOutcome


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goboilr",
        description="Generate accessors, constructors and builders for annotated Go structs.",
    )
    parser.add_argument(
        "-file",
        "--file",
        dest="file",
        default=None,
        help="The Go source file to process (defaults to $GOFILE, set by 'go generate').",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .goboilr.yml file (defaults to the one next to the input file).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse the input and report what would be generated without writing files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write detailed logs to this file.",
    )
    return parser


def run(
    argv: Sequence[str],
    getenv: Callable[[str], Optional[str]] = os.environ.get,
    orchestrator: Orchestrator | None = None,
) -> RunOutcome:
    """Resolve the input, then parse and generate both derived files."""
    parser = _build_parser()
    args = parser.parse_args(list(argv))
    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    source = resolve_input(args.file, getenv)
    config = load_config(args.config if args.config is not None else source.parent)

    print(f"goboilr: processing {source.name}")
    outcome = (orchestrator or Orchestrator()).run(
        source, config=config, dry_run=bool(args.dry_run)
    )
    if outcome.dry_run:
        _print_plan(outcome)
    else:
        print(f"  -> created {outcome.outputs.accessors.name}")
        print(f"  -> created {outcome.outputs.constructors.name}")
    return outcome


def _print_plan(outcome: RunOutcome) -> None:
    if not outcome.parsed.declarations:
        print("  no annotated structs found")
    for struct in outcome.parsed.declarations:
        features = [f"{len(struct.accessor_fields)} accessor fields"]
        if struct.generate_constructor:
            features.append("constructor")
        if struct.generate_builder:
            features.append("builder")
        print(f"  {struct.name}: {', '.join(features)}")
    print(f"  would write {outcome.outputs.accessors.name}")
    print(f"  would write {outcome.outputs.constructors.name}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: exits non-zero with a one-line message on failure."""
    parser = _build_parser()
    try:
        run(sys.argv[1:] if argv is None else argv)
    except (ConfigurationError, PathResolutionError) as exc:
        parser.exit(1, f"Configuration failed: {exc}\n")
    except ParseError as exc:
        parser.exit(1, f"Parsing failed: {exc}\n")
    except GenerationError as exc:
        parser.exit(1, f"Failed to generate {exc.mode}: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
