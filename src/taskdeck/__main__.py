"""CLI entry point for taskdeck."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskdeck",
        description="Three-column terminal task board",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory containing taskdeck.yml (default: current directory)",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Write the default taskdeck.yml seed file and exit",
    )
    parser.add_argument(
        "--id-scheme",
        choices=["sequential", "uuid"],
        default=None,
        help="How ids for new tasks are generated (default: sequential)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()

    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.id_scheme:
        settings_kwargs["id_scheme"] = args.id_scheme
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root))

    # Import here so --generate does not pay for loading textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
