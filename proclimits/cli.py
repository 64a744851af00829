"""Command-line interface for proclimits."""

import argparse
import sys
from pathlib import Path

from proclimits import __version__, limits_for
from proclimits.core.config import load_config
from proclimits.core.context import Context
from proclimits.core.logging import QueryLogger, get_log_path
from proclimits.core.output import FORMATS, Output
from proclimits.lib.errors import LimitsError
from proclimits.lib.limits import PROPERTY_NAMES


def pid_type(value: str) -> int:
    """argparse type for process ids."""
    try:
        pid = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pid: {value!r}") from None
    if pid < 0:
        raise argparse.ArgumentTypeError(f"invalid pid: {value!r}")
    return pid


def resolve_property(name: str) -> str | None:
    """Map "max_open_files", "open_files" or "open-files" to a field name."""
    key = name.strip().lower().replace("-", "_")
    if key in PROPERTY_NAMES:
        return key
    if f"max_{key}" in PROPERTY_NAMES:
        return f"max_{key}"
    return None


def create_parser(config: dict) -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="proclimits",
        description="Show the resource limits of a process",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Limits of this process
  %(prog)s --pid 1                  # Limits of init
  %(prog)s --pid 1 -p open_files    # Only the open files limit
  %(prog)s --format json            # JSON output for monitoring

Exit codes:
  0 - Limits reported
  2 - Usage error, unsupported OS or limits file not readable
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"proclimits {__version__}",
    )
    parser.add_argument(
        "--format",
        choices=list(FORMATS),
        default=config["format"],
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--pid",
        type=pid_type,
        help="Process ID to inspect (default: this process)",
    )
    parser.add_argument(
        "-p",
        "--property",
        action="append",
        dest="properties",
        metavar="NAME",
        help="Only show this property (can be specified multiple times)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=config["log"],
        help="Write a JSONL log entry for the query",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=Path(config["log_dir"]).expanduser() if config["log_dir"] else None,
        help="Directory for JSONL logs (default: ~/var/log/proclimits)",
    )
    return parser


def main(argv: list[str] | None = None, context: Context | None = None) -> int:
    """Main entry point."""
    if context is None:
        context = Context()

    parser = create_parser(load_config())
    args = parser.parse_args(argv)

    selected = None
    if args.properties:
        selected = []
        for name in args.properties:
            field_name = resolve_property(name)
            if field_name is None:
                print(f"Error: unknown property: {name}", file=sys.stderr)
                return 2
            selected.append(field_name)

    pid = args.pid if args.pid is not None else context.getpid()

    logger = None
    if args.log:
        logger = QueryLogger("proclimits", log_path=get_log_path("proclimits", args.log_dir))

    output = Output()
    try:
        try:
            limits = limits_for(pid, context=context, logger=logger)
        except LimitsError as e:
            if logger is not None:
                logger.query_failed(pid, e)
            print(f"Error: {e}", file=sys.stderr)
            return 2

        report = limits.to_dict()
        if selected is not None:
            report = {name: report[name] for name in selected}

        output.emit({"pid": pid, "limits": report})
        if logger is not None:
            logger.query_succeeded(pid, report)
    except OSError as e:
        # Raised by the query log, e.g. an unwritable --log-dir
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        if logger is not None:
            logger.close()

    output.render(args.format)
    return 0
