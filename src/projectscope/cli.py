# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""
Command line interface for projectscope.

Usage:
    projectscope name <path>
    projectscope estimate <bytes-or-file>
    projectscope scan [--base DIR] [--json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config, ConfigError, LoggingConfig
from .message_estimate import estimate_message_count, estimate_message_count_from_size
from .project_utils import extract_project_name
from .sessions import ProjectSummary, scan_projects

logger = logging.getLogger(__name__)


def setup_logging(logging_config: LoggingConfig) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, logging_config.level.upper(), logging.INFO),
        format=logging_config.format,
        datefmt=logging_config.datefmt,
        stream=sys.stderr,
    )


def cmd_name(args: argparse.Namespace, config: Config) -> int:
    """Print the project name resolved for a directory."""
    print(extract_project_name(args.path))
    return 0


def cmd_estimate(args: argparse.Namespace, config: Config) -> int:
    """Estimate from a byte count, or from the size of an existing file."""
    value = args.value
    candidate = Path(value)

    if candidate.is_file():
        count = estimate_message_count(candidate)
    else:
        try:
            size = int(value)
        except ValueError:
            print(f"Error: {value!r} is neither a byte count nor a file", file=sys.stderr)
            return 1
        try:
            count = estimate_message_count_from_size(size)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(count)
    return 0


def _format_table(summaries: List[ProjectSummary]) -> str:
    headers = ("PROJECT", "SESSIONS", "BYTES", "~MESSAGES", "WORKSPACE")
    rows = [
        (
            s.project_name,
            str(s.session_files),
            str(s.total_bytes),
            str(s.estimated_messages),
            s.workspace_path or "-",
        )
        for s in summaries
    ]
    widths = [
        max(len(headers[i]), *(len(row[i]) for row in rows)) if rows else len(headers[i])
        for i in range(len(headers))
    ]
    lines = ["  ".join(h.ljust(w) for h, w in zip(headers, widths)).rstrip()]
    for row in rows:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def cmd_scan(args: argparse.Namespace, config: Config) -> int:
    """Summarize Claude project directories as a table or JSON."""
    base = Path(args.base).expanduser() if args.base else config.paths.claude_projects_dir
    summaries = scan_projects(base)

    if args.json:
        print(json.dumps([s.to_dict() for s in summaries], indent=2))
    elif summaries:
        print(_format_table(summaries))
    else:
        print(f"No Claude projects found in {base}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectscope",
        description="Guess project names and estimate transcript sizes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s name ~/Dev/my-app          # Project name for a directory
  %(prog)s estimate 5000              # Messages in a 5000-byte file
  %(prog)s estimate session.jsonl     # Messages in an existing file
  %(prog)s scan --json                # Summarize ~/.claude/projects
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from config, else INFO)"
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory containing config.yaml"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    name_parser = subparsers.add_parser("name", help="Resolve a directory's project name")
    name_parser.add_argument("path", help="Directory to start from")
    name_parser.set_defaults(handler=cmd_name)

    estimate_parser = subparsers.add_parser("estimate", help="Estimate message count")
    estimate_parser.add_argument("value", help="Byte count or path to a file")
    estimate_parser.set_defaults(handler=cmd_estimate)

    scan_parser = subparsers.add_parser("scan", help="Summarize Claude project directories")
    scan_parser.add_argument(
        "--base",
        default=None,
        help="Claude projects directory (default: from config)"
    )
    scan_parser.add_argument(
        "--json",
        action="store_true",
        help="Print summaries as JSON"
    )
    scan_parser.set_defaults(handler=cmd_scan)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = Config(args.config_dir)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging_config = config.logging
    if args.log_level:
        logging_config.level = args.log_level
    setup_logging(logging_config)

    try:
        return args.handler(args, config)
    except OSError as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
