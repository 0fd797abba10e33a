"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fileguide import __version__
from fileguide.config import find_project_root, load_config, resolve_path


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the fileguide logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    config = load_config(find_project_root(Path.cwd()))
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = str(log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("fileguide")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)
            else:
                fh.setFormatter(fmt)
                root.addHandler(fh)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileguide",
        description="Runnable lessons and a documentation check for the file handling tutorial.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "fileguide check docs -v" works; SUPPRESS keeps an
    # absent subcommand flag from overwriting "fileguide -v check docs"
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # check
    p_check = subparsers.add_parser(
        "check",
        help="Verify the Python samples in Markdown docs (syntax, imports, module attributes).",
        parents=[global_flags],
    )
    p_check.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Markdown file or directory (default: the project's docs directory).",
    )
    p_check.add_argument("--format", "-f", choices=("text", "json"), default="text", help="Output format.")
    p_check.add_argument(
        "--no-imports",
        dest="no_imports",
        action="store_true",
        help="Only check syntax; do not resolve imports or module attributes.",
    )
    p_check.set_defaults(run="check")

    # list
    p_list = subparsers.add_parser("list", help="List runnable lessons and exercises.", parents=[global_flags])
    p_list.add_argument("--topic", "-t", help="Only this topic (formats, handling, exercises).")
    p_list.set_defaults(run="list")

    # run
    p_run = subparsers.add_parser("run", help="Run a lesson or exercise demo.", parents=[global_flags])
    p_run.add_argument("name", help="Lesson name (see 'fileguide list'), e.g. csv-tsv or exercise-3.")
    p_run.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Directory to run in and keep files (default: a temporary directory).",
    )
    p_run.set_defaults(run="run")

    # config
    p_config = subparsers.add_parser("config", help="Show or edit configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Project path for project-local config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value.")
    p_config.add_argument("--add", dest="add_key", metavar=("KEY", "VALUE"), nargs=2, help="Append VALUE to list KEY (e.g. ignore.additional_patterns drafts/).")
    p_config.add_argument("--remove", dest="remove_key", metavar=("KEY", "VALUE"), nargs=2, help="Remove VALUE from list KEY.")
    p_config.add_argument("--global", dest="global_", action="store_true", help="Write to the global config even inside a project.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)

    if hasattr(args, "path"):
        args.path = resolve_path(args.path)

    if run == "check":
        from fileguide.commands.check import run as cmd_run
    elif run == "list":
        from fileguide.commands.list_cmd import run as cmd_run
    elif run == "run":
        from fileguide.commands.run_cmd import run as cmd_run
    elif run == "config":
        from fileguide.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
