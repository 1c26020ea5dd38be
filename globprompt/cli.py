import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from globprompt.logging_setup import configure_logging
from globprompt.settings import settings

version_string = f"{settings.APP_NAME} version {settings.VERSION}"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Interactively pick files with a live-updating glob pattern",
    )
    parser.add_argument(
        "message",
        nargs="?",
        default="Which files?",
        help="Question shown in front of the pattern",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Print the version and exit",
    )
    parser.add_argument(
        "--default",
        "-d",
        default=None,
        help="Pattern used while the input is empty",
    )
    parser.add_argument(
        "--page-size",
        "-n",
        type=int,
        default=settings.DEFAULT_PAGE_SIZE,
        help="Number of matching paths shown per page",
    )
    parser.add_argument(
        "--force-match",
        action="store_true",
        help="Refuse to submit a pattern with no matches",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Directory to glob from (defaults to the current directory)",
    )
    parser.add_argument(
        "--ignore",
        "-i",
        action="append",
        default=[],
        help="Pattern of paths to leave out; may be repeated",
    )
    parser.add_argument(
        "--dot",
        action="store_true",
        help="Include hidden files and directories",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the selected paths as a JSON array",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        help=f"Write debug logging to {settings.LOG_FILE}",
    )
    return parser


def build_question(args: argparse.Namespace) -> Dict[str, Any]:
    glob_options: Dict[str, Any] = {}
    if args.cwd:
        glob_options["cwd"] = args.cwd
    if args.ignore:
        glob_options["ignore"] = list(args.ignore)
    if args.dot:
        glob_options["dot"] = True

    return {
        "type": "glob",
        "name": "paths",
        "message": args.message,
        "default": args.default,
        "pageSize": args.page_size,
        "forceMatch": args.force_match,
        "glob": glob_options or None,
    }


def print_paths(console: Console, paths: List[str], as_json: bool = False) -> None:
    if as_json:
        console.print_json(json.dumps(paths))
        return
    if not paths:
        console.print("[yellow]No files selected.[/yellow]")
        return
    for path in paths:
        console.print(escape(path), highlight=False)


def main(argv: Optional[List[str]] = None) -> int:
    console = Console()
    args = create_parser().parse_args(argv)

    if args.version:
        print(version_string)
        return 0

    configure_logging(level=logging.DEBUG if args.log else logging.WARNING)

    # Deferred so --version does not pay for prompt_toolkit
    from globprompt.ptk_prompt import prompt_glob

    try:
        paths = asyncio.run(prompt_glob(build_question(args)))
    except ValidationError as e:
        console.print(f"[red]Error: invalid question: {escape(str(e))}[/red]")
        return 2
    except (KeyboardInterrupt, EOFError):
        console.print("[bold red]Aborted.[/]")
        return 130

    print_paths(console, paths, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
