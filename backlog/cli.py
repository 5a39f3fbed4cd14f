"""Command-line interface for backlog.

Subcommands:
    backlog                  show pending items of the current repository
    backlog add <words...>   append an item
    backlog list [--all]     list every item (or every registered repository)
    backlog done <n>         mark item n as done
    backlog remove <n>       remove item n
    backlog next             print the first pending item
    backlog cli              interactive mode
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from backlog import __version__
from backlog.config import Config
from backlog.logging_config import get_logger
from backlog.services import commands
from backlog.services.backlog_store import BacklogStore
from backlog.services.commands import (
    ALL_DONE_MESSAGE,
    EMPTY_MESSAGE,
    CommandError,
    NotInRepositoryError,
)
from backlog.services.global_index import GlobalIndexStore
from backlog.services.repo_locator import (
    backlog_path_for,
    find_repo_root,
    get_global_index_path,
    get_repo_backlog_path,
)

logger = get_logger(__name__)

NOT_IN_REPO = "Not in a git repository"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="backlog",
        description="A simple backlog manager for your repos",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"backlog {__version__}"
    )
    sub = parser.add_subparsers(dest="command")

    add_p = sub.add_parser("add", help="Add a new item to the backlog")
    add_p.add_argument("description", nargs=argparse.REMAINDER, help="The backlog item description")

    list_p = sub.add_parser("list", help="List backlog items (current repo or all)")
    list_p.add_argument("-a", "--all", action="store_true", help="Show all backlogs across all repos")

    done_p = sub.add_parser("done", help="Mark an item as done")
    done_p.add_argument("number", type=int, help="Item number to mark as done")

    remove_p = sub.add_parser("remove", help="Remove an item from the backlog")
    remove_p.add_argument("number", type=int, help="Item number to remove")

    sub.add_parser("next", help="Show what to do next (first incomplete item)")
    sub.add_parser("cli", help="Interactive CLI mode")

    return parser


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def _repo_root(message: str = NOT_IN_REPO) -> Path:
    repo_root = find_repo_root()
    if repo_root is None:
        raise NotInRepositoryError(message)
    return repo_root


def _current_store(config: Config, message: str = NOT_IN_REPO) -> BacklogStore:
    path = get_repo_backlog_path(config=config)
    if path is None:
        raise NotInRepositoryError(message)
    return BacklogStore(path)


def cmd_summary(args: argparse.Namespace, config: Config) -> int:
    store = _current_store(config, f"{NOT_IN_REPO}. Use 'backlog --help' for usage.")
    _print_lines(commands.summary_lines(store.load()))
    return 0


def cmd_add(args: argparse.Namespace, config: Config) -> int:
    repo_root = _repo_root()
    store = BacklogStore(backlog_path_for(repo_root, config))
    item = commands.add_item(
        store,
        args.description,
        repo_root=repo_root,
        index_store=GlobalIndexStore(get_global_index_path(config)),
    )
    print(f"Added: {item.description}")
    return 0


def cmd_list(args: argparse.Namespace, config: Config) -> int:
    if args.all:
        index_store = GlobalIndexStore(get_global_index_path(config))
        _print_lines(commands.list_all_lines(index_store, config))
        return 0

    _print_lines(commands.list_lines(_current_store(config).load()))
    return 0


def cmd_done(args: argparse.Namespace, config: Config) -> int:
    item = commands.mark_done(_current_store(config), args.number)
    print(f"Marked as done: {item.description}")
    return 0


def cmd_remove(args: argparse.Namespace, config: Config) -> int:
    item = commands.remove_item(_current_store(config), args.number)
    print(f"Removed: {item.description}")
    return 0


def cmd_next(args: argparse.Namespace, config: Config) -> int:
    item = commands.next_item(_current_store(config).load())
    if item is None:
        print(ALL_DONE_MESSAGE, file=sys.stderr)
    else:
        print(item.description)
    return 0


def cmd_interactive(args: argparse.Namespace, config: Config) -> int:
    # Imported lazily so one-shot commands do not pay for Textual's import
    from backlog.ui.app import SessionError, run_interactive

    store = _current_store(config)
    items = store.load()
    if not items:
        print(EMPTY_MESSAGE)
        return 0

    hide_completed = config.get_display_config()['hide_completed']
    try:
        output = run_interactive(items, save=store.save, hide_completed=hide_completed)
    except SessionError as e:
        return _error(f"Error: {e}")

    if output is not None:
        print(output)
    return 0


COMMANDS: Dict[Optional[str], Callable[[argparse.Namespace, Config], int]] = {
    None: cmd_summary,
    "add": cmd_add,
    "list": cmd_list,
    "done": cmd_done,
    "remove": cmd_remove,
    "next": cmd_next,
    "cli": cmd_interactive,
}


def run_cli(argv: Optional[List[str]] = None, config: Optional[Config] = None) -> int:
    """Parse ``argv`` and run the selected command.

    Args:
        argv: Command-line arguments without the program name
        config: Configuration to use (defaults to ~/.backlog/config.ini)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    config = config or Config()
    logger.debug(f"Running command: {args.command or 'summary'}")

    try:
        return COMMANDS[args.command](args, config)
    except CommandError as e:
        logger.info(f"Command {args.command} failed: {e}")
        return _error(str(e))
