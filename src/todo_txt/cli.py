"""Command line interface for the todo list."""

from __future__ import annotations

import argparse
from typing import Callable, Dict, Optional

import structlog

from .config import get_settings
from .errors import TodoError
from .store import NumberArgument, TodoStore
from .utils import configure_logging

logger = structlog.get_logger(__name__)

USAGE = """Usage :-
$ ./todo add "todo item"  # Add a new todo
$ ./todo ls               # Show remaining todos
$ ./todo del NUMBER       # Delete a todo
$ ./todo done NUMBER      # Complete a todo
$ ./todo help             # Show usage
$ ./todo report           # Statistics"""


def _help(store: TodoStore, arg: Optional[str]) -> None:
    print(USAGE)


def _ls(store: TodoStore, arg: Optional[str]) -> None:
    todos = store.list_pending()
    if not todos:
        print("There are no pending todos!")
        return
    for number, text in enumerate(todos, 1):
        print(f"[{number}] {text}")


def _add(store: TodoStore, arg: Optional[str]) -> None:
    text = store.add_todo(arg)
    print(f'Added todo: "{text}"')


def _del(store: TodoStore, arg: Optional[str]) -> None:
    number = NumberArgument.parse(arg)
    store.delete_todo(number)
    print(f"Deleted todo #{number.value}")


def _done(store: TodoStore, arg: Optional[str]) -> None:
    number = NumberArgument.parse(arg)
    store.complete_todo(number)
    print(f"Marked todo #{number.value} as done.")


def _report(store: TodoStore, arg: Optional[str]) -> None:
    report = store.report()
    print(f"{report.date} Pending : {report.pending} Completed : {report.completed}")


COMMANDS: Dict[str, Callable[[TodoStore, Optional[str]], None]] = {
    "help": _help,
    "ls": _ls,
    "add": _add,
    "del": _del,
    "done": _done,
    "report": _report,
}


def resolve_command(name: Optional[str]) -> str:
    """Normalise a command name; anything unknown becomes ``help``."""
    key = (name or "").strip().lower()
    return key if key in COMMANDS else "help"


def run(store: TodoStore, command: Optional[str], arg: Optional[str] = None) -> None:
    name = resolve_command(command)
    logger.debug("dispatch", command=name)
    try:
        COMMANDS[name](store, arg)
    except TodoError as exc:
        print(exc)


def main(argv: list[str] | None = None, prog_name: str | None = None) -> None:
    # NUL never occurs in argv, so every argument is positional.
    parser = argparse.ArgumentParser(prog=prog_name, add_help=False, prefix_chars="\0")
    parser.add_argument("command", nargs="?")
    parser.add_argument("argument", nargs="?")
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    store = TodoStore(settings.todo_file, settings.done_file)
    run(store, args.command, args.argument)


if __name__ == "__main__":
    main()
