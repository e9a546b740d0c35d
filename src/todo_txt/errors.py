"""Errors reported to the user by the todo commands."""

from __future__ import annotations


class TodoError(Exception):
    """Base class; ``str(exc)`` is the message shown on stdout."""


class MissingArgument(TodoError):
    pass


class InvalidIndex(TodoError):
    def __init__(self, number: int, action: str) -> None:
        self.number = number
        self.action = action
        super().__init__(f"Error: todo #{number} does not exist. Nothing {action}.")
