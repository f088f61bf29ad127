"""Searching, sorting, expression conversion, linked lists, stacks, queues and a command-line menu."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "expressions",
    "linked_list",
    "queues",
    "searching",
    "sorting",
    "stacks",
]