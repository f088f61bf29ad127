"""Interactive menus and small demonstrations driven from the command line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import Sequence, TextIO

from dsakit.linked_list import CircularLinkedList
from dsakit.queues import CircularQueue, QueueOverflowError, QueueUnderflowError
from dsakit.sorting import format_array
from dsakit.stacks import ArrayStack, StackOverflowError, StackUnderflowError

_CHOICE_PROMPT = "Enter your choice: "
_EXIT_MESSAGE = "Exiting program.\n"
_TRAVERSAL_DATA = (10, 20, 30, 40, 50)

Ask = Callable[[str], int]
Handler = Callable[[Ask], str]


class _EndOfInput(Exception):
    """The input ran out in the middle of a menu session."""


class _BadNumber(Exception):
    """A token that should have been an integer was not one."""


def _tokens(infile: TextIO) -> Iterator[str]:
    for line in infile:
        yield from line.split()


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise _BadNumber(token) from None


def _run_menu(
    infile: TextIO,
    outfile: TextIO,
    header: str,
    handlers: dict[int, Handler],
    exit_choice: int,
    invalid_message: str,
) -> int:
    """Drive a numbered menu until the exit choice or the end of input."""
    tokens = _tokens(infile)

    def ask(prompt: str) -> int:
        outfile.write(prompt)
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        return _parse_int(token)

    while True:
        outfile.write(header)
        try:
            choice = ask(_CHOICE_PROMPT)
            if choice == exit_choice:
                outfile.write(_EXIT_MESSAGE)
                return 0
            handler = handlers.get(choice)
            if handler is None:
                outfile.write(invalid_message)
                continue
            outfile.write(handler(ask))
        except _BadNumber:
            outfile.write(invalid_message)
        except _EndOfInput:
            return 0


def run_circular_list_menu(infile: TextIO, outfile: TextIO) -> int:
    """Run the circular linked list menu over the given streams."""
    items = CircularLinkedList()

    def insert(ask: Ask) -> str:
        value = ask("Enter value to insert: ")
        items.insert_end(value)
        return f"Inserted {value} at the end.\n"

    def delete(ask: Ask) -> str:
        try:
            value = items.delete_begin()
        except IndexError:
            return "List is empty. Nothing to delete.\n"
        return f"Deleted node with data: {value}\n"

    def display(ask: Ask) -> str:
        if not len(items):
            return "List is empty.\n"
        return f"Circular Linked List: {format_array(items)}\n"

    header = (
        "\n--- Circular Linked List Menu ---\n"
        "1. Insert at End\n"
        "2. Delete from Beginning\n"
        "3. Display List\n"
        "4. Exit\n"
    )
    return _run_menu(
        infile,
        outfile,
        header,
        {1: insert, 2: delete, 3: display},
        4,
        "Invalid choice. Try again.\n",
    )


def run_circular_queue_menu(infile: TextIO, outfile: TextIO) -> int:
    """Run the five-slot circular queue menu over the given streams."""
    queue = CircularQueue(5)

    def enqueue(ask: Ask) -> str:
        value = ask("Enter value to enqueue: ")
        try:
            queue.enqueue(value)
        except QueueOverflowError:
            return f"Queue overflow! Cannot insert {value}\n"
        return f"Element {value} inserted successfully.\n"

    def dequeue(ask: Ask) -> str:
        try:
            value = queue.dequeue()
        except QueueUnderflowError:
            return "Queue underflow! Nothing to dequeue.\n"
        return f"Dequeued element: {value}\n"

    def display(ask: Ask) -> str:
        if queue.is_empty():
            return "Queue is empty.\n"
        return "Queue elements: " + " ".join(str(value) for value in queue) + "\n"

    header = (
        "\n--- Circular Queue Menu ---\n"
        "1. Enqueue\n"
        "2. Dequeue\n"
        "3. Display Queue\n"
        "4. Exit\n"
    )
    return _run_menu(
        infile,
        outfile,
        header,
        {1: enqueue, 2: dequeue, 3: display},
        4,
        "Invalid choice! Please try again.\n",
    )


def run_stack_menu(infile: TextIO, outfile: TextIO) -> int:
    """Run the hundred-slot stack menu over the given streams."""
    stack = ArrayStack(100)

    def push(ask: Ask) -> str:
        value = ask("Enter value to push: ")
        try:
            stack.push(value)
        except StackOverflowError:
            return "Stack Overflow\n"
        return f"{value} pushed to stack\n"

    def pop(ask: Ask) -> str:
        try:
            value = stack.pop()
        except StackUnderflowError:
            return "Stack Underflow\n"
        return f"{value} popped from stack\n"

    def peek(ask: Ask) -> str:
        try:
            value = stack.peek()
        except StackUnderflowError:
            return "Stack is empty\n"
        return f"Top element is {value}\n"

    def display(ask: Ask) -> str:
        if not len(stack):
            return "Stack is empty\n"
        return "Stack elements are:\n" + "".join(f"{value}\n" for value in stack)

    header = (
        "\n*** Stack Menu ***\n"
        "1. Push\n2. Pop\n3. Peek\n4. Display\n5. Exit\n"
    )
    return _run_menu(
        infile,
        outfile,
        header,
        {1: push, 2: pop, 3: peek, 4: display},
        5,
        "Invalid choice! Try again.\n",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: pick a demonstration or an interactive menu."""
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Data structure demonstrations and menus."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("hello", help="print a greeting")
    commands.add_parser("traverse", help="print the elements of a sample array")
    commands.add_parser("circular-list", help="interactive circular linked list")
    commands.add_parser("circular-queue", help="interactive circular queue")
    commands.add_parser("stack", help="interactive stack")
    args = parser.parse_args(argv)

    if args.command == "hello":
        sys.stdout.write("Hello, World!\n")
        return 0
    if args.command == "traverse":
        sys.stdout.write(format_array(_TRAVERSAL_DATA))
        return 0
    menus = {
        "circular-list": run_circular_list_menu,
        "circular-queue": run_circular_queue_menu,
        "stack": run_stack_menu,
    }
    return menus[args.command](sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())