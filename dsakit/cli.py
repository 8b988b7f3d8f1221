"""Interactive menus for exercising the data structures from a terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from dsakit.bst import BinarySearchTree
from dsakit.containers import ContainerUnderflow, Queue, Stack
from dsakit.linkedlist import SinglyLinkedList


class _InputError(ValueError):
    """Raised when the user types something that is not an integer."""


class _Console:
    def __init__(self, stream: Iterable[str], out: TextIO) -> None:
        self._tokens = (token for line in stream for token in line.split())
        self._out = out

    def say(self, text: str) -> None:
        print(text, file=self._out)

    def ask(self, prompt: str) -> int:
        print(prompt, end="", file=self._out)
        token = next(self._tokens, None)
        if token is None:
            raise EOFError
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer, got {token!r}") from None


_Actions = dict[int, tuple[str, Callable[[], None]]]


def _run_menu(console: _Console, title: str, actions: _Actions) -> None:
    exit_choice = len(actions) + 1
    menu = "\n".join(f"{number}.{label}" for number, (label, _) in actions.items())
    menu += f"\n{exit_choice}.exit"
    while True:
        console.say(f"\n{title}\n{menu}")
        choice = console.ask("Enter your choice: ")
        if choice == exit_choice:
            return
        action = actions.get(choice)
        if action is None:
            console.say("Invalid option !")
        else:
            action[1]()


def _bst_session(console: _Console) -> None:
    tree = BinarySearchTree()

    def insert() -> None:
        tree.insert(console.ask("Enter the data: "))

    def display() -> None:
        console.say(" ".join(str(value) for value in tree.inorder()))

    _run_menu(console, "Binary search tree", {1: ("insert", insert), 2: ("inorder", display)})


def _list_session(console: _Console) -> None:
    items = SinglyLinkedList()

    def add() -> None:
        value = console.ask("Enter the data to be added: ")
        items.append(value)
        console.say(f"{value} added.")

    def display() -> None:
        console.say(f"Elements on the list are :\n{items}")

    _run_menu(
        console,
        "Singly linked list",
        {1: ("create", add), 2: ("insert", add), 3: ("display", display)},
    )


def _is_full(container: Stack | Queue) -> bool:
    return container.capacity is not None and len(container) >= container.capacity


def _stack_session(console: _Console) -> None:
    stack = Stack(console.ask("Enter the size of the stack: "))

    def push() -> None:
        if _is_full(stack):
            console.say("Stack Overflow!")
            return
        value = console.ask("Enter the data to be added to the stack: ")
        stack.push(value)
        console.say(f"{value} added to the stack.")

    def pop() -> None:
        try:
            console.say(f"{stack.pop()} popped from the stack.")
        except ContainerUnderflow:
            console.say("Stack Underflow!")

    def display() -> None:
        if not len(stack):
            console.say("Stack is empty !")
        else:
            console.say("Stack Elements Are : " + " ".join(str(v) for v in stack))

    _run_menu(
        console, "Stack operations", {1: ("push", push), 2: ("pop", pop), 3: ("display", display)}
    )


def _queue_session(console: _Console) -> None:
    queue = Queue(console.ask("Enter the size of the queue: "))

    def enqueue() -> None:
        if _is_full(queue):
            console.say("Queue Overflow !")
            return
        value = console.ask("Enter the data to be added to the queue: ")
        queue.enqueue(value)
        console.say(f"{value} is enqueued to the queue.")

    def dequeue() -> None:
        try:
            console.say(f"{queue.dequeue()} is deleted.")
        except ContainerUnderflow:
            console.say("Queue underflow !")

    def display() -> None:
        if not len(queue):
            console.say("Queue is empty !")
        else:
            console.say("Queue elements are : " + " ".join(str(v) for v in queue))

    _run_menu(
        console,
        "Queue operations",
        {1: ("enqueue", enqueue), 2: ("dequeue", dequeue), 3: ("display", display)},
    )


_SESSIONS: dict[str, Callable[[_Console], None]] = {
    "bst": _bst_session,
    "list": _list_session,
    "stack": _stack_session,
    "queue": _queue_session,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Drive a data structure from an interactive menu."
    )
    parser.add_argument("structure", choices=sorted(_SESSIONS), help="structure to use")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the menu for the chosen structure, reading choices from standard input."""
    args = _parser().parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        _SESSIONS[args.structure](console)
    except EOFError:
        console.say("")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())