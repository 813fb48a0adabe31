"""A scripted walk through the linked list operations, narrated as it goes."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO

from netdrills.linked_list import LinkedList

_Say = Callable[..., None]


def _show(items: LinkedList, say: _Say) -> None:
    say(f"Linked List: {items}")


def _insert_at_beginning(items: LinkedList, value: int, say: _Say) -> None:
    items.insert_at_beginning(value)
    say(f"Inserted {value} at the beginning.")


def _insert_at_end(items: LinkedList, value: int, say: _Say) -> None:
    was_empty = items.head is None
    items.insert_at_end(value)
    if was_empty:
        say(f"Inserted {value} at the end (list was empty, now head).")
    else:
        say(f"Inserted {value} at the end.")


def _delete(items: LinkedList, key: int, say: _Say) -> None:
    try:
        position = items.delete(key)
    except ValueError:
        say(f"Key {key} not found in the list. Nothing to delete.")
        return
    if position == 0:
        say(f"Deleted {key} from the beginning.")
    else:
        say(f"Deleted {key} from the list.")


def _search(items: LinkedList, key: int, say: _Say) -> None:
    position = items.search(key)
    if position is None:
        say(f"Key {key} not found in the list.")
    else:
        say(f"Key {key} found at position {position}.")


def run_demo(output: Optional[TextIO] = None) -> LinkedList:
    """Run the scripted exercise, writing its narration to ``output``.

    Returns the list as it stands at the end (empty).
    """
    out = sys.stdout if output is None else output

    def say(text: str = "") -> None:
        print(text, file=out)

    items = LinkedList()

    say("--- Linked List Program for Analysis ---\n")

    say("--- Insertion Tests ---")
    _insert_at_end(items, 10, say)
    _show(items, say)
    _insert_at_beginning(items, 5, say)
    _show(items, say)
    _insert_at_end(items, 20, say)
    _show(items, say)
    _insert_at_beginning(items, 2, say)
    _show(items, say)

    say("\nAttempting to insert 15 after node with data 5:")
    target = items.head.next if items.head is not None else None
    if target is not None and target.data == 5:
        items.insert_after(target, 15)
        say(f"Inserted 15 after node with data {target.data}.")
        _show(items, say)
    else:
        say("Node with data 5 not found to insert after.")

    say("\n--- Traversal and Search Tests ---")
    _show(items, say)
    _search(items, 10, say)
    _search(items, 99, say)

    say("\n--- Deletion Tests ---")
    for key in (10, 2, 99, 20):
        _delete(items, key, say)
        _show(items, say)

    say("\n--- Reversal Test ---")
    items.reverse()
    say("Linked List reversed.")
    _show(items, say)

    say("\n--- Emptying List Tests ---")
    for key in (5, 15, 100):
        _delete(items, key, say)
        _show(items, say)

    say("\n--- Re-populating and Freeing List ---")
    for value in (1, 2, 3):
        _insert_at_end(items, value, say)
    _show(items, say)
    items.clear()
    say("All memory freed. List is now empty.")
    _show(items, say)

    return items


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo on standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())