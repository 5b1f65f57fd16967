"""A last-in, first-out stack of tweet drafts."""

from __future__ import annotations

from collections.abc import Iterator

from burbir.tweets import Tweet


class DraftStack:
    """Unpublished tweets; the most recently saved draft is on top."""

    def __init__(self) -> None:
        self._items: list[Tweet] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tweet]:
        """Yield the drafts from the top of the stack down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"DraftStack(size={len(self._items)})"

    def is_empty(self) -> bool:
        """Return True if no draft is saved."""
        return not self._items

    def push(self, tweet: Tweet) -> None:
        """Put a draft on top of the stack."""
        self._items.append(tweet)

    def pop(self) -> Tweet:
        """Remove and return the draft on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty draft stack")
        return self._items.pop()