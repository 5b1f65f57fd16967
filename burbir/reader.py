"""Reading words and sentences from a character tape terminated by ';'."""

from __future__ import annotations

import re
from typing import TextIO

MARK = ";"
BLANK = " "
MAX_LENGTH = 280

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class TapeReader:
    """Reads input one character at a time, skipping newlines.

    Every read starts a fresh pass over the tape and stops at the next
    ``;`` mark.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._current = ""

    def _advance(self) -> None:
        while True:
            char = self._stream.read(1)
            if char == "":
                raise EOFError("input ended before the ';' mark")
            if char != "\n":
                self._current = char
                return

    def _at_mark(self) -> bool:
        return self._current == MARK

    def _skip_blanks(self) -> None:
        while self._current == BLANK:
            self._advance()

    def _copy_word(self) -> str:
        chars = []
        while self._current not in (MARK, BLANK):
            chars.append(self._current)
            self._advance()
        return "".join(chars)[:MAX_LENGTH]

    def read_word(self) -> str:
        """Read one word, ignoring leading blanks.

        If the word is not directly followed by the mark, an empty string
        is returned and the rest of the line stays on the tape.
        """
        self._advance()
        self._skip_blanks()
        if self._at_mark():
            return ""
        word = self._copy_word()
        return word if self._at_mark() else ""

    def read_word_with_blank(self) -> str:
        """Read one word without ignoring leading blanks.

        Input holding anything but a single word up to the mark is consumed
        through the mark and gives an empty string.
        """
        self._advance()
        if self._at_mark():
            return ""
        word = self._copy_word()
        if self._at_mark():
            return word
        while not self._at_mark():
            self._advance()
        return ""

    def read_sentence(self) -> str:
        """Read every character up to the mark, blanks included."""
        self._advance()
        chars = []
        while not self._at_mark():
            chars.append(self._current)
            self._advance()
        return "".join(chars)[:MAX_LENGTH]


def is_only_blank(text: str) -> bool:
    """Return True if the text holds nothing but blanks (or nothing at all)."""
    return all(char == BLANK for char in text)


def word_to_integer(word: str) -> int:
    """Convert a word to an integer.

    A word starting with '-' gives -1; otherwise the leading digits are
    read and anything after them is ignored. A word without leading digits
    gives 0.
    """
    if word.startswith("-"):
        return -1
    if not word:
        raise ValueError("empty word")
    match = _LEADING_INTEGER.match(word)
    return int(match.group(1)) if match else 0