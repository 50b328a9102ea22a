"""Character and word counts for text, and the third angle of a triangle."""

import os
from dataclasses import dataclass
from typing import Union

# The whitespace set of the C locale.
_WHITESPACE = frozenset(" \t\n\v\f\r")


@dataclass(frozen=True)
class TextCounts:
    """Counts taken from a piece of text."""

    characters: int
    words: int


def count_words_and_chars(text: str) -> TextCounts:
    """Count every character, and every word that is followed by whitespace."""
    words = 0
    in_word = False
    for char in text:
        if char in _WHITESPACE:
            if in_word:
                words += 1
                in_word = False
        else:
            in_word = True
    return TextCounts(characters=len(text), words=words)


def count_file(path: Union[str, "os.PathLike[str]"]) -> TextCounts:
    """Count the characters and words of a text file."""
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        return count_words_and_chars(handle.read())


def third_angle(angle1: float, angle2: float) -> float:
    """Return the angle that completes a triangle with the two given angles, in degrees."""
    if not 0 < angle1 < 180:
        raise ValueError("angle1 is invalid")
    if not 0 < angle2 < 180:
        raise ValueError("angle2 is invalid")
    if not angle1 + angle2 < 180:
        raise ValueError("angle1 + angle2 is invalid")
    return 180 - angle1 - angle2