"""Whitespace and character helpers shared by the classifier and emitters"""

import string


def whitespace_strip(text: str) -> str:
    """
    Remove leading and trailing whitespace, terminator included

    All-whitespace input yields an empty string. Stripping an already
    stripped string returns it unchanged.
    """
    return text.strip()


def blank_is(line: str) -> bool:
    """True if every character is whitespace (an empty line counts as blank)"""
    return all(char.isspace() for char in line)


def digit_is(char: str) -> bool:
    """True only for the ASCII digits 0-9 (str.isdigit also accepts '²', '٣', ...)"""
    return len(char) == 1 and char in string.digits


def digits_are(text: str) -> bool:
    """True if text is non-empty and made only of ASCII digits"""
    return bool(text) and all(digit_is(char) for char in text)
