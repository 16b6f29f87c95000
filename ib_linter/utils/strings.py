"""String helpers shared by rules."""

import re


def matches(text: str, pattern: str) -> list[str]:
    """Return the first capture group of every match of ``pattern``.

    Matches are non-overlapping and in document order. ``.`` does not
    cross line breaks, so a line-oriented pattern yields one capture per
    matching line.

    Raises:
        re.error: If ``pattern`` is not a valid regular expression.
    """
    regex = re.compile(pattern)
    return [
        match.group(1)
        for match in regex.finditer(text)
        if match.group(1) is not None
    ]


def snake_to_camel_case(value: str) -> str:
    """Convert ``large_button`` to ``largeButton``.

    Already camelCase input is returned unchanged. Words written entirely
    in upper case are lowered first, so ``PRIMARY_RED`` becomes
    ``primaryRed``.
    """
    words = [word for word in value.split("_") if word]
    if not words:
        return ""

    words = [word.lower() if word.isupper() else word for word in words]
    head = words[0][0].lower() + words[0][1:]
    tail = "".join(word[0].upper() + word[1:] for word in words[1:])
    return head + tail
