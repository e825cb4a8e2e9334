"""Trigger letter normalization shared by every input channel."""

import re
from collections.abc import Collection

INVALID = ""

_NON_LETTERS = re.compile(r"[^A-Z]")


def normalize_letter(raw: object) -> str:
    """
    Normalize raw input to a single uppercase trigger letter.

    Args:
        raw: Any input; only strings can yield a letter

    Returns:
        The uppercase letter, or INVALID ("") unless the trimmed input is
        exactly one A-Z letter (either case)

    Example:
        >>> normalize_letter(" a ")
        'A'
        >>> normalize_letter("ab")
        ''
    """
    if not isinstance(raw, str):
        return INVALID
    letter = raw.strip().upper()
    if len(letter) == 1 and "A" <= letter <= "Z":
        return letter
    return INVALID


def letter_from_key(key: str | None, character: str | None = None) -> str:
    """
    Extract the trigger letter from a key event.

    Textual names letter keys by the letter itself, so a single-letter key
    name is used first. Otherwise the produced character is normalized
    (e.g. "shift+d" produces "D").
    """
    if key:
        letter = normalize_letter(key)
        if letter:
            return letter
    return normalize_letter(character)


def extract_letter(raw: str) -> str:
    """
    Reduce free text typed into the mapping editor to at most one letter.

    Uppercases, strips everything that is not A-Z and keeps the first
    remaining letter. Returns "" when nothing is left.
    """
    return _NON_LETTERS.sub("", raw.upper())[:1]


def filter_sequence(raw: str, allowed: Collection[str], limit: int) -> str:
    """
    Keep the characters of `raw` that are allowed letters (case folded),
    in order and with repeats, stopping after `limit` letters.

    Example:
        >>> filter_sequence("asd1a", {"A", "S", "D"}, 3)
        'ASD'
    """
    out: list[str] = []
    if limit <= 0:
        return ""
    for ch in str(raw):
        letter = normalize_letter(ch)
        if letter and letter in allowed:
            out.append(letter)
            if len(out) >= limit:
                break
    return "".join(out)
