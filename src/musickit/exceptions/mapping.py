"""Key mapping exceptions.

Raised while validating a new trigger letter for a pad:
- MappingError: Base class for mapping errors
- InvalidLetterError: Input is not a single A-Z letter
- DuplicateLetterError: Letter is already bound to another pad

Both are recoverable: the mapping editor stays open so the user can retry.
"""

from .base import MusicKitError


class MappingError(MusicKitError):
    """A trigger letter could not be applied."""

    def __init__(self, user_message: str, letter: str = "", **kwargs):
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message, **kwargs)
        self.letter = letter


class InvalidLetterError(MappingError):
    """Input is empty or not a single A-Z letter."""

    def __init__(self, raw: str):
        """
        Initialize invalid letter error.

        Args:
            raw: The rejected input
        """
        super().__init__(
            user_message="Trigger keys must be a single letter (A-Z).",
            technical_message=f"Rejected trigger letter input: {raw!r}",
            letter=raw,
            recovery_hint="Press a letter key, then Enter to confirm.",
        )


class DuplicateLetterError(MappingError):
    """Letter is already bound to another pad."""

    def __init__(self, letter: str, owner: str):
        """
        Initialize duplicate letter error.

        Args:
            letter: The letter that collided
            owner: Note id of the pad that already uses the letter
        """
        super().__init__(
            user_message=f"Key {letter} is already used by {owner}.",
            technical_message=f"Duplicate trigger letter {letter!r} (owned by {owner})",
            letter=letter,
            recovery_hint=f"Pick a letter that is not already mapped, or remap {owner} first.",
        )
        self.owner = owner
