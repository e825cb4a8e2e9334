"""Root of the Music Kit exception tree.

Every error raised by musickit carries two texts: one for the person at
the board and one for the log file. The CLI prints the first (with the
recovery hint), the handlers log the second.
"""

from typing import Optional


class MusicKitError(Exception):
    """
    An error the board knows how to explain.

    `recoverable` marks errors that leave the board usable (a rejected key,
    a silent pad, a device that can be retried). Commands stop on the
    others.

    Attributes:
        user_message: Short sentence shown in the TUI or on stderr
        technical_message: Details for the log (falls back to user_message)
        recoverable: Whether the board keeps working after this error
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.user_message!r})"

    def get_full_message(self) -> str:
        """User message followed by the hint, as the CLI prints it."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
