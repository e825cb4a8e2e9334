"""Sound pad model: one playable sound bound to one trigger letter."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

LETTER_PATTERN = r"^[A-Z]$"


class SoundPad(BaseModel):
    """
    A single playable pad on the board.

    `note_id` and `source` never change after creation. `letter` is the
    only mutable field and is re-validated on every assignment, but only
    SoundRegistry.set_letter should assign it so the letter index stays
    consistent.
    """

    model_config = ConfigDict(validate_assignment=True)

    note_id: str = Field(min_length=1, frozen=True, description="Note identity (e.g. 'C4')")
    source: Path = Field(frozen=True, description="Audio file backing this pad")
    letter: str = Field(pattern=LETTER_PATTERN, description="Trigger letter (A-Z)")

    def __str__(self) -> str:
        return f"{self.note_id}[{self.letter}]"
