"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from musickit.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".musickit" / "config.json"

DEFAULT_KEYS = ("A", "S", "D", "F", "G", "H", "J")


class SoundDef(BaseModel):
    """Static definition of one sound: note id and file name."""

    note_id: str = Field(min_length=1, description="Note identity shown on the pad")
    file: str = Field(min_length=1, description="File name, relative to sounds_dir")


def _default_sounds() -> list[SoundDef]:
    return [
        SoundDef(note_id="C4", file="C4vL.wav"),
        SoundDef(note_id="D4", file="D4vH.wav"),
        SoundDef(note_id="F4", file="F4vH.wav"),
        SoundDef(note_id="A4", file="A4vH.wav"),
        SoundDef(note_id="B4", file="B4vH.wav"),
        SoundDef(note_id="C5", file="C5vH.wav"),
        SoundDef(note_id="C6", file="C6vH.wav"),
    ]


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Board definition
    sounds: list[SoundDef] = Field(
        default_factory=_default_sounds,
        min_length=1,
        description="Sounds on the board, in display order",
    )
    default_keys: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEYS),
        description="Startup trigger letters, paired with sounds by position",
    )
    sounds_dir: Path = Field(
        default_factory=lambda: Path("assets") / "sounds",
        description="Directory containing the sound files",
    )

    # Timing
    step_ms: int = Field(default=350, gt=0, description="Duration of one sequence step (ms)")
    announce_delay_ms: int = Field(
        default=10, ge=0, description="Delay before the status line returns to the full mapping (ms)"
    )
    key_release_ms: int = Field(
        default=600,
        gt=0,
        description=(
            "Idle time after the last key event before a key counts as released (ms). "
            "Terminals do not report key release, so the TUI synthesizes it."
        ),
    )

    # Audio
    audio_device: int | None = Field(default=None, description="Output device ID (None = system default)")
    buffer_size: int = Field(default=512, gt=0, description="Audio buffer size in frames")
    sample_rate: int = Field(default=44100, gt=0, description="Output sample rate in Hz")

    @field_validator("default_keys")
    @classmethod
    def _normalize_keys(cls, keys: list[str]) -> list[str]:
        normalized = [key.strip().upper() for key in keys]
        for key in normalized:
            if len(key) != 1 or not "A" <= key <= "Z":
                raise ValueError(f"'{key}' is not a single letter A-Z")
        return normalized

    @model_validator(mode="after")
    def _check_board(self) -> "AppConfig":
        if len(self.default_keys) < len(self.sounds):
            raise ValueError(
                f"{len(self.sounds)} sounds need at least as many default_keys "
                f"(got {len(self.default_keys)})"
            )
        keys = self.default_keys[: len(self.sounds)]
        if len(set(keys)) != len(keys):
            raise ValueError(f"default_keys must be distinct: {' '.join(keys)}")
        note_ids = [sound.note_id for sound in self.sounds]
        if len(set(note_ids)) != len(note_ids):
            raise ValueError(f"sound note ids must be distinct: {' '.join(note_ids)}")
        return self

    @field_serializer("sounds_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    def sound_path(self, sound: SoundDef) -> Path:
        """Resolve a sound definition to its file path."""
        return self.sounds_dir / sound.file

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.musickit/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
