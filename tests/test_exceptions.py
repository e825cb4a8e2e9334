"""Tests for the exception hierarchy and error handling helpers."""

import logging

import pytest
from pydantic import BaseModel, Field, ValidationError

from musickit.exceptions import (
    AudioDeviceError,
    ConfigFileInvalidError,
    ConfigValidationError,
    DuplicateLetterError,
    ErrorContext,
    InvalidLetterError,
    MappingError,
    MusicKitError,
    format_error_for_display,
    wrap_audio_device_error,
    wrap_pydantic_error,
)


class Limits(BaseModel):
    step_ms: int = Field(gt=0)
    buffer_size: int = Field(gt=0)


class TestHierarchy:
    """Test exception attributes."""

    @pytest.mark.unit
    def test_duplicate_letter(self):
        error = DuplicateLetterError("A", "C4")

        assert isinstance(error, MappingError)
        assert error.recoverable
        assert error.letter == "A"
        assert error.owner == "C4"
        assert str(error) == "Key A is already used by C4."

    @pytest.mark.unit
    def test_invalid_letter(self):
        error = InvalidLetterError("")
        assert "single letter" in error.user_message
        assert error.recovery_hint

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        error = MusicKitError("Broken", recovery_hint="Fix it")
        assert error.get_full_message() == "Broken\n\nSuggestion: Fix it"
        assert error.technical_message == "Broken"

    @pytest.mark.unit
    def test_audio_device_error(self):
        error = AudioDeviceError(device_id=3, original_error="busy")
        assert error.user_message == "Could not open the audio device 3."
        assert "busy" in error.technical_message
        assert "musickit audio list" in error.recovery_hint


class TestWrapping:
    """Test conversion of library errors."""

    @pytest.mark.unit
    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            Limits.model_validate_json("{ nope")

        wrapped = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(wrapped, ConfigFileInvalidError)
        assert wrapped.file_path == "config.json"

    @pytest.mark.unit
    def test_single_field(self):
        with pytest.raises(ValidationError) as exc_info:
            Limits(step_ms=0, buffer_size=512)

        wrapped = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(wrapped, ConfigValidationError)
        assert wrapped.field == "step_ms"
        assert wrapped.value == 0

    @pytest.mark.unit
    def test_multiple_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            Limits(step_ms=0, buffer_size=0)

        wrapped = wrap_pydantic_error(exc_info.value, "config.json")
        assert wrapped.field == "multiple fields"
        assert "2 validation errors" in wrapped.user_message

    @pytest.mark.unit
    def test_audio_device(self):
        wrapped = wrap_audio_device_error(OSError("PortAudio error"), device_id=None)
        assert isinstance(wrapped, AudioDeviceError)
        assert "default audio device" in wrapped.user_message

    @pytest.mark.unit
    def test_audio_device_passes_own_errors_through(self):
        original = AudioDeviceError(2)
        assert wrap_audio_device_error(original, 2) is original


class TestDisplay:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_own_error(self):
        message, hint = format_error_for_display(DuplicateLetterError("S", "D4"))
        assert message == "Key S is already used by D4."
        assert hint is not None

    @pytest.mark.unit
    def test_foreign_error(self):
        message, hint = format_error_for_display(ValueError("bad"))
        assert message == "ValueError: bad"
        assert hint is None


class TestErrorContext:
    """Test the ErrorContext context manager."""

    @pytest.mark.unit
    def test_success(self):
        with ErrorContext("do nothing") as ctx:
            pass
        assert ctx.error is None

    @pytest.mark.unit
    def test_re_raises_by_default(self):
        with pytest.raises(ValueError):
            with ErrorContext("fail"):
                raise ValueError("boom")

    @pytest.mark.unit
    def test_suppresses_and_records(self, caplog):
        with caplog.at_level(logging.ERROR):
            with ErrorContext("open device", re_raise=False) as ctx:
                raise AudioDeviceError(1, "gone")

        assert isinstance(ctx.error, AudioDeviceError)
        assert "Failed to open device" in caplog.text

    @pytest.mark.unit
    def test_keyboard_interrupt_passes_through(self):
        with pytest.raises(KeyboardInterrupt):
            with ErrorContext("interrupted", re_raise=False):
                raise KeyboardInterrupt
