"""Unit tests for the sequence text field model."""

import re

import pytest

from musickit.core import SequenceField


@pytest.fixture
def field(registry, state):
    f = SequenceField(registry, state)
    registry.register_observer(f)
    return f


class TestRules:
    """Test input rules."""

    @pytest.mark.unit
    def test_max_length_is_twice_pad_count(self, field):
        assert field.max_length == 14

    @pytest.mark.unit
    def test_accepts_mapped_letters_either_case(self, field):
        assert field.accepts_insert("a")
        assert field.accepts_insert("J")

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["z", "1", " ", "", "as"])
    def test_rejects_other_inserts(self, field, text):
        assert not field.accepts_insert(text)

    @pytest.mark.unit
    def test_rejects_overflow(self, field):
        field.set_text("A" * 14)
        assert not field.accepts_insert("S")

    @pytest.mark.unit
    def test_restrict_pattern(self, field):
        pattern = field.restrict_pattern()
        assert re.fullmatch(pattern, "asdJ")
        assert not re.fullmatch(pattern, "asz")


class TestSetText:
    """Test normalization of the field content."""

    @pytest.mark.unit
    def test_normalizes(self, field):
        assert field.set_text("asdfgh123asdfgh123") == "ASDFGHASDFGH"
        assert field.value == "ASDFGHASDFGH"

    @pytest.mark.unit
    def test_truncates(self, field):
        assert len(field.set_text("a" * 30)) == 14

    @pytest.mark.unit
    def test_clear(self, field):
        field.set_text("asd")
        field.clear()
        assert field.value == ""


class TestCanPlay:
    """Test the play control state."""

    @pytest.mark.unit
    def test_disabled_when_empty(self, field):
        assert not field.can_play

    @pytest.mark.unit
    def test_enabled_with_content(self, field):
        field.set_text("a")
        assert field.can_play

    @pytest.mark.unit
    def test_disabled_while_busy(self, field, state):
        field.set_text("a")
        state.busy = True
        assert not field.can_play


class TestMappingChanges:
    """Test rule refresh after a remap."""

    @pytest.mark.unit
    def test_new_letter_accepted_old_rejected(self, field, registry):
        registry.set_letter(registry.get_by_letter("A"), "Z")

        assert field.accepts_insert("z")
        assert not field.accepts_insert("a")
        assert re.fullmatch(field.restrict_pattern(), "Zz")

    @pytest.mark.unit
    def test_value_drops_unmapped_letters(self, field, registry):
        field.set_text("ASA")
        registry.set_letter(registry.get_by_letter("A"), "Z")

        assert field.value == "S"
        assert re.fullmatch(field.restrict_pattern(), field.value)
        assert field.accepts_insert("z")
