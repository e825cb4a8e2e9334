"""Unit tests for the mapping editor state machine."""

from unittest.mock import Mock

import pytest

from musickit.core import EditorState, MappingEditor
from musickit.exceptions import DuplicateLetterError, InvalidLetterError
from musickit.protocols import EditorEvent, EditorObserver


@pytest.fixture
def editor(registry, state):
    return MappingEditor(registry, state)


@pytest.fixture
def observer(editor):
    obs = Mock(spec=EditorObserver)
    editor.register_observer(obs)
    return obs


def events_of(observer) -> list[EditorEvent]:
    return [c.args[0] for c in observer.on_editor_event.call_args_list]


class TestOpen:
    """Test opening an edit session."""

    @pytest.mark.unit
    def test_open_sets_pending_to_current_letter(self, editor, registry, observer, visual_of):
        pad = registry.get_by_letter("D")

        assert editor.open_edit(pad) is True

        assert editor.editor_state == EditorState.OPEN
        assert editor.session.pad is pad
        assert editor.session.pending == "D"
        assert editor.session.visual is visual_of("F4")
        observer.on_editor_event.assert_called_once_with(EditorEvent.OPENED, pad, "D", None)

    @pytest.mark.unit
    def test_open_ignored_while_busy(self, editor, registry, state, observer):
        state.busy = True

        assert editor.open_edit(registry.get_by_letter("A")) is False

        assert editor.editor_state == EditorState.CLOSED
        observer.on_editor_event.assert_not_called()

    @pytest.mark.unit
    def test_open_other_pad_cancels_current(self, editor, registry, observer):
        first = registry.get_by_letter("A")
        second = registry.get_by_letter("S")
        editor.open_edit(first)
        editor.type_char("Z")

        editor.open_edit(second)

        assert editor.session.pad is second
        assert editor.session.pending == "S"
        assert first.letter == "A"
        assert events_of(observer) == [
            EditorEvent.OPENED,
            EditorEvent.INPUT_CHANGED,
            EditorEvent.CLOSED,
            EditorEvent.OPENED,
        ]

    @pytest.mark.unit
    def test_reopen_same_pad_keeps_session(self, editor, registry):
        pad = registry.get_by_letter("A")
        editor.open_edit(pad)
        editor.type_char("Z")

        assert editor.open_edit(pad) is True
        assert editor.session.pending == "Z"


class TestTyping:
    """Test pending letter input."""

    @pytest.mark.unit
    def test_keeps_first_letter_uppercased(self, editor, registry):
        editor.open_edit(registry.get_by_letter("A"))
        assert editor.type_char("qx") == "Q"
        assert editor.session.pending == "Q"

    @pytest.mark.unit
    def test_strips_non_letters(self, editor, registry):
        editor.open_edit(registry.get_by_letter("A"))
        assert editor.type_char("7") == ""
        assert editor.session.pending == ""

    @pytest.mark.unit
    def test_typing_clears_error(self, editor, registry):
        editor.open_edit(registry.get_by_letter("A"))
        editor.type_char("S")
        editor.confirm()
        assert editor.has_error

        editor.type_char("Z")
        assert not editor.has_error

    @pytest.mark.unit
    def test_typing_when_closed_is_ignored(self, editor):
        assert editor.type_char("Z") == ""
        assert not editor.is_open


class TestConfirm:
    """Test committing a new letter."""

    @pytest.mark.unit
    def test_valid_letter_is_committed(self, editor, registry, observer, visual_of):
        pad = registry.get_by_letter("A")
        editor.open_edit(pad)
        editor.type_char("z")

        assert editor.confirm() is True

        assert pad.letter == "Z"
        assert registry.get_by_letter("Z") is pad
        assert registry.get_by_letter("A") is None
        assert visual_of("C4").letter == "Z"
        assert not editor.is_open
        assert events_of(observer)[-1] == EditorEvent.CLOSED

    @pytest.mark.unit
    def test_confirm_own_letter_is_noop_success(self, editor, registry):
        """Confirming a pad's current letter closes without changes."""
        pad = registry.get_by_letter("A")
        mapping_observer = Mock()
        registry.register_observer(mapping_observer)
        editor.open_edit(pad)

        assert editor.confirm() is True

        assert pad.letter == "A"
        assert registry.letters() == ["A", "S", "D", "F", "G", "H", "J"]
        assert not editor.has_error
        assert not editor.is_open
        mapping_observer.on_mapping_event.assert_not_called()

    @pytest.mark.unit
    def test_duplicate_letter_rejected(self, editor, registry, observer):
        """Confirming another pad's letter keeps the session open in error."""
        pad = registry.get_by_letter("A")
        editor.open_edit(pad)
        editor.type_char("s")

        assert editor.confirm() is False

        assert pad.letter == "A"
        assert registry.get_by_letter("S").note_id == "D4"
        assert editor.is_open
        assert editor.has_error
        assert editor.session.pending == "S"
        assert isinstance(editor.last_error, DuplicateLetterError)
        assert editor.last_error.owner == "D4"

        event, _, pending, error = observer.on_editor_event.call_args.args
        assert event == EditorEvent.ERROR
        assert pending == "S"
        assert error is editor.last_error

    @pytest.mark.unit
    def test_empty_letter_rejected(self, editor, registry):
        editor.open_edit(registry.get_by_letter("A"))
        editor.type_char("!")

        assert editor.confirm() is False
        assert isinstance(editor.last_error, InvalidLetterError)
        assert registry.get_by_letter("A") is not None

    @pytest.mark.unit
    def test_each_rejection_emits_error(self, editor, registry, observer):
        editor.open_edit(registry.get_by_letter("A"))
        editor.type_char("S")
        editor.confirm()
        editor.confirm()

        assert events_of(observer).count(EditorEvent.ERROR) == 2

    @pytest.mark.unit
    def test_retry_after_error(self, editor, registry):
        pad = registry.get_by_letter("A")
        editor.open_edit(pad)
        editor.type_char("S")
        editor.confirm()
        editor.type_char("K")

        assert editor.confirm() is True
        assert pad.letter == "K"

    @pytest.mark.unit
    def test_commit_clears_held_keys(self, editor, registry, state):
        state.held_keys.update({"A", "S"})
        editor.open_edit(registry.get_by_letter("A"))
        editor.type_char("Z")
        editor.confirm()

        assert state.held_keys == set()

    @pytest.mark.unit
    def test_confirm_when_closed(self, editor):
        assert editor.confirm() is False


class TestCancel:
    """Test leaving without changes."""

    @pytest.mark.unit
    def test_cancel_discards_pending(self, editor, registry, observer):
        pad = registry.get_by_letter("A")
        editor.open_edit(pad)
        editor.type_char("Z")

        editor.cancel()

        assert pad.letter == "A"
        assert not editor.is_open
        assert events_of(observer)[-1] == EditorEvent.CLOSED

    @pytest.mark.unit
    def test_dismiss_is_cancel(self, editor, registry):
        pad = registry.get_by_letter("A")
        editor.open_edit(pad)
        editor.type_char("Z")

        editor.dismiss()

        assert pad.letter == "A"
        assert not editor.is_open

    @pytest.mark.unit
    def test_cancel_when_closed_emits_nothing(self, editor, observer):
        editor.cancel()
        observer.on_editor_event.assert_not_called()


class TestUniqueness:
    """Letters stay unique through any sequence of edits."""

    @pytest.mark.unit
    def test_random_edits_keep_letters_unique(self, editor, registry):
        attempts = ["S", "A", "Z", "Z", "q", "D", "J", "b", "1", "A", "W"]
        pads = registry.pads
        for i, raw in enumerate(attempts):
            editor.open_edit(pads[i % len(pads)])
            editor.type_char(raw)
            if not editor.confirm():
                editor.cancel()

            letters = registry.letters()
            assert len(set(letters)) == len(letters)
            for letter in letters:
                assert registry.get_by_letter(letter).letter == letter
