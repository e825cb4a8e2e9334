"""Smoke tests for the TUI using Textual's test framework.

These tests verify that the board can launch, render and respond to basic
interactions without crashing. Audio is a mock output.
"""

import pytest

import musickit.tui.widgets.editor_bar as editor_bar_module
from musickit.tui import MusicKitApp
from musickit.tui.widgets import EditorBar, PadWidget, SequenceBar, StatusLine

MAPPING = "Keys: A S D F G H J → C4 D4 F4 A4 B4 C5 C6"


@pytest.fixture
def app(board):
    return MusicKitApp(board, key_release_ms=50)


def played(output) -> list[str]:
    return [c.args[0] for c in output.play.call_args_list]


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUILaunch:
    """Test that the TUI can launch without crashing."""

    async def test_mounts_widgets(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            assert len(app.query(PadWidget)) == 7
            assert app.query_one(EditorBar) is not None
            assert app.query_one(SequenceBar) is not None
            assert app.query_one("#copyright") is not None

    async def test_status_shows_mapping(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            assert app.query_one(StatusLine).text == MAPPING

    async def test_pad_widgets_are_bound_as_visuals(self, app, board):
        async with app.run_test() as pilot:
            await pilot.pause()

            pad = board.registry.get_by_letter("A")
            assert board.registry.get_visual(pad) is app.query_one("#pad-C4", PadWidget)

    async def test_editor_hidden_and_play_disabled_at_start(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            assert not app.query_one(EditorBar).is_open
            assert app.query_one("#play-sequence").disabled


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIKeyboard:
    """Test the keyboard channel."""

    async def test_key_plays_and_releases(self, app, output):
        async with app.run_test() as pilot:
            await pilot.pause()

            await pilot.press("a")
            pad_widget = app.query_one("#pad-C4", PadWidget)
            assert played(output) == ["C4"]
            assert pad_widget.is_active

            await pilot.pause(0.2)
            assert not pad_widget.is_active
            assert "A" not in app.board.state.held_keys

    async def test_unmapped_key_does_nothing(self, app, output):
        async with app.run_test() as pilot:
            await pilot.pause()

            await pilot.press("z")
            assert played(output) == []


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIEditing:
    """Test changing a pad's key."""

    async def test_edit_through_board(self, app, board):
        async with app.run_test() as pilot:
            await pilot.pause()

            pad = board.registry.get_by_letter("A")
            board.editor.open_edit(pad)
            await pilot.pause()
            assert app.query_one(EditorBar).is_open

            board.editor.type_char("z")
            assert board.editor.confirm() is True
            await pilot.pause(0.05)

            assert app.query_one("#pad-C4", PadWidget).letter == "Z"
            assert not app.query_one(EditorBar).is_open
            assert app.query_one(StatusLine).text == "Keys: Z S D F G H J → C4 D4 F4 A4 B4 C5 C6"

    async def test_edit_through_widgets(self, app, board):
        async with app.run_test() as pilot:
            await pilot.pause()

            await pilot.click("#pad-C4 .pad-edit")
            await pilot.pause()
            assert board.editor.is_open

            await pilot.press("q")
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()

            assert board.registry.get_by_note("C4").letter == "Q"
            assert not board.editor.is_open

    async def test_duplicate_keeps_editor_open(self, app, board):
        async with app.run_test() as pilot:
            await pilot.pause()

            board.editor.open_edit(board.registry.get_by_letter("S"))
            board.editor.type_char("a")
            board.editor.confirm()
            await pilot.pause()

            bar = app.query_one(EditorBar)
            assert bar.is_open
            assert bar.has_class("error")
            assert board.registry.get_by_note("D4").letter == "S"

    async def test_click_outside_editor_dismisses(self, app, board):
        async with app.run_test() as pilot:
            await pilot.pause()

            board.editor.open_edit(board.registry.get_by_letter("A"))
            await pilot.pause()
            await pilot.click("#editor-hint")
            await pilot.pause()
            assert board.editor.is_open

            # The status line cannot take focus, so the editor input keeps it
            await pilot.click("#status-line")
            await pilot.pause()

            assert not board.editor.is_open
            assert not app.query_one(EditorBar).is_open
            assert board.registry.get_by_note("C4").letter == "A"

    async def test_repeated_error_restarts_pulse(self, app, board, monkeypatch):
        monkeypatch.setattr(editor_bar_module, "PULSE_SECONDS", 1.0)
        async with app.run_test() as pilot:
            await pilot.pause()

            board.editor.open_edit(board.registry.get_by_letter("S"))
            board.editor.type_char("a")
            board.editor.confirm()
            await pilot.pause(0.6)
            board.editor.confirm()
            await pilot.pause(0.6)

            bar = app.query_one(EditorBar)
            assert bar.has_class("pulse")

            await pilot.pause(0.6)
            assert not bar.has_class("pulse")
            assert bar.has_class("error")


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUISequence:
    """Test the sequence bar."""

    async def test_field_keeps_only_mapped_letters(self, app, output):
        async with app.run_test() as pilot:
            await pilot.pause()

            await pilot.click("#sequence-input")
            for key in ("a", "s", "z", "1", "d"):
                await pilot.press(key)
            await pilot.pause()

            assert app.board.field.value == "ASD"
            assert not app.query_one("#play-sequence").disabled
            # Typing in the field does not play pads
            assert played(output) == []

    async def test_play_sequence(self, app, board, output):
        async with app.run_test() as pilot:
            await pilot.pause()

            board.field.set_text("asd")
            app.query_one(SequenceBar).update_play_state()
            await pilot.click("#play-sequence")
            await pilot.pause(0.3)

            assert played(output) == ["C4", "D4", "F4"]
            assert not board.busy
            assert not app.screen.has_class("busy")

    async def test_typing_after_remap(self, app, board):
        async with app.run_test() as pilot:
            await pilot.pause()

            await pilot.click("#sequence-input")
            await pilot.press("a", "s")
            await pilot.pause()
            assert board.field.value == "AS"

            board.registry.set_letter(board.registry.get_by_letter("A"), "Z")
            await pilot.pause()
            assert app.query_one("#sequence-input").value == "S"

            await pilot.press("end", "d", "z")
            await pilot.pause()

            assert board.field.value == "SDZ"
            assert app.query_one("#sequence-input").value == "SDZ"
