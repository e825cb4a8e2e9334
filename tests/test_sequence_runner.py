"""Tests for the sequence runner."""

import asyncio
import time
from unittest.mock import Mock

import pytest

from musickit.core import SequenceRunner
from musickit.protocols import SequenceEvent, SequenceObserver


@pytest.fixture
def runner(registry, playback, state):
    return SequenceRunner(registry, playback, state, step_ms=20)


@pytest.fixture
def observer(runner):
    obs = Mock(spec=SequenceObserver)
    runner.register_observer(obs)
    return obs


def events_of(observer) -> list[tuple]:
    return [c.args for c in observer.on_sequence_event.call_args_list]


class TestNormalize:
    """Test sequence normalization."""

    @pytest.mark.unit
    def test_default_mapping(self, runner):
        assert runner.normalize("asdfgh123asdfgh123") == "ASDFGHASDFGH"

    @pytest.mark.unit
    def test_truncated_to_twice_pad_count(self, runner):
        assert runner.normalize("a" * 20) == "A" * 14

    @pytest.mark.unit
    def test_unmapped_only(self, runner):
        assert runner.normalize("xyz 123") == ""

    @pytest.mark.unit
    def test_follows_remaps(self, runner, registry):
        registry.set_letter(registry.get_by_letter("A"), "Z")
        assert runner.normalize("az") == "Z"


@pytest.mark.asyncio
class TestRun:
    """Test running sequences."""

    async def test_steps_play_in_order(self, runner, output):
        await runner.run("ASD")

        assert [c.args[0] for c in output.play.call_args_list] == ["C4", "D4", "F4"]
        assert [c.args[0] for c in output.stop.call_args_list] == ["C4", "D4", "F4"]

    async def test_steps_are_serial(self, runner, output):
        """Each step is stopped before the next one starts."""
        order = []
        output.play.side_effect = lambda note: order.append(("play", note))
        output.stop.side_effect = lambda note: order.append(("stop", note))

        await runner.run("AA")

        assert order == [("play", "C4"), ("stop", "C4"), ("play", "C4"), ("stop", "C4")]

    async def test_takes_about_steps_times_step_ms(self, runner):
        start = time.monotonic()
        await runner.run("ASDF")
        elapsed = time.monotonic() - start

        assert elapsed >= 4 * 0.020 * 0.9

    async def test_visuals_toggle_per_step(self, runner, visual_of):
        await runner.run("SS")

        assert visual_of("D4").history == [True, False, True, False]
        assert not visual_of("D4").active

    async def test_busy_only_during_run(self, runner, state):
        seen = []
        task = asyncio.create_task(runner.run("AS"))
        await asyncio.sleep(0.005)
        seen.append(state.busy)
        assert runner.is_running
        await task

        assert seen == [True]
        assert state.busy is False
        assert not runner.is_running

    async def test_events(self, runner, observer):
        await runner.run("AS")

        assert events_of(observer) == [
            (SequenceEvent.STARTED,),
            (SequenceEvent.STEP_STARTED, "A"),
            (SequenceEvent.STEP_FINISHED, "A"),
            (SequenceEvent.STEP_STARTED, "S"),
            (SequenceEvent.STEP_FINISHED, "S"),
            (SequenceEvent.FINISHED,),
        ]

    async def test_unmapped_letter_is_skipped(self, runner, registry, output, observer):
        """A letter remapped away after normalization is skipped silently."""
        registry.set_letter(registry.get_by_letter("S"), "Q")

        await runner.run("ASD")

        assert [c.args[0] for c in output.play.call_args_list] == ["C4", "F4"]
        assert (SequenceEvent.STEP_SKIPPED, "S") in events_of(observer)

    async def test_empty_sequence_is_noop(self, runner, state, observer):
        await runner.run("")

        observer.on_sequence_event.assert_not_called()
        assert state.busy is False

    async def test_second_run_while_running_is_ignored(self, runner, output):
        first = asyncio.create_task(runner.run("AA"))
        await asyncio.sleep(0.005)

        await runner.run("SSSS")
        await first

        assert [c.args[0] for c in output.play.call_args_list] == ["C4", "C4"]

    async def test_step_failure_still_clears_busy(self, runner, state, observer):
        """A failing step ends the run, and busy is always cleared."""
        runner.playback = Mock()
        runner.playback.trigger_timed.side_effect = RuntimeError("boom")

        await runner.run("AS")

        assert state.busy is False
        assert not runner.is_running
        assert events_of(observer)[-1] == (SequenceEvent.FINISHED,)

    async def test_step_failure_deactivates_visual(self, runner, visual_of):
        runner.playback = Mock()
        runner.playback.trigger_timed.side_effect = RuntimeError("boom")

        await runner.run("A")

        assert not visual_of("C4").active

    async def test_playback_failure_does_not_stop_run(self, runner, output):
        output.play.side_effect = RuntimeError("no audio")

        await runner.run("AS")

        assert output.play.call_count == 2
        assert output.stop.call_count == 2
