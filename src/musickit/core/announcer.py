"""Status announcer: keeps the status line text in sync with the mapping."""

import asyncio
import logging

from musickit.models import SoundPad
from musickit.protocols import MappingEvent, StatusObserver
from musickit.utils import ObserverManager

from .registry import SoundRegistry

logger = logging.getLogger(__name__)

DEFAULT_ANNOUNCE_DELAY_MS = 10


class StatusAnnouncer:
    """
    Formats and publishes status text.

    After a remap the short change notice is published first, then replaced
    by the full mapping once `delay_ms` has elapsed on the running event
    loop. Without a running loop the full mapping follows immediately.

    Implements MappingObserver.
    """

    def __init__(self, registry: SoundRegistry, delay_ms: int = DEFAULT_ANNOUNCE_DELAY_MS):
        self.registry = registry
        self.delay_ms = delay_ms
        self.text = ""
        self._pending: asyncio.TimerHandle | None = None
        self._observers = ObserverManager[StatusObserver](observer_type_name="status")

    def register_observer(self, observer: StatusObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: StatusObserver) -> None:
        self._observers.unregister(observer)

    def mapping_text(self) -> str:
        """Full mapping, e.g. "Keys: A S D F G H J → C4 D4 F4 A4 B4 C5 C6"."""
        letters, notes = self.registry.mapping_summary()
        return f"Keys: {letters} → {notes}"

    @staticmethod
    def change_text(note_id: str, letter: str) -> str:
        return f"Key for {note_id} changed to {letter}."

    def refresh(self) -> None:
        """Publish the full mapping now."""
        self._pending = None
        self._publish(self.mapping_text())

    def announce_change(self, note_id: str, letter: str) -> None:
        """Publish the change notice, then schedule the full mapping."""
        self._publish(self.change_text(note_id, letter))

        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.refresh()
            return
        self._pending = loop.call_later(self.delay_ms / 1000, self.refresh)

    def on_mapping_event(self, event: MappingEvent, pad: SoundPad, old_letter: str) -> None:
        if event == MappingEvent.LETTER_CHANGED:
            self.announce_change(pad.note_id, pad.letter)

    def _publish(self, text: str) -> None:
        self.text = text
        logger.debug(f"Status: {text}")
        self._observers.notify("on_status", text)
