import logging
from typing import Callable, List, Optional

from globprompt.interfaces import KeyPress, LineEditor

logger = logging.getLogger(__name__)


class InputAdapter:
    """
    Routes the line editor's ``line`` and ``keypress`` feeds to a handler.

    Dispatch is one-shot: once ``is_done()`` reports true both feeds are
    unsubscribed and nothing else is forwarded, even for events already
    queued by the editor.
    """

    def __init__(
        self,
        rl: LineEditor,
        on_submit: Callable[[Optional[str]], None],
        on_keypress: Callable[[KeyPress], None],
        is_done: Callable[[], bool],
    ) -> None:
        self.rl = rl
        self._on_submit = on_submit
        self._on_keypress = on_keypress
        self._is_done = is_done
        self._unsubscribers: List[Callable[[], None]] = []

    @property
    def subscribed(self) -> bool:
        return bool(self._unsubscribers)

    def subscribe(self) -> None:
        if self._unsubscribers:
            return
        self._unsubscribers = [
            self.rl.on_line(self._dispatch_line),
            self.rl.on_keypress(self._dispatch_keypress),
        ]

    def unsubscribe(self) -> None:
        unsubscribers, self._unsubscribers = self._unsubscribers, []
        for unsubscribe in unsubscribers:
            unsubscribe()
        if unsubscribers:
            logger.debug("Input feeds unsubscribed")

    def _dispatch_line(self, line: Optional[str] = None) -> None:
        if self._is_done():
            self.unsubscribe()
            return
        self._on_submit(line)
        if self._is_done():
            self.unsubscribe()

    def _dispatch_keypress(self, key: KeyPress) -> None:
        if self._is_done():
            self.unsubscribe()
            return
        self._on_keypress(key)
        if self._is_done():
            self.unsubscribe()
