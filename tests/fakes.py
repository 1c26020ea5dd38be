import asyncio
from typing import Any, Callable, Dict, List, Optional

from rich.text import Text

from globprompt.interfaces import KeyPress


def plain(markup: str) -> str:
    return Text.from_markup(markup, emoji=False).plain


class FakeLineEditor:
    """Stands in for the host line editor, like a stubbed readline."""

    def __init__(self) -> None:
        self.line = ""
        self.line_listeners: List[Callable] = []
        self.keypress_listeners: List[Callable] = []

    def on_line(self, listener):
        self.line_listeners.append(listener)
        return lambda: self.line_listeners.remove(listener)

    def on_keypress(self, listener):
        self.keypress_listeners.append(listener)
        return lambda: self.keypress_listeners.remove(listener)

    def reset_line(self) -> None:
        self.line = ""

    # --- helpers used by tests ---

    def submit(self, line: Optional[str] = None) -> None:
        for listener in list(self.line_listeners):
            listener(line)

    def type(self, text: str) -> None:
        for char in text:
            self.line += char
            self.press(char)

    def press(self, name: str, **mods) -> None:
        key = KeyPress(name=name, sequence=name if len(name) == 1 else "", **mods)
        for listener in list(self.keypress_listeners):
            listener(key)


class FakeScreen:
    def __init__(self) -> None:
        self.renders: List[tuple] = []
        self.done_calls = 0

    def render(self, content: str, bottom_content: str = "") -> None:
        self.renders.append((content, bottom_content))

    def done(self) -> None:
        self.done_calls += 1

    @property
    def output(self) -> str:
        content, bottom = self.renders[-1]
        text = plain(content)
        if bottom:
            text += "\n" + plain(bottom)
        return text


class FakeGlob:
    """Records calls and resolves to ``results`` (or raises ``error``)."""

    def __init__(self, results: Optional[List[str]] = None) -> None:
        self.results = list(results or [])
        self.error: Optional[Exception] = None
        self.calls: List[tuple] = []

    async def __call__(self, pattern: str, options: Optional[Dict[str, Any]] = None):
        self.calls.append((pattern, options))
        if self.error is not None:
            raise self.error
        return list(self.results)


class ManualGlob:
    """Each call returns a future the test resolves by hand, in any order."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.futures: List[asyncio.Future] = []

    def __call__(self, pattern: str, options: Optional[Dict[str, Any]] = None):
        future = asyncio.get_running_loop().create_future()
        self.calls.append((pattern, options))
        self.futures.append(future)
        return future


async def settle() -> None:
    # let pending query tasks run to completion
    for _ in range(10):
        await asyncio.sleep(0)


