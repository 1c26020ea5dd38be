from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol


@dataclass(frozen=True)
class KeyPress:
    """Descriptor for a single keypress as reported by the line editor."""

    name: str = ""
    sequence: str = ""
    ctrl: bool = False
    meta: bool = False
    shift: bool = False


LineListener = Callable[[Optional[str]], None]
KeypressListener = Callable[[KeyPress], None]

# (pattern, options) -> ordered list of matching paths
GlobFunction = Callable[[str, Optional[Dict[str, Any]]], Awaitable[List[str]]]


class LineEditor(Protocol):
    """
    The host line editor.

    It applies edits to ``line`` *before* notifying keypress listeners, and
    calls line listeners on submit with optional override text.
    """

    line: str

    def on_line(self, listener: LineListener) -> Callable[[], None]: ...

    def on_keypress(self, listener: KeypressListener) -> Callable[[], None]: ...

    def reset_line(self) -> None: ...


class Screen(Protocol):
    def render(self, content: str, bottom_content: str = "") -> None: ...

    def done(self) -> None: ...
