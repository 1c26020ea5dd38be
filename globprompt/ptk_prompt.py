"""
prompt_toolkit host for the glob prompt.

- Uses a small inline Application (no full screen): the question and the
  editable pattern on the first line, the matching paths underneath.
- The controller renders rich markup; it is converted to ANSI with a Rich
  console and handed to prompt_toolkit as ``ANSI`` formatted text.
- Up/Down (or Ctrl-P/Ctrl-N) page through matches, Enter submits,
  Ctrl-C / Ctrl-D abort with KeyboardInterrupt.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.formatted_text.utils import fragment_list_to_text
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.processors import BeforeInput
from prompt_toolkit.layout.utils import explode_text_fragments
from rich.console import Console
from rich.text import Text

from globprompt.controller import GlobPromptController
from globprompt.interfaces import (
    GlobFunction,
    KeyPress,
    KeypressListener,
    LineListener,
)
from globprompt.question import GlobQuestion

logger = logging.getLogger(__name__)


def markup_to_ansi(markup: str) -> str:
    """Render rich console markup to an ANSI escaped string."""
    if not markup:
        return ""
    console = Console(
        force_terminal=True,
        color_system="standard",
        highlight=False,
        emoji=False,
        width=10_000,
    )
    with console.capture() as capture:
        console.print(Text.from_markup(markup, emoji=False), end="", soft_wrap=True)
    return capture.get()


def _subscribe(listeners: List, listener) -> Callable[[], None]:
    listeners.append(listener)

    def unsubscribe() -> None:
        if listener in listeners:
            listeners.remove(listener)

    return unsubscribe


class PromptToolkitLineEditor:
    """Line editor backed by a single-line prompt_toolkit Buffer."""

    def __init__(self) -> None:
        self._line_listeners: List[LineListener] = []
        self._keypress_listeners: List[KeypressListener] = []
        self.buffer = Buffer(multiline=False, on_text_changed=self._text_changed)

    @property
    def line(self) -> str:
        return self.buffer.text

    @line.setter
    def line(self, value: str) -> None:
        self.buffer.text = value

    def on_line(self, listener: LineListener) -> Callable[[], None]:
        return _subscribe(self._line_listeners, listener)

    def on_keypress(self, listener: KeypressListener) -> Callable[[], None]:
        return _subscribe(self._keypress_listeners, listener)

    def reset_line(self) -> None:
        self.buffer.reset()

    def emit_line(self, line: Optional[str] = None) -> None:
        for listener in list(self._line_listeners):
            listener(line)

    def emit_keypress(self, key: KeyPress) -> None:
        for listener in list(self._keypress_listeners):
            listener(key)

    def _text_changed(self, _buffer: Buffer) -> None:
        # The buffer has already applied the edit at this point
        self.emit_keypress(KeyPress(name="edit", sequence=self.buffer.text))

    def key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down", eager=True)
        def _(event) -> None:
            self.emit_keypress(KeyPress(name="down"))

        @kb.add("c-n", eager=True)
        def _(event) -> None:
            self.emit_keypress(KeyPress(name="n", ctrl=True))

        @kb.add("up", eager=True)
        def _(event) -> None:
            self.emit_keypress(KeyPress(name="up"))

        @kb.add("c-p", eager=True)
        def _(event) -> None:
            self.emit_keypress(KeyPress(name="p", ctrl=True))

        @kb.add("enter", eager=True)
        def _(event) -> None:
            self.emit_line(None)

        @kb.add("c-c")
        @kb.add("c-d")
        def _(event) -> None:
            event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

        return kb


class PromptToolkitScreen:
    """
    Screen sink drawing the controller's content inside a prompt_toolkit app.

    The editable line itself is drawn by the Buffer, so the content's trailing
    copy of the line text is trimmed and the rest shown before the input.
    """

    def __init__(self, editor: PromptToolkitLineEditor) -> None:
        self.editor = editor
        self.app: Optional[Application] = None
        self.content = ""
        self.bottom_content = ""
        self._content_ansi = ""
        self._bottom_ansi = ""

    def attach(self, app: Application) -> None:
        self.app = app

    def render(self, content: str, bottom_content: str = "") -> None:
        self.content = content
        self.bottom_content = bottom_content
        self._content_ansi = markup_to_ansi(content)
        self._bottom_ansi = markup_to_ansi(bottom_content)
        if self.app is not None and self.app.is_running:
            self.app.invalidate()

    def done(self) -> None:
        if self.app is not None and self.app.is_running and not self.app.is_done:
            self.app.exit()

    def prefix_fragments(self) -> StyleAndTextTuples:
        fragments = explode_text_fragments(to_formatted_text(ANSI(self._content_ansi)))
        text = self.editor.line
        if text and fragment_list_to_text(fragments).endswith(text):
            fragments = fragments[: -len(text)]
        return fragments

    def bottom_fragments(self) -> StyleAndTextTuples:
        return to_formatted_text(ANSI(self._bottom_ansi))


def build_application(
    editor: PromptToolkitLineEditor, screen: PromptToolkitScreen
) -> Application:
    input_window = Window(
        content=BufferControl(
            buffer=editor.buffer,
            input_processors=[BeforeInput(screen.prefix_fragments)],
            focusable=True,
        ),
        dont_extend_height=True,
        wrap_lines=True,
    )
    bottom_window = Window(
        content=FormattedTextControl(screen.bottom_fragments),
        dont_extend_height=True,
        wrap_lines=True,
    )

    app = Application(
        layout=Layout(HSplit([input_window, bottom_window]), focused_element=input_window),
        key_bindings=editor.key_bindings(),
        full_screen=False,
    )
    screen.attach(app)
    return app


async def prompt_glob(
    question: Union[GlobQuestion, Dict[str, Any]],
    glob: Optional[GlobFunction] = None,
) -> List[str]:
    """Ask a glob question in the terminal and return the matched paths."""
    if not isinstance(question, GlobQuestion):
        question = GlobQuestion.from_dict(question)

    editor = PromptToolkitLineEditor()
    screen = PromptToolkitScreen(editor)
    app = build_application(editor, screen)
    controller = GlobPromptController(question, editor, screen, glob=glob)

    answer = controller.start()
    try:
        await app.run_async()
    finally:
        controller.close()

    paths = answer.result()
    logger.info("Glob prompt %r answered with %d paths", question.name, len(paths))
    return paths
