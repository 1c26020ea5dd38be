import asyncio
import itertools
import logging
from typing import List, Optional, Set, Tuple

from globprompt.events import InputAdapter
from globprompt.globber import glob_paths
from globprompt.interfaces import GlobFunction, KeyPress, LineEditor, Screen
from globprompt.question import GlobQuestion
from globprompt.render import render_prompt
from globprompt.settings import settings
from globprompt.state import EditState, PageState, PromptStatus, QueryState

logger = logging.getLogger(__name__)


def is_page_down(key: KeyPress) -> bool:
    return key.name == "down" or (key.ctrl and key.name == "n")


def is_page_up(key: KeyPress) -> bool:
    return key.name == "up" or (key.ctrl and key.name == "p")


class GlobPromptController:
    """
    Live glob prompt: the user edits a pattern and sees the paginated paths
    it matches; submitting answers with the list of matched paths.

    All state is owned by this instance and only touched from the event loop
    thread. Glob queries run as tasks; each carries a token and only the
    result of the most recently issued query is ever applied.
    """

    def __init__(
        self,
        question: GlobQuestion,
        rl: LineEditor,
        screen: Screen,
        glob: Optional[GlobFunction] = None,
    ) -> None:
        self.question = question
        self.rl = rl
        self.screen = screen
        self._glob = glob or glob_paths

        self.status = PromptStatus.PENDING
        self.answer: Optional[str] = None
        self.edit = EditState(current_line=rl.line)
        self.query = QueryState()
        self.page = PageState(size=question.page_size)

        self._tokens = itertools.count(1)
        self._tasks: Set[asyncio.Task] = set()
        self._result: Optional[asyncio.Future] = None
        self.adapter = InputAdapter(
            rl,
            on_submit=self.handle_submit,
            on_keypress=self.handle_keypress,
            is_done=lambda: self.status is PromptStatus.ANSWERED,
        )

    @property
    def matches(self) -> List[str]:
        return self.query.matches

    # --- lifecycle -------------------------------------------------------

    def start(self) -> asyncio.Future:
        """Subscribe to input, glob for the initial pattern and return the answer future."""
        if self._result is not None:
            raise RuntimeError("Glob prompt has already been started")

        self._result = asyncio.get_running_loop().create_future()
        self.adapter.subscribe()

        self.edit.sync(self.rl.line, self.question.default)
        self.render()
        self.issue_query(self.edit.current_line or self.question.initial_pattern)
        return self._result

    async def run(self) -> List[str]:
        try:
            return await self.start()
        finally:
            self.close()

    def close(self) -> None:
        """Unsubscribe from input and cancel any query still in flight."""
        self.adapter.unsubscribe()
        for task in list(self._tasks):
            task.cancel()

    # --- query manager ---------------------------------------------------

    def issue_query(self, pattern: str) -> None:
        token = next(self._tokens)
        self.query.pending_token = token
        self.query.pattern = pattern
        logger.debug("Issuing glob query #%d for %r", token, pattern)

        try:
            pending = self._glob(pattern, self.question.glob)
        except Exception:
            logger.warning("Glob for %r failed", pattern, exc_info=True)
            pending = None

        task = asyncio.get_running_loop().create_task(
            self._resolve_query(token, pattern, pending)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _resolve_query(self, token: int, pattern: str, pending) -> None:
        paths: List[str] = []
        if pending is not None:
            try:
                paths = list(await pending)
            except Exception:
                if token != self.query.pending_token:
                    logger.debug("Dropping failure of stale glob query #%d", token)
                    return
                logger.warning("Glob for %r failed", pattern, exc_info=True)
                paths = []

        self.apply_results(token, paths)

    def apply_results(self, token: int, paths: List[str]) -> bool:
        """Apply the results of query ``token`` if it is still the current one."""
        if self.status is PromptStatus.ANSWERED or token != self.query.pending_token:
            logger.debug("Dropping stale glob query #%d", token)
            return False

        self.query.matches = paths
        self.page.reset(len(paths))
        logger.debug(
            "Glob query #%d matched %d paths (%d pages)", token, len(paths), self.page.count
        )
        self.render()
        return True

    # --- input handling --------------------------------------------------

    def handle_keypress(self, key: KeyPress) -> None:
        if self.status is PromptStatus.ANSWERED:
            return

        # remove or restore rendering the default pattern
        self.edit.sync(self.rl.line, self.question.default)

        if is_page_down(key):
            self.page.forward()
            logger.debug("Page %d of %d", self.page.index + 1, self.page.count)
            self.render()
        elif is_page_up(key):
            self.page.backward()
            logger.debug("Page %d of %d", self.page.index + 1, self.page.count)
            self.render()
        else:
            self.render()

            pattern = self.edit.current_line or self.question.initial_pattern
            if pattern != self.query.pattern:
                self.issue_query(pattern)

    def handle_submit(self, line: Optional[str] = None) -> None:
        if self.status is PromptStatus.ANSWERED:
            return

        if self.question.force_match and not self.query.matches:
            self.render(settings.FORCE_MATCH_ERROR)
            return

        self.answer = (
            line or self.rl.line or self.question.default or settings.DEFAULT_PATTERN
        )
        self.status = PromptStatus.ANSWERED
        answer = list(self.query.matches)

        self.rl.reset_line()
        self.edit.current_line = ""
        self.render()
        self.screen.done()
        self.adapter.unsubscribe()

        if self._result is not None and not self._result.done():
            self._result.set_result(answer)

    # --- rendering -------------------------------------------------------

    def current_render_content(self, error: Optional[str] = None) -> Tuple[str, str]:
        return render_prompt(
            self.question,
            status=self.status,
            line=self.edit.current_line,
            active_default=self.edit.active_default,
            matches=self.query.matches,
            page=self.page,
            answer=self.answer,
            error=error,
        )

    def render(self, error: Optional[str] = None) -> None:
        content, bottom_content = self.current_render_content(error)
        self.screen.render(content, bottom_content)
