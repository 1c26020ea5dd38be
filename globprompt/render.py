"""
Render content assembly for the glob prompt.

Everything here is a pure function of prompt state and returns rich console
markup strings, so rendering the same state twice yields identical output.
"""

from typing import List, Optional, Tuple

from rich.markup import escape

from globprompt.question import GlobQuestion
from globprompt.settings import settings
from globprompt.state import PageState, PromptStatus

ARROW_UP = "↑"
ARROW_DOWN = "↓"


def render_question(
    question: GlobQuestion, status: PromptStatus, active_default: Optional[str]
) -> str:
    message = f"[green]{escape(question.prefix)}[/green] " if question.prefix else ""
    message += f"[bold]{escape(question.message)}[/bold]{escape(question.suffix)} "

    if active_default is not None and status is not PromptStatus.ANSWERED:
        message += f"[dim]({escape(active_default)}) [/dim]"

    return message


def render_matches(matches: List[str], page: PageState) -> str:
    visible = page.window(matches)
    bottom = "[dim]- " + "\n- ".join(escape(path) for path in visible) + "[/dim]"

    total = len(matches)
    bottom += f"\n{total} matching file"
    if total != 1:
        bottom += "s"

    if page.count > 1:
        bottom += f" (page {page.index + 1} of {page.count} {ARROW_UP}{ARROW_DOWN})"

    return bottom


def render_prompt(
    question: GlobQuestion,
    *,
    status: PromptStatus,
    line: str,
    active_default: Optional[str],
    matches: List[str],
    page: PageState,
    answer: Optional[str] = None,
    error: Optional[str] = None,
) -> Tuple[str, str]:
    """Return the (content, bottom_content) pair for the screen."""
    content = render_question(question, status, active_default)
    bottom = ""

    if status is PromptStatus.ANSWERED:
        content += f"[cyan]{escape(answer or '')}[/cyan]"
    elif matches:
        content += escape(line)
        bottom += render_matches(matches, page)
    else:
        content += escape(line)
        bottom += f"[yellow]{escape(settings.NO_MATCHES_TEXT)}[/yellow]"

    if error:
        bottom += ("\n" if bottom else "") + "[red]>> [/red]" + escape(error)

    return content, bottom
