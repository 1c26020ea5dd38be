from globprompt.question import GlobQuestion
from globprompt.render import render_prompt, render_question
from globprompt.state import PageState, PromptStatus
from tests.fakes import plain


def render(question, matches=(), line="", **kwargs):
    page = kwargs.pop("page", None) or PageState(size=question.page_size)
    if not page.count:
        page.reset(len(matches))
    kwargs.setdefault("status", PromptStatus.PENDING)
    kwargs.setdefault("active_default", None)
    content, bottom = render_prompt(
        question, line=line, matches=list(matches), page=page, **kwargs
    )
    return plain(content), plain(bottom)


def test_single_match_is_not_pluralized():
    q = GlobQuestion(message="Files?")
    assert render(q, ["only.txt"]) == ("? Files? ", "- only.txt\n1 matching file")


def test_paths_and_patterns_are_escaped():
    q = GlobQuestion(message="Files?")
    content, bottom = render(q, ["[abc].txt", "a[/dim]b"], line="[ab]*")

    assert content == "? Files? [ab]*"
    assert bottom == "- [abc].txt\n- a[/dim]b\n2 matching files"


def test_error_is_appended_after_the_detail_block():
    q = GlobQuestion(message="Files?")
    _, bottom = render(q, error="Nope")
    assert bottom == "No matching files...\n>> Nope"


def test_answered_prompt_has_no_detail_block():
    q = GlobQuestion(message="Files?", default="*.md")
    content, bottom = render(
        q,
        ["a.md"],
        status=PromptStatus.ANSWERED,
        answer="*.md",
        active_default="*.md",
    )
    assert content == "? Files? *.md"
    assert bottom == ""


def test_prefix_and_suffix():
    q = GlobQuestion(message="Pick", prefix="", suffix=":")
    assert plain(render_question(q, PromptStatus.PENDING, "x")) == "Pick: (x) "


def test_page_indicator_follows_the_current_page():
    q = GlobQuestion(message="Files?", page_size=2)
    page = PageState(size=2)
    page.reset(5)
    page.backward()

    _, bottom = render(q, ["a", "b", "c", "d", "e"], page=page)
    assert bottom == "- e\n5 matching files (page 3 of 3 ↑↓)"
