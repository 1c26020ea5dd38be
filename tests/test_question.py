import pytest
from pydantic import ValidationError

from globprompt.question import GlobQuestion


def test_defaults():
    q = GlobQuestion(message="Which files?")
    assert q.page_size == 10
    assert q.force_match is False
    assert q.default is None
    assert q.glob is None
    assert q.initial_pattern == "*"


def test_from_dict_accepts_inquirer_style_keys():
    q = GlobQuestion.from_dict(
        {
            "type": "glob",
            "name": "filePaths",
            "message": "Which files?",
            "default": "cypress/plugins/index.js",
            "pageSize": 4,
            "forceMatch": True,
            "glob": {"ignore": "node_modules"},
            "suffix": None,
        }
    )
    assert q.name == "filePaths"
    assert q.page_size == 4
    assert q.force_match is True
    assert q.glob == {"ignore": "node_modules"}
    assert q.suffix == ""
    assert q.initial_pattern == "cypress/plugins/index.js"


@pytest.mark.parametrize("page_size", [0, -3])
def test_page_size_must_be_positive(page_size):
    with pytest.raises(ValidationError):
        GlobQuestion(message="x", page_size=page_size)


def test_question_is_immutable():
    q = GlobQuestion(message="x", default="*.py")
    with pytest.raises(ValidationError):
        q.default = None
