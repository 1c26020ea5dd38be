from globprompt.controller import GlobPromptController
from globprompt.interfaces import KeyPress
from globprompt.question import GlobQuestion
from globprompt.settings import settings

__version__ = settings.VERSION

__all__ = [
    "GlobPromptController",
    "GlobQuestion",
    "KeyPress",
    "prompt_glob",
]


def __getattr__(name):
    # prompt_toolkit is only imported when the terminal host is needed
    if name == "prompt_glob":
        from globprompt.ptk_prompt import prompt_glob

        return prompt_glob
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
