from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from globprompt.settings import settings


class GlobQuestion(BaseModel):
    """
    Per-invocation configuration for one glob prompt.

    Accepts both the snake_case field names and the camelCase keys used by
    inquirer-style question dicts (``pageSize``, ``forceMatch``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str
    name: str = "paths"
    default: Optional[str] = None
    page_size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, alias="pageSize")
    force_match: bool = Field(default=False, alias="forceMatch")
    glob: Optional[Dict[str, Any]] = None
    prefix: str = settings.DEFAULT_PREFIX
    suffix: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GlobQuestion":
        # "type" is registration plumbing, not configuration
        fields = {k: v for k, v in data.items() if k != "type" and v is not None}
        return cls.model_validate(fields)

    @property
    def initial_pattern(self) -> str:
        return self.default or settings.DEFAULT_PATTERN
