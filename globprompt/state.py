import enum
import math
from dataclasses import dataclass, field
from typing import List, Optional


class PromptStatus(str, enum.Enum):
    PENDING = "pending"
    ANSWERED = "answered"


@dataclass
class EditState:
    current_line: str = ""
    # placeholder shown while the line is empty
    active_default: Optional[str] = None

    def sync(self, line: str, default: Optional[str]) -> None:
        """Mirror the editor buffer and show the default only while it is empty."""
        self.current_line = line
        self.active_default = None if line else default


@dataclass
class QueryState:
    pattern: Optional[str] = None
    pending_token: int = 0
    matches: List[str] = field(default_factory=list)


@dataclass
class PageState:
    size: int
    index: int = 0
    count: int = 0

    def reset(self, total: int) -> None:
        self.count = math.ceil(total / self.size)
        self.index = 0

    def forward(self) -> None:
        if self.count <= 1:
            return
        self.index = (self.index + 1) % self.count

    def backward(self) -> None:
        if self.count <= 1:
            return
        self.index = (self.index - 1 + self.count) % self.count

    def window(self, matches: List[str]) -> List[str]:
        start = self.index * self.size
        return matches[start : start + self.size]
