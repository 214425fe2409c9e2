from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Course:
    id: int
    code: str
    name: str
    prerequisites: List[int] = field(default_factory=list)  # 0 means none
    opens: List[int] = field(default_factory=list)
    semester: int | None = None


@dataclass(frozen=True)
class Professor:
    id: str
    name: str
    rating: float | None = None
