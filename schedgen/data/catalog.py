from __future__ import annotations

from typing import Dict, Iterable, List

from ..errors import CatalogError
from ..models.course import Course


class CourseCatalog:
    def __init__(self, data: Dict[str, object]):
        self.records: List[Course] = []
        for c in data.get("courses", []):
            try:
                self.records.append(
                    Course(
                        id=int(c["id"]),
                        code=str(c["code"]),
                        name=str(c["name"]),
                        prerequisites=[int(p) for p in c.get("prerequisites", [])],
                        opens=[int(o) for o in c.get("opens", [])],
                        semester=c.get("semester"),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise CatalogError(f"Malformed course record {c!r}: {exc}") from exc
        self._by_id: Dict[int, Course] = {c.id: c for c in self.records}

    @classmethod
    def from_courses(cls, courses: Iterable[Course]) -> "CourseCatalog":
        catalog = cls({})
        catalog.records = list(courses)
        catalog._by_id = {c.id: c for c in catalog.records}
        return catalog

    def __contains__(self, course_id: object) -> bool:
        return course_id in self._by_id

    def __len__(self) -> int:
        return len(self.records)

    def get(self, course_id: int) -> Course | None:
        return self._by_id.get(course_id)

    def by_code(self, code: str) -> Course | None:
        for c in self.records:
            if c.code == code:
                return c
        return None

    def by_semester(self, semester: int) -> List[Course]:
        return [c for c in self.records if c.semester == semester]

    def prerequisites_of(self, code: str) -> List[Course]:
        course = self.by_code(code)
        if course is None:
            return []
        return [self._by_id[p] for p in course.prerequisites if p in self._by_id]

    def opened_by(self, course_id: int) -> List[Course]:
        return [c for c in self.records if course_id in c.opens]

    def available_courses(self, approved: Iterable[int]) -> List[Course]:
        # Prerequisite id 0 stands for "no prerequisite"
        done = set(approved)
        out: List[Course] = []
        for c in self.records:
            if c.id in done:
                continue
            if all(p == 0 or p in done for p in c.prerequisites):
                out.append(c)
        return out
