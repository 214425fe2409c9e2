from __future__ import annotations

from typing import Dict, List

from ..errors import CatalogError
from ..models.course import Professor


class ProfessorDirectory:
    def __init__(self, data: Dict[str, object]):
        self.records: List[Professor] = []
        for p in data.get("professors", []):
            try:
                self.records.append(Professor(id=str(p["id"]), name=str(p["name"]), rating=p.get("rating")))
            except (KeyError, TypeError) as exc:
                raise CatalogError(f"Malformed professor record {p!r}: {exc}") from exc
        self._by_id: Dict[str, Professor] = {p.id: p for p in self.records}

        # JSON object keys are strings; course ids are ints everywhere else
        self.course_professors: Dict[int, List[str]] = {
            int(cid): list(pids) for cid, pids in data.get("course_professors", {}).items()
        }

    def for_course(self, course_id: int) -> List[Professor]:
        out: List[Professor] = []
        for pid in self.course_professors.get(course_id, []):
            prof = self._by_id.get(pid)
            if prof is not None:
                out.append(prof)
        return out

    def name_for(self, professor_id: str | None) -> str | None:
        if professor_id is None:
            return None
        prof = self._by_id.get(professor_id)
        return prof.name if prof else None
