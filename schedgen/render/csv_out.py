from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List

from ..models.period import DAYS, TIME_SLOTS
from ..models.schedule import Schedule

HEADER = ["Day", "SlotId", "Start", "End", "CourseCode", "CourseName", "Professor"]


def csv_blocks(schedule: Schedule) -> str:
    # One row per grid cell; free cells keep empty course columns
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(HEADER)
    for d in DAYS:
        for s in TIME_SLOTS:
            b = schedule.block_at(d, s.id)
            if b is None:
                writer.writerow([d, s.id, s.start, s.end, "", "", ""])
            else:
                writer.writerow([d, s.id, s.start, s.end, b.course_code, b.course_name, b.professor or ""])
    return buf.getvalue()


def write_csv_blocks(text: str, outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "timetable.csv"
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path


def schedule_to_dict(schedule: Schedule) -> Dict[str, Any]:
    blocks: List[Dict[str, Any]] = [
        {
            "course_id": b.course_id,
            "course_code": b.course_code,
            "course_name": b.course_name,
            "day": b.day,
            "time_slot_id": b.time_slot_id,
            "professor": b.professor,
        }
        for b in sorted(schedule.blocks, key=lambda x: (DAYS.index(x.day), x.time_slot_id, x.course_id))
    ]
    return {
        "id": schedule.id,
        "created_at": schedule.created_at.isoformat(),
        "total_weekly_hours": schedule.total_weekly_hours(),
        "blocks": blocks,
    }


def write_schedule_json(schedule: Schedule, outputs_dir: Path) -> Path:
    json_dir = outputs_dir / "json"
    json_dir.mkdir(parents=True, exist_ok=True)
    path = json_dir / "schedule.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(schedule_to_dict(schedule), f, indent=2, ensure_ascii=False)
    return path
