from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "validation.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    return path


def format_validation_report(report: Dict[str, object]) -> str:
    lines: List[str] = [f"clash_count: {report.get('clash_count', 0)}"]

    violations = report.get("violations_by_rule") or {}
    lines.append(f"violations_by_rule: {sum(len(v) for v in violations.values())} total")
    for rule, items in sorted(violations.items()):
        lines.append(f"  {rule}:")
        lines.extend(f"    {item}" for item in items)

    unmet = report.get("unmet_weekly_loads") or {}
    lines.append(f"unmet_weekly_loads: {len(unmet)} entries")
    for course_id, missing in unmet.items():
        lines.append(f"  course {course_id}: missing {missing} block(s)")

    gaps = report.get("day_gaps") or {}
    idle = sum(gaps.values())
    lines.append(f"idle_slots: {idle}" + (f" ({', '.join(f'{d} {n}' for d, n in gaps.items() if n)})" if idle else ""))

    by_day = report.get("blocks_by_day") or {}
    for day, codes in by_day.items():
        if codes:
            lines.append(f"{day}: {' | '.join(codes)}")
    return "\n".join(lines)
