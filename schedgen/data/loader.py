from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass
class LoadedData:
    courses: Dict[str, Any]
    professors: Dict[str, Any]


def load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_data(root: Path) -> LoadedData:
    data_dir = root / "data"
    return LoadedData(
        courses=load_json(data_dir / "courses.json"),
        professors=load_json(data_dir / "professors.json"),
    )
