from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    max_attempts: int = 200  # random draws per course
    blocks_per_course: int = 2  # weekly contact blocks targeted per course
    morning_last_slot: int = 4
    afternoon_first_slot: int = 4  # slot 4 is eligible under both policies


def _project_root() -> Path:
    # schedgen/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_settings(project_root: Path | str | None = None) -> EngineSettings:
    """Load engine settings from configs/engine.toml if present, else defaults.

    Keys may sit at the top level or under an [assigner] table. Values that
    are missing, non-integer or below 1 keep their default.
    """
    base = EngineSettings()
    root: Path = _project_root() if project_root is None else Path(project_root)
    cfg = root / "configs" / "engine.toml"
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning(f"Ignoring unreadable config {cfg}: {exc}")
        return base
    section = data.get("assigner") if isinstance(data.get("assigner"), dict) else data

    def get_int(name: str, default: int) -> int:
        v = section.get(name, default)
        # bool is an int subclass; floats are rejected, not truncated
        if type(v) is not int:
            logger.warning(f"Config key {name!r} is not an integer; using {default}")
            return default
        return v if v >= 1 else default

    return EngineSettings(
        max_attempts=get_int("max_attempts", base.max_attempts),
        blocks_per_course=get_int("blocks_per_course", base.blocks_per_course),
        morning_last_slot=get_int("morning_last_slot", base.morning_last_slot),
        afternoon_first_slot=get_int("afternoon_first_slot", base.afternoon_first_slot),
    )
