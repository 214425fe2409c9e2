from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional

import typer

from ..config import load_settings
from ..data.catalog import CourseCatalog
from ..data.loader import load_data, load_json
from ..data.professors import ProfessorDirectory
from ..errors import PreferenceError, SchedgenError
from ..models.preferences import Preferences
from ..render.csv_out import csv_blocks, write_csv_blocks, write_schedule_json
from ..scheduler import generate_schedule
from ..validate.checks import validate_schedule
from ..validate.report import format_validation_report, write_validation_report


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "engine.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def parse_course_list(raw: str, catalog: CourseCatalog) -> List[int]:
    # Accepts ids or course codes, comma-separated; unknown codes are kept as -1 and later skipped
    out: List[int] = []
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        if token.isdigit():
            out.append(int(token))
            continue
        course = catalog.by_code(token)
        out.append(course.id if course else -1)
    return out


def run_pipeline(
    project_root: Path,
    course_ids: List[int],
    preferences: Preferences | None = None,
    *,
    log_level: int | None = None,
    seed: int | None = None,
    outputs_dir: Path | None = None,
) -> tuple[str, str, str]:
    _setup_logging(project_root)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)
    preferences = preferences or Preferences()
    loaded = load_data(project_root)
    catalog = CourseCatalog(loaded.courses)
    professors = ProfessorDirectory(loaded.professors)
    settings = load_settings(project_root)
    rng = random.Random(seed) if seed is not None else random.Random()

    result = generate_schedule(
        course_ids, preferences, catalog, professors=professors, settings=settings, rng=rng
    )
    schedule = result.schedule
    report = validate_schedule(
        schedule, preferences, course_ids=course_ids, blocks_per_course=settings.blocks_per_course
    )

    outputs_dir = outputs_dir or project_root / "outputs"
    write_validation_report(report, outputs_dir)
    csv = csv_blocks(schedule)
    write_csv_blocks(csv, outputs_dir)
    write_schedule_json(schedule, outputs_dir)

    audit_text = "\n".join(result.audit)
    with (outputs_dir / "audit.txt").open("w", encoding="utf-8") as f:
        f.write(audit_text)

    return csv, format_validation_report(report), audit_text


def _root() -> Path:
    return Path(__file__).resolve().parents[2]


def _load_preferences(path: Optional[Path]) -> Preferences:
    if path is None:
        return Preferences()
    try:
        data = load_json(path)
    except ValueError as exc:  # JSONDecodeError, UnicodeDecodeError
        raise PreferenceError(f"{path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise PreferenceError(f"Cannot read preferences file {path}: {exc}") from exc
    return Preferences.from_dict(data)


app = typer.Typer(add_completion=False, help="Weekly course timetable generator")


@app.command("generate")
def cli_generate(
    courses: str = typer.Argument(..., help="Course ids or codes, comma-separated"),
    preferences: Optional[Path] = typer.Option(None, help="Preferences JSON file"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible placement"),
    log_level: str = typer.Option("INFO", help="Log level"),
) -> None:
    root = _root()
    level = getattr(logging, log_level.upper(), logging.INFO)
    try:
        prefs = _load_preferences(preferences)
        catalog = CourseCatalog(load_data(root).courses)
        ids = parse_course_list(courses, catalog)
        csv, validation, audit = run_pipeline(root, ids, prefs, log_level=level, seed=seed)
    except SchedgenError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(csv)
    typer.echo(validation)
    typer.echo(audit)


@app.command("validate")
def cli_validate(
    courses: str = typer.Argument(..., help="Course ids or codes, comma-separated"),
    preferences: Optional[Path] = typer.Option(None, help="Preferences JSON file"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
) -> None:
    root = _root()
    try:
        prefs = _load_preferences(preferences)
        ids = parse_course_list(courses, CourseCatalog(load_data(root).courses))
        _, validation, _ = run_pipeline(root, ids, prefs, seed=seed)
    except SchedgenError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(validation)


@app.command("export-csv")
def cli_export_csv(
    courses: str = typer.Argument(..., help="Course ids or codes, comma-separated"),
    preferences: Optional[Path] = typer.Option(None, help="Preferences JSON file"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
) -> None:
    root = _root()
    try:
        prefs = _load_preferences(preferences)
        ids = parse_course_list(courses, CourseCatalog(load_data(root).courses))
        csv, _, _ = run_pipeline(root, ids, prefs, seed=seed)
    except SchedgenError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(csv)


@app.command("available")
def cli_available(
    approved: str = typer.Argument("", help="Approved course ids, comma-separated"),
) -> None:
    catalog = CourseCatalog(load_data(_root()).courses)
    done = [int(t) for t in approved.split(",") if t.strip().isdigit()]
    for c in catalog.available_courses(done):
        typer.echo(f"{c.id}\t{c.code}\t{c.name}")


if __name__ == "__main__":  # pragma: no cover
    app()
