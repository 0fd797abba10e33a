"""Runnable lessons: one demo per tutorial topic, plus one per practice exercise."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from fileguide.exercises import EXERCISES
from fileguide.lessons import basics, columnar, delimited, json_files, text


@dataclass(frozen=True)
class Lesson:
    """A named demo that runs inside a scratch directory."""

    name: str
    topic: str  # 'formats', 'handling' or 'exercises'
    summary: str
    demo: Callable[[Path], None]


def _build_registry() -> dict[str, Lesson]:
    lessons = [
        Lesson("text", "formats", "Write, read, iterate and append text files.", text.demo),
        Lesson("csv-tsv", "formats", "Rows and records in CSV and TSV files; pandas.read_csv.", delimited.demo),
        Lesson("json", "formats", "Dump and load JSON documents.", json_files.demo),
        Lesson("parquet", "formats", "Save and load Parquet tables; read the schema.", columnar.demo),
        Lesson(
            "context-managers",
            "handling",
            "with blocks, try/finally, and a custom enter/exit scope.",
            basics.demo_context_managers,
        ),
        Lesson("exceptions", "handling", "Catch missing files and other open() failures.", basics.demo_exceptions),
        Lesson("directories", "handling", "Create, list, glob and remove directories.", basics.demo_directories),
    ]
    for exercise in EXERCISES:
        lessons.append(
            Lesson(f"exercise-{exercise.number}", "exercises", exercise.title, exercise.demo)
        )
    return {lesson.name: lesson for lesson in lessons}


LESSONS: dict[str, Lesson] = _build_registry()

TOPICS = ("formats", "handling", "exercises")


def get_lesson(name: str) -> Lesson | None:
    """Lesson by name, or None if there is no such lesson."""
    return LESSONS.get(name)


def list_lessons(topic: str | None = None) -> list[Lesson]:
    """All lessons in registry order, optionally only those of one topic."""
    return [lesson for lesson in LESSONS.values() if topic is None or lesson.topic == topic]


__all__ = ["LESSONS", "Lesson", "TOPICS", "get_lesson", "list_lessons"]
