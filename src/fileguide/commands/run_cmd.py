"""Run one lesson or exercise demo in a scratch directory."""

from __future__ import annotations

import logging
import sys
import tempfile
from argparse import Namespace
from pathlib import Path

from fileguide.lessons import Lesson, get_lesson

logger = logging.getLogger(__name__)


def _run_in(lesson: Lesson, workdir: Path) -> None:
    logger.debug("Running %s in %s", lesson.name, workdir)
    print(f"== {lesson.name}: {lesson.summary}")
    lesson.demo(workdir)


def run(args: Namespace) -> None:
    """Run the named demo. Without --workdir a temporary directory is used and removed."""
    name = getattr(args, "name", "")
    workdir: Path | None = getattr(args, "workdir", None)

    lesson = get_lesson(name)
    if lesson is None:
        print(f"Error: no lesson named {name!r}. Run 'fileguide list' to see them.", file=sys.stderr)
        sys.exit(1)

    if workdir is not None:
        workdir = workdir.resolve()
        if workdir.exists() and not workdir.is_dir():
            print(f"Error: {workdir} is not a directory.", file=sys.stderr)
            sys.exit(1)
        workdir.mkdir(parents=True, exist_ok=True)
        _run_in(lesson, workdir)
        return

    with tempfile.TemporaryDirectory(prefix="fileguide-") as tmp:
        _run_in(lesson, Path(tmp))
