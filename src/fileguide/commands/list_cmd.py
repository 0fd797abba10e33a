"""List runnable lessons and exercises."""

from __future__ import annotations

import sys
from argparse import Namespace

from fileguide.lessons import TOPICS, list_lessons


def run(args: Namespace) -> None:
    topic = getattr(args, "topic", None)
    if topic is not None and topic not in TOPICS:
        print(f"Error: unknown topic {topic!r}. Choose from: {', '.join(TOPICS)}.", file=sys.stderr)
        sys.exit(1)

    lessons = list_lessons(topic)
    width = max(len(lesson.name) for lesson in lessons)
    current = None
    for lesson in lessons:
        if lesson.topic != current:
            if current is not None:
                print()
            print(f"{lesson.topic}:")
            current = lesson.topic
        print(f"  {lesson.name:<{width}}  {lesson.summary}")
