"""Unit tests for Markdown code block extraction."""

from __future__ import annotations

from pathlib import Path

from fileguide.docs.extract import SKIP_MARKER, extract_file, extract_samples


def test_no_fences_returns_empty() -> None:
    assert extract_samples("# Title\n\nJust prose.\n") == []


def test_single_python_block_with_line_numbers() -> None:
    text = "# Title\n\n```python\nx = 1\nprint(x)\n```\n"
    samples = extract_samples(text, source="doc.md")
    assert len(samples) == 1
    s = samples[0]
    assert s.source == "doc.md"
    assert s.language == "python"
    assert s.code == "x = 1\nprint(x)\n"
    # Fence on line 3, first code line on line 4
    assert s.start_line == 4
    assert s.closed
    assert not s.skipped
    assert s.is_python()


def test_language_is_first_word_lowercased() -> None:
    samples = extract_samples("```Python title=example.py\npass\n```\n")
    assert samples[0].language == "python"


def test_block_without_language() -> None:
    samples = extract_samples("```\nplain\n```\n")
    assert samples[0].language == ""
    assert not samples[0].is_python()


def test_tilde_fence_and_longer_closing_fence() -> None:
    text = "~~~py\na = 1\n~~~~~\n"
    samples = extract_samples(text)
    assert samples[0].language == "py"
    assert samples[0].code == "a = 1\n"
    assert samples[0].closed


def test_backticks_inside_tilde_fence_do_not_close_it() -> None:
    text = "~~~python\ns = '```'\n```\n~~~\n"
    samples = extract_samples(text)
    assert len(samples) == 1
    assert samples[0].code == "s = '```'\n```\n"


def test_shorter_fence_does_not_close() -> None:
    text = "````python\n```\nx = 1\n````\n"
    samples = extract_samples(text)
    assert samples[0].code == "```\nx = 1\n"


def test_unclosed_fence_runs_to_end() -> None:
    samples = extract_samples("```python\nx = 1\ny = 2\n")
    assert len(samples) == 1
    assert not samples[0].closed
    assert samples[0].code == "x = 1\ny = 2\n"


def test_indented_fence_strips_indent() -> None:
    text = "1. Step\n\n   ```python\n   for i in range(2):\n       print(i)\n   ```\n"
    samples = extract_samples(text)
    assert samples[0].code == "for i in range(2):\n    print(i)\n"


def test_four_space_indent_is_not_a_fence() -> None:
    assert extract_samples("    ```python\n    x = 1\n    ```\n") == []


def test_skip_marker_applies_to_next_block_only() -> None:
    text = f"{SKIP_MARKER}\n\n```python\nbroken(\n```\n\n```python\nok = 1\n```\n"
    samples = extract_samples(text)
    assert [s.skipped for s in samples] == [True, False]


def test_skip_marker_separated_by_prose_does_not_apply() -> None:
    text = f"{SKIP_MARKER}\n\nSome prose.\n\n```python\nx = 1\n```\n"
    assert extract_samples(text)[0].skipped is False


def test_multiple_blocks_in_order() -> None:
    text = "```python\na = 1\n```\n\n```text\noutput\n```\n\n```py\nb = 2\n```\n"
    samples = extract_samples(text)
    assert [s.language for s in samples] == ["python", "text", "py"]
    assert [s.start_line for s in samples] == [2, 6, 10]


def test_empty_block() -> None:
    samples = extract_samples("```python\n```\n")
    assert samples[0].code == ""
    assert samples[0].closed


def test_extract_file_uses_posix_path(tmp_path: Path) -> None:
    doc = tmp_path / "guide.md"
    doc.write_text("```python\nprint('hi')\n```\n", encoding="utf-8")
    samples = extract_file(doc)
    assert samples[0].source == doc.as_posix()
