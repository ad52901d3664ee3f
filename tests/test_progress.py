import io
import time

import pytest

from raytracer.progress import BAR_WIDTH, ProgressBar


def _bar_body(text):
    return text[text.index("[") + 1 : text.index("]")]


def test_update_never_moves_backwards():
    bar = ProgressBar(10)
    bar.update(7)
    bar.update(3)
    assert bar.current_iteration == 7


def test_format_shows_counts_and_fixed_width():
    bar = ProgressBar(10)
    bar.update(7)
    text = bar.format()
    assert text.startswith("\r[")
    assert "] 7/10 |" in text
    assert len(_bar_body(text)) == BAR_WIDTH


def test_format_fill_grows_with_progress():
    bar = ProgressBar(10)
    empty = _bar_body(bar.format())
    assert empty.startswith(">")
    bar.update(5)
    half = _bar_body(bar.format())
    assert half.count("=") == 40
    assert half.index(">") == half.count("=")


def test_format_reports_elapsed_minutes_and_seconds():
    bar = ProgressBar(4)
    bar.start_time = time.monotonic() - 125
    assert bar.format().endswith("02:05")


def test_display_writes_formatted_bar():
    bar = ProgressBar(10)
    bar.update(2)
    stream = io.StringIO()
    bar.display(stream)
    written = stream.getvalue()
    assert written.split(" | ")[0] == bar.format().split(" | ")[0]


def test_format_without_iterations_raises():
    with pytest.raises(ValueError):
        ProgressBar(0).format()