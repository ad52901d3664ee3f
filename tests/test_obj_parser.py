import io

import pytest

from raytracer.obj_parser import ObjParser


def test_ignoring_unrecognized_lines():
    parser = ObjParser("The Ray Tracer\n Challenge")
    assert parser.ignored_lines == 2


@pytest.mark.parametrize(
    "text, expected",
    [("", 0), ("one line\n", 1), ("a\nb\nc\n", 3), ("a\n\nb", 3)],
)
def test_line_counting_follows_newlines(text, expected):
    assert ObjParser(text).ignored_lines == expected


def test_reading_from_a_file_object():
    parser = ObjParser(io.StringIO("v 1 2 3\nv 4 5 6\nf 1 2 3\n"))
    assert parser.ignored_lines == 3


def test_reading_from_a_list_of_lines():
    assert ObjParser(["first\n", "second\n"]).ignored_lines == 2