"""A reader for Wavefront OBJ text that counts the lines it does not use."""

from __future__ import annotations


class ObjParser:
    """Reads OBJ text line by line; no statements are recognised yet."""

    def __init__(self, source):
        """Parse ``source``, a string or an iterable of lines such as an open file."""
        self.ignored_lines = 0
        if isinstance(source, str):
            lines = source.split("\n")
            if lines and lines[-1] == "":
                lines.pop()
        else:
            lines = (line.rstrip("\n") for line in source)
        for line in lines:
            self._parse_line(line)

    def _parse_line(self, line):
        self.ignored_lines += 1