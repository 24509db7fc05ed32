# src/hoststoggle/core/region.py
import re
from typing import Pattern, Sequence

from hoststoggle.config import END_MARKER_PATTERN, START_MARKER_TEMPLATE
from hoststoggle.errors import (
    InvalidProjectPatternError,
    ProjectEndNotFoundError,
    ProjectNotFoundError,
)
from hoststoggle.models import Region

_END_MARKER = re.compile(END_MARKER_PATTERN)

def build_start_pattern(project: str, literal: bool = True) -> Pattern[str]:
    """
    Compiles the start marker regex for a project.
    With literal=False the name is embedded unescaped, so '.' or '+' keep
    their regex meaning.
    """
    name = re.escape(project) if literal else project
    try:
        return re.compile(START_MARKER_TEMPLATE.format(project=name))
    except re.error as e:
        raise InvalidProjectPatternError(project, str(e)) from e

def find_start(lines: Sequence[str], project: str, literal: bool = True) -> int:
    """Returns the index of the first start marker line for the project."""
    pattern = build_start_pattern(project, literal)
    for i, line in enumerate(lines):
        if pattern.match(line):
            return i
    raise ProjectNotFoundError(project)

def find_end(lines: Sequence[str], start: int, project: str = "") -> int:
    """Returns the index of the first end marker at or after `start`."""
    for i in range(start, len(lines)):
        if _END_MARKER.match(lines[i]):
            return i
    raise ProjectEndNotFoundError(project)

def locate_region(lines: Sequence[str], project: str, literal: bool = True) -> Region:
    start = find_start(lines, project, literal)
    end = find_end(lines, start, project)
    return Region(start=start, end=end)
