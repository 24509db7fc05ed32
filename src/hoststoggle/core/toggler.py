# src/hoststoggle/core/toggler.py
from typing import List, Sequence, Tuple

from hoststoggle.core.region import locate_region
from hoststoggle.models import Region, ToggleResult

COMMENT_CHAR = "#"

def toggle_line(line: str) -> Tuple[str, bool]:
    """
    Flips the comment state of a single line.
    Returns the new line and whether it was commented before.
    """
    if line.startswith(COMMENT_CHAR):
        # Strip every leading '#', not just one
        return line.lstrip(COMMENT_CHAR), True
    return COMMENT_CHAR + line, False

def toggle_region(lines: Sequence[str], region: Region) -> ToggleResult:
    """Toggles every line strictly inside the region. `lines` is left untouched."""
    new_lines: List[str] = list(lines)
    uncommented: List[str] = []
    commented: List[str] = []

    for i in region.body:
        new_line, was_commented = toggle_line(new_lines[i])
        if was_commented:
            uncommented.append(new_line)
        else:
            commented.append(new_line)
        new_lines[i] = new_line

    return ToggleResult(
        lines=tuple(new_lines),
        uncommented=tuple(uncommented),
        commented=tuple(commented),
    )

def toggle_project(lines: Sequence[str], project: str, literal: bool = True) -> ToggleResult:
    region = locate_region(lines, project, literal)
    return toggle_region(lines, region)
