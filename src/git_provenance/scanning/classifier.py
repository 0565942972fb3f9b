"""Line classification: comment vs. code, one forward pass per file."""

from dataclasses import dataclass
from typing import Iterable

from ..math import percentage
from .languages import CommentSyntax


@dataclass(frozen=True)
class LineCounts:
    code_lines: int = 0
    comment_lines: int = 0

    def __add__(self, other: "LineCounts") -> "LineCounts":
        return LineCounts(
            self.code_lines + other.code_lines,
            self.comment_lines + other.comment_lines,
        )


def classify_lines(lines: Iterable[str], syntax: CommentSyntax) -> LineCounts:
    """Count code and comment lines.

    Blank lines count toward neither total. A line that opens a block
    comment is a comment line, and so is every line up to and including the
    one that closes it. Block markers are matched anywhere in the trimmed
    line; the single-line marker only at its start.

    Args:
        lines: File content split into lines
        syntax: Comment delimiters for the file's language

    Returns:
        LineCounts for the file
    """
    code_lines = 0
    comment_lines = 0
    in_block = False

    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue

        if syntax.has_block:
            if not in_block and syntax.block_start in trimmed:
                comment_lines += 1
                # Opener and closer on one line. Symmetric markers (""") always
                # satisfy this, so a docstring opener never enters the block.
                in_block = syntax.block_end not in trimmed
                continue

            if in_block:
                comment_lines += 1
                if syntax.block_end in trimmed:
                    in_block = False
                continue

        if trimmed.startswith(syntax.single):
            comment_lines += 1
        else:
            code_lines += 1

    return LineCounts(code_lines, comment_lines)


def comment_ratio(comment_lines: int, code_lines: int) -> float:
    """Comment lines per code line as a percentage.

    Measured against code lines rather than total lines, so heavily
    documented code goes above 100. Zero code lines gives 0.
    """
    return percentage(comment_lines, code_lines)
