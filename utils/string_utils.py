"""Line-oriented text helpers.

This module provides dedent() and indent(), which reshape the leading
whitespace of each line of a block of text without rewrapping it.
"""

import re
from typing import Callable, List, Optional


_WHITESPACE_ONLY_RE = re.compile(r'^[ \t]+$', re.MULTILINE)
_LEADING_WHITESPACE_RE = re.compile(r'(^[ \t]*)(?:[^ \t\n])', re.MULTILINE)
_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')


def dedent(text: str) -> str:
    """Remove any common leading whitespace from every line in text.

    Tabs and spaces are both whitespace but are not equal: the lines
    "  hello" and "\\thello" have no common leading whitespace. Lines
    made of spaces and tabs only are normalized to empty lines first and
    do not take part in the margin computation. Text with no line of
    content is returned unchanged.

    Args:
        text: The text to dedent.

    Returns:
        Text with the common margin removed.
    """
    margin: Optional[str] = None
    original = text
    text = _WHITESPACE_ONLY_RE.sub('', text)

    for line_indent in _LEADING_WHITESPACE_RE.findall(text):
        if margin is None:
            margin = line_indent
        elif line_indent.startswith(margin):
            # Deeper than the current margin: no change.
            continue
        elif margin.startswith(line_indent):
            margin = line_indent
        else:
            for i, (x, y) in enumerate(zip(margin, line_indent)):
                if x != y:
                    margin = margin[:i]
                    break

    if margin is None:
        return original
    if margin:
        text = re.sub(r'(?m)^' + margin, '', text)
    return text


def _has_content(line: str) -> bool:
    return bool(line.strip())


def indent(
    text: str,
    prefix: str,
    predicate: Optional[Callable[[str], bool]] = None,
) -> str:
    """Add prefix to the beginning of selected lines in text.

    Line breaks may be LF, CRLF or CR; they are all rewritten as LF.
    Each line is passed to ``predicate`` with its trailing newline. By
    default every line that is not empty or whitespace-only is prefixed.

    Args:
        text: The text to indent.
        prefix: String to prepend.
        predicate: Decides which lines get the prefix.

    Returns:
        The indented text.
    """
    if predicate is None:
        predicate = _has_content

    lines: List[str] = []
    for line in _LINE_BREAK_RE.split(text):
        line += '\n'
        lines.append(prefix + line if predicate(line) else line)
    return ''.join(lines)[:-1]
