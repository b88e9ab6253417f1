"""Greedy line packing of chunks into wrapped lines.

This module turns the chunk sequence produced by the chunk splitter into
the final list of output lines. It handles indentation, leading and
trailing whitespace dropping, words too long to fit on any line, and
truncation to ``max_lines`` with a placeholder.

Chunks are consumed front to back through an index cursor over a private
copy of the sequence; a chunk split by long-word handling is replaced in
that copy by its unplaced remainder.
"""

from enum import Enum
import logging
from typing import List, Sequence

from wrapping.wrap_config import WrapConfig


logger = logging.getLogger(__name__)


class PackSignal(Enum):
    """Outcome of finishing one line."""
    CONTINUE = "continue"
    STOP = "stop"


def _is_whitespace(chunk: str) -> bool:
    return chunk.strip() == ''


def handle_long_word(
    chunks: List[str],
    pos: int,
    cur_line: List[str],
    cur_len: int,
    width: int,
    config: WrapConfig,
) -> int:
    """Deal with ``chunks[pos]``, a chunk too long to fit on any line.

    With break_long_words, as much of the chunk as fits is moved onto
    ``cur_line`` (breaking after a hyphen when possible) and the rest
    stays pending at ``pos``; a fully placed chunk is consumed. Otherwise
    the chunk is placed whole, but only on an empty line; a line that
    already has content is left alone so the chunk starts the next line.

    Args:
        chunks: Working chunk list; may be modified at ``pos``.
        pos: Index of the oversized chunk.
        cur_line: Chunks of the line being built; may be appended to.
        cur_len: Total length of ``cur_line``.
        width: Width available for this line after indentation.
        config: Wrapping configuration.

    Returns:
        Cursor position of the next pending chunk.
    """
    # An indent wider than the line still has to make progress.
    if width < 1:
        space_left = 1
    else:
        space_left = width - cur_len

    if config.break_long_words:
        chunk = chunks[pos]
        end = space_left
        if config.break_on_hyphens and len(chunk) > space_left:
            # Break after the last hyphen, but only if there are
            # non-hyphens before it.
            hyphen = chunk.rfind('-', 0, space_left)
            if hyphen > 0 and any(c != '-' for c in chunk[:hyphen]):
                end = hyphen + 1
        logger.debug(f"Breaking long chunk of {len(chunk)} chars at {end}")
        cur_line.append(chunk[:end])
        chunks[pos] = chunk[end:]
        # Only reachable with an indent at least as wide as the line.
        if not chunks[pos]:
            return pos + 1
        return pos

    if not cur_line:
        cur_line.append(chunks[pos])
        return pos + 1

    return pos


def _finish_line(
    lines: List[str],
    cur_line: List[str],
    cur_len: int,
    indent: str,
    width: int,
    is_last_content: bool,
    config: WrapConfig,
) -> PackSignal:
    """Append ``cur_line`` to ``lines``, truncating if max_lines is hit."""
    if (config.max_lines is None
            or len(lines) + 1 < config.max_lines
            or (is_last_content and cur_len <= width)):
        lines.append(indent + ''.join(cur_line))
        return PackSignal.CONTINUE

    logger.debug(f"Truncating output at line {len(lines) + 1}")
    placeholder = config.placeholder
    while cur_line:
        if (not _is_whitespace(cur_line[-1])
                and cur_len + len(placeholder) <= width):
            cur_line.append(placeholder)
            lines.append(indent + ''.join(cur_line))
            return PackSignal.STOP
        cur_len -= len(cur_line[-1])
        cur_line.pop()

    if lines:
        prev_line = lines[-1].rstrip()
        if len(prev_line) + len(placeholder) <= config.width:
            lines[-1] = prev_line + placeholder
            return PackSignal.STOP
    lines.append(indent + placeholder.lstrip())
    return PackSignal.STOP


def pack_lines(chunks: Sequence[str], config: WrapConfig) -> List[str]:
    """Wrap a sequence of chunks into lines of at most ``config.width``.

    Lines may be wider than the width only when break_long_words is
    False and a single chunk does not fit. Whitespace chunks are kept
    between words; with drop_whitespace they are removed from the start
    (except on the first line) and end of each line.

    Args:
        chunks: Chunks as returned by the chunk splitter. Not modified.
        config: Wrapping configuration.

    Returns:
        Output lines, indentation included, without trailing newlines.
    """
    chunks = list(chunks)
    lines: List[str] = []
    pos = 0

    while pos < len(chunks):
        cur_line: List[str] = []
        cur_len = 0

        indent = config.indent_for(len(lines))
        width = config.width - len(indent)

        # Leading whitespace is only kept at the very start of the text.
        if config.drop_whitespace and lines and _is_whitespace(chunks[pos]):
            pos += 1

        while pos < len(chunks):
            length = len(chunks[pos])
            if cur_len + length > width:
                break
            cur_line.append(chunks[pos])
            cur_len += length
            pos += 1

        if pos < len(chunks) and len(chunks[pos]) > width:
            pos = handle_long_word(chunks, pos, cur_line, cur_len, width, config)
            cur_len = sum(len(chunk) for chunk in cur_line)

        if config.drop_whitespace and cur_line and _is_whitespace(cur_line[-1]):
            cur_len -= len(cur_line[-1])
            cur_line.pop()

        if cur_line:
            remaining = len(chunks) - pos
            is_last_content = remaining == 0 or (
                config.drop_whitespace
                and remaining == 1
                and _is_whitespace(chunks[pos])
            )
            signal = _finish_line(
                lines, cur_line, cur_len, indent, width, is_last_content, config,
            )
            if signal is PackSignal.STOP:
                break

    logger.debug(f"Packed {len(chunks)} chunks into {len(lines)} lines")
    return lines
