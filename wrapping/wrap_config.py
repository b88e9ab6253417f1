"""Wrapping configuration.

This module defines the immutable configuration value shared by every
stage of the wrapping pipeline, and the error raised when it is invalid.
"""

from dataclasses import dataclass, fields, replace
import logging
from typing import Any, Dict, Mapping, Optional


logger = logging.getLogger(__name__)


DEFAULT_WIDTH = 70
DEFAULT_TAB_SIZE = 8
DEFAULT_PLACEHOLDER = ' [...]'


class InvalidConfigurationError(ValueError):
    """Exception raised when a wrapping configuration cannot be used."""
    pass


@dataclass(frozen=True)
class WrapConfig:
    """Options controlling how a paragraph is wrapped.

    Attributes:
        width: Maximum width of wrapped lines (unless break_long_words
            is False). Must be greater than zero.
        initial_indent: String prepended to the first output line. Counts
            towards the line's width.
        subsequent_indent: String prepended to every output line but the
            first. Counts towards the line's width.
        expand_tabs: Expand tabs to 0 .. tab_size spaces depending on
            their column before any other processing.
        tab_size: Tab stop interval used by expand_tabs. Must not be
            negative.
        replace_whitespace: Replace every whitespace character with a
            space after tab expansion.
        fix_sentence_endings: Make sentence-ending punctuation followed by
            a single space be followed by two. Imperfect by nature.
        break_long_words: Break words longer than the available width.
        break_on_hyphens: Allow breaks right after hyphens in compound
            words, and prefer them when breaking long words.
        drop_whitespace: Drop whitespace at the start and end of lines.
        max_lines: Truncate output to at most this many lines. At least 1
            when set.
        placeholder: Appended to the last line when output is truncated.
    """
    width: int = DEFAULT_WIDTH
    initial_indent: str = ''
    subsequent_indent: str = ''
    expand_tabs: bool = True
    tab_size: int = DEFAULT_TAB_SIZE
    replace_whitespace: bool = True
    fix_sentence_endings: bool = False
    break_long_words: bool = True
    break_on_hyphens: bool = True
    drop_whitespace: bool = True
    max_lines: Optional[int] = None
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise InvalidConfigurationError(
                f"invalid width {self.width!r} (must be > 0)"
            )
        if self.tab_size < 0:
            raise InvalidConfigurationError(
                f"invalid tab_size {self.tab_size!r} (must be >= 0)"
            )

        if self.max_lines is not None:
            if self.max_lines < 1:
                raise InvalidConfigurationError(
                    f"invalid max_lines {self.max_lines!r} (must be >= 1)"
                )
            # The placeholder ends up on the last permitted line.
            if self.max_lines > 1:
                indent = self.subsequent_indent
            else:
                indent = self.initial_indent
            if len(indent) + len(self.placeholder.lstrip()) > self.width:
                raise InvalidConfigurationError(
                    "placeholder too large for max width"
                )

    def indent_for(self, line_index: int) -> str:
        """Return the indent for the output line at ``line_index``."""
        return self.initial_indent if line_index == 0 else self.subsequent_indent

    def with_options(self, **options: Any) -> 'WrapConfig':
        """Return a validated copy with the given fields replaced.

        Raises:
            InvalidConfigurationError: If an option is unknown or the
                resulting configuration is invalid.
        """
        _check_known_fields(options)
        return replace(self, **options)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'WrapConfig':
        """Create a config from a dictionary (e.g. a YAML section).

        Missing keys and keys set to None fall back to the defaults,
        except max_lines where None already means "no limit".

        Args:
            data: Configuration dictionary (may be None).

        Returns:
            WrapConfig instance.

        Raises:
            InvalidConfigurationError: If a key is unknown or a value is
                invalid.
        """
        if not data:
            return cls()

        _check_known_fields(data)
        options: Dict[str, Any] = {
            key: value for key, value in data.items() if value is not None
        }
        logger.debug(f"Building wrap config from keys: {sorted(options)}")
        return cls(**options)


def _check_known_fields(options: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(WrapConfig)}
    unknown = sorted(set(options) - known)
    if unknown:
        raise InvalidConfigurationError(
            f"Unknown wrap option(s): {', '.join(unknown)}"
        )
