"""Public wrapping interface.

The TextWrapper class runs the full pipeline for one configuration:

    raw text -> normalize -> split into chunks -> (fix sentence endings)
             -> pack into lines

The module-level wrap(), fill() and shorten() functions are convenience
wrappers building a one-off configuration from keyword arguments.

Example:
    from wrapping import TextWrapper, WrapConfig

    wrapper = TextWrapper(WrapConfig(width=40, subsequent_indent='  '))
    print(wrapper.fill(paragraph))
"""

import logging
from typing import Any, List, Optional

from wrapping.chunk_splitter import chunk_text
from wrapping.line_packer import pack_lines
from wrapping.sentence_endings import fix_sentence_endings
from wrapping.wrap_config import DEFAULT_WIDTH, WrapConfig


logger = logging.getLogger(__name__)


class TextWrapper:
    """Wraps and fills paragraphs according to a WrapConfig.

    The configuration is immutable, so a wrapper can be shared freely
    between callers. Options passed as keyword arguments are applied on
    top of ``config`` (or the defaults when no config is given).
    """

    def __init__(self, config: Optional[WrapConfig] = None, **options: Any):
        base = config if config is not None else WrapConfig()
        self._config = base.with_options(**options) if options else base

    @property
    def config(self) -> WrapConfig:
        """The configuration used by this wrapper."""
        return self._config

    def chunk(self, text: str) -> List[str]:
        """Split text into the chunks the line packer will see."""
        chunks = chunk_text(text, self._config)
        if self._config.fix_sentence_endings:
            fix_sentence_endings(chunks)
        return chunks

    def wrap(self, text: str) -> List[str]:
        """Reformat a single paragraph into lines of at most config.width.

        Tabs are expanded and, by default, all other whitespace
        (newlines included) becomes spaces, so the whole text is treated
        as one paragraph.

        Args:
            text: The paragraph to wrap.

        Returns:
            Wrapped lines without trailing newlines; empty when the text
            has no content.
        """
        chunks = self.chunk(text)
        logger.debug(f"Wrapping {len(text)} chars as {len(chunks)} chunks")
        return pack_lines(chunks, self._config)

    def fill(self, text: str) -> str:
        """Reformat a single paragraph and return it as one string."""
        return "\n".join(self.wrap(text))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._config!r})"


def wrap(text: str, width: int = DEFAULT_WIDTH, **options: Any) -> List[str]:
    """Wrap a single paragraph, returning a list of lines.

    Keyword arguments are WrapConfig fields.
    """
    return TextWrapper(WrapConfig(width=width, **options)).wrap(text)


def fill(text: str, width: int = DEFAULT_WIDTH, **options: Any) -> str:
    """Fill a single paragraph, returning one newline-joined string.

    Keyword arguments are WrapConfig fields.
    """
    return TextWrapper(WrapConfig(width=width, **options)).fill(text)


def shorten(text: str, width: int, **options: Any) -> str:
    """Collapse whitespace in text and truncate it to fit in ``width``.

    If the collapsed text fits it is returned as is; otherwise as many
    words as fit are kept and the placeholder is appended:

        >>> shorten("Hello  world!", 12)
        'Hello world!'
        >>> shorten("Hello  world!", 11)
        'Hello [...]'

    Keyword arguments are WrapConfig fields other than max_lines.
    """
    config = WrapConfig(width=width, max_lines=1, **options)
    return TextWrapper(config).fill(' '.join(text.split()))
