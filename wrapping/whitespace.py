"""Whitespace normalization applied before a paragraph is split into chunks."""

from wrapping.wrap_config import WrapConfig


# Characters treated as whitespace by the wrapper. Narrower
# than str.isspace(): non-breaking and other Unicode spaces stay intact.
WHITESPACE = '\t\n\x0b\x0c\r '

_WHITESPACE_TO_SPACE = {ord(char): ' ' for char in WHITESPACE}


def normalize(text: str, config: WrapConfig) -> str:
    """Expand tabs and convert whitespace characters to spaces.

    Tabs expand to the next multiple of ``config.tab_size`` counted from
    the start of their line; a tab size of zero removes tabs. When
    ``config.replace_whitespace`` is set, each whitespace character left
    after expansion becomes a single space.

    Args:
        text: Raw paragraph text.
        config: Wrapping configuration.

    Returns:
        The normalized text.
    """
    if config.expand_tabs:
        text = text.expandtabs(config.tab_size)
    if config.replace_whitespace:
        text = text.translate(_WHITESPACE_TO_SPACE)
    return text
