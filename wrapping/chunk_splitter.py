"""Splitting of normalized text into indivisible chunks.

With hyphen-aware splitting a chunk is either a run of whitespace or a
run of non-whitespace, and words are additionally broken right after the
hyphens of compound words ("well-known" -> "well-", "known") and around
em-dashes written as two or more hyphens ("this--that"). Without it,
text is only split around runs of tabs, line breaks, vertical tabs and
form feeds.
"""

import re
from typing import List

from wrapping.whitespace import WHITESPACE, normalize
from wrapping.wrap_config import WrapConfig


_WORD_PUNCT = r'[\w!"\'&.,?]'
_LETTER = r'[^\d\W]'
_WS = '[%s]' % re.escape(WHITESPACE)
_NO_WS = '[^' + _WS[1:]

HYPHEN_AWARE_RE = re.compile(r'''
    ( # any whitespace
      %(ws)s+
    | # em-dash between words
      (?<=%(wp)s) -{2,} (?=\w)
    | # word, possibly hyphenated
      %(nws)s+? (?:
        # hyphenated word
          -(?: (?<=%(lt)s{2}-) | (?<=%(lt)s-%(lt)s-))
          (?= %(lt)s -? %(lt)s)
        | # end of word
          (?=%(ws)s|\Z)
        | # em-dash
          (?<=%(wp)s) (?=-{2,}\w)
        )
    )''' % {'wp': _WORD_PUNCT, 'lt': _LETTER, 'ws': _WS, 'nws': _NO_WS},
    re.VERBOSE)

# Spaces are not separators without hyphen-aware splitting.
SIMPLE_RE = re.compile(r'([\t\n\x0b\x0c\r]+)')


def split_chunks(text: str, config: WrapConfig) -> List[str]:
    """Split already-normalized text into chunks.

    Example (hyphen-aware):
        "Hello there -- you goof-ball, use the -b option!"
    becomes
        Hello/ /there/ /--/ /you/ /goof-/ball,/ /use/ /the/ /-b/ /option!

    Args:
        text: Text as returned by normalize().
        config: Wrapping configuration; break_on_hyphens picks the mode.

    Returns:
        Non-empty chunks in text order.
    """
    if config.break_on_hyphens:
        chunks = HYPHEN_AWARE_RE.split(text)
    else:
        chunks = SIMPLE_RE.split(text)
    return [chunk for chunk in chunks if chunk]


def chunk_text(text: str, config: WrapConfig) -> List[str]:
    """Normalize whitespace in raw text, then split it into chunks."""
    return split_chunks(normalize(text, config), config)
