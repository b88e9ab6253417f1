"""Paragraph wrapping for paragraph-wrap.

This package reformats plain-text paragraphs into lines no wider than a
given width and provides the related text-shape helpers.

Components:
    - normalize: tab expansion and whitespace replacement
    - split_chunks: splitting text into words, spaces and hyphen breaks
    - fix_sentence_endings: two spaces after sentence-ending punctuation
    - pack_lines: greedy packing of chunks into lines
    - TextWrapper: the pipeline for one WrapConfig

Example:
    from wrapping import fill, shorten, dedent

    print(fill(dedent(docstring), width=60))
    print(shorten("Hello  world!", 11))   # 'Hello [...]'
"""

from wrapping.wrap_config import (
    WrapConfig,
    InvalidConfigurationError,
)
from wrapping.whitespace import normalize
from wrapping.chunk_splitter import (
    split_chunks,
    chunk_text,
)
from wrapping.sentence_endings import fix_sentence_endings
from wrapping.line_packer import (
    PackSignal,
    pack_lines,
)
from wrapping.text_wrapper import (
    TextWrapper,
    wrap,
    fill,
    shorten,
)
from utils.string_utils import (
    dedent,
    indent,
)

__all__ = [
    # Configuration
    'WrapConfig',
    'InvalidConfigurationError',
    # Pipeline stages
    'normalize',
    'split_chunks',
    'chunk_text',
    'fix_sentence_endings',
    'PackSignal',
    'pack_lines',
    # Public interface
    'TextWrapper',
    'wrap',
    'fill',
    'shorten',
    'dedent',
    'indent',
]
