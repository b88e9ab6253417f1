"""Utility modules for paragraph-wrap."""

from utils.string_utils import (
    dedent,
    indent,
)

__all__ = [
    'dedent',
    'indent',
]
