"""Two-spaces-after-a-sentence correction for chunk sequences."""

import re
from typing import List


# Anchored at the end of a single chunk, so "Mr. Smith" is treated as a
# sentence end too. The heuristic cannot tell abbreviations apart.
SENTENCE_END_RE = re.compile(r'[a-z][.!?]["\']?\Z')


def fix_sentence_endings(chunks: List[str]) -> List[str]:
    """Make sentence-ending chunks be followed by two spaces.

    A chunk ending in a lowercase letter, then one of ``.!?``, then an
    optional quote, that is followed by a single-space chunk gets that
    space doubled. The list is modified in place and returned.
    """
    i = 0
    while i < len(chunks) - 1:
        if chunks[i + 1] == ' ' and SENTENCE_END_RE.search(chunks[i]):
            chunks[i + 1] = '  '
            i += 2
        else:
            i += 1
    return chunks
