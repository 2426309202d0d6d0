# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word list normalization.

Cleans raw word-list lines before they reach the dictionary index:
separators such as underscores, hyphens, apostrophes and spaces are
stripped, and any line that still contains a non-letter is rejected
with the line number so the source file can be fixed.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional


logger = logging.getLogger(__name__)

# Characters removed from an entry before the alphabetic check
SEPARATOR_PATTERN = re.compile(r"[_'\-\s,./=]")
NON_ALPHA_PATTERN = re.compile(r"[^a-zA-Z]")


class WordListFormatError(Exception):
    """Raised when a word list cannot be read or contains invalid entries."""
    pass


def normalize_entry(line: str, line_number: int = 0) -> str:
    """
    Normalize a single word-list entry.

    Args:
        line: Raw line from the word list
        line_number: 1-based line number, used in error messages

    Returns:
        The entry with separators removed (case preserved)

    Raises:
        WordListFormatError: If a non-alphabetic character remains
    """
    trimmed = line.strip()
    stripped = SEPARATOR_PATTERN.sub("", trimmed)

    invalid = NON_ALPHA_PATTERN.findall(stripped)
    if invalid:
        raise WordListFormatError(
            f"Line {line_number}: non-alpha character detected after stripping separators.\n"
            f"  Original: \"{trimmed}\"\n"
            f"  Stripped: \"{stripped}\"\n"
            f"  Invalid characters: {', '.join(invalid)}"
        )

    return stripped


def normalize_word_list(
    lines: Iterable[str],
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> List[str]:
    """
    Normalize every entry of a word list.

    Blank lines and '#' comment lines are skipped. Entries outside the
    length bounds are dropped.
    """
    words = []
    for line_number, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        word = normalize_entry(trimmed, line_number)
        if len(word) < min_length:
            continue
        if max_length is not None and len(word) > max_length:
            continue
        words.append(word)

    return words


def load_word_list(
    path: str,
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> List[str]:
    """
    Load and normalize a word list file (one entry per line).

    Raises:
        WordListFormatError: If the file is missing, unreadable or has invalid entries
    """
    path = Path(path)
    if not path.exists():
        raise WordListFormatError(f"Word list not found: {path}")

    logger.info(f"Reading word list {path}...")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = normalize_word_list(f, min_length=min_length, max_length=max_length)
    except UnicodeDecodeError as e:
        raise WordListFormatError(f"Word list {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise WordListFormatError(f"Cannot read word list {path}: {e}") from e

    logger.info(f"Loaded {len(words)} words from {path}")
    return words
