"""
Word Grading Engine
- Canonicalizes spoken/typed text for comparison
- Levenshtein edit distance
- Tolerant single-word and syllable-sequence matching
"""

import logging
from typing import Optional, Sequence

import config

logger = logging.getLogger(__name__)

# Characters stripped before comparing: space, hyphen, en dash, em dash
_STRIP_CHARS = (" ", "-", "–", "—")


def normalize_token(text: Optional[str]) -> str:
    """Lowercase and drop spaces/dashes so "Sun-Set" == "sunset"."""
    if not text:
        return ""
    token = text.lower()
    for ch in _STRIP_CHARS:
        token = token.replace(ch, "")
    return token.strip()


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance using a single rolling row."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diag, row[0] = row[0], i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            diag, row[j] = row[j], min(row[j] + 1, row[j - 1] + 1, diag + cost)
    return row[-1]


def similarity_ratio(a: str, b: str) -> float:
    """Share of the longer string left untouched by the edit distance (0-1)."""
    max_len = max(len(a), len(b), 1)
    return (max_len - edit_distance(a, b)) / max_len


def is_word_match(
    spoken: Optional[str],
    target: Optional[str],
    threshold: float = config.WORD_SIMILARITY_THRESHOLD,
) -> bool:
    """
    Check a recognized/typed response against the target word.

    Accepts exact matches, either string containing the other (recognizers
    often add filler words), or a near-miss spelling whose similarity ratio
    exceeds threshold. An empty response is contained in any target, so
    callers that must reject silence check for it before grading.
    """
    said = normalize_token(spoken)
    word = normalize_token(target)

    exact = said == word
    contains = word in said or said in word
    ratio = similarity_ratio(said, word)
    is_correct = exact or contains or ratio > threshold

    logger.debug(
        "Word check: said=%r target=%r exact=%s contains=%s ratio=%.2f -> %s",
        said, word, exact, contains, ratio, is_correct,
    )
    return is_correct


def is_token_sequence_match(
    selected: Sequence[str],
    expected: Sequence[str],
    full_target: Optional[str],
) -> bool:
    """
    Check an assembled syllable sequence.

    Correct if the joined syllables spell the target word, or if the
    syllables match the expected ones one by one, in order.
    """
    norm_selected = [normalize_token(s) for s in selected]
    norm_expected = [normalize_token(s) for s in expected]

    word_matches = "".join(norm_selected) == normalize_token(full_target)
    syllables_match = len(norm_selected) == len(norm_expected) and all(
        s == e for s, e in zip(norm_selected, norm_expected)
    )

    logger.debug(
        "Syllable check: selected=%s expected=%s target=%r word=%s syllables=%s",
        norm_selected, norm_expected, full_target, word_matches, syllables_match,
    )
    return word_matches or syllables_match


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if config.DEBUG_MODE else logging.INFO)

    print(f"edit_distance('kitten', 'sitting') = {edit_distance('kitten', 'sitting')}")
    for said, word in [("the cat", "cat"), ("elefant", "elephant"), ("dog", "cat")]:
        print(f"{said!r} vs {word!r}: {is_word_match(said, word)}")
    print(f"['sun', 'set'] -> sunset: {is_token_sequence_match(['sun', 'set'], ['sun', 'set'], 'sunset')}")
    print(f"['set', 'sun'] -> sunset: {is_token_sequence_match(['set', 'sun'], ['sun', 'set'], 'sunset')}")
