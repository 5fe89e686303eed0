"""
text.py - Text folding shared by the education and profession classifiers.

Folding is what makes matching case- and accent-tolerant: "Máster", "MASTER"
and "master" all fold to the same string, so the rule tables only need to
spell each pattern once, without accents.
"""
import re

from unidecode import unidecode

SPACE_RE = re.compile(r"\s+")


def fold_text(text: str) -> str:
    """
    Lower-case, strip accents and collapse whitespace.

    Args:
        text (str): Free text (may be None or empty).

    Returns:
        str: Folded text, "" for missing input.
    """
    if not text:
        return ""
    text = unidecode(text).lower()
    return SPACE_RE.sub(" ", text).strip()
