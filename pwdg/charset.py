"""
pwdg.charset
Fixed ASCII character categories used by the generator.
"""

import enum
import string
from typing import Iterable, Tuple


SPECIAL_CHARS = "!@#$%^&*()_+-={}[]|:;\"'<>,.?/~\\`"


class Category(enum.Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def chars(self) -> str:
        return BASE_SETS[self]


BASE_SETS = {
    Category.UPPER: string.ascii_uppercase,
    Category.LOWER: string.ascii_lowercase,
    Category.DIGIT: string.digits,
    Category.SPECIAL: SPECIAL_CHARS,
}

# order in which minimums are drawn and validated
CATEGORIES: Tuple[Category, ...] = (
    Category.UPPER,
    Category.LOWER,
    Category.DIGIT,
    Category.SPECIAL,
)

ALL_CHARS = "".join(BASE_SETS[c] for c in CATEGORIES)


def filtered(chars: Iterable[str], exclude: Iterable[str] = ()) -> str:
    """Return `chars` with every character in `exclude` removed, order kept."""
    excluded = set(exclude)
    return "".join(c for c in chars if c not in excluded)
