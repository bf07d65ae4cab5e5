"""
Three-valued truth: TRUE, FALSE, UNKNOWN.

UNKNOWN means "not yet determined". It is its own state, never a stand-in
for a missing bool, and it only resolves when the other operand settles
the result on its own (FALSE AND ? is FALSE, TRUE OR ? is TRUE).

The connective tables are written out in full. Every combination has a
row; there is no default branch to fall through.
"""

from enum import Enum


class Truth(Enum):
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    @classmethod
    def from_optional(cls, value) -> "Truth":
        """
        Lift True / False / None into a Truth. A Truth passes through.

        Anything else is a TypeError -- 0, 1 and "true" are not truth values.
        """
        if isinstance(value, Truth):
            return value
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        if value is None:
            return cls.UNKNOWN
        raise TypeError(
            f"truth must be a Truth, True, False or None, not {value!r}"
        )

    @property
    def is_definite(self) -> bool:
        return self is not Truth.UNKNOWN

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def __repr__(self):
        return self.name


T, F, U = Truth.TRUE, Truth.FALSE, Truth.UNKNOWN

_SYMBOLS = {T: "T", F: "F", U: "U"}


NOT_TABLE = {
    T: F,
    F: T,
    U: U,
}

AND_TABLE = {
    (T, T): T,
    (T, F): F,
    (T, U): U,
    (F, T): F,
    (F, F): F,
    (F, U): F,
    (U, T): U,
    (U, F): F,
    (U, U): U,
}

OR_TABLE = {
    (T, T): T,
    (T, F): T,
    (T, U): T,
    (F, T): T,
    (F, F): F,
    (F, U): U,
    (U, T): T,
    (U, F): U,
    (U, U): U,
}


def kleene_not(x: Truth) -> Truth:
    return NOT_TABLE[x]


def kleene_and(x: Truth, y: Truth) -> Truth:
    return AND_TABLE[(x, y)]


def kleene_or(x: Truth, y: Truth) -> Truth:
    return OR_TABLE[(x, y)]
