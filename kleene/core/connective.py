"""
The six connectives and their fixed precedence.

Precedence runs tightest to loosest:

    NOT=1  AND=2  OR=3  XOR=4  IMPLIES=5  IFF=6

It is only used for rendering -- deciding when an operand's name needs
parentheses. Truth evaluation never looks at it.
"""

from enum import Enum


class Connective(Enum):
    NOT = "not"
    AND = "and"
    OR = "or"
    XOR = "xor"
    IMPLIES = "implies"
    IFF = "iff"

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]

    @property
    def arity(self) -> int:
        return 1 if self is Connective.NOT else 2

    def binds_tighter_than(self, other: "Connective") -> bool:
        return self.precedence < other.precedence

    def __repr__(self):
        return self.name


PRECEDENCE = {
    Connective.NOT:     1,
    Connective.AND:     2,
    Connective.OR:      3,
    Connective.XOR:     4,
    Connective.IMPLIES: 5,
    Connective.IFF:     6,
}

SYMBOLS = {
    Connective.NOT:     "~",
    Connective.AND:     "^",
    Connective.OR:      "v",
    Connective.XOR:     "(+)",
    Connective.IMPLIES: "->",
    Connective.IFF:     "<->",
}
