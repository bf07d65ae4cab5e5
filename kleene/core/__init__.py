from .truth import Truth, kleene_not, kleene_and, kleene_or
from .connective import Connective, PRECEDENCE, SYMBOLS
from .proposition import (
    Proposition, Atomic, Derived, ATOMIC, Origin,
    atom, negate, conjoin, disjoin, exclusive_or, implies, iff,
    CONNECTIVE_FUNCTIONS,
)

__all__ = [
    "Truth", "kleene_not", "kleene_and", "kleene_or",
    "Connective", "PRECEDENCE", "SYMBOLS",
    "Proposition", "Atomic", "Derived", "ATOMIC", "Origin",
    "atom", "negate", "conjoin", "disjoin", "exclusive_or", "implies", "iff",
    "CONNECTIVE_FUNCTIONS",
]
