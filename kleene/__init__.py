"""
Kleene: three-valued propositional algebra.

Build atomic propositions, combine them with NOT, AND, OR, XOR, IMPLIES
and IFF, and get back a new proposition with a precedence-correct name
and a truth value in {TRUE, FALSE, UNKNOWN}.

Usage:
    python -m kleene --example demo
    python -m kleene --example precedence
    python -m kleene --example tables
    python -m kleene --list
"""

from .core.truth import Truth, kleene_not, kleene_and, kleene_or
from .core.connective import Connective, PRECEDENCE
from .core.proposition import (
    Proposition, Atomic, Derived, ATOMIC,
    atom, negate, conjoin, disjoin, exclusive_or, implies, iff,
)
from .derivation import derivation, axioms_of, depth
from .visualization import (
    print_proposition, print_derivation,
    truth_table, print_truth_table, export_dot,
)

__all__ = [
    "Truth", "kleene_not", "kleene_and", "kleene_or",
    "Connective", "PRECEDENCE",
    "Proposition", "Atomic", "Derived", "ATOMIC",
    "atom", "negate", "conjoin", "disjoin", "exclusive_or", "implies", "iff",
    "derivation", "axioms_of", "depth",
    "print_proposition", "print_derivation",
    "truth_table", "print_truth_table", "export_dot",
]
