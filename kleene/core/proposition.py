"""
Proposition: a named, three-valued, immutable expression value.

Atomic propositions are built directly by the caller. Every connective
returns a new Proposition whose name is synthesized from its operands'
rendered names and whose truth follows Kleene's three-valued rules:

    p = atom("p", None)          # p is UNKNOWN
    q = atom("q", True)
    p | q                        # pvq, TRUE
    p >> ~q                      # p->~q
    (p | q).iff(p >> ~q)         # (pvq)<->(p->~q)

Names are display strings only. Two atoms called "p" are two unrelated
values; nothing here compares or unifies names.
"""

from dataclasses import dataclass, field
from typing import Union

from .truth import Truth, kleene_not, kleene_and, kleene_or
from .connective import Connective


@dataclass(frozen=True)
class Atomic:
    """Origin of a proposition the caller built directly."""

    def __repr__(self):
        return "ATOMIC"


@dataclass(frozen=True)
class Derived:
    """Origin of a proposition produced by a connective."""
    connective: Connective

    def __post_init__(self):
        if not isinstance(self.connective, Connective):
            raise TypeError(f"not a connective: {self.connective!r}")

    def __repr__(self):
        return self.connective.name


ATOMIC = Atomic()

Origin = Union[Atomic, Derived]


@dataclass(frozen=True, eq=False)
class Proposition:
    """
    A proposition value.

    name:    display string (caller identifier, or synthesized)
    truth:   TRUE, FALSE or UNKNOWN
    origin:  ATOMIC, or Derived(connective) for connective results
    source:  the operands this value was built from; empty for atoms.
             Only used to walk derivations, never for truth or naming.

    Equality is identity: same-named propositions are not the same value.
    """
    name: str
    truth: Truth = Truth.UNKNOWN
    origin: Origin = ATOMIC
    source: tuple = field(default=(), repr=False)

    def __post_init__(self):
        # Accept True / False / None at the boundary; store a Truth.
        object.__setattr__(self, "truth", Truth.from_optional(self.truth))
        if not isinstance(self.origin, (Atomic, Derived)):
            raise TypeError(
                f"origin must be ATOMIC or Derived(connective), not {self.origin!r}"
            )
        if not isinstance(self.source, tuple) or not all(
            isinstance(operand, Proposition) for operand in self.source
        ):
            raise TypeError("source must be a tuple of Propositions")
        # Atoms have no operands; a derived value has exactly its arity.
        expected = 0 if isinstance(self.origin, Atomic) else self.origin.connective.arity
        if len(self.source) != expected:
            raise ValueError(
                f"origin {self.origin!r} needs {expected} operand(s), "
                f"got {len(self.source)}"
            )

    @classmethod
    def new(cls, name: str, truth=Truth.UNKNOWN) -> "Proposition":
        """Build an atomic proposition."""
        return cls(name=name, truth=truth)

    # ── Rendering ────────────────────────────────────────────────────────────

    @property
    def connective(self):
        """The connective that produced this value, or None for atoms."""
        if isinstance(self.origin, Derived):
            return self.origin.connective
        return None

    def render_operand(self, enclosing: Connective) -> str:
        """
        This proposition's name as an operand of `enclosing`.

        Parenthesized iff our own connective binds strictly looser than
        `enclosing`. Atoms are never wrapped. Only one level is considered;
        our name already carries whatever parentheses its own operands got.
        """
        own = self.connective
        if own is not None and enclosing.binds_tighter_than(own):
            return f"({self.name})"
        return self.name

    def _binary_name(self, other: "Proposition", connective: Connective) -> str:
        left = self.render_operand(connective)
        right = other.render_operand(connective)
        return f"{left}{connective.symbol}{right}"

    @staticmethod
    def _derive(name: str, truth: Truth, connective: Connective,
                *operands: "Proposition") -> "Proposition":
        return Proposition(
            name=name,
            truth=truth,
            origin=Derived(connective),
            source=operands,
        )

    # ── Connectives ──────────────────────────────────────────────────────────

    def negate(self) -> "Proposition":
        """NOT: ~a"""
        name = f"{Connective.NOT.symbol}{self.render_operand(Connective.NOT)}"
        return self._derive(name, kleene_not(self.truth), Connective.NOT, self)

    def conjoin(self, other: "Proposition") -> "Proposition":
        """AND: a^b"""
        return self._derive(
            self._binary_name(other, Connective.AND),
            kleene_and(self.truth, other.truth),
            Connective.AND, self, other,
        )

    def disjoin(self, other: "Proposition") -> "Proposition":
        """OR: avb"""
        return self._derive(
            self._binary_name(other, Connective.OR),
            kleene_or(self.truth, other.truth),
            Connective.OR, self, other,
        )

    def exclusive_or(self, other: "Proposition") -> "Proposition":
        """XOR: a(+)b, with truth of (a OR b) AND NOT (a AND b)."""
        a, b = self.truth, other.truth
        truth = kleene_and(kleene_or(a, b), kleene_not(kleene_and(a, b)))
        return self._derive(
            self._binary_name(other, Connective.XOR),
            truth, Connective.XOR, self, other,
        )

    def implies(self, other: "Proposition") -> "Proposition":
        """IMPLIES: a->b, with truth of a OR NOT b."""
        truth = kleene_or(self.truth, kleene_not(other.truth))
        return self._derive(
            self._binary_name(other, Connective.IMPLIES),
            truth, Connective.IMPLIES, self, other,
        )

    def iff(self, other: "Proposition") -> "Proposition":
        """
        IFF: (a)<->(b), with truth of (a AND b) OR (NOT a AND NOT b).

        Both sides are always parenthesized, on top of whatever
        render_operand already added.
        """
        a, b = self.truth, other.truth
        truth = kleene_or(
            kleene_and(a, b),
            kleene_and(kleene_not(a), kleene_not(b)),
        )
        left = self.render_operand(Connective.IFF)
        right = other.render_operand(Connective.IFF)
        name = f"({left}){Connective.IFF.symbol}({right})"
        return self._derive(name, truth, Connective.IFF, self, other)

    def __invert__(self):
        return self.negate()

    def __and__(self, other):
        if not isinstance(other, Proposition):
            return NotImplemented
        return self.conjoin(other)

    def __or__(self, other):
        if not isinstance(other, Proposition):
            return NotImplemented
        return self.disjoin(other)

    def __xor__(self, other):
        if not isinstance(other, Proposition):
            return NotImplemented
        return self.exclusive_or(other)

    def __rshift__(self, other):
        if not isinstance(other, Proposition):
            return NotImplemented
        return self.implies(other)

    # ── Queries ──────────────────────────────────────────────────────────────

    def is_axiom(self) -> bool:
        return isinstance(self.origin, Atomic)

    def is_tautology(self) -> bool:
        return self.truth is Truth.TRUE

    def is_contradiction(self) -> bool:
        return self.truth is Truth.FALSE

    # ── Display ──────────────────────────────────────────────────────────────

    def describe(self) -> str:
        """One-line summary: name, truth and where it came from."""
        if self.is_axiom():
            kind = "axiom"
        else:
            kind = f"via {self.connective.name}"
        return f"{self.name} = {self.truth.symbol}  [{kind}]"

    def __str__(self):
        return self.name


def atom(name: str, truth=Truth.UNKNOWN) -> Proposition:
    return Proposition.new(name, truth)


def negate(a: Proposition) -> Proposition:
    return a.negate()


def conjoin(a: Proposition, b: Proposition) -> Proposition:
    return a.conjoin(b)


def disjoin(a: Proposition, b: Proposition) -> Proposition:
    return a.disjoin(b)


def exclusive_or(a: Proposition, b: Proposition) -> Proposition:
    return a.exclusive_or(b)


def implies(a: Proposition, b: Proposition) -> Proposition:
    return a.implies(b)


def iff(a: Proposition, b: Proposition) -> Proposition:
    return a.iff(b)


CONNECTIVE_FUNCTIONS = {
    Connective.NOT:     negate,
    Connective.AND:     conjoin,
    Connective.OR:      disjoin,
    Connective.XOR:     exclusive_or,
    Connective.IMPLIES: implies,
    Connective.IFF:     iff,
}
