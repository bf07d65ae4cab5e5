"""
Example: how operand names get parenthesized.

An operand is wrapped only when its own connective binds strictly looser
than the one combining it. IFF wraps both sides regardless.
"""

from ..core.proposition import Proposition, atom


def make_precedence_examples() -> list:
    p, q, r = atom("p"), atom("q"), atom("r")
    return [
        p & q,              # p^q
        (p & q) | r,        # p^qvr
        (p | q) & r,        # (pvq)^r
        ~(p | q),           # ~(pvq)
        ~~p,                # ~~p
        (p >> q) ^ r,       # (p->q)(+)r
        (p ^ q) >> r,       # p(+)q->r
        (p >> q).iff(r),    # (p->q)<->(r)
        p & q.iff(r),       # p^((q)<->(r))
    ]


def run_precedence(verbose: bool = True) -> Proposition:
    examples = make_precedence_examples()
    if verbose:
        for prop in examples:
            print(f"  {prop.connective.name:<8} {prop.name}")
    return examples[-1]
