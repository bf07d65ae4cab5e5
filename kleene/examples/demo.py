"""
Example: the p / q scenario.

    p          unknown
    q          true
    pvq        true, because q is
    p->~q      p OR NOT(~q)  =  p OR q  =  true
    (pvq)<->(p->~q)
"""

from ..core.proposition import Proposition, atom


def run_demo(verbose: bool = True) -> Proposition:
    p = atom("p", None)
    q = atom("q", True)
    p_or_q = p.disjoin(q)
    if_p_then_q = p.implies(q.negate())
    taut = p_or_q.iff(if_p_then_q)
    if verbose:
        print(f"{p_or_q!r}, {if_p_then_q!r}")
        print(f"{taut!r}")
        print(taut.is_tautology())
    return taut
