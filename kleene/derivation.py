"""
Derivation walking.

Every derived Proposition keeps its operands in `source`. These helpers
walk those links back to the axioms, the same way a proof is recovered
from a derived clause. Nodes are tracked by identity, not by name: two
atoms both called "p" are two leaves.

The walks use an explicit stack; expressions can nest far deeper than
the interpreter's recursion limit.
"""

from .core.proposition import Proposition


def derivation(prop: Proposition) -> list:
    """
    Walk back from `prop` through source links.
    Returns a list of (proposition, depth) pairs, ordered from axioms to `prop`.

    depth is the distance from `prop` (which has depth 0). A value used
    twice in the same expression is listed once, at its first visit.
    Every node comes after all of its operands.
    """
    steps = []
    visited = set()
    # (node, depth, operands_done)
    stack = [(prop, 0, False)]
    while stack:
        node, level, operands_done = stack.pop()
        if operands_done:
            steps.append((node, level))
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, level, True))
        # reversed so the left operand is walked first
        for operand in reversed(node.source):
            stack.append((operand, level + 1, False))
    return steps


def axioms_of(prop: Proposition) -> list:
    """The distinct atomic leaves under `prop`, in first-seen order."""
    leaves = []
    seen = set()
    stack = [prop]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        if node.is_axiom():
            leaves.append(node)
        else:
            stack.extend(reversed(node.source))
    return leaves


def depth(prop: Proposition) -> int:
    """Nesting depth: 0 for an axiom, 1 + deepest operand otherwise."""
    depths = {}
    stack = [(prop, False)]
    while stack:
        node, operands_done = stack.pop()
        if id(node) in depths:
            continue
        if operands_done:
            if node.source:
                depths[id(node)] = 1 + max(depths[id(o)] for o in node.source)
            else:
                depths[id(node)] = 0
            continue
        stack.append((node, True))
        for operand in node.source:
            if id(operand) not in depths:
                stack.append((operand, False))
    return depths[id(prop)]
