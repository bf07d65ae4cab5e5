"""
Visualization and reporting utilities.
"""

from .core.truth import Truth
from .core.connective import Connective
from .core.proposition import Proposition, CONNECTIVE_FUNCTIONS
from .derivation import derivation


TRUTH_COLORS = {
    Truth.TRUE: "palegreen",
    Truth.FALSE: "lightpink",
    Truth.UNKNOWN: "lightgray",
}


def print_proposition(prop: Proposition):
    """Print a summary of a proposition and its queries."""
    print(f"\n{'='*60}")
    print(f"Proposition: {prop.name}")
    print(f"  truth:         {prop.truth.value}")
    print(f"  origin:        {prop.origin!r}")
    print(f"  axiom:         {prop.is_axiom()}")
    print(f"  tautology:     {prop.is_tautology()}")
    print(f"  contradiction: {prop.is_contradiction()}")
    print(f"{'='*60}")


def print_derivation(prop: Proposition):
    """Pretty-print the derivation tree, axioms first."""
    steps = derivation(prop)
    print(f"\n{'='*60}")
    print(f"Derivation of {prop.name}")
    print(f"{'='*60}")
    for i, (node, depth) in enumerate(steps):
        indent = "  " * depth
        if node.source:
            operands = ", ".join(operand.name for operand in node.source)
            src = f"  [{node.connective.name} of: {operands}]"
        else:
            src = "  [axiom]"
        print(f"  {i+1}. {indent}{node.name} = {node.truth.symbol}{src}")
    print(f"{'='*60}")


def truth_table(connective: Connective) -> list:
    """
    Rows of (operand truths, result truth) for `connective`, computed by
    applying it to fresh atoms.
    """
    apply = CONNECTIVE_FUNCTIONS[connective]
    states = list(Truth)
    rows = []
    if connective.arity == 1:
        for x in states:
            result = apply(Proposition.new("a", x))
            rows.append(((x,), result.truth))
    else:
        for x in states:
            for y in states:
                result = apply(Proposition.new("a", x), Proposition.new("b", y))
                rows.append(((x, y), result.truth))
    return rows


def print_truth_table(connective: Connective):
    """Print the three-valued truth table of one connective."""
    a, b = Proposition.new("a"), Proposition.new("b")
    if connective.arity == 1:
        header = CONNECTIVE_FUNCTIONS[connective](a).name
        columns = ["a"]
    else:
        header = CONNECTIVE_FUNCTIONS[connective](a, b).name
        columns = ["a", "b"]
    print(f"\n{connective.name}")
    print("  " + " | ".join(columns) + f" | {header}")
    for operands, result in truth_table(connective):
        cells = " | ".join(t.symbol for t in operands)
        print(f"  {cells} | {result.symbol}")


def _dot_escape(text: str) -> str:
    """Escape a name for use inside a double-quoted DOT string."""
    return (text.replace("\\", "\\\\")
                .replace('"', '\\"')
                .replace("\n", "\\n"))


def export_dot(prop: Proposition, path="kleene_graph.dot"):
    """Export the derivation graph as a DOT file for Graphviz visualization."""
    steps = derivation(prop)
    node_ids = {id(node): f"n{i}" for i, (node, _) in enumerate(steps)}
    with open(path, "w") as f:
        f.write("digraph kleene {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")

        for node, _ in steps:
            label = _dot_escape(node.name)
            color = TRUTH_COLORS[node.truth]
            f.write(f'  {node_ids[id(node)]} [label="{label}", '
                    f'fillcolor={color}, style=filled];\n')
            for operand in node.source:
                f.write(f"  {node_ids[id(operand)]} -> {node_ids[id(node)]};\n")
        f.write("}\n")
    print(f"Graph exported to {path}")
