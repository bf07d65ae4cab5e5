"""
Example: the truth table of every connective.
"""

from ..core.connective import Connective
from ..core.proposition import Proposition, atom
from ..visualization import print_truth_table


def run_tables(verbose: bool = True) -> Proposition:
    if verbose:
        for connective in Connective:
            print_truth_table(connective)
    return atom("a").iff(atom("b"))
