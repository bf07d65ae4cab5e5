"""
Example registry.

Each example is a dict:
    run:          (verbose: bool) -> Proposition   the final value built
    description:  str
"""

from .demo import run_demo
from .precedence import run_precedence, make_precedence_examples
from .tables import run_tables


EXAMPLES = {
    "demo": {
        "run":         run_demo,
        "description": "p unknown, q true: build (pvq)<->(p->~q) and check it",
    },
    "precedence": {
        "run":         run_precedence,
        "description": "Operand parenthesization by connective precedence",
    },
    "tables": {
        "run":         run_tables,
        "description": "Three-valued truth tables for all six connectives",
    },
}
