"""Propositional satisfiability by semantic tableaux."""
from .errors import ParseError, ParseErrorKind
from .formula import And, Formula, Iff, Implies, Not, Or, Var, evaluate, variables
from .parser import parse
from .tableau import Satisfiable, SignedFormula, TableauSolver, Unsatisfiable, Verdict, decide, is_satisfiable, is_valid

__version__ = '0.1.0'

__all__ = [
    'And', 'Formula', 'Iff', 'Implies', 'Not', 'Or', 'Var',
    'ParseError', 'ParseErrorKind',
    'Satisfiable', 'SignedFormula', 'TableauSolver', 'Unsatisfiable', 'Verdict',
    'decide', 'evaluate', 'is_satisfiable', 'is_valid', 'parse', 'variables',
]
