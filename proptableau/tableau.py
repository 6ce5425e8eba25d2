"""
Propositional satisfiability by semantic tableaux.

The input formula is assumed true at the root and expanded with signed
alpha (linear) and beta (branching) rules. A branch closes as soon as it
holds some formula both as true and as false. The formula is unsatisfiable
iff every branch closes; otherwise the literals of the leftmost open,
fully expanded branch give a model.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Union

from .formula import Formula, Not, is_atom, variables
from .parser import parse

logger = logging.getLogger(__name__)


def INFO(depth: int, msg, *args) -> None:
    if logger.isEnabledFor(logging.INFO):
        logger.info('  ' * max(0, depth) + msg, *args)

def DEBUG(depth: int, msg, *args) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('  ' * max(0, depth) + msg, *args)


# ============================================================
#                        SIGNED FORMULAS
# ============================================================

@dataclass(frozen=True)
class SignedFormula:
    formula: Formula
    polarity: bool

    def conjugate(self) -> SignedFormula:
        return SignedFormula(self.formula, not self.polarity)

    def __str__(self) -> str:
        return ('T ' if self.polarity else 'F ') + str(self.formula)


def T(f: Formula) -> SignedFormula:
    return SignedFormula(f, True)

def F(f: Formula) -> SignedFormula:
    return SignedFormula(f, False)


# ============================================================
#                           VERDICTS
# ============================================================

@dataclass
class Satisfiable:
    satisfiable: ClassVar[bool] = True
    assignment: dict[str, bool]

    def __bool__(self) -> bool:
        return True


@dataclass
class Unsatisfiable:
    satisfiable: ClassVar[bool] = False

    def __bool__(self) -> bool:
        return False


Verdict = Union[Satisfiable, Unsatisfiable]


# ============================================================
#                            BRANCH
# ============================================================

class Branch:
    """
    One root-to-frontier path of the tableau.

    entries: every signed formula asserted on the path.
    pending: compound entries not yet expanded, oldest first.
    literals: the polarity of each variable seen so far.
    """

    def __init__(self, entries: set[SignedFormula], pending: deque[SignedFormula], literals: dict[str, bool], depth: int = 0, index: int = 0) -> None:
        self.entries = entries
        self.pending = pending
        self.literals = literals
        self.depth = depth
        self.index = index
        self.closed = False

    @classmethod
    def root(cls, signed: SignedFormula, index: int = 0) -> Branch:
        branch = cls(set(), deque(), {}, 0, index)
        branch.add(signed)
        return branch

    def add(self, signed: SignedFormula) -> None:
        if self.closed or signed in self.entries:
            return

        if signed.conjugate() in self.entries:
            DEBUG(self.depth, 'x  branch %d closes on %s', self.index, signed.formula)
            self.closed = True
            return

        self.entries.add(signed)
        if is_atom(signed.formula):
            self.literals[signed.formula.name] = signed.polarity
        else:
            self.pending.append(signed)

    def copy_for_split(self, extra: tuple[SignedFormula, ...], index: int) -> Branch:
        child = Branch(
            entries=set(self.entries),
            pending=deque(self.pending),
            literals=dict(self.literals),
            depth=self.depth + 1,
            index=index,
        )
        for signed in extra:
            child.add(signed)
        return child


# ========== Rule Matching ==========

def match_alpha_rule(signed: SignedFormula) -> tuple[SignedFormula, ...] | None:
    f, polarity = signed.formula, signed.polarity
    kind = f.kind

    # T -A / F -A
    if kind == 'not':
        return (SignedFormula(f.sub, not polarity),)

    # T (A^B)
    if kind == 'and' and polarity:
        return (T(f.left), T(f.right))

    # F (A|B)
    if kind == 'or' and not polarity:
        return (F(f.left), F(f.right))

    # F (A->B)
    if kind == 'implies' and not polarity:
        return (T(f.left), F(f.right))

    return None

def match_beta_rule(signed: SignedFormula) -> tuple[tuple[SignedFormula, ...], tuple[SignedFormula, ...]] | None:
    f, polarity = signed.formula, signed.polarity
    kind = f.kind

    # F (A^B)
    if kind == 'and' and not polarity:
        return (F(f.left),), (F(f.right),)

    # T (A|B)
    if kind == 'or' and polarity:
        return (T(f.left),), (T(f.right),)

    # T (A->B)
    if kind == 'implies' and polarity:
        return (F(f.left),), (T(f.right),)

    # T (A<->B)
    if kind == 'iff' and polarity:
        return (T(f.left), T(f.right)), (F(f.left), F(f.right))

    # F (A<->B)
    if kind == 'iff' and not polarity:
        return (T(f.left), F(f.right)), (F(f.left), T(f.right))

    return None


# ============================================================
#                         TABLEAU SOLVER
# ============================================================

class TableauSolver:
    """
    Builds the tableau for one formula, depth first, left child before
    right, and stops at the first open terminal branch.

    The tree is walked with an explicit stack, never by recursion.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.branches = 0
        self.closed = 0
        self.expansions = 0

    def next_index(self) -> int:
        self.branches += 1
        return self.branches - 1

    def expand_branch(self, branch: Branch, stack: list[Branch]) -> bool:
        """
        Expand branch until it closes, splits or runs out of work.
        Return True only if it ends open and fully expanded.
        """
        while not branch.closed and branch.pending:
            signed = branch.pending.popleft()
            self.expansions += 1

            alpha = match_alpha_rule(signed)
            if alpha is not None:
                if logger.isEnabledFor(logging.DEBUG):
                    DEBUG(branch.depth, 'alpha %s => %s', signed, ', '.join(map(str, alpha)))
                for child in alpha:
                    branch.add(child)
                continue

            left, right = match_beta_rule(signed)
            children = [branch.copy_for_split(left, self.next_index()), branch.copy_for_split(right, self.next_index())]
            if logger.isEnabledFor(logging.DEBUG):
                DEBUG(branch.depth, 'beta  %s => [%s] | [%s]', signed, ', '.join(map(str, left)), ', '.join(map(str, right)))
            # reversed so the left child is popped first
            stack.extend(reversed(children))
            return False

        if branch.closed:
            self.closed += 1
            return False
        return True

    def model(self, formula: Formula, branch: Branch) -> dict[str, bool]:
        return {name: branch.literals.get(name, False) for name in variables(formula)}

    def check(self, formula: Formula) -> Verdict:
        self.reset()
        root = Branch.root(T(formula), self.next_index())
        stack = [root]
        verdict: Verdict = Unsatisfiable()

        while stack:
            branch = stack.pop()
            if self.expand_branch(branch, stack):
                DEBUG(branch.depth, 'o  branch %d is open', branch.index)
                verdict = Satisfiable(self.model(formula, branch))
                break

        stats = []
        stats.append("Statistics")
        stats.append("Branches created: %d" % self.branches)
        stats.append("Branches closed: %d" % self.closed)
        stats.append("Expansions: %d" % self.expansions)
        INFO(0, "\n".join(stats))
        return verdict


# ============================================================
#                          ENTRY POINTS
# ============================================================

def decide(formula: Formula) -> Verdict:
    return TableauSolver().check(formula)

def is_valid(formula: Formula) -> bool:
    """A formula is valid iff its negation has no model."""
    return not decide(Not(formula))

def is_satisfiable(fmla: str) -> Verdict:
    """Parse fmla and decide it. ParseError propagates."""
    return decide(parse(fmla))
