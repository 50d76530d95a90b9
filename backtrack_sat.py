#!/usr/bin/env python3
"""
Backtracking SAT Solver

A depth-first SAT solver with a one-shot pure literal pass and an explicit
stack of deferred branches. Every decision splits the search on the
lowest-numbered unassigned variable: the true branch is explored at once and
the false branch is pushed onto the stack for later. A branch that falsifies
a clause is abandoned and the most recently deferred branch is resumed.
"""

import time
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple


Clause = Tuple[int, ...]
Formula = Tuple[Clause, ...]


class Value(Enum):
    """Tri-state value of a variable in a partial assignment."""
    UNKNOWN = 0
    TRUE = 1
    FALSE = 2

    @staticmethod
    def of(flag: bool) -> "Value":
        return Value.TRUE if flag else Value.FALSE


Assignment = Dict[int, Value]


class CNFFormula:
    """Represents a CNF (Conjunctive Normal Form) formula."""

    def __init__(self, clauses: Iterable[Iterable[int]]):
        """
        Initialize CNF formula.

        Args:
            clauses: Iterable of clauses, where each clause is an iterable of literals.
                    A literal is a non-zero integer (positive or negative).
                    Variable n is represented by n, and its negation by -n.
        """
        self.clauses: Formula = tuple(tuple(clause) for clause in clauses)
        for clause in self.clauses:
            if 0 in clause:
                raise ValueError(f"Literal 0 is not allowed in clause {list(clause)}")
        self.variables = sorted({abs(lit) for clause in self.clauses for lit in clause})
        self.num_variables = len(self.variables)
        self.num_clauses = len(self.clauses)

        # Counts from a DIMACS problem line, if the formula came from one
        self.declared_variables: Optional[int] = None
        self.declared_clauses: Optional[int] = None

    def is_satisfied(self, assignment: Dict[int, bool]) -> bool:
        """Check if the formula is satisfied by the given assignment."""
        for clause in self.clauses:
            clause_satisfied = False
            for lit in clause:
                var = abs(lit)
                if var in assignment:
                    if (lit > 0 and assignment[var]) or (lit < 0 and not assignment[var]):
                        clause_satisfied = True
                        break
            if not clause_satisfied:
                return False
        return True

    def __repr__(self):
        return f"CNFFormula(num_variables={self.num_variables}, num_clauses={self.num_clauses})"


def literal_is_true(lit: int, assignment: Assignment) -> bool:
    """Return True if the literal evaluates to true under the assignment."""
    value = assignment.get(abs(lit), Value.UNKNOWN)
    if lit > 0:
        return value is Value.TRUE
    return value is Value.FALSE


def simplify(formula: Iterable[Sequence[int]], assignment: Assignment) -> Formula:
    """
    Drop every clause that is satisfied under the assignment.

    Clauses that are not satisfied are kept unchanged, including literals that
    are already false. A clause is never judged falsified here.

    Args:
        formula: Clauses to simplify
        assignment: Partial assignment to simplify against

    Returns:
        The remaining clauses, in their original order.
    """
    return tuple(
        tuple(clause) for clause in formula
        if not any(literal_is_true(lit, assignment) for lit in clause)
    )


def initial_assignment(formula: Iterable[Iterable[int]]) -> Assignment:
    """Map every variable that appears in the formula to UNKNOWN."""
    assignment: Assignment = {}
    for clause in formula:
        for lit in clause:
            assignment.setdefault(abs(lit), Value.UNKNOWN)
    return assignment


def pure_literal_elimination(formula: Iterable[Sequence[int]], assignment: Assignment) -> Formula:
    """
    Assign every pure variable and simplify the formula once.

    A variable is pure if all of its occurrences share one polarity. Pure
    variables are set to the value that makes their literals true. The
    assignment is updated in place. Pure literals that only appear after the
    returned formula is further simplified are not detected.

    Args:
        formula: Clauses to scan
        assignment: Assignment to update, normally fresh from initial_assignment

    Returns:
        The formula simplified against the updated assignment.
    """
    formula = tuple(tuple(clause) for clause in formula)
    candidates: Dict[int, bool] = {}
    evicted = set()

    for clause in formula:
        for lit in clause:
            var = abs(lit)
            if var in evicted:
                continue
            polarity = lit > 0
            if var not in candidates:
                candidates[var] = polarity
            elif candidates[var] != polarity:
                # Seen with both polarities, never pure again
                del candidates[var]
                evicted.add(var)

    for var, polarity in candidates.items():
        assignment[var] = Value.of(polarity)

    return simplify(formula, assignment)


def unknown_variables(assignment: Assignment) -> List[int]:
    """Return the UNKNOWN variables of the assignment in ascending order."""
    return sorted(var for var, value in assignment.items() if value is Value.UNKNOWN)


class Root:
    """Decision marker of the search tree root, where nothing is decided yet."""

    def __repr__(self):
        return "ROOT"


ROOT = Root()


class Decision(NamedTuple):
    variable: int
    value: bool


class SearchNode(NamedTuple):
    """
    One node of the search tree.

    `assignment` is the assignment before `decision` was made; the decided
    variable is still UNKNOWN in it. `formula` was simplified against the
    parent's committed assignment. Nodes are never mutated once built.
    """
    formula: Formula
    decision: object  # ROOT or Decision
    assignment: Assignment
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.decision is ROOT

    def unknown_variables(self) -> List[int]:
        return unknown_variables(self.assignment)

    def committed_assignment(self) -> Assignment:
        """Return a fresh copy of the assignment with this node's decision applied."""
        committed = dict(self.assignment)
        if not self.is_root:
            committed[self.decision.variable] = Value.of(self.decision.value)
        return committed


class NodeStatus(Enum):
    CONFLICT = 0
    UNDETERMINED = 1
    SOLUTION = 2


def evaluate_node(node: SearchNode) -> NodeStatus:
    """
    Classify a node under its assignment plus its decision.

    Per clause: a literal made true by the decision or by an assigned variable
    satisfies the clause. A literal on an UNKNOWN variable is skipped. A
    literal made false counts as falsified. A clause conflicts only when every
    one of its literals was falsified, so a clause holding an UNKNOWN literal
    never conflicts here.

    Returns:
        CONFLICT if some clause conflicts, SOLUTION if every clause is
        satisfied, UNDETERMINED otherwise.
    """
    if node.is_root:
        decided_var, decided_value = None, None
    else:
        decided_var, decided_value = node.decision
    assignment = node.assignment

    satisfied_count = 0
    for clause in node.formula:
        falsified = 0
        satisfied = False
        for lit in clause:
            var = abs(lit)
            if var == decided_var:
                value = Value.of(decided_value)
            else:
                value = assignment.get(var, Value.UNKNOWN)
                if value is Value.UNKNOWN:
                    continue
            if (lit > 0) == (value is Value.TRUE):
                satisfied = True
                break
            falsified += 1

        if satisfied:
            satisfied_count += 1
        elif falsified == len(clause):
            return NodeStatus.CONFLICT

    if satisfied_count == len(node.formula):
        return NodeStatus.SOLUTION
    return NodeStatus.UNDETERMINED


class Outcome(Enum):
    FOUND = 0
    CONFLICT = 1


class BacktrackingSolver:
    """
    A depth-first SAT solver with chronological backtracking.

    The true branch of every decision is explored directly; the false branch
    waits on a LIFO stack. There is no unit propagation, no clause learning
    and no restart.
    """

    def __init__(self, formula: CNFFormula, verify: bool = True,
                 verbose: bool = False, log_every: int = 10000):
        """Initialize the solver with a CNF formula."""
        self.formula = formula
        self.verify = verify
        self.verbose = verbose
        self.log_every = log_every

        self.stack: List[SearchNode] = []
        self.preprocessed_formula: Formula = ()
        self.num_pure_literals = 0
        self.num_expansions = 0
        self.num_conflicts = 0
        self.max_stack_size = 0
        self.solve_time = 0.0

    def solve(self) -> Optional[Dict[int, bool]]:
        """
        Solve the SAT problem.

        Returns:
            A satisfying assignment covering every variable if SAT, None if UNSAT.
        """
        start_time = time.time()
        self.stack = []
        self.num_expansions = 0
        self.num_conflicts = 0
        self.max_stack_size = 0

        assignment = initial_assignment(self.formula.clauses)
        self.preprocessed_formula = pure_literal_elimination(self.formula.clauses, assignment)
        self.num_pure_literals = sum(1 for value in assignment.values() if value is not Value.UNKNOWN)
        if self.verbose:
            print(f" > {self.formula}: {self.num_pure_literals} pure literals, "
                  f"{len(self.preprocessed_formula)} clauses left")

        result = None
        self._push(SearchNode(self.preprocessed_formula, ROOT, assignment))
        while self.stack:
            node = self.stack.pop()
            outcome, found = self._expand(node)
            if outcome is Outcome.FOUND:
                result = found
                break

        self.solve_time = time.time() - start_time
        if self.verbose:
            verdict = "SAT" if result is not None else "UNSAT"
            print(f" > {verdict} after {self.num_expansions} expansions, "
                  f"{self.num_conflicts} conflicts, {self.solve_time:.3f}s")

        if result is not None and self.verify:
            # Verify the solution
            if not self.formula.is_satisfied(result):
                raise RuntimeError("Invalid solution found!")

        return result

    def _evaluate(self, node: SearchNode) -> NodeStatus:
        return evaluate_node(node)

    def _push(self, node: SearchNode) -> None:
        self.stack.append(node)
        if len(self.stack) > self.max_stack_size:
            self.max_stack_size = len(self.stack)

    def _expand(self, node: SearchNode) -> Tuple[Outcome, Optional[Dict[int, bool]]]:
        """
        Explore a node and the chain of true branches below it.

        Each level pushes its false branch onto the stack and continues with
        the true branch, so the chain runs as a loop.

        Returns:
            (FOUND, assignment) on a solution, (CONFLICT, None) when the chain
            ends in a conflicting node.
        """
        while True:
            self.num_expansions += 1
            if self.verbose and self.num_expansions % self.log_every == 0:
                print(f" - expansions: {self.num_expansions}, depth: {node.depth}, "
                      f"stack: {len(self.stack)}, conflicts: {self.num_conflicts}")

            if node.is_root:
                committed = node.committed_assignment()
                formula = node.formula
                if not node.unknown_variables():
                    status = self._evaluate(node)
                    if status is NodeStatus.CONFLICT:
                        self.num_conflicts += 1
                        return Outcome.CONFLICT, None
                    return Outcome.FOUND, self._complete(committed)
            else:
                status = self._evaluate(node)
                if status is NodeStatus.CONFLICT:
                    self.num_conflicts += 1
                    return Outcome.CONFLICT, None
                committed = node.committed_assignment()
                if status is NodeStatus.SOLUTION:
                    return Outcome.FOUND, self._complete(committed)
                formula = simplify(node.formula, committed)

            remaining = unknown_variables(committed)
            if not remaining:
                # Nothing left to decide
                return Outcome.FOUND, self._complete(committed)

            var = remaining[0]
            depth = node.depth + 1
            self._push(SearchNode(formula, Decision(var, False), committed, depth))
            node = SearchNode(formula, Decision(var, True), committed, depth)

    @staticmethod
    def _complete(assignment: Assignment) -> Dict[int, bool]:
        """Turn a committed assignment into a full one; UNKNOWN variables default to True."""
        return {var: value is not Value.FALSE for var, value in assignment.items()}


def format_assignment(assignment: Optional[Dict[int, bool]]) -> str:
    """
    Render a solver result.

    Returns:
        One "<variable>: <value>" line per variable in ascending order, or
        "UNSATISFIED" when there is no assignment.
    """
    if assignment is None:
        return "UNSATISFIED"
    return "\n".join(f"{var}: {assignment[var]}" for var in sorted(assignment))


def solve_sat(clauses: Iterable[Iterable[int]]) -> Optional[Dict[int, bool]]:
    """
    Convenience function to solve a SAT problem.

    Args:
        clauses: List of clauses in CNF format

    Returns:
        Satisfying assignment if SAT, None if UNSAT
    """
    formula = CNFFormula(clauses)
    solver = BacktrackingSolver(formula)
    return solver.solve()


if __name__ == "__main__":
    # Example usage
    print("Backtracking SAT Solver")
    print("=" * 50)

    # (x1 ∨ x2) ∧ (¬x1 ∨ ¬x2)
    clauses1 = [
        [1, 2],      # x1 ∨ x2
        [-1, -2],    # ¬x1 ∨ ¬x2
    ]

    print("\nExample 1: (x1 ∨ x2) ∧ (¬x1 ∨ ¬x2)")
    print(format_assignment(solve_sat(clauses1)))

    # (x1) ∧ (¬x1)
    clauses2 = [
        [1],         # x1
        [-1],        # ¬x1
    ]

    print("\nExample 2: (x1) ∧ (¬x1)")
    print(format_assignment(solve_sat(clauses2)))

    # (x1 ∨ x2 ∨ x3) ∧ (¬x1 ∨ ¬x2) ∧ (¬x3 ∨ x4)
    clauses3 = [
        [1, 2, 3],   # x1 ∨ x2 ∨ x3
        [-1, -2],    # ¬x1 ∨ ¬x2
        [-3, 4],     # ¬x3 ∨ x4
    ]

    print("\nExample 3: (x1 ∨ x2 ∨ x3) ∧ (¬x1 ∨ ¬x2) ∧ (¬x3 ∨ x4)")
    print(format_assignment(solve_sat(clauses3)))
