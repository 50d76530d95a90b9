#!/usr/bin/env python3
"""
Examples for the Backtracking SAT Solver
"""

from backtrack_sat import (BacktrackingSolver, CNFFormula, Value, format_assignment,
                           initial_assignment, pure_literal_elimination, solve_sat)
from dimacs import parse_dimacs
from util import brute_force_satisfiable, make_rng, random_kcnf, timeit


def example_3_coloring():
    """
    Graph 3-coloring of a triangle (satisfiable).

    Variable (vertex - 1) * 3 + color means the vertex has that color.
    """
    print("\n" + "="*60)
    print("Example: Graph 3-Coloring (Triangle)")
    print("="*60)

    clauses = []
    edges = [(1, 2), (1, 3), (2, 3)]

    for vertex in range(1, 4):
        colors = [(vertex - 1) * 3 + color for color in range(1, 4)]
        # At least one color
        clauses.append(colors)
        # At most one color
        for i in range(3):
            for j in range(i + 1, 3):
                clauses.append([-colors[i], -colors[j]])

    # Adjacent vertices differ
    for u, v in edges:
        for color in range(1, 4):
            clauses.append([-((u - 1) * 3 + color), -((v - 1) * 3 + color)])

    result = solve_sat(clauses)

    if result:
        print("SAT - 3-coloring exists!")
        print("\nColoring:")
        for vertex in range(1, 4):
            for color in range(1, 4):
                if result[(vertex - 1) * 3 + color]:
                    print(f"  Vertex {vertex}: Color {color}")
    else:
        print("UNSAT - No 3-coloring exists")


def example_pure_literals():
    """
    Show what the pure literal pass does before the search starts.
    """
    print("\n" + "="*60)
    print("Example: Pure Literal Elimination")
    print("="*60)

    clauses = [[1, 2], [2, 3], [-4, -2, 3], [-1, -2, 3], [-4, 2, 3]]
    assignment = initial_assignment(clauses)
    simplified = pure_literal_elimination(clauses, assignment)

    print("\nAssignment after the pass:")
    for var in sorted(assignment):
        print(f"  Variable {var}: {assignment[var].name}")
    print(f"\nRemaining clauses: {[list(c) for c in simplified]}")
    print(f"Variables left to decide: {sum(v is Value.UNKNOWN for v in assignment.values())}")


def example_dimacs_format():
    """
    Example using DIMACS format.
    """
    print("\n" + "="*60)
    print("Example: DIMACS Format")
    print("="*60)

    dimacs = """
    c Example CNF formula in DIMACS format
    c (x1 ∨ ¬x2) ∧ (x2 ∨ x3) ∧ (¬x1 ∨ ¬x3)
    p cnf 3 3
    1 -2 0
    2 3 0
    -1 -3 0
    """

    print("\nDIMACS input:")
    print(dimacs)

    formula = parse_dimacs(dimacs)
    solver = BacktrackingSolver(formula)
    print(format_assignment(solver.solve()))
    print(f"\n{solver.num_expansions} expansions, {solver.num_conflicts} conflicts")


def example_pigeonhole():
    """
    Pigeonhole principle: n+1 pigeons in n holes.
    This is a classic UNSAT problem.
    """
    print("\n" + "="*60)
    print("Example: Pigeonhole Principle (4 pigeons, 3 holes)")
    print("="*60)

    n_pigeons = 4
    n_holes = 3

    clauses = []

    # Each pigeon must be in at least one hole
    for pigeon in range(n_pigeons):
        clauses.append([pigeon * n_holes + hole + 1 for hole in range(n_holes)])

    # At most one pigeon per hole
    for hole in range(n_holes):
        for p1 in range(n_pigeons):
            for p2 in range(p1 + 1, n_pigeons):
                clauses.append([-(p1 * n_holes + hole + 1), -(p2 * n_holes + hole + 1)])

    print(f"\n{len(clauses)} clauses generated")

    solver = BacktrackingSolver(CNFFormula(clauses))
    result = solver.solve()

    if result:
        print("SAT - Assignment found (unexpected!)")
    else:
        print("UNSAT - Cannot fit 4 pigeons in 3 holes (as expected)")
    print(f"{solver.num_expansions} expansions, max stack {solver.max_stack_size}")


def example_random_3sat():
    """
    Random 3-SAT near the phase transition, checked against the truth table.
    """
    print("\n" + "="*60)
    print("Example: Random 3-SAT (10 variables, 43 clauses)")
    print("="*60)

    rng = make_rng(7)
    for i in range(5):
        clauses = random_kcnf(10, 43, 3, rng)
        result, elapsed = timeit(solve_sat, clauses)
        expected = brute_force_satisfiable(clauses)
        verdict = "SAT" if result is not None else "UNSAT"
        print(f"  Instance {i}: {verdict} in {elapsed:.4f}s "
              f"(truth table agrees: {expected == (result is not None)})")


if __name__ == "__main__":
    print("\nBacktracking SAT Solver - Examples")
    print("="*60)

    example_pure_literals()
    example_3_coloring()
    example_dimacs_format()
    example_pigeonhole()
    example_random_3sat()

    print("\n" + "="*60)
    print("All examples completed!")
    print("="*60)
