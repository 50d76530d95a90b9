import itertools
import time
import numpy as np

from backtrack_sat import Value

# misc


def timeit(f, *args, **kwargs):
    start_time = time.time()
    result = f(*args, **kwargs)
    end_time = time.time()
    return result, end_time - start_time


def count_unknown(assignment):
    return sum(1 for value in assignment.values() if value is Value.UNKNOWN)


def clause_is_satisfied(clause, model):
    return any((lit > 0) == model[abs(lit)] for lit in clause)

# brute force reference


def brute_force_solve(clauses):
    """
    Enumerate the whole truth table, variables in ascending order.

    Returns the first satisfying assignment as a dict, or None. Only usable
    for small formulas.
    """
    variables = sorted({abs(lit) for clause in clauses for lit in clause})
    for values in itertools.product((False, True), repeat=len(variables)):
        model = dict(zip(variables, values))
        if all(clause_is_satisfied(clause, model) for clause in clauses):
            return model
    return None


def brute_force_satisfiable(clauses):
    return brute_force_solve(clauses) is not None

# numpy


def make_rng(seed=None):
    return np.random.default_rng(seed)


def random_kcnf(n_vars, n_clauses, k=3, rng=None):
    """
    Sample a random k-CNF formula.

    Each clause draws k distinct variables uniformly from 1..n_vars and
    negates each with probability 1/2.
    """
    assert (1 <= k <= n_vars)
    if rng is None:
        rng = make_rng()
    clauses = []
    for _ in range(n_clauses):
        variables = rng.choice(np.arange(1, n_vars + 1), size=k, replace=False)
        signs = rng.choice(np.array([-1, 1]), size=k)
        clauses.append([int(v * s) for v, s in zip(variables, signs)])
    return clauses


def random_cnf(max_vars, max_clauses, max_width=4, rng=None):
    """Sample a formula with random size and clause widths (clauses may be empty)."""
    if rng is None:
        rng = make_rng()
    n_vars = int(rng.integers(1, max_vars + 1))
    n_clauses = int(rng.integers(0, max_clauses + 1))
    clauses = []
    for _ in range(n_clauses):
        width = int(rng.integers(0, min(max_width, n_vars) + 1))
        clauses.append(random_kcnf(n_vars, 1, width, rng)[0] if width else [])
    return clauses
