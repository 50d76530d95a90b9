"""
Reading CNF formulas in DIMACS format.
"""

from typing import List

from backtrack_sat import CNFFormula


class DimacsError(ValueError):
    """Raised when a DIMACS file cannot be read or is malformed."""

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def parse_dimacs(text: str) -> CNFFormula:
    """
    Parse a CNF formula in DIMACS format.

    Lines starting with 'c' are comments. The problem line must read
    'p cnf <n_vars> <n_clauses>'. Every other line holds integer literals;
    0 closes the current clause, which may span several lines.

    Args:
        text: DIMACS format text

    Returns:
        CNFFormula object

    Raises:
        DimacsError: on a malformed problem line or a non-integer literal.
    """
    clauses: List[List[int]] = []
    clause: List[int] = []
    problem = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()

        # Skip blank lines and comments
        if not tokens or tokens[0].startswith('c'):
            continue

        if tokens[0] == 'p':
            if problem is not None:
                raise DimacsError("duplicate problem line", line_number)
            problem = _parse_problem_line(tokens, line_number)
            continue

        for token in tokens:
            try:
                lit = int(token)
            except ValueError:
                raise DimacsError(f"invalid literal {token!r}", line_number) from None
            if lit == 0:
                clauses.append(clause)
                clause = []
            else:
                clause.append(lit)

    # Last clause without a terminating 0
    if clause:
        clauses.append(clause)

    formula = CNFFormula(clauses)
    if problem is not None:
        formula.declared_variables, formula.declared_clauses = problem
    return formula


def _parse_problem_line(tokens: List[str], line_number: int):
    if len(tokens) != 4 or tokens[1] != 'cnf':
        raise DimacsError(f"invalid problem line {' '.join(tokens)!r}", line_number)
    try:
        n_vars, n_clauses = int(tokens[2]), int(tokens[3])
    except ValueError:
        raise DimacsError(f"invalid problem line {' '.join(tokens)!r}", line_number) from None
    if n_vars < 0 or n_clauses < 0:
        raise DimacsError(f"negative count in problem line {' '.join(tokens)!r}", line_number)
    return n_vars, n_clauses


def read_cnf_file(path: str) -> CNFFormula:
    """Read and parse a DIMACS CNF file."""
    try:
        with open(path, 'r') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DimacsError(f"cannot read {path}: {e}") from e
    return parse_dimacs(text)
