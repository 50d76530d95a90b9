#!/usr/bin/env python3
"""
Solve DIMACS CNF files from the command line.

    python solve_cnf.py problem.cnf
    python solve_cnf.py benchmarks/ --stats
"""

import argparse
import glob
import os
import sys

from tqdm import tqdm

from backtrack_sat import BacktrackingSolver, format_assignment
from dimacs import DimacsError, read_cnf_file


def collect_files(paths):
    files = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(sorted(glob.glob(os.path.join(path, '*.cnf'))))
        else:
            files.append(path)
    return files


def solve_file(cnf_filepath, opts):
    formula = read_cnf_file(cnf_filepath)
    solver = BacktrackingSolver(formula, verify=not opts.no_verify,
                                verbose=opts.verbose, log_every=opts.log_every)
    result = solver.solve()

    out_str = format_assignment(result)
    if opts.stats:
        out_str += (f"\n - variables: {formula.num_variables}, clauses: {formula.num_clauses}, "
                    f"pure literals: {solver.num_pure_literals}"
                    f"\n - expansions: {solver.num_expansions}, conflicts: {solver.num_conflicts}, "
                    f"max stack: {solver.max_stack_size}, time: {solver.solve_time:.3f}s")
    return result, out_str


def main(opts):
    files = collect_files(opts.paths)
    if not files:
        print(f" ! Error: no CNF files found in {' '.join(opts.paths)}", file=sys.stderr)
        return 1

    if len(files) == 1:
        try:
            _, out_str = solve_file(files[0], opts)
        except DimacsError as e:
            print(f" ! Error: {files[0]}: {e}", file=sys.stderr)
            return 1
        print(out_str)
        return 0

    n_sat = 0
    n_errors = 0
    for cnf_filepath in tqdm(files, desc="Solving", dynamic_ncols=True):
        try:
            result, out_str = solve_file(cnf_filepath, opts)
        except DimacsError as e:
            tqdm.write(f" ! Error: {cnf_filepath}: {e}", file=sys.stderr)
            n_errors += 1
            continue
        if result is not None:
            n_sat += 1
        tqdm.write(f"==> {cnf_filepath} <==\n{out_str}")

    n_solved = len(files) - n_errors
    print(f" * {n_solved} files solved: {n_sat} SAT, {n_solved - n_sat} UNSAT, {n_errors} errors")
    return 1 if n_errors else 0


def init(argv=None):
    parser = argparse.ArgumentParser(description="Backtracking SAT solver for DIMACS CNF files")

    parser.add_argument("paths", nargs='+',
                        help='CNF files, or directories holding *.cnf files')
    parser.add_argument("--verbose", action='store_true', default=False,
                        help='Print search progress')
    parser.add_argument("--log_every", type=int, default=10000,
                        help='Expansions between progress lines with --verbose')
    parser.add_argument("--stats", action='store_true', default=False,
                        help='Print search statistics after each verdict')
    parser.add_argument("--no_verify", action='store_true', default=False,
                        help='Skip checking found assignments against the formula')

    opts = parser.parse_args(argv)
    if opts.log_every <= 0:
        parser.error("--log_every must be positive")
    return opts


def run():
    sys.exit(main(init()))


if __name__ == "__main__":
    run()
