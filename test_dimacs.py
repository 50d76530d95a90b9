#!/usr/bin/env python3
"""
Tests for DIMACS reading and the command line entry point
"""

import contextlib
import io
import os
import tempfile
import unittest

import solve_cnf
from dimacs import DimacsError, parse_dimacs, read_cnf_file


class TestDIMACSParser(unittest.TestCase):
    """Tests for DIMACS format parser."""

    def test_parse_simple(self):
        """Test parsing simple DIMACS format."""
        dimacs = """
        c This is a comment
        p cnf 3 2
        1 2 0
        -1 3 0
        """
        formula = parse_dimacs(dimacs)
        self.assertEqual(formula.clauses, ((1, 2), (-1, 3)))
        self.assertEqual(formula.declared_variables, 3)
        self.assertEqual(formula.declared_clauses, 2)

    def test_parse_with_comments(self):
        """Test parsing DIMACS with multiple comments."""
        dimacs = """
        c Comment 1
        c Comment 2
        p cnf 2 2
        1 2 0
        c Another comment
        -1 -2 0
        """
        formula = parse_dimacs(dimacs)
        self.assertEqual(formula.num_clauses, 2)

    def test_clause_spans_lines(self):
        formula = parse_dimacs("p cnf 3 2\n1 2\n3 0 -1\n0\n")
        self.assertEqual(formula.clauses, ((1, 2, 3), (-1,)))

    def test_several_clauses_on_one_line(self):
        formula = parse_dimacs("1 -2 0 2 3 0")
        self.assertEqual(formula.clauses, ((1, -2), (2, 3)))

    def test_unterminated_last_clause(self):
        formula = parse_dimacs("p cnf 3 2\n1 2 0\n3")
        self.assertEqual(formula.clauses, ((1, 2), (3,)))

    def test_empty_clause(self):
        formula = parse_dimacs("p cnf 1 2\n1 0\n0\n")
        self.assertEqual(formula.clauses, ((1,), ()))

    def test_missing_problem_line(self):
        formula = parse_dimacs("1 2 0\n")
        self.assertIsNone(formula.declared_variables)
        self.assertEqual(formula.clauses, ((1, 2),))

    def test_bad_problem_lines(self):
        for line in ("p cnf 3", "p dnf 3 2", "p cnf x 2", "p cnf 3 2 1", "p cnf -1 2"):
            with self.assertRaises(DimacsError):
                parse_dimacs(line + "\n1 0\n")

    def test_duplicate_problem_line(self):
        with self.assertRaises(DimacsError) as cm:
            parse_dimacs("p cnf 1 1\np cnf 1 1\n1 0\n")
        self.assertEqual(cm.exception.line_number, 2)

    def test_bad_literal(self):
        with self.assertRaises(DimacsError) as cm:
            parse_dimacs("p cnf 2 1\n1 x 0\n")
        self.assertEqual(cm.exception.line_number, 2)
        self.assertIsInstance(cm.exception, ValueError)

    def test_read_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "a.cnf")
            with open(path, 'w') as f:
                f.write("c test\np cnf 2 2\n1 2 0\n-1 -2 0\n")
            formula = read_cnf_file(path)
        self.assertEqual(formula.clauses, ((1, 2), (-1, -2)))

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(DimacsError):
                read_cnf_file(os.path.join(tmp_dir, "missing.cnf"))


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = os.path.join(self.tmp_dir, name)
        with open(path, 'w') as f:
            f.write(text)
        return path

    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = solve_cnf.main(solve_cnf.init(list(argv)))
        return status, out.getvalue(), err.getvalue()

    def test_sat_file(self):
        path = self.write("sat.cnf", "p cnf 2 2\n1 2 0\n-1 -2 0\n")
        status, out, _ = self.run_main(path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "1: True\n2: False\n")

    def test_unsat_file(self):
        path = self.write("unsat.cnf", "p cnf 1 2\n1 0\n-1 0\n")
        status, out, _ = self.run_main(path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "UNSATISFIED\n")

    def test_stats(self):
        path = self.write("sat.cnf", "p cnf 2 2\n1 2 0\n-1 -2 0\n")
        status, out, _ = self.run_main(path, "--stats")
        self.assertEqual(status, 0)
        self.assertIn(" - expansions: ", out)

    def test_parse_error(self):
        path = self.write("bad.cnf", "p cnf 2\n1 2 0\n")
        status, out, err = self.run_main(path)
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn(" ! Error:", err)

    def test_directory(self):
        self.write("a.cnf", "p cnf 2 2\n1 2 0\n-1 -2 0\n")
        self.write("b.cnf", "p cnf 1 2\n1 0\n-1 0\n")
        self.write("notes.txt", "not a formula")
        status, out, _ = self.run_main(self.tmp_dir)
        self.assertEqual(status, 0)
        self.assertIn("a.cnf <==\n1: True\n2: False", out)
        self.assertIn("b.cnf <==\nUNSATISFIED", out)
        self.assertIn(" * 2 files solved: 1 SAT, 1 UNSAT, 0 errors", out)

    def test_directory_with_bad_file(self):
        self.write("a.cnf", "1 0\n")
        self.write("b.cnf", "1 y 0\n")
        status, out, err = self.run_main(self.tmp_dir)
        self.assertEqual(status, 1)
        self.assertIn("b.cnf", err)
        self.assertIn("1 files solved: 1 SAT, 0 UNSAT, 1 errors", out)

    def test_empty_directory(self):
        status, _, err = self.run_main(self.tmp_dir)
        self.assertEqual(status, 1)
        self.assertIn("no CNF files", err)


if __name__ == '__main__':
    unittest.main()
