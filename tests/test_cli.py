import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from dimacs2manchester import __version__
from dimacs2manchester.cli import main


class TestCLI(unittest.TestCase):

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write(self, name, txt):
        fname = os.path.join(self.tmpdir.name, name)
        with open(fname, "w") as f:
            f.write(txt)
        return fname

    def _run(self, args, stdin=""):
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO(stdin)), redirect_stdout(out):
            main(args)
        return out.getvalue()

    def test_file(self):
        fname = self._write("example.cnf", "c example\np cnf 2 2\n1 -2 0\n-1 2 0\n")
        self.assertEqual(self._run([fname]), "(_1 OR NOT _2 OR _0) AND \n(NOT _1 OR _2 OR _0)\n")

    def test_stdin(self):
        out = self._run([], stdin="p cnf 2 2\n-1 0\n2 0\n")
        self.assertEqual(out, "(NOT _1 OR _0) AND \n(_2 OR _0)\n")

    def test_empty_input(self):
        self.assertEqual(self._run([], stdin=""), "\n")

    def test_headers_only(self):
        self.assertEqual(self._run([], stdin="c nothing here\np cnf 0 0\n"), "\n")

    def test_trailing_whitespace(self):
        out = self._run([], stdin="1 0\n2 0\n")
        self.assertTrue(out.endswith(")\n"))
        self.assertFalse(out.endswith("\n\n"))

    def test_several_files(self):
        first = self._write("a.cnf", "p cnf 3 2\n1 2 0\n")
        second = self._write("b.cnf", "-3 0\n")
        self.assertEqual(self._run([first, "-", second], stdin="c from stdin\n-1 0\n"),
                         "(_1 OR _2 OR _0) AND \n(NOT _1 OR _0) AND \n(NOT _3 OR _0)\n")

    def test_missing_file(self):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                main([os.path.join(self.tmpdir.name, "missing.cnf")])
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertTrue(err.getvalue().startswith("Error reading input:"))

    def test_corrupt_xz(self):
        fname = self._write("x.cnf.xz", "1 0\n")
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                main([fname])
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertTrue(err.getvalue().startswith("Error reading input:"))

    def test_version(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                main(["--version"])
        self.assertEqual(cm.exception.code, 0)
        self.assertEqual(out.getvalue().strip(), f"dimacs2manchester {__version__}")


if __name__ == '__main__':
    unittest.main()
