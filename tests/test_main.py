import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

from lcinterp import main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch.dict(os.environ, {"ANSI_COLORS_DISABLED": "1", "NO_COLOR": "1"})
        patcher.start()
        self.addCleanup(patcher.stop)

        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.path = os.path.join(tmp.name, "prog.lc")
        with open(self.path, "w", encoding="utf-8") as file:
            file.write("((\\x.(\\y.x)) a b)\n(\\x.x x) (\\x.x x)\n")

    def run_main(self, *args):
        out = io.StringIO()
        with mock.patch.object(sys, "argv", ["lcinterp", *args]), redirect_stdout(out):
            main.main()
        return out.getvalue()

    def test_file(self):
        expected = ("((λx y.x) a b) = a\n"
                    f"{self.path}:2: warning: '(\\x.x x) (\\x.x x)' has no beta-normal form within 3 steps\n")
        self.assertEqual(expected, self.run_main(self.path, "--max-steps", "3"))

    def test_trace(self):
        output = self.run_main(self.path, "--max-steps", "3", "--trace")
        self.assertTrue(output.startswith("  β  (λy.a)\n  β  a\n((λx y.x) a b) = a\n"), output)

    def test_missing_file(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main(os.path.join(os.path.dirname(self.path), "missing.lc"))
        self.assertEqual(1, context.exception.code)


if __name__ == '__main__':
    unittest.main()
