import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from textgen.cli import main


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.first = os.path.join(self.tmp.name, "first.txt")
        self.second = os.path.join(self.tmp.name, "second.txt")
        with open(self.first, "w", encoding="utf-8") as f:
            f.write("Hello there hi Leo")
        with open(self.second, "w", encoding="utf-8") as f:
            f.write("one two")

    def tearDown(self):
        self.tmp.cleanup()

    def run_cli(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate(self):
        code, out = self.run_cli(["--data", self.first, "generate", "--words", "5"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Hello there hi Leo Hello\n")

    def test_dump(self):
        code, out = self.run_cli(["--data", self.first, "dump"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Hello: there->\nthere: hi->\nhi: Leo->\nLeo: Hello->\n")

    def test_several_files(self):
        _, out = self.run_cli(["--data", self.first, "--data", self.second, "dump"])
        self.assertIn("Leo: Hello->", out)
        self.assertIn("two: one->", out)

    def test_retrain_keeps_last_file(self):
        _, out = self.run_cli(
            ["--data", self.first, "--data", self.second, "--retrain", "generate", "--words", "3"]
        )
        self.assertEqual(out, "one two one\n")

    def test_missing_file(self):
        code, out = self.run_cli(
            ["--data", os.path.join(self.tmp.name, "missing.txt"), "generate"]
        )
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_undecodable_file(self):
        path = os.path.join(self.tmp.name, "binary.txt")
        with open(path, "wb") as f:
            f.write(b"Hello \xff\xfe there")
        code, out = self.run_cli(["--data", path, "generate"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_seed_out_of_range(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--data", self.first, "--seed", "99999999999999999999", "generate"])
        self.assertEqual(ctx.exception.code, 2)

    def test_seed_at_upper_bound(self):
        code, out = self.run_cli(
            ["--data", self.first, "--seed", str(2**64 - 1), "generate", "--words", "2"]
        )
        self.assertEqual(code, 0)
        self.assertEqual(out, "Hello there\n")


if __name__ == '__main__':
    unittest.main()
