import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import matplotlib
matplotlib.use("Agg")

from boardVerify.games.cli import main


class CheckersCliTest(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
    # end def setUp

    def tearDown(self):
        self.tmpdir.cleanup()
    # end def tearDown

    def write(self, name, text):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w") as f:
            f.write(text)
        return path
    # end def write

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(list(argv))
        # end with
        return status, out.getvalue().splitlines()
    # end def run_cli

    def test_verify_single_file(self):
        path = self.write("game.txt", "1,2,2,3\n4,5,3,4\n2,3,1,4\n")
        status, lines = self.run_cli("checkers", "verify", path)
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["line 3 illegal move: 2,3,1,4"])
    # end def test_verify_single_file

    def test_verify_several_files(self):
        first = self.write("first.txt", "1,2,2,3\n0,5,1,4\n")
        second = self.write("second.txt", "0,0,1,1\n")
        status, lines = self.run_cli("checkers", "verify", first, second)
        self.assertEqual(status, 0)
        self.assertEqual(lines, [f"{first}: incomplete game", f"{second}: line 1 illegal move: 0,0,1,1"])
    # end def test_verify_several_files

    def test_verify_malformed_and_missing_files(self):
        bad = self.write("bad.txt", "1,2,2\n")
        good = self.write("good.txt", "1,2,2,3\n")
        missing = os.path.join(self.tmpdir.name, "missing.txt")
        status, lines = self.run_cli("checkers", "verify", bad, missing, good)
        self.assertEqual(status, 1)
        self.assertEqual(lines, [f"{good}: incomplete game"])
    # end def test_verify_malformed_and_missing_files

    def test_verify_file_not_utf8(self):
        bad = os.path.join(self.tmpdir.name, "bad.bin")
        with open(bad, "wb") as f:
            f.write(b"1,2,2,3\n\xff\xfe\n")
        # end with
        good = self.write("good.txt", "1,2,2,3\n")
        status, lines = self.run_cli("checkers", "verify", bad, good)
        self.assertEqual(status, 1)
        self.assertEqual(lines, [f"{good}: incomplete game"])
    # end def test_verify_file_not_utf8

    def test_verify_empty_delimiter(self):
        path = self.write("game.txt", "1,2,2,3\n")
        status, lines = self.run_cli("checkers", "verify", path, "--delimiter", "")
        self.assertEqual(status, 1)
        self.assertEqual(lines, [])

        config = self.write("config.yaml", "delimiter: \"\"\n")
        status, lines = self.run_cli("checkers", "verify", path, "--config", config)
        self.assertEqual(status, 1)
        self.assertEqual(lines, [])
    # end def test_verify_empty_delimiter

    def test_verify_with_delimiter_and_config(self):
        path = self.write("game.txt", "1;2;2;3\n")
        config = self.write("config.yaml", "delimiter: ';'\n")
        status, lines = self.run_cli("checkers", "verify", path, "--config", config)
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["incomplete game"])

        status, lines = self.run_cli("checkers", "verify", path, "--delimiter", ";", "--debug", "--show-board")
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["incomplete game"])
    # end def test_verify_with_delimiter_and_config

    def test_verify_plot(self):
        path = self.write("game.txt", "1,2,2,3\n0,5,1,4\n")
        output = os.path.join(self.tmpdir.name, "board.png")
        status, lines = self.run_cli("checkers", "verify", path, "--plot", output)
        self.assertEqual(status, 0)
        self.assertTrue(os.path.exists(output))
    # end def test_verify_plot

    def test_show(self):
        path = self.write("game.txt", "1,2,2,3\n0,5,1,4\n")
        status, lines = self.run_cli("checkers", "show", path)
        self.assertEqual(status, 0)
        self.assertEqual(lines[-1], "incomplete game")
    # end def test_show

    def test_show_missing_file(self):
        status, lines = self.run_cli("checkers", "show", os.path.join(self.tmpdir.name, "missing.txt"))
        self.assertEqual(status, 1)
        self.assertEqual(lines, [])
    # end def test_show_missing_file

    def test_no_command_prints_help(self):
        status, lines = self.run_cli()
        self.assertEqual(status, 2)
    # end def test_no_command_prints_help

# end class CheckersCliTest


if __name__ == '__main__':
    unittest.main()
# end if
