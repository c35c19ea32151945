import os
import tempfile
import unittest

import boardVerify
from boardVerify.games.checkers import (
    CheckersBoard,
    IncompleteGame,
    Illegal,
    MoveParseError,
    Position,
    board_to_string,
    load_moves,
    parse_move,
    parse_moves,
    verify_file
)


class ParseMoveTest(unittest.TestCase):

    def test_parse_move(self):
        move = parse_move("1,2,0,3", 4)
        self.assertEqual(move.initial, Position(1, 2))
        self.assertEqual(move.destination, Position(0, 3))
        self.assertEqual(move.line, 4)
        self.assertEqual(move.src, "1,2,0,3")
    # end def test_parse_move

    def test_whitespace_and_delimiter(self):
        move = parse_move(" 1, 2 ,0 , 3", 1)
        self.assertEqual(move.destination, Position(0, 3))
        self.assertEqual(move.src, " 1, 2 ,0 , 3")

        move = parse_move("1 2 0 3", 1, delimiter=" ")
        self.assertEqual(move.initial, Position(1, 2))
    # end def test_whitespace_and_delimiter

    def test_negative_coordinates_are_parsed(self):
        move = parse_move("0,1,-1,2", 1)
        self.assertEqual(move.destination, Position(-1, 2))
    # end def test_negative_coordinates_are_parsed

    def test_wrong_token_count(self):
        with self.assertRaises(MoveParseError) as ctx:
            parse_move("1,2,0", 3)
        # end with
        self.assertEqual(ctx.exception.line, 3)
        self.assertIn("expected 4 tokens, got 3", str(ctx.exception))

        with self.assertRaises(MoveParseError):
            parse_move("1,2,0,3,4", 1)
        # end with
    # end def test_wrong_token_count

    def test_non_numeric_token(self):
        with self.assertRaises(MoveParseError) as ctx:
            parse_move("1,b,0,3", 2)
        # end with
        self.assertEqual(ctx.exception.line, 2)
        self.assertIn("'b'", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)
    # end def test_non_numeric_token

    def test_empty_delimiter(self):
        with self.assertRaises(MoveParseError) as ctx:
            parse_move("1,2,0,3", 5, delimiter="")
        # end with
        self.assertEqual(ctx.exception.line, 5)
        self.assertEqual(ctx.exception.reason, "empty delimiter")
    # end def test_empty_delimiter

    def test_parse_moves_skips_blank_lines(self):
        moves = parse_moves(["1,2,0,3\n", "\n", "  \n", "0,5,1,4\n"])
        self.assertEqual(len(moves), 2)
        self.assertEqual([move.line for move in moves], [1, 4])
        self.assertEqual(moves[1].src, "0,5,1,4")
    # end def test_parse_moves_skips_blank_lines

# end class ParseMoveTest


class MoveFileTest(unittest.TestCase):

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

    def test_load_moves(self):
        path = self.write("game.txt", "1,2,2,3\n0,5,1,4\n")
        moves = load_moves(path)
        self.assertEqual(len(moves), 2)
        self.assertEqual(moves[0].initial, Position(1, 2))
    # end def test_load_moves

    def test_verify_file_illegal(self):
        path = self.write("game.txt", "1,2,2,3\n4,5,3,4\n2,3,1,4\n")
        verdict = verify_file(path)
        self.assertIsInstance(verdict, Illegal)
        self.assertEqual(str(verdict), "line 3 illegal move: 2,3,1,4")
    # end def test_verify_file_illegal

    def test_verify_file_incomplete(self):
        path = self.write("game.txt", "1,2,2,3\r\n0,5,1,4\r\n")
        self.assertEqual(verify_file(path), IncompleteGame())
    # end def test_verify_file_incomplete

    def test_load_moves_not_utf8(self):
        path = os.path.join(self.tmpdir.name, "game.bin")
        with open(path, "wb") as f:
            f.write(b"1,2,2,3\n\xff\xfe\n")
        # end with
        with self.assertRaises(UnicodeDecodeError):
            load_moves(path)
        # end with
    # end def test_load_moves_not_utf8

    def test_verify_file_malformed(self):
        path = self.write("game.txt", "1,2,2,3\n0,5,x,4\n")
        with self.assertRaises(MoveParseError) as ctx:
            verify_file(path)
        # end with
        self.assertEqual(ctx.exception.line, 2)
    # end def test_verify_file_malformed

    def test_package_helpers(self):
        self.assertEqual(boardVerify.checkers("1,2,2,3\n0,5,1,4"), IncompleteGame())
        self.assertEqual(boardVerify.checkers(["1,2,2,3", "0,5,1,4"]), IncompleteGame())
        path = self.write("game.txt", "0,0,1,1\n")
        self.assertEqual(str(boardVerify.checkers_file(path)), "line 1 illegal move: 0,0,1,1")
    # end def test_package_helpers

# end class MoveFileTest


class BoardToStringTest(unittest.TestCase):

    def test_board_to_string(self):
        lines = board_to_string(CheckersBoard()).splitlines()
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[0], "  0 1 2 3 4 5 6 7")
        self.assertEqual(lines[1], "0 _ o _ o _ o _ o 0")
        self.assertEqual(lines[8], "7 x _ x _ x _ x _ 7")
        self.assertEqual(lines[9], lines[0])
    # end def test_board_to_string

# end class BoardToStringTest


if __name__ == '__main__':
    unittest.main()
# end if
