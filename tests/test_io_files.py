import io
import os
import tempfile
import unittest

from config import CFG
from io_files import board_output_path, print_board, write_board
from render import render_result
from solver.orchestrator import solve_board


class WriteOutputsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self._orig_board = CFG.BOARD_OUT

    def tearDown(self) -> None:
        CFG.BOARD_OUT = self._orig_board

    def test_write_board_uses_configured_relative_path(self) -> None:
        CFG.BOARD_OUT = "outputs/custom_board.txt"
        text = ". Q . . \r\n. . . Q \r\nQ . . . \r\n. . Q . \r\n"

        path = write_board(text, self.tmpdir.name)

        expected = os.path.join(self.tmpdir.name, "outputs", "custom_board.txt")
        self.assertEqual(path, expected)
        with open(path, "rb") as fh:
            self.assertEqual(fh.read(), text.encode("utf-8"))

    def test_explicit_name_overrides_config(self) -> None:
        target = os.path.join(self.tmpdir.name, "boards", "eight.txt")
        CFG.BOARD_OUT = "ignored.txt"

        path = write_board("Q \n", self.tmpdir.name, target)

        self.assertEqual(path, target)
        self.assertEqual(board_output_path(self.tmpdir.name), os.path.join(self.tmpdir.name, "ignored.txt"))


class PrintBoardTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._orig_newline = CFG.NEWLINE
        CFG.NEWLINE = "\n"

    def tearDown(self) -> None:
        CFG.NEWLINE = self._orig_newline

    def test_grid_is_printed_without_extra_blank_line(self) -> None:
        out = io.StringIO()
        print_board("Q \n", out)
        self.assertEqual(out.getvalue(), "Q \n")

    def test_message_gets_a_terminator(self) -> None:
        out = io.StringIO()
        print_board("no solution for 2-queens", out)
        self.assertEqual(out.getvalue(), "no solution for 2-queens\n")

    def test_message_uses_configured_terminator(self) -> None:
        CFG.NEWLINE = "\r\n"
        raw = io.BytesIO()
        out = io.TextIOWrapper(raw, encoding="utf-8", newline="\r\n")
        print_board("no solution for 3-queens", out)
        self.assertEqual(raw.getvalue(), b"no solution for 3-queens\r\n")

    def test_translating_stream_does_not_double_carriage_returns(self) -> None:
        CFG.NEWLINE = "\r\n"
        board = solve_board(4, verify=False)
        text = render_result(board)
        raw = io.BytesIO()
        out = io.TextIOWrapper(raw, encoding="utf-8", newline="\r\n")

        print_board(text, out)

        self.assertEqual(raw.getvalue(), text.encode("utf-8"))
        self.assertEqual(raw.getvalue().count(b"\r\n"), 4)
        self.assertNotIn(b"\r\r", raw.getvalue())


if __name__ == "__main__":
    unittest.main()
