import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from notes2chord.cli import format_resolution, interactive, main, run_query
from notes2chord.errors import ChordError
from notes2chord.resolver import identify


class TestFormat(unittest.TestCase):
    def test_chord_table(self):
        out = format_resolution(identify("E G C"))
        self.assertEqual(out.splitlines(), [
            "C major triad (1st inversion)",
            "  Root     C",
            "  Third    E",
            "  Fifth    G",
        ])

    def test_interval_has_no_table(self):
        self.assertEqual(format_resolution(identify("G C")), "Perfect fourth")

    def test_vector(self):
        out = run_query("C E G", vector=True)
        self.assertIn("Chroma   [1 0 0 0 1 0 0 1 0 0 0 0]", out)

    def test_run_query_raises(self):
        with self.assertRaises(ChordError):
            run_query("C D F")


class TestMain(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_main_prints_result(self, mock_stdout):
        main(["C", "E", "G", "B"])
        self.assertTrue(mock_stdout.getvalue().startswith("C major 7th\n"))
        self.assertIn("Seventh  B", mock_stdout.getvalue())

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_main_accepts_quoted_notes(self, mock_stdout):
        main(["Bb D F Ab"])
        self.assertIn("Bb dominant 7th", mock_stdout.getvalue())

    def test_main_error_exits(self):
        with self.assertRaises(SystemExit) as ctx:
            main(["C", "D", "F"])
        self.assertEqual(ctx.exception.code, "Error: Invalid chord")

        with self.assertRaises(SystemExit) as ctx:
            main(["H"])
        self.assertEqual(ctx.exception.code, 'Error: Invalid note letter in "H"')

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_main_requires_notes(self, mock_stderr):
        with self.assertRaises(SystemExit) as ctx:
            main([])
        self.assertEqual(ctx.exception.code, 2)

    @patch("sys.stderr", new_callable=io.StringIO)
    @patch("sys.stdout", new_callable=io.StringIO)
    def test_verbose_trace(self, mock_stdout, mock_stderr):
        main(["-v", "E", "G", "C"])
        trace = mock_stderr.getvalue()
        self.assertIn("[notes2chord] rotation search:", trace)
        self.assertEqual(trace.count("→ accept"), 1)
        self.assertEqual(trace.count("→ reject"), 2)

    @patch("sys.stderr", new_callable=io.StringIO)
    @patch("sys.stdout", new_callable=io.StringIO)
    @patch("notes2chord.cli.to_music21_chord")
    def test_musicxml_mocked(self, mock_chord, mock_stdout, mock_stderr):
        mock_chord.return_value = MagicMock()
        path = os.path.join(self.test_dir, "chord.musicxml")

        main(["C", "E", "G", "--musicxml", path])

        mock_chord.return_value.write.assert_called_once_with("musicxml", fp=path)
        self.assertIn(f"Saved {path}", mock_stderr.getvalue())

    @patch("sys.stderr", new_callable=io.StringIO)
    @patch("sys.stdout", new_callable=io.StringIO)
    def test_musicxml_integration(self, mock_stdout, mock_stderr):
        path = os.path.join(self.test_dir, "chord.musicxml")
        main(["G", "B", "D", "F", "--musicxml", path])
        self.assertTrue(os.path.exists(path))
        with open(path) as f:
            self.assertIn("<step>G</step>", f.read())

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_musicxml_too_many_accidentals_exits(self, mock_stdout):
        path = os.path.join(self.test_dir, "chord.musicxml")
        with self.assertRaises(SystemExit) as ctx:
            main(["C#####", "--musicxml", path])
        self.assertEqual(ctx.exception.code,
                         'Error: Cannot export "C#####": more than 4 sharps or flats')
        self.assertFalse(os.path.exists(path))
        self.assertEqual(mock_stdout.getvalue(), "")

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_too_many_accidentals_still_resolve(self, mock_stdout):
        main(["C#####"])
        self.assertEqual(mock_stdout.getvalue(), "C#####\n")


class TestInteractive(unittest.TestCase):
    @patch("sys.stderr", new_callable=io.StringIO)
    @patch("sys.stdout", new_callable=io.StringIO)
    def test_continues_after_errors(self, mock_stdout, mock_stderr):
        stream = io.StringIO("C\n\nC D F\nC G\nH\n")
        interactive(stream)
        self.assertEqual(mock_stdout.getvalue(), "C\nPerfect fifth\n")
        self.assertEqual(mock_stderr.getvalue(),
                         'Error: Invalid chord\nError: Invalid note letter in "H"\n')

    @patch("sys.stdout", new_callable=io.StringIO)
    @patch("sys.stdin", new=io.StringIO("A C E\n"))
    def test_main_interactive(self, mock_stdout):
        main(["--interactive"])
        self.assertIn("A minor triad", mock_stdout.getvalue())

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_interactive_rejects_musicxml(self, mock_stderr):
        with self.assertRaises(SystemExit) as ctx:
            main(["--interactive", "--musicxml", "out.musicxml"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("--musicxml cannot be combined with --interactive", mock_stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
