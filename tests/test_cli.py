import io
import logging
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from wordtrie.cli import build_parser, main, print_matches
from wordtrie.constants import DEFAULT_SOURCE_URL
from wordtrie.trie import Trie


class TestCli(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "words.txt")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("cat\ncar\ncard\ndog\n")

    def tearDown(self):
        if os.path.exists(self.test_dir):
            shutil.rmtree(self.test_dir)

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.source, DEFAULT_SOURCE_URL)
        self.assertEqual(args.prefixes, [])
        self.assertIsNone(args.limit)

    def test_prefix_arguments(self):
        code, out = self._run(["--source", self.path, "ca", "x"])
        self.assertEqual(code, 0)
        self.assertIn("Loaded 4 words", out)
        self.assertIn("CA: 3 word(s)", out)
        self.assertIn("    CARD", out)
        self.assertIn("X: (no match)", out)

    def test_limit(self):
        code, out = self._run(["--source", self.path, "--limit", "1", "CA"])
        self.assertEqual(code, 0)
        self.assertIn("CA: 1 word(s)", out)
        self.assertNotIn("CARD", out)

    def test_invalid_prefix_argument(self):
        code, out = self._run(["--source", self.path, "C4"])
        self.assertEqual(code, 0)
        self.assertIn("Invalid prefix", out)

    def test_unreadable_source(self):
        code, out = self._run(["--source", os.path.join(self.test_dir, "missing.txt"), "CA"])
        self.assertEqual(code, 1)
        self.assertIn("Could not load word list", out)
        self.assertIn("Lines processed before the failure: 0", out)

    def test_verbose_enables_debug(self):
        root = logging.getLogger()
        self.addCleanup(root.setLevel, root.level)
        with self.assertLogs("wordtrie.loader", level="DEBUG") as logs:
            code, _ = self._run(["--source", self.path, "--verbose", "CA"])
        self.assertEqual(code, 0)
        self.assertEqual(root.level, logging.DEBUG)
        self.assertIn("1: cat", "\n".join(logs.output))

    def test_keep_case(self):
        """Words and prefixes are used exactly as given."""
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("cat\nDOG\n")
        code, out = self._run(["--source", self.path, "--keep-case", "DO", "do"])
        self.assertEqual(code, 0)
        self.assertIn("Loaded 1 words (1 rejected)", out)
        self.assertIn("DO: 1 word(s)", out)
        self.assertIn("Invalid prefix", out)

    @patch.dict(os.environ, {"no_proxy": "*", "NO_PROXY": "*"})
    def test_malformed_url_exits_with_error(self):
        code, out = self._run(["--source", "http://example.com:abc/words", "CA"])
        self.assertEqual(code, 1)
        self.assertIn("Could not load word list", out)

    def test_negative_limit_is_usage_error(self):
        with redirect_stdout(io.StringIO()), patch("sys.stderr", new=io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--limit", "-1", "CA"])
        self.assertEqual(ctx.exception.code, 2)

    @patch("builtins.input", side_effect=["do", "", "d!", "quit"])
    def test_interactive_prompt(self, _mock_input):
        code, out = self._run(["--source", self.path])
        self.assertEqual(code, 0)
        self.assertIn("DO: 1 word(s)", out)
        self.assertIn("    DOG", out)
        self.assertIn("Invalid prefix", out)

    @patch("builtins.input", side_effect=EOFError)
    def test_prompt_ends_on_eof(self, _mock_input):
        code, _ = self._run(["--source", self.path])
        self.assertEqual(code, 0)


class TestPrintMatches(unittest.TestCase):
    def test_no_match(self):
        out = io.StringIO()
        with redirect_stdout(out):
            print_matches(Trie(["CAT"]), "DOG")
        self.assertEqual(out.getvalue().strip(), "DOG: (no match)")


if __name__ == "__main__":
    unittest.main()
