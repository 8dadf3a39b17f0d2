"""Unit tests for the text chunker."""

import unittest

from interview_prep.src.services.retrieval.components import chunk_text


class TestChunkText(unittest.TestCase):
    """Test cases for chunk_text."""

    def test_short_text_is_single_chunk(self) -> None:
        """Test that text under the limit yields one chunk."""
        self.assertEqual(chunk_text("one two three", max_words=5), ["one two three"])

    def test_splits_into_fixed_windows(self) -> None:
        """Test that chunks hold at most max_words words, with the remainder last."""
        words = [f"w{i}" for i in range(7)]
        chunks = chunk_text(" ".join(words), max_words=3)

        self.assertEqual(chunks, ["w0 w1 w2", "w3 w4 w5", "w6"])

    def test_preserves_word_count(self) -> None:
        """Test that chunking neither drops nor duplicates words."""
        text = " ".join(f"word{i}" for i in range(1234))
        chunks = chunk_text(text, max_words=500)

        self.assertEqual(len(chunks), 3)
        self.assertEqual(sum(len(chunk.split(" ")) for chunk in chunks), 1234)
        self.assertEqual(" ".join(chunks), text)

    def test_collapses_whitespace_runs(self) -> None:
        """Test that newlines, tabs and repeated spaces become single separators."""
        chunks = chunk_text("  alpha\n\nbeta\t gamma   ", max_words=10)
        self.assertEqual(chunks, ["alpha beta gamma"])

    def test_empty_text(self) -> None:
        """Test that text without words yields no chunks."""
        self.assertEqual(chunk_text(""), [])
        self.assertEqual(chunk_text(" \n\t "), [])

    def test_exact_multiple(self) -> None:
        """Test that a word count divisible by max_words leaves no empty chunk."""
        chunks = chunk_text("a b c d", max_words=2)
        self.assertEqual(chunks, ["a b", "c d"])

    def test_invalid_max_words(self) -> None:
        """Test that a non-positive window size is rejected."""
        with self.assertRaises(ValueError):
            chunk_text("some text", max_words=0)


if __name__ == "__main__":
    unittest.main()
