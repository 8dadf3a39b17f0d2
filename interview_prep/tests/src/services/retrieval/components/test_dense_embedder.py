"""Unit tests for the Hugging Face embedding client."""

import unittest
from unittest.mock import Mock, call, patch

import requests

from interview_prep.src.services.retrieval.components import (
    EmbeddingError,
    HuggingFaceEmbedder,
)

SLEEP_PATH = "interview_prep.src.services.retrieval.components.dense_embedder.time.sleep"


def make_response(payload=None, error: Exception = None) -> Mock:
    response = Mock()
    response.json.return_value = payload
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


class TestHuggingFaceEmbedder(unittest.TestCase):
    """Test cases for HuggingFaceEmbedder.encode."""

    def setUp(self) -> None:
        """Set up an embedder with a mocked HTTP session."""
        self.embedder = HuggingFaceEmbedder(
            api_url="https://example.test/models/bge",
            api_key="hf_test",
            max_retries=3,
            timeout=5,
            loading_wait=20.0,
            loading_error_wait=30.0,
            retry_delay=5.0,
        )
        self.embedder.session = Mock()

    def test_returns_flat_vector(self) -> None:
        """Test that a plain vector payload is returned as floats."""
        self.embedder.session.post.return_value = make_response([0.1, 0.2, 0.3])

        with patch(SLEEP_PATH) as mock_sleep:
            result = self.embedder.encode("python developer")

        self.assertEqual(result, [0.1, 0.2, 0.3])
        mock_sleep.assert_not_called()

    def test_sends_auth_header_and_payload(self) -> None:
        """Test the request shape sent to the API."""
        self.embedder.session.post.return_value = make_response([1.0])

        self.embedder.encode("hello")

        args, kwargs = self.embedder.session.post.call_args
        self.assertEqual(args[0], "https://example.test/models/bge")
        self.assertEqual(kwargs["json"]["inputs"], "hello")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer hf_test")
        self.assertEqual(kwargs["timeout"], 5)

    def test_unwraps_batched_vector(self) -> None:
        """Test that a single vector wrapped in a batch is unwrapped."""
        self.embedder.session.post.return_value = make_response([[0.5, 0.5]])
        self.assertEqual(self.embedder.encode("text"), [0.5, 0.5])

    def test_mean_pools_token_vectors(self) -> None:
        """Test that per-token vectors are averaged into one vector."""
        self.embedder.session.post.return_value = make_response(
            [[[1.0, 3.0], [3.0, 5.0]]]
        )
        self.assertEqual(self.embedder.encode("text"), [2.0, 4.0])

    def test_waits_while_model_loading(self) -> None:
        """Test that a loading body waits loading_wait seconds and retries."""
        self.embedder.session.post.side_effect = [
            make_response({"error": "Model BAAI/bge-small-en-v1.5 is currently loading"}),
            make_response([0.1, 0.2]),
        ]

        with patch(SLEEP_PATH) as mock_sleep:
            result = self.embedder.encode("text")

        self.assertEqual(result, [0.1, 0.2])
        mock_sleep.assert_called_once_with(20.0)
        self.assertEqual(self.embedder.session.post.call_count, 2)

    def test_waits_longer_on_loading_error(self) -> None:
        """Test that an HTTP error reporting a loading model waits loading_error_wait."""
        error_response = Mock(text='{"error": "Model is currently loading"}')
        self.embedder.session.post.side_effect = [
            make_response(error=requests.exceptions.HTTPError("503", response=error_response)),
            make_response([0.3]),
        ]

        with patch(SLEEP_PATH) as mock_sleep:
            result = self.embedder.encode("text")

        self.assertEqual(result, [0.3])
        mock_sleep.assert_called_once_with(30.0)

    def test_retries_then_raises(self) -> None:
        """Test that persistent failures raise after max_retries attempts."""
        self.embedder.session.post.side_effect = requests.exceptions.ConnectionError(
            "connection refused"
        )

        with patch(SLEEP_PATH) as mock_sleep:
            with self.assertRaises(EmbeddingError):
                self.embedder.encode("text")

        self.assertEqual(self.embedder.session.post.call_count, 3)
        self.assertEqual(mock_sleep.call_args_list, [call(5.0), call(5.0)])

    def test_recovers_after_transient_error(self) -> None:
        """Test that a later successful attempt is returned."""
        self.embedder.session.post.side_effect = [
            requests.exceptions.Timeout("timed out"),
            make_response([0.9, 0.1]),
        ]

        with patch(SLEEP_PATH) as mock_sleep:
            result = self.embedder.encode("text")

        self.assertEqual(result, [0.9, 0.1])
        mock_sleep.assert_called_once_with(5.0)

    def test_error_payload_is_retried(self) -> None:
        """Test that a non-loading error body counts as a failed attempt."""
        self.embedder.session.post.return_value = make_response({"error": "Bad input"})

        with patch(SLEEP_PATH):
            with self.assertRaises(EmbeddingError):
                self.embedder.encode("text")

        self.assertEqual(self.embedder.session.post.call_count, 3)

    def test_loading_on_every_attempt_raises(self) -> None:
        """Test that a model that never finishes loading raises after the loop."""
        self.embedder.session.post.return_value = make_response(
            {"error": "Model is currently loading"}
        )

        with patch(SLEEP_PATH) as mock_sleep:
            with self.assertRaises(EmbeddingError):
                self.embedder.encode("text")

        self.assertEqual(mock_sleep.call_count, 3)

    def test_invalid_retry_count(self) -> None:
        """Test that at least one attempt is required."""
        with self.assertRaises(ValueError):
            HuggingFaceEmbedder(max_retries=0)


if __name__ == "__main__":
    unittest.main()
