"""Tests for bounded outbound calls."""

import io
import itertools
import unittest
from unittest.mock import MagicMock, patch

import requests
from urllib3.exceptions import ReadTimeoutError

from referent.utils.deadline import (
    BODY_CHUNK_SIZE,
    DeadlineOutcome,
    DeadlineResult,
    call_with_deadline,
)


def _streamed_response(body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response.raw = io.BytesIO(body)
    return response


class TestCallWithDeadline(unittest.TestCase):
    """Tests for call_with_deadline."""

    def test_success_passes_deadline(self) -> None:
        """Should call the function with the deadline and wrap the value."""
        func = MagicMock(return_value="value")

        result = call_with_deadline(func, 12.5)

        func.assert_called_once_with(12.5)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, "value")
        self.assertIsNone(result.error)

    def test_timeout(self) -> None:
        """Should return TIMED_OUT for connect and read timeouts."""
        for error in (requests.exceptions.ConnectTimeout(), requests.exceptions.ReadTimeout()):
            with self.subTest(error=type(error).__name__):
                result = call_with_deadline(MagicMock(side_effect=error))

                self.assertEqual(result.outcome, DeadlineOutcome.TIMED_OUT)
                self.assertFalse(result.ok)
                self.assertIsNone(result.value)

    def test_transport_error(self) -> None:
        """Should return TRANSPORT_ERROR carrying the exception."""
        error = requests.exceptions.ConnectionError("refused")

        result = call_with_deadline(MagicMock(side_effect=error))

        self.assertEqual(result.outcome, DeadlineOutcome.TRANSPORT_ERROR)
        self.assertIs(result.error, error)

    def test_response_body_is_read_within_deadline(self) -> None:
        """Should read a streamed body so the response is usable afterwards."""
        response = _streamed_response(b"<p>hello</p>")

        result = call_with_deadline(MagicMock(return_value=response), 5)

        self.assertTrue(result.ok)
        self.assertEqual(result.value.content, b"<p>hello</p>")

    @patch("referent.utils.deadline.time.monotonic")
    def test_trickling_body_times_out(self, mock_clock: MagicMock) -> None:
        """Should give up on a body still arriving after the deadline."""
        response = _streamed_response(b"x" * (BODY_CHUNK_SIZE * 4))
        mock_clock.side_effect = itertools.count(0.0, 0.4)

        result = call_with_deadline(MagicMock(return_value=response), 1)

        self.assertEqual(result.outcome, DeadlineOutcome.TIMED_OUT)

    def test_read_timeout_mid_body_is_timeout(self) -> None:
        """Should report a stalled body as a timeout, not a transport error."""
        response = MagicMock(spec=requests.Response)
        response.iter_content.side_effect = requests.exceptions.ConnectionError(
            ReadTimeoutError(None, "/article", "Read timed out.")
        )

        result = call_with_deadline(MagicMock(return_value=response), 5)

        self.assertEqual(result.outcome, DeadlineOutcome.TIMED_OUT)
        response.close.assert_called_once()

    def test_broken_body_is_transport_error(self) -> None:
        """Should report other failures while reading the body as transport errors."""
        response = MagicMock(spec=requests.Response)
        response.iter_content.side_effect = requests.exceptions.ChunkedEncodingError("cut")

        result = call_with_deadline(MagicMock(return_value=response), 5)

        self.assertEqual(result.outcome, DeadlineOutcome.TRANSPORT_ERROR)

    def test_other_exceptions_propagate(self) -> None:
        """Should not swallow errors that are not network failures."""
        with self.assertRaises(KeyError):
            call_with_deadline(MagicMock(side_effect=KeyError("x")))


class TestDeadlineResult(unittest.TestCase):
    """Tests for DeadlineResult constructors."""

    def test_constructors(self) -> None:
        """Should tag each outcome."""
        self.assertEqual(DeadlineResult.success(1).outcome, DeadlineOutcome.OK)
        self.assertEqual(DeadlineResult.timed_out().outcome, DeadlineOutcome.TIMED_OUT)
        self.assertEqual(
            DeadlineResult.transport_error(OSError()).outcome, DeadlineOutcome.TRANSPORT_ERROR
        )


if __name__ == "__main__":
    unittest.main()
