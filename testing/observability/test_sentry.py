"""Tests for Sentry initialisation."""

import os
import unittest
from unittest.mock import MagicMock, patch

from referent.observability.sentry import init_sentry


class TestInitSentry(unittest.TestCase):
    """Tests for init_sentry."""

    @patch("referent.observability.sentry.sentry_sdk.init")
    def test_skipped_without_dsn(self, mock_init: MagicMock) -> None:
        """Should not initialise Sentry when no DSN is set."""
        with patch.dict(os.environ, {}, clear=True):
            init_sentry()

        mock_init.assert_not_called()

    @patch("referent.observability.sentry.sentry_sdk.init")
    def test_initialises_with_dsn(self, mock_init: MagicMock) -> None:
        """Should initialise Sentry without request bodies or PII."""
        env = {"SENTRY_DSN": "https://key@sentry.example/1", "APP_ENV": "prod"}
        with patch.dict(os.environ, env, clear=True):
            init_sentry()

        kwargs = mock_init.call_args.kwargs
        self.assertEqual(kwargs["dsn"], "https://key@sentry.example/1")
        self.assertEqual(kwargs["environment"], "prod")
        self.assertFalse(kwargs["send_default_pii"])
        self.assertEqual(kwargs["max_request_body_size"], "never")
        self.assertEqual(kwargs["traces_sample_rate"], 0.0)


if __name__ == "__main__":
    unittest.main()
