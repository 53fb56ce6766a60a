"""Tests for the console front-end."""

import unittest
from unittest.mock import MagicMock, patch

from referent.enums import ArtifactAction, PipelinePhase
from referent.session.console import render, render_menu, run_console
from referent.session.orchestrator import ArticleSession
from referent.session.state import PipelineState


class TestRender(unittest.TestCase):
    """Tests for state rendering."""

    def test_placeholder_when_empty(self) -> None:
        """Should show the placeholder before any result."""
        self.assertIn("Результат появится здесь", render(PipelineState()))

    def test_result(self) -> None:
        """Should show the current result."""
        self.assertEqual(render(PipelineState(result="Тезисы")), "Результат:\nТезисы")

    def test_error_takes_precedence(self) -> None:
        """Should show the error in the error phase."""
        state = PipelineState(result="Старое", phase=PipelinePhase.ERROR, error="Сбой")
        self.assertEqual(render(state), "Ошибка: Сбой")

    def test_busy_phase_shows_progress(self) -> None:
        """Should show progress while a request is outstanding."""
        state = PipelineState(result="Старое", phase=PipelinePhase.TRANSLATING)
        self.assertEqual(render(state), "Перевод...")

    def test_menu_hides_actions_without_translation(self) -> None:
        """Should offer artifact actions only after translation."""
        self.assertNotIn("Тезисы", render_menu(PipelineState()))
        self.assertIn("[2] Тезисы", render_menu(PipelineState(translated_text="Перевод")))


class TestRunConsole(unittest.IsolatedAsyncioTestCase):
    """Tests for the console loop."""

    async def test_submit_then_artifact_then_quit(self) -> None:
        """Should submit the URL, run the chosen action and exit."""
        client = MagicMock()
        client.parse.return_value = {"date": "d", "title": "t", "content": "c"}
        client.translate.return_value = "Перевод"
        client.analyze.return_value = "Пост"
        session = ArticleSession(client)

        with (
            patch(
                "referent.session.console._prompt",
                side_effect=["https://example.com", "3", "q"],
            ),
            patch("builtins.print") as mock_print,
        ):
            await run_console(session)

        client.analyze.assert_called_once_with("Перевод", "telegram", "https://example.com")
        self.assertEqual(session.state.last_action, ArtifactAction.TELEGRAM)
        mock_print.assert_any_call("Результат:\nПост")

    async def test_clear_resets_session(self) -> None:
        """Should clear the session on the clear command."""
        session = MagicMock()
        session.state = PipelineState()

        with (
            patch("referent.session.console._prompt", side_effect=["", "c", "q"]),
            patch("builtins.print"),
        ):
            await run_console(session)

        session.reset.assert_called_once()
        session.submit.assert_not_called()


if __name__ == "__main__":
    unittest.main()
