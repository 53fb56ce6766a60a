"""Tests for prompt construction."""

import unittest

from referent.enums import ArtifactAction
from referent.extraction import ParsedArticle
from referent.generation.prompts import (
    SUMMARY_SYSTEM_PROMPT,
    TELEGRAM_SYSTEM_PROMPT,
    THESES_SYSTEM_PROMPT,
    build_prompt,
    build_translation_prompt,
    format_article_for_translation,
    render_source_trailer,
)

SOURCE_URL = "https://example.com/articles/42?ref=home"


class TestBuildPrompt(unittest.TestCase):
    """Tests for build_prompt function."""

    def test_temperatures_per_action(self) -> None:
        """Should use the fixed temperature for each action."""
        expected = {
            ArtifactAction.SUMMARY: 0.3,
            ArtifactAction.THESES: 0.4,
            ArtifactAction.TELEGRAM: 0.7,
        }
        for action, temperature in expected.items():
            with self.subTest(action=action):
                self.assertEqual(build_prompt(action, "text").temperature, temperature)

    def test_system_prompts_per_action(self) -> None:
        """Should pick the system prompt for each action."""
        self.assertEqual(build_prompt("summary", "t").system_prompt, SUMMARY_SYSTEM_PROMPT)
        self.assertEqual(build_prompt("theses", "t").system_prompt, THESES_SYSTEM_PROMPT)
        self.assertEqual(build_prompt("telegram", "t").system_prompt, TELEGRAM_SYSTEM_PROMPT)

    def test_text_is_embedded(self) -> None:
        """Should include the article text at the end of the user prompt."""
        for action in ArtifactAction:
            with self.subTest(action=action):
                prompt = build_prompt(action, "Текст статьи")
                self.assertTrue(prompt.user_prompt.endswith("Текст статьи"))

    def test_telegram_includes_source_trailer(self) -> None:
        """Should instruct the model to append the literal source URL."""
        prompt = build_prompt(ArtifactAction.TELEGRAM, "Текст", SOURCE_URL)

        self.assertIn(f"📎 Источник: {SOURCE_URL}", prompt.user_prompt)
        self.assertIn("после всех хештегов", prompt.user_prompt)

    def test_telegram_without_source_has_no_trailer(self) -> None:
        """Should omit the trailer instruction when no URL is given."""
        prompt = build_prompt(ArtifactAction.TELEGRAM, "Текст")

        self.assertNotIn("ОБЯЗАТЕЛЬНО", prompt.user_prompt)
        self.assertNotIn("Источник:", prompt.user_prompt)

    def test_telegram_uses_custom_trailer_template(self) -> None:
        """Should render the configured trailer template."""
        prompt = build_prompt(
            ArtifactAction.TELEGRAM,
            "Текст",
            SOURCE_URL,
            trailer_template="<a href='{url}'>Источник</a>",
        )

        self.assertIn(f"<a href='{SOURCE_URL}'>Источник</a>", prompt.user_prompt)

    def test_telegram_does_not_request_translation(self) -> None:
        """Should treat the text as already translated."""
        prompt = build_prompt(ArtifactAction.TELEGRAM, "Уже переведенный текст", SOURCE_URL)

        self.assertNotIn("Translate", prompt.user_prompt)
        self.assertNotIn("Translate", prompt.system_prompt)
        self.assertIn("УЖЕ ПЕРЕВЕДЕННЫЙ", prompt.user_prompt)

    def test_summary_ignores_source_url(self) -> None:
        """Should not mention the source for non-Telegram actions."""
        prompt = build_prompt(ArtifactAction.SUMMARY, "Text", SOURCE_URL)

        self.assertNotIn(SOURCE_URL, prompt.user_prompt)

    def test_text_with_braces_is_preserved(self) -> None:
        """Should not treat braces in the text as placeholders."""
        prompt = build_prompt(ArtifactAction.THESES, "dict = {key: value}")

        self.assertTrue(prompt.user_prompt.endswith("dict = {key: value}"))

    def test_unknown_action_raises(self) -> None:
        """Should reject actions outside the enum."""
        with self.assertRaises(ValueError):
            build_prompt("bogus", "text")  # type: ignore[arg-type]


class TestTranslationPrompt(unittest.TestCase):
    """Tests for translation prompt helpers."""

    def test_build_translation_prompt(self) -> None:
        """Should ask for an English to Russian translation at 0.3."""
        prompt = build_translation_prompt("Hello")

        self.assertEqual(prompt.user_prompt, "Translate to Russian:\n\nHello")
        self.assertIn("English to Russian", prompt.system_prompt)
        self.assertEqual(prompt.temperature, 0.3)

    def test_format_article_for_translation(self) -> None:
        """Should label each field."""
        article = ParsedArticle(title="T", date="2024-01-01", content="Body")

        text = format_article_for_translation(article)

        self.assertEqual(text, "Title: T\n\nDate: 2024-01-01\n\nContent: Body")

    def test_render_source_trailer(self) -> None:
        """Should insert the URL verbatim."""
        self.assertEqual(render_source_trailer(SOURCE_URL), f"📎 Источник: {SOURCE_URL}")


if __name__ == "__main__":
    unittest.main()
