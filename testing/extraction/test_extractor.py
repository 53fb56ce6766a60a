"""Tests for the article extractor."""

import unittest
from unittest.mock import MagicMock, patch

from referent.extraction import NOT_FOUND, ParsedArticle, extract


class TestExtract(unittest.TestCase):
    """Tests for extract function."""

    def test_extracts_title_and_body_from_article(self) -> None:
        """Should take the heading and the article body."""
        body = "x" * 150
        html = f"<html><body><article><h1>T</h1><p>{body}</p></article></body></html>"

        article = extract(html)

        self.assertEqual(article.title, "T")
        self.assertEqual(article.content, f"T {body}")
        self.assertEqual(article.date, NOT_FOUND)

    def test_falls_back_to_short_body(self) -> None:
        """Should return body text when no container qualifies."""
        html = "<html><body><div>Short text</div></body></html>"

        article = extract(html)

        self.assertEqual(article.content, "Short text")
        self.assertEqual(article.title, NOT_FOUND)

    def test_short_article_falls_through_to_body(self) -> None:
        """Should ignore containers under the minimum length."""
        html = "<html><body><article><p>tiny</p></article><div>other text</div></body></html>"

        article = extract(html)

        self.assertEqual(article.content, "tiny other text")

    def test_removes_noise_from_content(self) -> None:
        """Should drop scripts, navigation and ads from the body."""
        paragraph = "Readable sentence. " * 10
        html = f"""
        <html><body>
            <article>
                <nav>Menu Home About</nav>
                <script>var tracking = 1;</script>
                <div class="ad">Buy now</div>
                <p>{paragraph}</p>
                <footer>Copyright</footer>
            </article>
        </body></html>
        """

        article = extract(html)

        self.assertEqual(article.content, paragraph.strip())
        for noise in ("Menu", "tracking", "Buy now", "Copyright"):
            self.assertNotIn(noise, article.content)

    def test_normalises_whitespace_in_content(self) -> None:
        """Should collapse whitespace runs to single spaces."""
        words = "\n\n   ".join(["word"] * 40)
        html = f"<html><body><main><p>{words}</p></main></body></html>"

        article = extract(html)

        self.assertEqual(article.content, " ".join(["word"] * 40))

    def test_prefers_datetime_attribute(self) -> None:
        """Should use the machine-readable datetime over visible text."""
        html = """
        <html><body>
            <h1>Headline</h1>
            <time datetime="2024-01-15T10:00:00Z">January 15, 2024</time>
        </body></html>
        """

        article = extract(html)

        self.assertEqual(article.date, "2024-01-15T10:00:00Z")

    def test_uses_visible_time_text_without_attribute(self) -> None:
        """Should fall back to the time element's text."""
        html = "<html><body><time> March 3, 2024 </time></body></html>"

        article = extract(html)

        self.assertEqual(article.date, "March 3, 2024")

    def test_reads_date_from_metadata(self) -> None:
        """Should read the published time meta tag when nothing else matches."""
        html = """
        <html>
        <head><meta property="article:published_time" content="2024-02-01"></head>
        <body><p>Body</p></body>
        </html>
        """

        article = extract(html)

        self.assertEqual(article.date, "2024-02-01")

    def test_title_falls_back_to_document_title(self) -> None:
        """Should use the title tag when there is no heading."""
        html = "<html><head><title>Doc Title</title></head><body><p>x</p></body></html>"

        article = extract(html)

        self.assertEqual(article.title, "Doc Title")

    def test_title_matches_class_pattern(self) -> None:
        """Should match elements whose class contains 'title'."""
        html = '<html><body><div class="entry-title">Class Title</div></body></html>'

        article = extract(html)

        self.assertEqual(article.title, "Class Title")

    def test_empty_html_returns_placeholders(self) -> None:
        """Should return placeholders for an empty document."""
        article = extract("")

        self.assertEqual(article, ParsedArticle())
        self.assertFalse(article.has_content)

    def test_garbage_input_does_not_raise(self) -> None:
        """Should return a well-formed article for any input."""
        for html in ("<<<>>>", "<div><p>unclosed", "plain text only"):
            with self.subTest(html=html):
                article = extract(html)
                self.assertIsInstance(article, ParsedArticle)
                self.assertTrue(article.title)
                self.assertTrue(article.date)
                self.assertTrue(article.content)

    @patch("referent.extraction.extractor.first_match")
    def test_parser_failure_returns_placeholders(self, mock_first_match: MagicMock) -> None:
        """Should swallow probe failures and return placeholders."""
        mock_first_match.side_effect = RuntimeError("boom")

        article = extract("<html><body><h1>T</h1></body></html>")

        self.assertEqual(article, ParsedArticle())


if __name__ == "__main__":
    unittest.main()
