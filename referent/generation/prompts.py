"""Prompt construction for translation and derived artifacts.

The mapping from artifact kind to prompts and temperature is fixed. Telegram
posts are built from text that is already in Russian; the prompt says so and
never asks for another translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from referent.config import DEFAULT_SOURCE_TEMPLATE
from referent.enums import ArtifactAction
from referent.generation.models import PromptSpec

if TYPE_CHECKING:
    from referent.extraction.models import ParsedArticle

TRANSLATION_TEMPERATURE = 0.3

ACTION_TEMPERATURES: dict[ArtifactAction, float] = {
    ArtifactAction.SUMMARY: 0.3,
    ArtifactAction.THESES: 0.4,
    ArtifactAction.TELEGRAM: 0.7,
}

TRANSLATION_SYSTEM_PROMPT = (
    "You are a professional translator. Translate the following text from English "
    "to Russian, preserving structure and formatting."
)

SUMMARY_SYSTEM_PROMPT = (
    "Ты опытный аналитик и рецензент научных статей. "
    "Твоя задача - кратко и точно описать содержание статьи."
)
SUMMARY_USER_TEMPLATE = (
    "Прочитай следующую статью и напиши краткое описание на русском языке "
    "(2-3 предложения). О чем эта статья? Что в ней рассматривается?\n\n{text}"
)

THESES_SYSTEM_PROMPT = (
    "Ты эксперт по анализу научных текстов. "
    "Твоя задача - извлечь основные тезисы и ключевые моменты из статьи."
)
THESES_USER_TEMPLATE = (
    "Прочитай следующую статью и извлеки основные тезисы. Представь их в виде "
    "нумерованного списка на русском языке. Каждый тезис должен быть кратким "
    "и информативным.\n\n{text}"
)

TELEGRAM_SYSTEM_PROMPT = (
    "Ты профессиональный копирайтер для Telegram. Твоя задача - создавать КОРОТКИЕ, "
    "интересные посты для социальной сети на русском языке. ВАЖНО: Ты получаешь УЖЕ "
    "ПЕРЕВЕДЕННЫЙ на русский язык текст статьи. Создай на его основе НОВЫЙ пост, "
    "который кратко передает суть. Пост должен быть компактным (не более 300-400 слов), "
    "с эмодзи, хештегами и ссылкой на источник."
)
TELEGRAM_USER_TEMPLATE = (
    "Создай КОРОТКИЙ пост для Telegram на русском языке на основе следующего "
    "переведенного текста статьи."
    """

ВАЖНО:
- Ты получаешь УЖЕ ПЕРЕВЕДЕННЫЙ на русский язык текст
- НЕ переводи текст повторно и НЕ копируй его дословно
- Создай НОВЫЙ оригинальный пост, который кратко передает суть и основные идеи
- Пост должен быть интересным и привлекающим внимание
- Используй эмодзи для визуального оформления (🔷, 📌, ✅, ⚠️, 🚀 и т.д.)
- Добавь релевантные хештеги в конце (3-5 хештегов)
- Пост должен быть компактным (не более 300-400 слов)
- Пиши на русском языке, создавай новый текст на основе переведенного{source_instruction}

Переведенный текст статьи для анализа:
{text}"""
)
SOURCE_INSTRUCTION_TEMPLATE = (
    "\n\nОБЯЗАТЕЛЬНО: В самом конце поста, после всех хештегов, добавь ссылку "
    "на источник в формате:\n\n{trailer}"
)


def render_source_trailer(source_url: str, template: str = DEFAULT_SOURCE_TEMPLATE) -> str:
    """Render the source line appended to Telegram posts.

    :param source_url: The article URL, inserted verbatim.
    :param template: Trailer template containing ``{url}``.
    :returns: The trailer line.
    """
    return template.replace("{url}", source_url)


def build_prompt(
    action: ArtifactAction,
    text: str,
    source_url: str | None = None,
    *,
    trailer_template: str = DEFAULT_SOURCE_TEMPLATE,
) -> PromptSpec:
    """Build the prompts and temperature for an artifact request.

    Summary and theses accept original or translated text. Telegram expects
    text already translated to Russian.

    :param action: The artifact kind.
    :param text: Article text to work from.
    :param source_url: Article URL; only used for Telegram posts.
    :param trailer_template: Template for the Telegram source trailer.
    :returns: The prompts and temperature.
    :raises ValueError: If the action is not a known artifact kind.
    """
    action = ArtifactAction(action)
    temperature = ACTION_TEMPERATURES[action]

    if action == ArtifactAction.SUMMARY:
        return PromptSpec(
            system_prompt=SUMMARY_SYSTEM_PROMPT,
            user_prompt=SUMMARY_USER_TEMPLATE.format(text=text),
            temperature=temperature,
        )

    if action == ArtifactAction.THESES:
        return PromptSpec(
            system_prompt=THESES_SYSTEM_PROMPT,
            user_prompt=THESES_USER_TEMPLATE.format(text=text),
            temperature=temperature,
        )

    source_instruction = ""
    if source_url:
        trailer = render_source_trailer(source_url, trailer_template)
        source_instruction = SOURCE_INSTRUCTION_TEMPLATE.format(trailer=trailer)

    return PromptSpec(
        system_prompt=TELEGRAM_SYSTEM_PROMPT,
        user_prompt=TELEGRAM_USER_TEMPLATE.format(
            source_instruction=source_instruction,
            text=text,
        ),
        temperature=temperature,
    )


def build_translation_prompt(text: str) -> PromptSpec:
    """Build the English-to-Russian translation prompt.

    :param text: Text to translate.
    :returns: The prompts and temperature.
    """
    return PromptSpec(
        system_prompt=TRANSLATION_SYSTEM_PROMPT,
        user_prompt=f"Translate to Russian:\n\n{text}",
        temperature=TRANSLATION_TEMPERATURE,
    )


def format_article_for_translation(article: ParsedArticle) -> str:
    """Concatenate the extracted fields with labels for translation.

    :param article: The extracted article.
    :returns: Labelled text block.
    """
    return f"Title: {article.title}\n\nDate: {article.date}\n\nContent: {article.content}"
