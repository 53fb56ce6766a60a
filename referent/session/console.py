"""Interactive console front-end for an article session."""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

from referent.api.client import ReferentAPIClient
from referent.config import get_settings
from referent.enums import PipelinePhase
from referent.paths import PROJECT_ROOT
from referent.session.labels import ACTION_LABELS, action_from_label
from referent.session.orchestrator import ArticleSession
from referent.session.state import PipelineState
from referent.utils.logging import configure_logging

logger = logging.getLogger(__name__)

CLEAR_COMMAND = "c"
QUIT_COMMAND = "q"
NEW_URL_COMMAND = "u"

# Menu keys in display order
MENU: dict[str, str] = {str(index): label for index, label in enumerate(ACTION_LABELS.values(), 1)}

BUSY_MESSAGES: dict[PipelinePhase, str] = {
    PipelinePhase.FETCHING: "Загрузка статьи...",
    PipelinePhase.TRANSLATING: "Перевод...",
    PipelinePhase.ANALYZING: "Обработка...",
}


def render(state: PipelineState) -> str:
    """Render the session state for display.

    :param state: Current session state.
    :returns: Text to print.
    """
    if state.phase == PipelinePhase.ERROR:
        return f"Ошибка: {state.error}"
    if state.is_busy:
        return BUSY_MESSAGES[state.phase]
    if state.result:
        return f"Результат:\n{state.result}"
    return "Результат появится здесь после выбора действия..."


def render_menu(state: PipelineState) -> str:
    """Render the available commands.

    :param state: Current session state.
    :returns: Menu text.
    """
    lines = []
    if state.artifacts_available:
        lines.extend(f"  [{key}] {label}" for key, label in MENU.items())
    lines.append(f"  [{NEW_URL_COMMAND}] Новая статья")
    lines.append(f"  [{CLEAR_COMMAND}] Очистить")
    lines.append(f"  [{QUIT_COMMAND}] Выход")
    return "\n".join(lines)


async def _prompt(text: str) -> str:
    return (await asyncio.to_thread(input, text)).strip()


async def run_console(session: ArticleSession) -> None:
    """Run the read-act-render loop until the user quits.

    :param session: The article session to drive.
    """
    url = await _prompt("URL англоязычной статьи: ")
    if url:
        print("Загрузка и перевод...")
        await session.submit(url)
        print(render(session.state))

    while True:
        print(render_menu(session.state))
        choice = (await _prompt("> ")).lower()

        if choice == QUIT_COMMAND:
            return
        if choice == CLEAR_COMMAND:
            session.reset()
            print(render(session.state))
        elif choice == NEW_URL_COMMAND:
            url = await _prompt("URL англоязычной статьи: ")
            print("Загрузка и перевод...")
            await session.submit(url)
            print(render(session.state))
        elif choice in MENU and session.state.artifacts_available:
            print("Обработка...")
            await session.request_artifact(action_from_label(MENU[choice]))
            print(render(session.state))
        else:
            print("Неизвестная команда")


def main() -> None:
    """Entry point for the console front-end."""
    load_dotenv(PROJECT_ROOT / ".env")
    configure_logging()
    settings = get_settings()

    client = ReferentAPIClient(base_url=settings.api_base_url, timeout=settings.request_timeout)
    with client:
        session = ArticleSession(client)
        try:
            asyncio.run(run_console(session))
        except (KeyboardInterrupt, EOFError):
            logger.info("Console session ended")
