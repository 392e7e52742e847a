"""Handlers of the bot's commands, callbacks and panel messages."""

from __future__ import annotations

import secrets
import time
from typing import Any, Optional
from uuid import UUID

import requests

from adplatform.bot.state import Dialogue, PrePanel, PrePanelKind, State, StateKind
from adplatform.bot.telegram import InlineButton, TelegramBot

BACKEND_TIMEOUT = 30

NOT_FOUND_TEXT = "Не удалось найти рекламодателя с указанным UUID. "
CREATE_FAILED_TEXT = "Не удалось создать рекламодателя."
ASK_NAME_TEXT = "Введите название рекламодателя:"
ASK_UUID_TEXT = "Введите UUID рекламодателя:"
NAME_MISSING_TEXT = "Пожалуйста, введите название рекламодателя."
UUID_MISSING_TEXT = "Пожалуйста, введите UUID рекламодателя."
INVALID_STATE_TEXT = "Не удалось обработать сообщение. Напишите /start для возврата в диалог."


def _uuid7() -> UUID:
    """A time-ordered UUID: millisecond timestamp followed by random bits."""
    millis = time.time_ns() // 1_000_000
    value = ((millis & ((1 << 48) - 1)) << 80) | secrets.randbits(80)
    value = (value & ~(0xF << 76)) | (0x7 << 76)
    value = (value & ~(0x3 << 62)) | (0x2 << 62)
    return UUID(int=value)


def start(bot: TelegramBot, dialogue: Dialogue) -> None:
    """Greet the user with the login and registration buttons."""
    keyboard = [
        [InlineButton(label, callback)]
        for label, callback in (("Войти", "login"), ("Зарегистрироваться", "register"))
    ]
    bot.send_message(dialogue.chat_id, "Start", keyboard)


def _ask(bot: TelegramBot, dialogue: Dialogue, data: Optional[str], text: str, kind: PrePanelKind) -> None:
    if data is None:
        return
    bot.send_message(dialogue.chat_id, text)
    dialogue.update(State(StateKind.PANEL, previous=PrePanel(kind)))


def enter_login(bot: TelegramBot, dialogue: Dialogue, data: Optional[str]) -> None:
    """Ask for the advertiser's UUID and wait for it in the panel."""
    _ask(bot, dialogue, data, ASK_UUID_TEXT, PrePanelKind.LOGIN)


def enter_register(bot: TelegramBot, dialogue: Dialogue, data: Optional[str]) -> None:
    """Ask for the new advertiser's name and wait for it in the panel."""
    _ask(bot, dialogue, data, ASK_NAME_TEXT, PrePanelKind.REGISTER)


def _register(bot: TelegramBot, chat_id: int, name: str, backend_address: str, http: Any) -> None:
    try:
        response = http.post(
            f"http://{backend_address}/advertisers/bulk",
            json=[{"advertiser_id": str(_uuid7()), "name": name}],
            timeout=BACKEND_TIMEOUT,
        )
    except requests.RequestException:
        bot.send_message(chat_id, CREATE_FAILED_TEXT)
        return
    if response.status_code == 201:
        advertiser_id = response.json()[0]["advertiser_id"]
        welcome_message(bot, chat_id, advertiser_id, name)
    else:
        bot.send_message(chat_id, NOT_FOUND_TEXT)


def _login(bot: TelegramBot, chat_id: int, advertiser_id: str, backend_address: str, http: Any) -> None:
    try:
        response = http.get(
            f"http://{backend_address}/advertisers/{advertiser_id}", timeout=BACKEND_TIMEOUT
        )
    except requests.RequestException:
        bot.send_message(chat_id, NOT_FOUND_TEXT)
        return
    if response.status_code == 200:
        welcome_message(bot, chat_id, advertiser_id, response.json()["name"])
    else:
        bot.send_message(chat_id, NOT_FOUND_TEXT)


def enter_panel(
    bot: TelegramBot,
    dialogue: Dialogue,
    previous: PrePanel,
    text: Optional[str],
    backend_address: str,
    session: Optional[requests.Session] = None,
) -> None:
    """Handle a message in the panel, depending on the step before it."""
    http: Any = session if session is not None else requests
    chat_id = dialogue.chat_id
    if previous.kind is PrePanelKind.PANEL_MENU:
        welcome_message(bot, chat_id, str(previous.advertiser_id), str(previous.advertiser_name))
    elif previous.kind is PrePanelKind.REGISTER:
        if text is None:
            bot.send_message(chat_id, NAME_MISSING_TEXT)
            return
        _register(bot, chat_id, text, backend_address, http)
    else:
        if text is None:
            bot.send_message(chat_id, UUID_MISSING_TEXT)
            return
        _login(bot, chat_id, text, backend_address, http)


def exit_panel(bot: TelegramBot, dialogue: Dialogue) -> None:
    """Leave the panel and return to the start."""
    dialogue.update(State())


def welcome_message(
    bot: TelegramBot, chat_id: int, advertiser_id: str, advertiser_name: str
) -> Any:
    """Greet the advertiser and show the panel menu."""
    keyboard = [
        [InlineButton("Аккаунт", f"account::{advertiser_id}::")],
        [InlineButton("Мои кампании", f"campaigns::{advertiser_id}::")],
        [InlineButton("Статистика", f"campaigns::{advertiser_id}::")],
        [InlineButton("Выйти из аккаунта", "exit")],
    ]
    return bot.send_message(
        chat_id,
        f'Доброго времени суток, "{advertiser_name}"! (UUID: {advertiser_id})',
        keyboard,
    )


def invalid_state(bot: TelegramBot, chat_id: int) -> None:
    """Tell the user the message could not be handled."""
    bot.send_message(chat_id, INVALID_STATE_TEXT)