"""A small Telegram Bot API client."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

import requests

DEFAULT_API_URL = "https://api.telegram.org"
TOKEN_VARIABLE = "TELOXIDE_TOKEN"
REQUEST_TIMEOUT = 10


@dataclass(frozen=True)
class InlineButton:
    """An inline keyboard button sending callback data."""

    text: str
    callback_data: str

    def _to_json(self) -> dict[str, str]:
        return {"text": self.text, "callback_data": self.callback_data}


class TelegramError(Exception):
    """A Bot API call failed."""


class TelegramBot:
    """Calls the Bot API with one bot's token."""

    api_url = DEFAULT_API_URL

    def __init__(self, token: str, session: Optional[requests.Session] = None) -> None:
        self.token = token
        self._session = session if session is not None else requests.Session()

    def _call(self, method: str, payload: Mapping[str, Any], timeout: float) -> Any:
        url = f"{self.api_url}/bot{self.token}/{method}"
        try:
            response = self._session.post(url, json=dict(payload), timeout=timeout)
        except requests.RequestException as exc:
            raise TelegramError(f"{method} failed: {exc}") from exc
        try:
            data = response.json()
        except ValueError as exc:
            raise TelegramError(f"{method} returned an invalid response") from exc
        if not isinstance(data, dict) or not data.get("ok"):
            description = data.get("description") if isinstance(data, dict) else None
            raise TelegramError(description or f"{method} failed")
        return data.get("result")

    def send_message(
        self,
        chat_id: int,
        text: str,
        keyboard: Optional[Iterable[Iterable[InlineButton]]] = None,
    ) -> dict[str, Any]:
        """Send a text message, with an inline keyboard given row by row."""
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if keyboard is not None:
            payload["reply_markup"] = {
                "inline_keyboard": [[button._to_json() for button in row] for row in keyboard]
            }
        return self._call("sendMessage", payload, REQUEST_TIMEOUT)

    def get_updates(self, offset: Optional[int] = None, timeout: int = 0) -> list[dict[str, Any]]:
        """Fetch pending updates, waiting up to ``timeout`` seconds for one."""
        payload: dict[str, Any] = {
            "timeout": timeout,
            "allowed_updates": ["message", "callback_query"],
        }
        if offset is not None:
            payload["offset"] = offset
        return list(self._call("getUpdates", payload, timeout + REQUEST_TIMEOUT))


def bot_from_env(environ: Optional[Mapping[str, str]] = None) -> TelegramBot:
    """Create a bot with the token read from the environment."""
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_VARIABLE)
    if not token:
        raise TelegramError(f"{TOKEN_VARIABLE} is not set")
    return TelegramBot(token)