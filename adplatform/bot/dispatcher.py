"""Routing of bot updates to handlers, the polling loop and the command."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any, Optional

import requests

from adplatform.bot.handlers import (
    enter_login,
    enter_panel,
    enter_register,
    exit_panel,
    invalid_state,
    start,
)
from adplatform.bot.state import Dialogue, InMemoryStorage, StateKind
from adplatform.bot.telegram import TelegramBot, TelegramError, bot_from_env
from adplatform.env_config import Config, Variable

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_ADDRESS = "localhost:8080"
COMMANDS = frozenset({"start"})
POLL_TIMEOUT = 30
RETRY_DELAY = 1.0


def bot_setup(environ: Optional[Mapping[str, str]] = None) -> tuple[InMemoryStorage, str]:
    """Read the configuration and create the dialogue storage.

    Returns the storage and the backend address.
    """
    config = Config([Variable("BACKEND_ADDRESS", str, DEFAULT_BACKEND_ADDRESS)], environ)
    config.init()
    logger.info("Starting ad_platform bot...")
    return InMemoryStorage(), config["BACKEND_ADDRESS"]


def _chat_id(update: Mapping[str, Any]) -> Optional[int]:
    message = update.get("message")
    if message is None:
        query = update.get("callback_query") or {}
        message = query.get("message")
    if not message:
        return None
    return message.get("chat", {}).get("id")


def _parse_command(text: str) -> Optional[str]:
    if not text.startswith("/"):
        return None
    parts = text[1:].split(maxsplit=1)
    if not parts:
        return None
    name = parts[0].split("@", 1)[0]
    return name if name in COMMANDS else None


def dispatch(
    bot: TelegramBot,
    storage: InMemoryStorage,
    update: Mapping[str, Any],
    backend_address: str,
    session: Optional[requests.Session] = None,
) -> None:
    """Handle one update according to the chat's dialogue state."""
    chat_id = _chat_id(update)
    if chat_id is None:
        return
    dialogue = Dialogue(storage, chat_id)
    state = dialogue.get()

    message = update.get("message")
    if message is not None:
        text = message.get("text")
        if text is not None and _parse_command(text) == "start" and state.kind is StateKind.START:
            start(bot, dialogue)
        elif state.kind is StateKind.PANEL and state.previous is not None:
            enter_panel(bot, dialogue, state.previous, text, backend_address, session)
        else:
            invalid_state(bot, chat_id)
        return

    query = update.get("callback_query")
    if query is None:
        return
    data = query.get("data")
    if data == "register":
        enter_register(bot, dialogue, data)
    elif data == "login":
        enter_login(bot, dialogue, data)
    elif data == "exit":
        exit_panel(bot, dialogue)


def run(
    bot: TelegramBot,
    storage: InMemoryStorage,
    backend_address: str,
    session: Optional[requests.Session] = None,
) -> None:
    """Poll for updates and dispatch them until interrupted."""
    offset: Optional[int] = None
    while True:
        try:
            updates = bot.get_updates(offset, POLL_TIMEOUT)
        except TelegramError as exc:
            logger.error("Failed to fetch updates: %s", exc)
            time.sleep(RETRY_DELAY)
            continue
        for update in updates:
            offset = update["update_id"] + 1
            try:
                dispatch(bot, storage, update, backend_address, session)
            except Exception:
                logger.exception("Failed to handle update %s", update["update_id"])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the advertiser bot."""
    parser = argparse.ArgumentParser(description="Telegram bot of the advertising platform.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    storage, backend_address = bot_setup()
    bot = bot_from_env()
    try:
        run(bot, storage, backend_address)
    except KeyboardInterrupt:
        logger.info("Stopping the bot")
    return 0