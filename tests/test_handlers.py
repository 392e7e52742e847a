import json
from uuid import UUID

import requests
import responses

from adplatform.bot.handlers import (
    enter_login,
    enter_panel,
    enter_register,
    exit_panel,
    invalid_state,
    start,
    welcome_message,
)
from adplatform.bot.state import Dialogue, InMemoryStorage, PrePanel, PrePanelKind, State, StateKind

BACKEND = "localhost:8080"
ADVERTISER_ID = "01234567-89ab-7def-8123-456789abcdef"


class FakeBot:
    def __init__(self):
        self.sent = []

    def send_message(self, chat_id, text, keyboard=None):
        self.sent.append((chat_id, text, keyboard))
        return {"chat_id": chat_id, "text": text}


def _dialogue(chat_id=10):
    return Dialogue(InMemoryStorage(), chat_id)


def _callbacks(keyboard):
    return [button.callback_data for row in keyboard for button in row]


def test_start_offers_login_and_register():
    bot = FakeBot()
    start(bot, _dialogue())
    chat_id, text, keyboard = bot.sent[0]
    assert (chat_id, text) == (10, "Start")
    assert _callbacks(keyboard) == ["login", "register"]
    assert keyboard[0][0].text == "Войти"


def test_enter_login_asks_uuid_and_moves_to_panel():
    bot = FakeBot()
    dialogue = _dialogue()
    enter_login(bot, dialogue, "login")
    assert bot.sent[0][1] == "Введите UUID рекламодателя:"
    state = dialogue.get()
    assert state.kind is StateKind.PANEL
    assert state.previous.kind is PrePanelKind.LOGIN


def test_enter_login_without_data_does_nothing():
    bot = FakeBot()
    dialogue = _dialogue()
    enter_login(bot, dialogue, None)
    assert bot.sent == []
    assert dialogue.get() == State()


def test_enter_register_asks_name():
    bot = FakeBot()
    dialogue = _dialogue()
    enter_register(bot, dialogue, "register")
    assert bot.sent[0][1] == "Введите название рекламодателя:"
    assert dialogue.get().previous.kind is PrePanelKind.REGISTER


def test_welcome_message_menu():
    bot = FakeBot()
    welcome_message(bot, 3, ADVERTISER_ID, "Acme")
    _, text, keyboard = bot.sent[0]
    assert "Acme" in text and ADVERTISER_ID in text
    assert _callbacks(keyboard) == [
        f"account::{ADVERTISER_ID}::",
        f"campaigns::{ADVERTISER_ID}::",
        f"campaigns::{ADVERTISER_ID}::",
        "exit",
    ]


def test_exit_panel_returns_to_start():
    dialogue = _dialogue()
    dialogue.update(State(StateKind.PANEL, previous=PrePanel(PrePanelKind.LOGIN)))
    exit_panel(FakeBot(), dialogue)
    assert dialogue.get().kind is StateKind.START


def test_invalid_state_message():
    bot = FakeBot()
    invalid_state(bot, 4)
    assert bot.sent == [
        (4, "Не удалось обработать сообщение. Напишите /start для возврата в диалог.", None)
    ]


def test_panel_menu_shows_welcome():
    bot = FakeBot()
    previous = PrePanel(PrePanelKind.PANEL_MENU, UUID(ADVERTISER_ID), "Acme")
    enter_panel(bot, _dialogue(), previous, "anything", BACKEND)
    assert ADVERTISER_ID in bot.sent[0][1]


def test_register_creates_advertiser():
    bot = FakeBot()
    with responses.RequestsMock() as rsps:
        rsps.post(
            f"http://{BACKEND}/advertisers/bulk",
            json=[{"advertiser_id": ADVERTISER_ID, "name": "Acme"}],
            status=201,
        )
        enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.REGISTER), "Acme", BACKEND)
        body = json.loads(rsps.calls[0].request.body)
    assert body[0]["name"] == "Acme"
    assert UUID(body[0]["advertiser_id"]).version == 7
    assert ADVERTISER_ID in bot.sent[0][1]


def test_register_rejected_reports_failure():
    bot = FakeBot()
    with responses.RequestsMock() as rsps:
        rsps.post(f"http://{BACKEND}/advertisers/bulk", json={}, status=400)
        enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.REGISTER), "Acme", BACKEND)
    assert bot.sent[0][1] == "Не удалось найти рекламодателя с указанным UUID. "


def test_register_connection_error():
    bot = FakeBot()
    with responses.RequestsMock() as rsps:
        rsps.post(f"http://{BACKEND}/advertisers/bulk", body=requests.ConnectionError("down"))
        enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.REGISTER), "Acme", BACKEND)
    assert bot.sent[0][1] == "Не удалось создать рекламодателя."


def test_register_without_text_asks_again():
    bot = FakeBot()
    enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.REGISTER), None, BACKEND)
    assert bot.sent[0][1] == "Пожалуйста, введите название рекламодателя."


def test_login_finds_advertiser():
    bot = FakeBot()
    with requests.Session() as session, responses.RequestsMock() as rsps:
        rsps.get(f"http://{BACKEND}/advertisers/{ADVERTISER_ID}", json={"name": "Acme"})
        enter_panel(
            bot, _dialogue(), PrePanel(PrePanelKind.LOGIN), ADVERTISER_ID, BACKEND, session
        )
    text = bot.sent[0][1]
    assert "Acme" in text and ADVERTISER_ID in text


def test_login_unknown_advertiser():
    bot = FakeBot()
    with responses.RequestsMock() as rsps:
        rsps.get(f"http://{BACKEND}/advertisers/{ADVERTISER_ID}", json={}, status=404)
        enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.LOGIN), ADVERTISER_ID, BACKEND)
    assert bot.sent[0][1] == "Не удалось найти рекламодателя с указанным UUID. "


def test_login_connection_error():
    bot = FakeBot()
    with responses.RequestsMock() as rsps:
        rsps.get(
            f"http://{BACKEND}/advertisers/{ADVERTISER_ID}",
            body=requests.ConnectionError("down"),
        )
        enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.LOGIN), ADVERTISER_ID, BACKEND)
    assert bot.sent[0][1] == "Не удалось найти рекламодателя с указанным UUID. "


def test_login_without_text_asks_again():
    bot = FakeBot()
    enter_panel(bot, _dialogue(), PrePanel(PrePanelKind.LOGIN), None, BACKEND)
    assert bot.sent[0][1] == "Пожалуйста, введите UUID рекламодателя."