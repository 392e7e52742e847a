import pytest
import responses

from adplatform.bot.dispatcher import bot_setup, dispatch, main, run
from adplatform.bot.state import InMemoryStorage, PrePanel, PrePanelKind, State, StateKind
from adplatform.bot.telegram import TelegramError

BACKEND = "localhost:8080"
ADVERTISER_ID = "01234567-89ab-7def-8123-456789abcdef"


class FakeBot:
    def __init__(self, batches=()):
        self.sent = []
        self.batches = list(batches)
        self.offsets = []

    def send_message(self, chat_id, text, keyboard=None):
        self.sent.append((chat_id, text, keyboard))
        return {}

    def get_updates(self, offset=None, timeout=0):
        self.offsets.append(offset)
        if not self.batches:
            raise _Stop()
        return self.batches.pop(0)


class _Stop(Exception):
    pass


def _message(chat_id, text, update_id=1):
    return {"update_id": update_id, "message": {"chat": {"id": chat_id}, "text": text}}


def _callback(chat_id, data, update_id=1):
    return {
        "update_id": update_id,
        "callback_query": {"data": data, "message": {"chat": {"id": chat_id}}},
    }


def test_bot_setup_reads_backend_address():
    storage, address = bot_setup({"BACKEND_ADDRESS": "backend:9000"})
    assert address == "backend:9000"
    assert len(storage) == 0


def test_bot_setup_default_address():
    _, address = bot_setup({})
    assert address == "localhost:8080"


@pytest.mark.parametrize("text", ["/start", "/start@somebot"])
def test_start_command_in_start_state(text):
    bot = FakeBot()
    dispatch(bot, InMemoryStorage(), _message(5, text), BACKEND)
    assert bot.sent[0][:2] == (5, "Start")


def test_plain_text_at_start_is_invalid():
    bot = FakeBot()
    dispatch(bot, InMemoryStorage(), _message(5, "hello"), BACKEND)
    assert bot.sent[0][1].startswith("Не удалось обработать сообщение")


def test_login_callback_moves_chat_to_panel():
    bot = FakeBot()
    storage = InMemoryStorage()
    dispatch(bot, storage, _callback(9, "login"), BACKEND)
    state = storage.get(9)
    assert state.kind is StateKind.PANEL
    assert state.previous.kind is PrePanelKind.LOGIN
    assert bot.sent[0][0] == 9


def test_exit_callback_returns_to_start():
    storage = InMemoryStorage()
    storage.update(9, State(StateKind.PANEL, previous=PrePanel(PrePanelKind.REGISTER)))
    dispatch(FakeBot(), storage, _callback(9, "exit"), BACKEND)
    assert storage.get(9).kind is StateKind.START


def test_panel_message_logs_in():
    bot = FakeBot()
    storage = InMemoryStorage()
    storage.update(9, State(StateKind.PANEL, previous=PrePanel(PrePanelKind.LOGIN)))
    with responses.RequestsMock() as rsps:
        rsps.get(f"http://{BACKEND}/advertisers/{ADVERTISER_ID}", json={"name": "Acme"})
        dispatch(bot, storage, _message(9, ADVERTISER_ID), BACKEND)
    assert "Acme" in bot.sent[0][1]


def test_update_without_chat_is_ignored():
    bot = FakeBot()
    storage = InMemoryStorage()
    dispatch(bot, storage, {"update_id": 1, "callback_query": {"data": "login"}}, BACKEND)
    assert bot.sent == []
    assert len(storage) == 0


def test_run_dispatches_and_advances_offset():
    bot = FakeBot([[_message(1, "/start", 10), _callback(2, "register", 11)]])
    storage = InMemoryStorage()
    with pytest.raises(_Stop):
        run(bot, storage, BACKEND)
    assert bot.offsets == [None, 12]
    assert [chat for chat, _, _ in bot.sent] == [1, 2]
    assert storage.get(2).previous.kind is PrePanelKind.REGISTER


def test_main_without_token_fails(monkeypatch):
    monkeypatch.delenv("TELOXIDE_TOKEN", raising=False)
    with pytest.raises(TelegramError):
        main([])