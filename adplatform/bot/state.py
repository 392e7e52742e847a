"""Dialogue states of the bot and their in-memory storage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID


class PrePanelKind(Enum):
    """Where the user came from before entering the panel."""

    PANEL_MENU = "panel_menu"
    REGISTER = "register"
    LOGIN = "login"


@dataclass(frozen=True)
class PrePanel:
    """The step before the panel; the panel menu carries the advertiser."""

    kind: PrePanelKind
    advertiser_id: Optional[UUID] = None
    advertiser_name: Optional[str] = None

    def __post_init__(self) -> None:
        has_advertiser = self.advertiser_id is not None and self.advertiser_name is not None
        has_any = self.advertiser_id is not None or self.advertiser_name is not None
        if self.kind is PrePanelKind.PANEL_MENU and not has_advertiser:
            raise ValueError("the panel menu needs an advertiser id and name")
        if self.kind is not PrePanelKind.PANEL_MENU and has_any:
            raise ValueError(f"{self.kind.value} carries no advertiser")


class StateKind(Enum):
    """The step of the dialogue a chat is in."""

    START = "start"
    REGISTER = "register"
    RECEIVE_ADVERTISER_NAME = "receive_advertiser_name"
    LOGIN = "login"
    RECEIVE_ADVERTISER_UUID = "receive_advertiser_uuid"
    PANEL = "panel"
    ACCOUNT = "account"
    CAMPAIGNS = "campaigns"
    STATS = "stats"


_ADVERTISER_KINDS = frozenset({StateKind.ACCOUNT, StateKind.CAMPAIGNS, StateKind.STATS})


@dataclass(frozen=True)
class State:
    """State of one chat's dialogue, with the data its step needs."""

    kind: StateKind = StateKind.START
    previous: Optional[PrePanel] = None
    advertiser_id: Optional[UUID] = None
    advertiser_name: Optional[str] = None

    def __post_init__(self) -> None:
        has_advertiser = self.advertiser_id is not None and self.advertiser_name is not None
        has_any = self.advertiser_id is not None or self.advertiser_name is not None
        if self.kind is StateKind.PANEL:
            if self.previous is None or has_any:
                raise ValueError("the panel state needs the previous step only")
        elif self.kind in _ADVERTISER_KINDS:
            if not has_advertiser or self.previous is not None:
                raise ValueError(f"{self.kind.value} needs an advertiser id and name")
        elif self.previous is not None or has_any:
            raise ValueError(f"{self.kind.value} carries no data")


class InMemoryStorage:
    """Dialogue states kept in memory, by chat id."""

    def __init__(self) -> None:
        self._states: dict[int, State] = {}

    def __len__(self) -> int:
        return len(self._states)

    def get(self, chat_id: int) -> State:
        """Return the chat's state; a chat never seen is at the start."""
        return self._states.get(chat_id, State())

    def update(self, chat_id: int, state: State) -> None:
        """Store the chat's new state."""
        self._states[chat_id] = state

    def reset(self, chat_id: int) -> None:
        """Forget the chat's state."""
        self._states.pop(chat_id, None)


class Dialogue:
    """The dialogue of one chat over a storage."""

    def __init__(self, storage: InMemoryStorage, chat_id: int) -> None:
        self.storage = storage
        self.chat_id = chat_id

    def get(self) -> State:
        """Current state of the dialogue."""
        return self.storage.get(self.chat_id)

    def update(self, state: State) -> None:
        """Move the dialogue to ``state``."""
        self.storage.update(self.chat_id, state)

    def exit(self) -> None:
        """End the dialogue; it starts over next time."""
        self.storage.reset(self.chat_id)