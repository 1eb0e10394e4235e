# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for renewable-allowance tests."""

from __future__ import annotations

import pytest

from renewable_allowance.base_token import MemoryBaseToken, TokenMetadata
from renewable_allowance.engine import AllowanceEngine
from renewable_allowance.events import EventLog
from renewable_allowance.ledger import RenewableAllowanceToken


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start: int = 0) -> None:
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def event_log() -> EventLog:
    return EventLog()


@pytest.fixture
def engine(event_log: EventLog) -> AllowanceEngine:
    """An engine over a fresh in-memory store, emitting into ``event_log``."""
    return AllowanceEngine(events=event_log)


@pytest.fixture
def base_token() -> MemoryBaseToken:
    """A base token with 10,000 units minted to 'alice'."""
    token = MemoryBaseToken(TokenMetadata(name="Credit", symbol="CRD", decimals=6))
    token.mint("alice", 10_000)
    return token


@pytest.fixture
def token(base_token: MemoryBaseToken, event_log: EventLog, clock: FakeClock) -> RenewableAllowanceToken:
    return RenewableAllowanceToken(base_token, events=event_log, clock=clock)
