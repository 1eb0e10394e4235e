# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Ledger notifications and the sink they are emitted to.

The transport is pluggable: anything with an ``emit(event)`` method can act
as a sink. ``EventLog`` keeps the most recent events in memory and is what
tests and single-process ledgers use.
"""

from __future__ import annotations

import collections
from typing import Literal, Optional, Protocol, Union

from pydantic import BaseModel

from renewable_allowance.config import EventLogConfig

# ---------------------------------------------------------------------------
# Event models
# ---------------------------------------------------------------------------


class AllowanceGranted(BaseModel, frozen=True):
    """Emitted on every renewable grant. Carries no expiration."""

    kind: Literal["allowance_granted"] = "allowance_granted"
    owner: str
    spender: str
    max_amount: int
    recovery_rate: int


class Approval(BaseModel, frozen=True):
    """Emitted by a plain static approval."""

    kind: Literal["approval"] = "approval"
    owner: str
    spender: str
    value: int


class Transfer(BaseModel, frozen=True):
    kind: Literal["transfer"] = "transfer"
    sender: str
    recipient: str
    value: int


LedgerEvent = Union[AllowanceGranted, Approval, Transfer]

EventKind = Literal["allowance_granted", "approval", "transfer"]


# ---------------------------------------------------------------------------
# Sink protocol
# ---------------------------------------------------------------------------


class EventSink(Protocol):
    """Protocol for emitting ledger events. Injected for testability."""

    def emit(self, event: LedgerEvent) -> None:
        ...


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class EventLog:
    """
    Bounded in-memory event sink.

    When :attr:`~EventLogConfig.max_events` is reached the oldest event is
    evicted to make room for the new one.

    Example::

        log = EventLog(EventLogConfig(max_events=100))
        token = RenewableAllowanceToken(base, events=log)
        token.approve_renewable("alice", "bob", 1000, 10)
        granted = log.query(kind="allowance_granted")
    """

    def __init__(self, config: EventLogConfig | None = None) -> None:
        self._config = config or EventLogConfig()
        self._events: collections.deque[LedgerEvent] = collections.deque(
            maxlen=self._config.max_events
        )

    def emit(self, event: LedgerEvent) -> None:
        self._events.append(event)

    def query(
        self,
        kind: Optional[EventKind] = None,
        owner: Optional[str] = None,
        spender: Optional[str] = None,
    ) -> list[LedgerEvent]:
        """
        Return stored events, oldest first, optionally filtered.

        All filters are AND-ed. ``owner`` and ``spender`` only match events
        that carry those fields; transfers are never matched by them.
        """
        results: list[LedgerEvent] = []
        for event in self._events:
            if kind is not None and event.kind != kind:
                continue
            if owner is not None and getattr(event, "owner", None) != owner:
                continue
            if spender is not None and getattr(event, "spender", None) != spender:
                continue
            results.append(event)
        return results

    def latest(self, n: int = 10) -> list[LedgerEvent]:
        """Return the ``n`` most recent events, oldest first."""
        if n < 1:
            raise ValueError(f"n must be >= 1; got {n}.")
        return list(self._events)[-n:]

    def count(self) -> int:
        return len(self._events)

    def clear(self) -> int:
        """Remove all stored events and return how many were removed."""
        count = len(self._events)
        self._events.clear()
        return count
