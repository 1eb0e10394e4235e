# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging

from renewable_allowance.allowance import (
    allowance_state,
    allowance_terms,
    apply_consumption,
    create_renewable,
    create_static,
    spendable_amount,
)
from renewable_allowance.arithmetic import UINT64_MAX, require_uint
from renewable_allowance.config import AllowanceConfig
from renewable_allowance.errors import (
    ExpirationInPastError,
    InsufficientAllowanceError,
    InvalidRecoveryRateError,
)
from renewable_allowance.events import AllowanceGranted, EventSink
from renewable_allowance.storage.interface import AllowanceStore
from renewable_allowance.storage.memory import MemoryAllowanceStore
from renewable_allowance.types import (
    AllowanceSnapshot,
    AllowanceTerms,
    RenewableAllowance,
)

logger = logging.getLogger("renewable_allowance.engine")


class AllowanceEngine:
    """
    Computation layer for renewable allowances.

    Design contract
    ---------------
    - ``now`` is always passed in. The engine never reads the wall clock.
    - Recovery is lazy: nothing runs between calls. Reads compute the
      recovered value on the fly; only grants and consumes write.
    - ``current_spendable()``, ``read_allowance()`` and ``snapshot()`` are
      read-only.
    - A failed ``consume()`` or grant leaves the store untouched.
    - Operations on one (owner, spender) pair must be serialized by the
      caller; different pairs are independent.

    Usage
    -----
    ::

        engine = AllowanceEngine()
        engine.grant_renewable("alice", "bob", max_amount=1000, recovery_rate=10, now=0)
        engine.consume("alice", "bob", 400, now=0)
        engine.current_spendable("alice", "bob", now=50)  # 1000
    """

    def __init__(
        self,
        store: AllowanceStore | None = None,
        config: AllowanceConfig | None = None,
        events: EventSink | None = None,
    ) -> None:
        self._store: AllowanceStore = store if store is not None else MemoryAllowanceStore()
        self._config = config or AllowanceConfig()
        self._events = events

    @property
    def store(self) -> AllowanceStore:
        return self._store

    # ─── Grants ───────────────────────────────────────────────────────────────

    def grant_renewable(
        self,
        owner: str,
        spender: str,
        max_amount: int,
        recovery_rate: int,
        now: int,
        expiration: int | None = None,
    ) -> RenewableAllowance:
        """
        Replace the pair's allowance with a full renewable grant.

        This is a hard reset: unspent prior allowance is discarded and the
        new allowance starts at ``max_amount``. Emits ``AllowanceGranted``.

        Raises:
            InvalidRecoveryRateError: If ``recovery_rate > max_amount`` and
                the engine is in strict mode.
            ExpirationInPastError: If ``expiration <= now`` and past
                expirations are rejected by configuration.
            ValueError: If any amount or timestamp is out of range, or an
                address is empty.
        """
        _require_pair(owner, spender)
        require_uint(max_amount, name="max_amount")
        require_uint(recovery_rate, name="recovery_rate")
        require_uint(now, UINT64_MAX, name="now")
        if expiration is not None:
            require_uint(expiration, UINT64_MAX, name="expiration")

        if recovery_rate > max_amount:
            if self._config.strict_recovery_rate:
                raise InvalidRecoveryRateError(max_amount=max_amount, recovery_rate=recovery_rate)
            logger.warning(
                "recovery_rate_exceeds_max",
                extra={
                    "owner": owner,
                    "spender": spender,
                    "max_amount": max_amount,
                    "recovery_rate": recovery_rate,
                },
            )

        if expiration is not None and expiration <= now and self._config.reject_past_expiration:
            raise ExpirationInPastError(expiration=expiration, now=now)

        record = create_renewable(
            max_amount=max_amount,
            recovery_rate=recovery_rate,
            now=now,
            expiration=expiration,
            previous=self._store.get(owner, spender),
        )
        self._store.set(owner, spender, record)

        logger.debug(
            "renewable_allowance_granted",
            extra={
                "owner": owner,
                "spender": spender,
                "max_amount": max_amount,
                "recovery_rate": recovery_rate,
                "expiration": expiration,
            },
        )
        if self._events is not None:
            self._events.emit(
                AllowanceGranted(
                    owner=owner,
                    spender=spender,
                    max_amount=max_amount,
                    recovery_rate=recovery_rate,
                )
            )
        return record

    def grant_static(self, owner: str, spender: str, value: int, now: int) -> RenewableAllowance:
        """
        Replace the pair's allowance with a plain, non-renewable one.

        The recovery rate is always zeroed and any expiration cleared, even
        if a renewable allowance was active. No ``AllowanceGranted`` event is
        emitted.
        """
        _require_pair(owner, spender)
        require_uint(value, name="value")
        require_uint(now, UINT64_MAX, name="now")

        record = create_static(value=value, now=now, previous=self._store.get(owner, spender))
        self._store.set(owner, spender, record)

        logger.debug(
            "static_allowance_granted",
            extra={"owner": owner, "spender": spender, "value": value},
        )
        return record

    # ─── Reads ────────────────────────────────────────────────────────────────

    def current_spendable(self, owner: str, spender: str, now: int) -> int:
        """Return the amount spendable at ``now``. Never mutates state."""
        return spendable_amount(self._store.get(owner, spender), now)

    def read_allowance(self, owner: str, spender: str) -> AllowanceTerms:
        """Return the grant parameters, not the remaining amount."""
        return allowance_terms(self._store.get(owner, spender))

    def snapshot(self, owner: str, spender: str, now: int) -> AllowanceSnapshot:
        """Return terms, live spendable amount and derived state in one view."""
        record = self._store.get(owner, spender)
        return AllowanceSnapshot(
            owner=owner,
            spender=spender,
            max_amount=record.max_amount,
            recovery_rate=record.recovery_rate,
            expiration=record.expiration,
            spendable=spendable_amount(record, now),
            state=allowance_state(record, now),
            as_of=now,
        )

    # ─── Consume ──────────────────────────────────────────────────────────────

    def consume(self, owner: str, spender: str, amount: int, now: int) -> RenewableAllowance:
        """
        Spend ``amount`` of the pair's allowance at ``now``.

        Recovery up to ``now`` is materialized first, then ``amount`` is
        subtracted and the record is written back with ``last_updated=now``.
        A zero amount always succeeds and writes nothing, leaving
        ``last_updated`` where it was. Spendable values at every later time
        are the same as if the recovered amount had been written back.

        Raises:
            InsufficientAllowanceError: If ``amount`` exceeds the spendable
                amount. No state is mutated.
        """
        require_uint(amount, name="amount")
        require_uint(now, UINT64_MAX, name="now")

        record = self._store.get(owner, spender)
        spendable = spendable_amount(record, now)

        if amount > spendable:
            logger.info(
                "allowance_consume_rejected",
                extra={
                    "owner": owner,
                    "spender": spender,
                    "requested": amount,
                    "available": spendable,
                },
            )
            raise InsufficientAllowanceError(
                owner=owner,
                spender=spender,
                requested=amount,
                available=spendable,
            )

        if amount == 0:
            return record

        updated = apply_consumption(record, amount, now)
        self._store.set(owner, spender, updated)

        logger.debug(
            "allowance_consumed",
            extra={
                "owner": owner,
                "spender": spender,
                "amount": amount,
                "remaining": updated.current_amount,
            },
        )
        return updated


def _require_pair(owner: str, spender: str) -> None:
    if not owner:
        raise ValueError("owner must be a non-empty string.")
    if not spender:
        raise ValueError("spender must be a non-empty string.")
