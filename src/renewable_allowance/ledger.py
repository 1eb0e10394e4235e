# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging

from renewable_allowance.base_token import BaseToken
from renewable_allowance.capabilities import (
    BASE_TOKEN_PROXY_INTERFACE_ID,
    CAPABILITY_DISCOVERY_INTERFACE_ID,
    EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID,
    RENEWABLE_ALLOWANCE_INTERFACE_ID,
    supports,
)
from renewable_allowance.clock import Clock, SystemClock
from renewable_allowance.config import LedgerConfig
from renewable_allowance.engine import AllowanceEngine
from renewable_allowance.errors import InsufficientBalanceError
from renewable_allowance.events import Approval, EventLog, EventSink, Transfer
from renewable_allowance.storage.interface import AllowanceStore
from renewable_allowance.types import AllowanceSnapshot, AllowanceTerms

logger = logging.getLogger("renewable_allowance.ledger")


class RenewableAllowanceToken:
    """
    Token surface with renewable allowances.

    Balances, supply and metadata belong to the injected base token; this
    class only owns allowances. Every time-dependent call reads ``now`` from
    the injected clock once and hands it to the engine.

    Usage
    -----
    ::

        base = MemoryBaseToken(TokenMetadata(name="Credit", symbol="CRD"))
        base.mint("alice", 10_000)
        token = RenewableAllowanceToken(base)

        token.approve_renewable("alice", "bob", max_amount=1000, recovery_rate=10)
        token.transfer_from("bob", "alice", "carol", 400)
        token.allowance("alice", "bob")  # recovers by 10 per second up to 1000
    """

    def __init__(
        self,
        base_token: BaseToken,
        store: AllowanceStore | None = None,
        config: LedgerConfig | None = None,
        events: EventSink | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config or LedgerConfig()
        self._base_token = base_token
        self._events: EventSink = events if events is not None else EventLog(self._config.events)
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._engine = AllowanceEngine(
            store=store,
            config=self._config.allowance,
            events=self._events,
        )

    @property
    def engine(self) -> AllowanceEngine:
        return self._engine

    @property
    def events(self) -> EventSink:
        return self._events

    # ─── Metadata & balances ──────────────────────────────────────────────────

    def name(self) -> str:
        return self._base_token.metadata.name

    def symbol(self) -> str:
        return self._base_token.metadata.symbol

    def decimals(self) -> int:
        return self._base_token.metadata.decimals

    def total_supply(self) -> int:
        return self._base_token.total_supply()

    def balance_of(self, account: str) -> int:
        return self._base_token.balance_of(account)

    # ─── Approvals ────────────────────────────────────────────────────────────

    def approve_renewable(
        self,
        caller: str,
        spender: str,
        max_amount: int,
        recovery_rate: int,
        expiration: int | None = None,
    ) -> bool:
        """
        Grant ``spender`` a renewable allowance over the caller's tokens.

        Pass ``expiration`` (absolute seconds) for the expirable variant.

        Raises:
            InvalidRecoveryRateError: If ``recovery_rate > max_amount``.
        """
        self._engine.grant_renewable(
            owner=caller,
            spender=spender,
            max_amount=max_amount,
            recovery_rate=recovery_rate,
            now=self._clock.now(),
            expiration=expiration,
        )
        return True

    def approve(self, caller: str, spender: str, value: int) -> bool:
        """Grant a plain allowance. Any renewal terms on the pair are dropped."""
        self._engine.grant_static(owner=caller, spender=spender, value=value, now=self._clock.now())
        self._events.emit(Approval(owner=caller, spender=spender, value=value))
        return True

    # ─── Allowance queries ────────────────────────────────────────────────────

    def allowance(self, owner: str, spender: str) -> int:
        """Return what ``spender`` can move from ``owner`` right now."""
        return self._engine.current_spendable(owner, spender, self._clock.now())

    def renewable_allowance(self, owner: str, spender: str) -> AllowanceTerms:
        """Return ``(max_amount, recovery_rate, expiration)`` terms for the pair."""
        return self._engine.read_allowance(owner, spender)

    def allowance_snapshot(self, owner: str, spender: str) -> AllowanceSnapshot:
        return self._engine.snapshot(owner, spender, self._clock.now())

    # ─── Transfers ────────────────────────────────────────────────────────────

    def transfer(self, caller: str, recipient: str, amount: int) -> bool:
        """Move the caller's own tokens. No allowance is involved."""
        self._base_token.move(caller, recipient, amount)
        self._events.emit(Transfer(sender=caller, recipient=recipient, value=amount))
        return True

    def transfer_from(self, caller: str, owner: str, recipient: str, amount: int) -> bool:
        """
        Move ``amount`` of ``owner``'s tokens to ``recipient`` on the
        caller's allowance.

        The owner's balance is checked before the allowance is consumed, and
        the prior allowance record is restored if the base token rejects the
        move, so either both the allowance and the balances change or
        neither does.

        Raises:
            InsufficientBalanceError: If ``owner`` cannot cover ``amount``.
            InsufficientAllowanceError: If the caller's spendable allowance
                is below ``amount``.
        """
        if not recipient:
            raise ValueError("recipient must be a non-empty string.")
        balance = self._base_token.balance_of(owner)
        if amount > balance:
            raise InsufficientBalanceError(account=owner, requested=amount, balance=balance)

        previous = self._engine.store.get(owner, caller)
        self._engine.consume(owner=owner, spender=caller, amount=amount, now=self._clock.now())
        try:
            self._base_token.move(owner, recipient, amount)
        except Exception:
            if self._engine.store.get(owner, caller) != previous:
                self._engine.store.set(owner, caller, previous)
            raise
        self._events.emit(Transfer(sender=owner, recipient=recipient, value=amount))

        logger.debug(
            "transfer_from",
            extra={"spender": caller, "owner": owner, "recipient": recipient, "amount": amount},
        )
        return True

    # ─── Capability discovery ─────────────────────────────────────────────────

    def supported_interfaces(self) -> frozenset[bytes]:
        return frozenset(
            {
                CAPABILITY_DISCOVERY_INTERFACE_ID,
                RENEWABLE_ALLOWANCE_INTERFACE_ID,
                EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID,
            }
        )

    def supports_interface(self, interface_id: bytes) -> bool:
        return supports(self.supported_interfaces(), interface_id)


class RenewableAllowanceProxy(RenewableAllowanceToken):
    """
    Renewable allowances layered over an existing, separately deployed token.

    Identical to :class:`RenewableAllowanceToken` except that it exposes the
    wrapped token and advertises the base-token capability.
    """

    def get_base_token(self) -> BaseToken:
        return self._base_token

    def supported_interfaces(self) -> frozenset[bytes]:
        return super().supported_interfaces() | {BASE_TOKEN_PROXY_INTERFACE_ID}
