# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for RenewableAllowanceToken and RenewableAllowanceProxy, the public
token surface over the engine and the base token.
"""

from __future__ import annotations

import pytest

from renewable_allowance.base_token import BaseToken, MemoryBaseToken, TokenMetadata
from renewable_allowance.capabilities import (
    BASE_TOKEN_PROXY_INTERFACE_ID,
    CAPABILITY_DISCOVERY_INTERFACE_ID,
    EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID,
    INVALID_INTERFACE_ID,
    RENEWABLE_ALLOWANCE_INTERFACE_ID,
)
from renewable_allowance.errors import (
    InsufficientAllowanceError,
    InsufficientBalanceError,
    InvalidRecoveryRateError,
)
from renewable_allowance.events import AllowanceGranted, Approval, EventLog, Transfer
from renewable_allowance.ledger import RenewableAllowanceProxy, RenewableAllowanceToken

from tests.conftest import FakeClock


class FrozenRecipientToken(MemoryBaseToken):
    """Base token that refuses to credit the account named 'frozen'."""

    def move(self, sender: str, recipient: str, amount: int) -> None:
        if recipient == "frozen":
            raise PermissionError(f"account {recipient!r} is frozen")
        super().move(sender, recipient, amount)


# ---------------------------------------------------------------------------
# TestMetadataAndBalances
# ---------------------------------------------------------------------------


class TestMetadataAndBalances:
    def test_metadata_comes_from_base_token(self, token: RenewableAllowanceToken) -> None:
        assert token.name() == "Credit"
        assert token.symbol() == "CRD"
        assert token.decimals() == 6

    def test_supply_and_balances(self, token: RenewableAllowanceToken) -> None:
        assert token.total_supply() == 10_000
        assert token.balance_of("alice") == 10_000
        assert token.balance_of("nobody") == 0

    def test_plain_transfer_emits_transfer(
        self, token: RenewableAllowanceToken, event_log: EventLog
    ) -> None:
        assert token.transfer("alice", "carol", 250) is True
        assert token.balance_of("carol") == 250
        assert event_log.query(kind="transfer") == [
            Transfer(sender="alice", recipient="carol", value=250)
        ]

    def test_plain_transfer_beyond_balance_raises(self, token: RenewableAllowanceToken) -> None:
        with pytest.raises(InsufficientBalanceError):
            token.transfer("carol", "alice", 1)


# ---------------------------------------------------------------------------
# TestApprovals
# ---------------------------------------------------------------------------


class TestApprovals:
    def test_approve_renewable_and_read_terms(self, token: RenewableAllowanceToken) -> None:
        assert token.approve_renewable("alice", "bob", 1000, 10) is True
        terms = token.renewable_allowance("alice", "bob")
        assert (terms.max_amount, terms.recovery_rate, terms.expiration) == (1000, 10, None)
        assert token.allowance("alice", "bob") == 1000

    def test_approve_renewable_with_expiration(
        self, token: RenewableAllowanceToken, clock: FakeClock
    ) -> None:
        token.approve_renewable("alice", "bob", 500, 5, expiration=100)
        assert token.renewable_allowance("alice", "bob").expiration == 100
        clock.advance(100)
        assert token.allowance("alice", "bob") == 0
        assert token.allowance_snapshot("alice", "bob").state == "expired"

    def test_approve_renewable_rejects_rate_above_max(
        self, token: RenewableAllowanceToken, event_log: EventLog
    ) -> None:
        with pytest.raises(InvalidRecoveryRateError):
            token.approve_renewable("alice", "bob", 1000, 1500)
        assert token.renewable_allowance("alice", "bob").max_amount == 0
        assert event_log.count() == 0

    def test_approve_zeroes_recovery_rate(
        self, token: RenewableAllowanceToken, event_log: EventLog
    ) -> None:
        token.approve_renewable("alice", "bob", 1000, 10)
        token.approve("alice", "bob", 200)

        terms = token.renewable_allowance("alice", "bob")
        assert terms.max_amount == 200
        assert terms.recovery_rate == 0
        assert token.allowance("alice", "bob") == 200

        assert event_log.query(kind="allowance_granted") == [
            AllowanceGranted(owner="alice", spender="bob", max_amount=1000, recovery_rate=10)
        ]
        assert event_log.query(kind="approval") == [
            Approval(owner="alice", spender="bob", value=200)
        ]


# ---------------------------------------------------------------------------
# TestTransferFrom
# ---------------------------------------------------------------------------


class TestTransferFrom:
    def test_transfer_from_consumes_allowance_and_moves_balance(
        self, token: RenewableAllowanceToken, clock: FakeClock, event_log: EventLog
    ) -> None:
        token.approve_renewable("alice", "bob", 1000, 10)
        assert token.transfer_from("bob", "alice", "carol", 1000) is True

        assert token.balance_of("alice") == 9_000
        assert token.balance_of("carol") == 1_000
        assert token.allowance("alice", "bob") == 0
        assert event_log.query(kind="transfer")[-1] == Transfer(
            sender="alice", recipient="carol", value=1000
        )

        clock.advance(40)
        assert token.allowance("alice", "bob") == 400

    def test_transfer_from_beyond_allowance_changes_nothing(
        self, token: RenewableAllowanceToken, clock: FakeClock
    ) -> None:
        token.approve_renewable("alice", "bob", 1000, 10)
        token.transfer_from("bob", "alice", "carol", 1000)
        clock.advance(40)

        with pytest.raises(InsufficientAllowanceError):
            token.transfer_from("bob", "alice", "carol", 500)

        assert token.balance_of("alice") == 9_000
        assert token.engine.store.get("alice", "bob").last_updated == 0

    def test_transfer_from_beyond_balance_keeps_allowance(
        self, base_token: MemoryBaseToken, clock: FakeClock
    ) -> None:
        token = RenewableAllowanceToken(base_token, clock=clock)
        token.approve("alice", "bob", 50_000)

        with pytest.raises(InsufficientBalanceError):
            token.transfer_from("bob", "alice", "carol", 20_000)

        assert token.allowance("alice", "bob") == 50_000
        assert token.balance_of("carol") == 0

    def test_transfer_from_with_empty_recipient_keeps_allowance(
        self, token: RenewableAllowanceToken
    ) -> None:
        token.approve("alice", "bob", 100)
        with pytest.raises(ValueError):
            token.transfer_from("bob", "alice", "", 10)
        assert token.allowance("alice", "bob") == 100

    def test_rejected_move_restores_allowance(self, clock: FakeClock) -> None:
        base = FrozenRecipientToken(TokenMetadata(name="Credit", symbol="CRD"))
        base.mint("alice", 1_000)
        token = RenewableAllowanceToken(base, clock=clock)
        token.approve("alice", "bob", 500)

        with pytest.raises(PermissionError):
            token.transfer_from("bob", "alice", "frozen", 300)

        assert token.allowance("alice", "bob") == 500
        assert token.balance_of("alice") == 1_000
        assert token.balance_of("frozen") == 0

    def test_rejected_move_restores_renewable_record(self, clock: FakeClock) -> None:
        base = FrozenRecipientToken(TokenMetadata(name="Credit", symbol="CRD"))
        base.mint("alice", 1_000)
        token = RenewableAllowanceToken(base, clock=clock)
        token.approve_renewable("alice", "bob", 100, 1)
        token.transfer_from("bob", "alice", "carol", 100)
        clock.advance(30)
        before = token.engine.store.get("alice", "bob")

        with pytest.raises(PermissionError):
            token.transfer_from("bob", "alice", "frozen", 20)

        assert token.engine.store.get("alice", "bob") == before
        assert token.allowance("alice", "bob") == 30

    def test_rejected_zero_move_creates_no_record(self, clock: FakeClock) -> None:
        base = FrozenRecipientToken(TokenMetadata(name="Credit", symbol="CRD"))
        token = RenewableAllowanceToken(base, clock=clock)
        with pytest.raises(PermissionError):
            token.transfer_from("bob", "alice", "frozen", 0)
        assert token.engine.store.contains("alice", "bob") is False

    def test_spender_needs_own_allowance(self, token: RenewableAllowanceToken) -> None:
        token.approve("alice", "bob", 100)
        with pytest.raises(InsufficientAllowanceError):
            token.transfer_from("mallory", "alice", "mallory", 1)

    def test_default_event_log_is_created(self, base_token: MemoryBaseToken) -> None:
        token = RenewableAllowanceToken(base_token)
        token.approve_renewable("alice", "bob", 10, 1)
        assert isinstance(token.events, EventLog)
        assert token.events.count() == 1


# ---------------------------------------------------------------------------
# TestCapabilities
# ---------------------------------------------------------------------------


class TestCapabilities:
    def test_token_advertises_allowance_capabilities(
        self, token: RenewableAllowanceToken
    ) -> None:
        assert token.supports_interface(RENEWABLE_ALLOWANCE_INTERFACE_ID)
        assert token.supports_interface(EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID)
        assert token.supports_interface(CAPABILITY_DISCOVERY_INTERFACE_ID)
        assert not token.supports_interface(BASE_TOKEN_PROXY_INTERFACE_ID)

    def test_invalid_identifiers_are_not_supported(self, token: RenewableAllowanceToken) -> None:
        assert not token.supports_interface(INVALID_INTERFACE_ID)
        assert not token.supports_interface(b"\x00\x01")
        assert not token.supports_interface(b"\x00\x00\x00\x00")

    def test_proxy_exposes_base_token(
        self, base_token: MemoryBaseToken, clock: FakeClock
    ) -> None:
        proxy = RenewableAllowanceProxy(base_token, clock=clock)
        assert proxy.get_base_token() is base_token
        assert isinstance(proxy.get_base_token(), BaseToken)
        assert proxy.supports_interface(BASE_TOKEN_PROXY_INTERFACE_ID)
        assert proxy.supports_interface(RENEWABLE_ALLOWANCE_INTERFACE_ID)

    def test_proxy_moves_base_token_balances(
        self, base_token: MemoryBaseToken, clock: FakeClock
    ) -> None:
        proxy = RenewableAllowanceProxy(base_token, clock=clock)
        proxy.approve_renewable("alice", "bob", 100, 1)
        proxy.transfer_from("bob", "alice", "carol", 60)
        assert base_token.balance_of("carol") == 60
