# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Base fungible-token collaborator.

The allowance ledger never keeps balances itself. It is handed an object
implementing :class:`BaseToken` and calls into it for metadata, balances
and raw movements. :class:`MemoryBaseToken` is a minimal in-process
implementation for tests and single-process use.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from renewable_allowance.arithmetic import UINT256_MAX, require_uint
from renewable_allowance.errors import InsufficientBalanceError


class TokenMetadata(BaseModel, frozen=True):
    """Descriptive token metadata."""

    name: str = Field(..., min_length=1, max_length=64)
    symbol: str = Field(..., min_length=1, max_length=11)
    decimals: int = Field(18, ge=0, le=36)


@runtime_checkable
class BaseToken(Protocol):
    """Balance bookkeeping the ledger delegates to."""

    @property
    def metadata(self) -> TokenMetadata:
        ...

    def total_supply(self) -> int:
        ...

    def balance_of(self, account: str) -> int:
        ...

    def move(self, sender: str, recipient: str, amount: int) -> None:
        """Move ``amount`` from ``sender`` to ``recipient`` or raise without side effects."""
        ...


class MemoryBaseToken:
    """
    In-process balance table.

    All state is lost when the process exits. Supply only changes through
    :meth:`mint` and :meth:`burn`.
    """

    def __init__(self, metadata: TokenMetadata) -> None:
        self._metadata = metadata
        self._balances: dict[str, int] = {}
        self._total_supply = 0

    @property
    def metadata(self) -> TokenMetadata:
        return self._metadata

    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

    def move(self, sender: str, recipient: str, amount: int) -> None:
        require_uint(amount, name="amount")
        if not recipient:
            raise ValueError("recipient must be a non-empty string.")
        balance = self.balance_of(sender)
        if amount > balance:
            raise InsufficientBalanceError(account=sender, requested=amount, balance=balance)
        self._balances[sender] = balance - amount
        self._balances[recipient] = self.balance_of(recipient) + amount

    def mint(self, account: str, amount: int) -> None:
        require_uint(amount, name="amount")
        if not account:
            raise ValueError("account must be a non-empty string.")
        if self._total_supply + amount > UINT256_MAX:
            raise ValueError("Minting would overflow total supply.")
        self._total_supply += amount
        self._balances[account] = self.balance_of(account) + amount

    def burn(self, account: str, amount: int) -> None:
        require_uint(amount, name="amount")
        balance = self.balance_of(account)
        if amount > balance:
            raise InsufficientBalanceError(account=account, requested=amount, balance=balance)
        self._balances[account] = balance - amount
        self._total_supply -= amount
