# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class RenewableAllowanceError(Exception):
    """Base class for all renewable-allowance errors."""

    def __init__(self, message: str, code: str = "RENEWABLE_ALLOWANCE_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidRecoveryRateError(RenewableAllowanceError):
    """
    Raised when a grant's recovery rate exceeds its maximum amount.

    Attributes:
        max_amount: The requested allowance ceiling.
        recovery_rate: The requested per-second recovery rate.
    """

    def __init__(self, max_amount: int, recovery_rate: int) -> None:
        super().__init__(
            f"Recovery rate {recovery_rate} exceeds max amount {max_amount}.",
            code="INVALID_RECOVERY_RATE",
        )
        self.max_amount = max_amount
        self.recovery_rate = recovery_rate


class InsufficientAllowanceError(RenewableAllowanceError):
    """
    Raised when a spender tries to consume more than is currently spendable.

    Attributes:
        owner: The account whose allowance was checked.
        spender: The account attempting to spend.
        requested: The amount requested.
        available: The spendable amount at the time of the request.
    """

    def __init__(self, owner: str, spender: str, requested: int, available: int) -> None:
        super().__init__(
            f"Spender '{spender}' requested {requested} from '{owner}' "
            f"but only {available} is spendable.",
            code="INSUFFICIENT_ALLOWANCE",
        )
        self.owner = owner
        self.spender = spender
        self.requested = requested
        self.available = available


class InsufficientBalanceError(RenewableAllowanceError):
    """Raised by a base token when an account cannot cover a transfer."""

    def __init__(self, account: str, requested: int, balance: int) -> None:
        super().__init__(
            f"Account '{account}' has balance {balance} but {requested} was requested.",
            code="INSUFFICIENT_BALANCE",
        )
        self.account = account
        self.requested = requested
        self.balance = balance


class ExpirationInPastError(RenewableAllowanceError):
    """Raised when past expirations are rejected by configuration."""

    def __init__(self, expiration: int, now: int) -> None:
        super().__init__(
            f"Expiration {expiration} is not after the current time {now}.",
            code="EXPIRATION_IN_PAST",
        )
        self.expiration = expiration
        self.now = now
