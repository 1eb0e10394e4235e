# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from renewable_allowance.arithmetic import UINT64_MAX, UINT256_MAX

# ─── Scalars ──────────────────────────────────────────────────────────────────

Address = Annotated[str, Field(min_length=1)]
Amount = Annotated[int, Field(ge=0, le=UINT256_MAX)]
Timestamp = Annotated[int, Field(ge=0, le=UINT64_MAX)]

# ─── Allowance record ─────────────────────────────────────────────────────────


class RenewableAllowance(BaseModel, frozen=True):
    """
    Stored allowance state for one (owner, spender) pair.

    ``current_amount`` is a snapshot as of ``last_updated``, not the live
    spendable value. A ``recovery_rate`` of zero makes the record a plain
    static allowance.
    """

    max_amount: Amount = 0
    recovery_rate: Amount = 0
    current_amount: Amount = 0
    last_updated: Timestamp = 0
    expiration: Optional[Timestamp] = None

    @model_validator(mode="after")
    def current_within_max(self) -> "RenewableAllowance":
        if self.current_amount > self.max_amount:
            raise ValueError(
                f"current_amount {self.current_amount} exceeds max_amount {self.max_amount}"
            )
        return self


ZERO_ALLOWANCE = RenewableAllowance()

# ─── Derived views ────────────────────────────────────────────────────────────

AllowanceState = Literal["absent", "static", "renewable", "expired"]


class AllowanceTerms(BaseModel, frozen=True):
    """Grant parameters of an allowance, independent of how much remains."""

    max_amount: int
    recovery_rate: int
    expiration: Optional[int] = None


class AllowanceSnapshot(BaseModel, frozen=True):
    """Point-in-time view combining allowance terms with the live spendable value."""

    owner: str
    spender: str
    max_amount: int
    recovery_rate: int
    expiration: Optional[int]
    spendable: int
    state: AllowanceState
    as_of: int
