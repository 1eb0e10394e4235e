# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Pure allowance math.

Nothing here touches storage or the wall clock: every function takes the
record and ``now`` explicitly and returns a value or a fresh record.
"""

from __future__ import annotations

from renewable_allowance.arithmetic import (
    require_uint,
    saturating_add,
    saturating_mul,
)
from renewable_allowance.types import (
    AllowanceState,
    AllowanceTerms,
    RenewableAllowance,
)


def create_renewable(
    max_amount: int,
    recovery_rate: int,
    now: int,
    expiration: int | None = None,
    previous: RenewableAllowance | None = None,
) -> RenewableAllowance:
    """
    Build a freshly granted renewable allowance, full at ``max_amount``.

    Any unspent prior allowance is discarded. ``previous`` is only consulted
    to keep ``last_updated`` from moving backwards.
    """
    return RenewableAllowance(
        max_amount=max_amount,
        recovery_rate=recovery_rate,
        current_amount=max_amount,
        last_updated=_advance(previous, now),
        expiration=expiration,
    )


def create_static(
    value: int,
    now: int,
    previous: RenewableAllowance | None = None,
) -> RenewableAllowance:
    """Build a non-renewable allowance. Recovery rate and expiration are always cleared."""
    return RenewableAllowance(
        max_amount=value,
        recovery_rate=0,
        current_amount=value,
        last_updated=_advance(previous, now),
        expiration=None,
    )


def is_expired(record: RenewableAllowance, now: int) -> bool:
    return record.expiration is not None and now >= record.expiration


def spendable_amount(record: RenewableAllowance, now: int) -> int:
    """
    Compute how much of the allowance can be spent at ``now``.

    Recovery is ``elapsed * recovery_rate`` with elapsed clamped at zero, and
    the total is capped at ``max_amount``. Expired allowances are worth zero.
    """
    if is_expired(record, now):
        return 0
    if record.recovery_rate == 0:
        return record.current_amount

    elapsed = max(0, now - record.last_updated)
    recovered = saturating_mul(elapsed, record.recovery_rate)
    return min(record.max_amount, saturating_add(record.current_amount, recovered))


def apply_consumption(record: RenewableAllowance, amount: int, now: int) -> RenewableAllowance:
    """
    Return the record after spending ``amount`` at ``now``.

    Recovery up to ``now`` is folded into ``current_amount`` before the
    subtraction, so recovered allowance is never lost or double-counted.

    Raises ValueError if ``amount`` exceeds the spendable amount; callers
    are expected to check first and raise a domain error.
    """
    require_uint(amount, name="amount")
    spendable = spendable_amount(record, now)
    if amount > spendable:
        raise ValueError(f"amount {amount} exceeds spendable {spendable}")

    return record.model_copy(
        update={
            "current_amount": spendable - amount,
            "last_updated": _advance(record, now),
        }
    )


def allowance_terms(record: RenewableAllowance) -> AllowanceTerms:
    return AllowanceTerms(
        max_amount=record.max_amount,
        recovery_rate=record.recovery_rate,
        expiration=record.expiration,
    )


def allowance_state(record: RenewableAllowance, now: int) -> AllowanceState:
    """Classify a record. 'expired' is observed from ``now``, never stored."""
    if is_expired(record, now):
        return "expired"
    if record.max_amount == 0 and record.recovery_rate == 0 and record.current_amount == 0:
        return "absent"
    if record.recovery_rate == 0:
        return "static"
    return "renewable"


def _advance(previous: RenewableAllowance | None, now: int) -> int:
    if previous is None:
        return now
    return max(now, previous.last_updated)
