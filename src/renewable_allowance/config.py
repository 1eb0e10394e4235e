# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field


class AllowanceConfig(BaseModel, frozen=True):
    """
    Configuration for the AllowanceEngine.

    Attributes:
        strict_recovery_rate: When True, a grant whose recovery rate exceeds
            its max amount raises :class:`InvalidRecoveryRateError`. When
            False the grant is stored and a warning is logged instead.
        reject_past_expiration: When True, a renewable grant whose expiration
            is not after the grant time raises
            :class:`ExpirationInPastError`. When False such a grant is stored
            and is simply exhausted from the start.
    """

    strict_recovery_rate: bool = True
    reject_past_expiration: bool = False


class EventLogConfig(BaseModel, frozen=True):
    """
    Configuration for the in-memory EventLog.

    Attributes:
        max_events: Maximum number of events retained. Oldest events are
            evicted when this limit is reached.
    """

    max_events: Annotated[int, Field(gt=0)] = 10_000


class LedgerConfig(BaseModel, frozen=True):
    """
    Top-level configuration for a RenewableAllowanceToken.

    Example::

        config = LedgerConfig(
            allowance=AllowanceConfig(strict_recovery_rate=True),
            events=EventLogConfig(max_events=1000),
        )
        token = RenewableAllowanceToken(base_token, config=config)
    """

    allowance: AllowanceConfig = Field(default_factory=AllowanceConfig)
    events: EventLogConfig = Field(default_factory=EventLogConfig)
