# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Clock abstraction for time-dependent ledger calls. Inject a fake in tests."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Return the current time in whole seconds since the epoch."""
        ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> int:
        return int(time.time())
