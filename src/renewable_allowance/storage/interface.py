# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod

from renewable_allowance.types import RenewableAllowance


class AllowanceStore(ABC):
    """
    Minimal persistence contract for allowance records.

    One record per ordered (owner, spender) pair. Implementors may back this
    with any key-value store that offers point reads and writes. The default
    MemoryAllowanceStore is suitable for single-process use and testing
    only; state is lost when the process exits.

    No locking is performed here; the host ledger serializes operations on
    a given pair.
    """

    @abstractmethod
    def get(self, owner: str, spender: str) -> RenewableAllowance:
        """Return the stored record, or the zero record if none exists."""
        ...

    @abstractmethod
    def set(self, owner: str, spender: str, record: RenewableAllowance) -> None:
        """Overwrite the record for the pair. No partial updates."""
        ...

    @abstractmethod
    def contains(self, owner: str, spender: str) -> bool:
        ...

    @abstractmethod
    def list_spenders(self, owner: str) -> list[str]:
        ...
