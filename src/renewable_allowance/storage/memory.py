# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from renewable_allowance.storage.interface import AllowanceStore
from renewable_allowance.types import ZERO_ALLOWANCE, RenewableAllowance


class MemoryAllowanceStore(AllowanceStore):
    """
    In-process memory store, suitable for single-process ledgers and testing.

    Records are immutable models, so they are stored and returned as-is.
    """

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], RenewableAllowance] = {}

    def get(self, owner: str, spender: str) -> RenewableAllowance:
        return self._records.get((owner, spender), ZERO_ALLOWANCE)

    def set(self, owner: str, spender: str, record: RenewableAllowance) -> None:
        self._records[(owner, spender)] = record

    def contains(self, owner: str, spender: str) -> bool:
        return (owner, spender) in self._records

    def list_spenders(self, owner: str) -> list[str]:
        return [spender for (key_owner, spender) in self._records if key_owner == owner]

    def __len__(self) -> int:
        return len(self._records)
