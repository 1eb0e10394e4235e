# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from renewable_allowance.storage.interface import AllowanceStore
from renewable_allowance.storage.memory import MemoryAllowanceStore

__all__ = ["AllowanceStore", "MemoryAllowanceStore"]
