# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
renewable-allowance: token allowances that regenerate over time.

Quick start::

    from renewable_allowance import MemoryBaseToken, RenewableAllowanceToken, TokenMetadata

    base = MemoryBaseToken(TokenMetadata(name="Credit", symbol="CRD"))
    base.mint("alice", 10_000)
    token = RenewableAllowanceToken(base)

    token.approve_renewable("alice", "bob", max_amount=1000, recovery_rate=10)
    token.transfer_from("bob", "alice", "carol", 400)
"""

from renewable_allowance.allowance import (
    allowance_state,
    allowance_terms,
    apply_consumption,
    create_renewable,
    create_static,
    is_expired,
    spendable_amount,
)
from renewable_allowance.arithmetic import UINT64_MAX, UINT256_MAX
from renewable_allowance.base_token import BaseToken, MemoryBaseToken, TokenMetadata
from renewable_allowance.capabilities import (
    BASE_TOKEN_PROXY_INTERFACE_ID,
    CAPABILITY_DISCOVERY_INTERFACE_ID,
    EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID,
    RENEWABLE_ALLOWANCE_INTERFACE_ID,
    interface_id,
    selector,
)
from renewable_allowance.clock import Clock, SystemClock
from renewable_allowance.config import AllowanceConfig, EventLogConfig, LedgerConfig
from renewable_allowance.engine import AllowanceEngine
from renewable_allowance.errors import (
    ExpirationInPastError,
    InsufficientAllowanceError,
    InsufficientBalanceError,
    InvalidRecoveryRateError,
    RenewableAllowanceError,
)
from renewable_allowance.events import (
    AllowanceGranted,
    Approval,
    EventLog,
    EventSink,
    LedgerEvent,
    Transfer,
)
from renewable_allowance.ledger import RenewableAllowanceProxy, RenewableAllowanceToken
from renewable_allowance.storage import AllowanceStore, MemoryAllowanceStore
from renewable_allowance.types import (
    ZERO_ALLOWANCE,
    AllowanceSnapshot,
    AllowanceState,
    AllowanceTerms,
    RenewableAllowance,
)

__all__ = [
    # Core classes
    "AllowanceEngine",
    "RenewableAllowanceToken",
    "RenewableAllowanceProxy",
    # Types
    "RenewableAllowance",
    "ZERO_ALLOWANCE",
    "AllowanceTerms",
    "AllowanceSnapshot",
    "AllowanceState",
    "UINT256_MAX",
    "UINT64_MAX",
    # Config
    "AllowanceConfig",
    "EventLogConfig",
    "LedgerConfig",
    # Errors
    "RenewableAllowanceError",
    "InvalidRecoveryRateError",
    "InsufficientAllowanceError",
    "InsufficientBalanceError",
    "ExpirationInPastError",
    # Storage
    "AllowanceStore",
    "MemoryAllowanceStore",
    # Collaborators
    "BaseToken",
    "MemoryBaseToken",
    "TokenMetadata",
    "Clock",
    "SystemClock",
    # Events
    "AllowanceGranted",
    "Approval",
    "Transfer",
    "LedgerEvent",
    "EventSink",
    "EventLog",
    # Capabilities
    "RENEWABLE_ALLOWANCE_INTERFACE_ID",
    "EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID",
    "BASE_TOKEN_PROXY_INTERFACE_ID",
    "CAPABILITY_DISCOVERY_INTERFACE_ID",
    "selector",
    "interface_id",
    # Utilities
    "create_renewable",
    "create_static",
    "spendable_amount",
    "apply_consumption",
    "is_expired",
    "allowance_terms",
    "allowance_state",
]
