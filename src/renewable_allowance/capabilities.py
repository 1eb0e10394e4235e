# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Capability discovery by interface identifier.

A selector is the first four bytes of SHA3-256 over a canonical function
signature. An interface identifier is the XOR of the selectors of the
functions it groups, so it changes whenever any signature in the group
does.
"""

from __future__ import annotations

import hashlib
from functools import reduce
from typing import Final

INVALID_INTERFACE_ID: Final[bytes] = b"\xff\xff\xff\xff"

RENEWABLE_ALLOWANCE_SIGNATURES: Final[tuple[str, ...]] = (
    "approveRenewable(address,uint256,uint256)",
    "renewableAllowance(address,address)",
)

EXPIRABLE_RENEWABLE_ALLOWANCE_SIGNATURES: Final[tuple[str, ...]] = (
    "approveRenewable(address,uint256,uint256,uint64)",
    "renewableAllowance(address,address)",
)

BASE_TOKEN_PROXY_SIGNATURES: Final[tuple[str, ...]] = ("getBaseToken()",)

CAPABILITY_DISCOVERY_SIGNATURES: Final[tuple[str, ...]] = ("supportsInterface(bytes4)",)


def selector(signature: str) -> bytes:
    """Return the 4-byte selector for a canonical function signature."""
    if not signature or "(" not in signature or not signature.endswith(")"):
        raise ValueError(f"Not a canonical function signature: {signature!r}")
    return hashlib.sha3_256(signature.encode("ascii")).digest()[:4]


def interface_id(signatures: tuple[str, ...]) -> bytes:
    """XOR the selectors of ``signatures`` into a single 4-byte identifier."""
    if not signatures:
        raise ValueError("An interface needs at least one function signature.")
    combined = reduce(
        lambda acc, sig: acc ^ int.from_bytes(selector(sig), "big"),
        signatures,
        0,
    )
    return combined.to_bytes(4, "big")


RENEWABLE_ALLOWANCE_INTERFACE_ID: Final[bytes] = interface_id(RENEWABLE_ALLOWANCE_SIGNATURES)
EXPIRABLE_RENEWABLE_ALLOWANCE_INTERFACE_ID: Final[bytes] = interface_id(
    EXPIRABLE_RENEWABLE_ALLOWANCE_SIGNATURES
)
BASE_TOKEN_PROXY_INTERFACE_ID: Final[bytes] = interface_id(BASE_TOKEN_PROXY_SIGNATURES)
CAPABILITY_DISCOVERY_INTERFACE_ID: Final[bytes] = interface_id(CAPABILITY_DISCOVERY_SIGNATURES)


def supports(advertised: frozenset[bytes], candidate: bytes) -> bool:
    """
    Check ``candidate`` against a set of advertised identifiers.

    ``0xffffffff`` is never supported, and anything that is not exactly
    four bytes is rejected rather than raising.
    """
    if not isinstance(candidate, (bytes, bytearray)) or len(candidate) != 4:
        return False
    candidate = bytes(candidate)
    if candidate == INVALID_INTERFACE_ID:
        return False
    return candidate in advertised
