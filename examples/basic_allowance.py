# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_allowance.py

Demonstrates a spender drawing on a renewable allowance:
  1. Mint a balance and grant a renewable allowance.
  2. Spend in bursts while simulated time passes.
  3. Watch the allowance recover between bursts.
  4. Inspect the event log at the end.

Run with:  python examples/basic_allowance.py
(from the repository root with renewable-allowance installed)
"""

from renewable_allowance import (
    InsufficientAllowanceError,
    MemoryBaseToken,
    RenewableAllowanceToken,
    TokenMetadata,
)


class SteppedClock:
    def __init__(self) -> None:
        self.current = 0

    def now(self) -> int:
        return self.current


# ─── Setup ────────────────────────────────────────────────────────────────────

clock = SteppedClock()
base = MemoryBaseToken(TokenMetadata(name="Credit", symbol="CRD", decimals=2))
base.mint("treasury", 100_000)

token = RenewableAllowanceToken(base, clock=clock)
token.approve_renewable("treasury", "payroll-bot", max_amount=1_000, recovery_rate=10)

# ─── Simulate bursts of spending ──────────────────────────────────────────────

schedule = [(0, 600), (10, 500), (30, 500), (60, 200), (200, 1_000)]

for at, amount in schedule:
    clock.current = at
    available = token.allowance("treasury", "payroll-bot")
    try:
        token.transfer_from("payroll-bot", "treasury", "contractor", amount)
    except InsufficientAllowanceError as exc:
        print(f"t={at:>4}: DENIED   {amount:>5}  available={exc.available}")
        continue
    print(
        f"t={at:>4}: SPENT    {amount:>5}  available_before={available:>5}  "
        f"available_after={token.allowance('treasury', 'payroll-bot')}"
    )

# ─── Final state ──────────────────────────────────────────────────────────────

snapshot = token.allowance_snapshot("treasury", "payroll-bot")

print("\n── Allowance summary ─────────────────────────────────")
print(f"  State         : {snapshot.state}")
print(f"  Max amount    : {snapshot.max_amount}")
print(f"  Recovery rate : {snapshot.recovery_rate}/s")
print(f"  Spendable     : {snapshot.spendable}")
print(f"  Contractor    : {token.balance_of('contractor')} {token.symbol()}")
print("──────────────────────────────────────────────────────")

print(f"\n{token.events.count()} events recorded:")
for event in token.events.query():
    print(f"  {event.kind:<18} {event.model_dump(exclude={'kind'})}")
