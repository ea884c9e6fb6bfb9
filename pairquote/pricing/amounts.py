"""
Single-hop constant-product math with the V2 0.3% fee.

Integer-for-integer port of the on-chain quote / getAmountOut / getAmountIn.
Python ints never overflow, so every input and intermediate is checked against
uint256 to reject exactly what checked on-chain math would revert on.

Rounding: amount-out rounds down, amount-in rounds up (the trailing +1).
The pairing guarantees amount_out_for_exact_in(amount_in_for_exact_out(x)) >= x.
"""

from pairquote.constants import MAX_UINT256
from pairquote.errors import (
    ArithmeticOverflowError,
    InsufficientAmountError,
    InsufficientInputAmountError,
    InsufficientLiquidityError,
    InsufficientOutputAmountError,
)

FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000


def _uint(value: int, label: str) -> int:
    """Reject anything outside [0, 2**256 - 1]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an int, got {type(value).__name__}")
    if value < 0 or value > MAX_UINT256:
        raise ArithmeticOverflowError(f"{label}={value}")
    return value


def quote_equivalent(amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Proportional amount of B for amount_a of A at current reserves. No fee."""
    _uint(amount_a, "amount_a")
    _uint(reserve_a, "reserve_a")
    _uint(reserve_b, "reserve_b")
    if amount_a == 0:
        raise InsufficientAmountError(f"amount_a={amount_a}")
    if reserve_a == 0 or reserve_b == 0:
        raise InsufficientLiquidityError(f"reserves=({reserve_a}, {reserve_b})")
    return _uint(amount_a * reserve_b, "amount_a * reserve_b") // reserve_a


def amount_out_for_exact_in(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """Max output for an exact input, after fee. Rounds down."""
    _uint(amount_in, "amount_in")
    _uint(reserve_in, "reserve_in")
    _uint(reserve_out, "reserve_out")
    if amount_in == 0:
        raise InsufficientInputAmountError(f"amount_in={amount_in}")
    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidityError(f"reserves=({reserve_in}, {reserve_out})")

    amount_in_with_fee = _uint(amount_in * FEE_NUMERATOR, "amount_in_with_fee")
    numerator = _uint(amount_in_with_fee * reserve_out, "numerator")
    denominator = _uint(
        _uint(reserve_in * FEE_DENOMINATOR, "reserve_in * 1000") + amount_in_with_fee,
        "denominator",
    )
    return numerator // denominator


def amount_in_for_exact_out(amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Min input needed for an exact output, after fee. Rounds up."""
    _uint(amount_out, "amount_out")
    _uint(reserve_in, "reserve_in")
    _uint(reserve_out, "reserve_out")
    if amount_out == 0:
        raise InsufficientOutputAmountError(f"amount_out={amount_out}")
    if reserve_in == 0 or reserve_out == 0:
        raise InsufficientLiquidityError(f"reserves=({reserve_in}, {reserve_out})")
    if amount_out >= reserve_out:
        raise InsufficientLiquidityError(f"amount_out={amount_out} >= reserve_out={reserve_out}")

    numerator = _uint(
        _uint(reserve_in * amount_out, "reserve_in * amount_out") * FEE_DENOMINATOR,
        "numerator",
    )
    denominator = _uint((reserve_out - amount_out) * FEE_NUMERATOR, "denominator")
    return _uint(numerator // denominator + 1, "amount_in")
