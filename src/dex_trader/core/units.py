"""
Native asset constants and amount conversion.

All amounts sent to Jupiter or the RPC are raw integers in the asset's
smallest unit (lamports for SOL). Conversion from human units rounds half
away from zero exactly once, using Decimal so float artefacts never leak
into the raw value.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

# Wrapped SOL pseudo-mint; Jupiter treats it as native SOL
SOL_MINT = "So11111111111111111111111111111111111111112"
SOL_DECIMALS = 9
LAMPORTS_PER_SOL = 1_000_000_000

# Alias accepted wherever a mint address is expected
SOL_ALIAS = "SOL"

MAX_DECIMALS = 18

# Significant digits for conversions (a u64 raw amount needs 20)
_PRECISION = 80


class AmountError(ValueError):
    """Raised when an amount cannot be converted to raw units."""
    pass


def resolve_mint(mint: str) -> str:
    """Map the literal "SOL" to the native pseudo-mint, pass anything else through."""
    return SOL_MINT if mint == SOL_ALIAS else mint


def to_raw_amount(amount: float | int | str | Decimal, decimals: int) -> int:
    """
    Convert a human-readable amount into raw smallest units.

    Args:
        amount: amount in whole units (e.g. 0.5 SOL)
        decimals: decimal places of the asset (0-18)

    Returns:
        int: round(amount * 10^decimals), half away from zero

    Raises:
        AmountError: decimals out of range, or an amount that is not finite or
            too large to express in raw units
    """
    if not 0 <= decimals <= MAX_DECIMALS:
        raise AmountError(f"decimals must be between 0 and {MAX_DECIMALS}, got {decimals}")
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise AmountError(f"amount must be a number, got {amount!r}") from e
    if not value.is_finite():
        raise AmountError(f"amount must be a finite number, got {amount}")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            scaled = value.scaleb(decimals)
            return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        except InvalidOperation as e:
            raise AmountError(
                f"amount {amount} with {decimals} decimals is too large to convert to raw units"
            ) from e


def from_raw_amount(raw: int | str, decimals: int) -> float:
    """Convert a raw integer amount back to whole units."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(int(raw)).scaleb(-decimals))


def lamports_to_sol(lamports: int | str) -> float:
    return from_raw_amount(lamports, SOL_DECIMALS)
