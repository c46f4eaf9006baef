"""
Unit tests for amount conversion and mint aliasing.
These run without network access (pure Python logic).
"""

from decimal import Decimal

import pytest

from dex_trader.core.units import (
    LAMPORTS_PER_SOL,
    SOL_MINT,
    AmountError,
    from_raw_amount,
    lamports_to_sol,
    resolve_mint,
    to_raw_amount,
)


def test_half_sol_to_lamports():
    assert to_raw_amount(0.5, 9) == 500_000_000


def test_one_sol_is_lamports_per_sol():
    assert to_raw_amount(1, 9) == LAMPORTS_PER_SOL


@pytest.mark.parametrize("decimals", range(0, 19))
def test_raw_amount_matches_decimal_rounding(decimals):
    amount = 1.2345678901
    expected = int(
        (Decimal(str(amount)) * Decimal(10) ** decimals).to_integral_value(rounding="ROUND_HALF_UP")
    )
    assert to_raw_amount(amount, decimals) == expected


def test_rounds_half_away_from_zero():
    assert to_raw_amount(2.5, 0) == 3
    assert to_raw_amount(0.125, 2) == 13
    assert to_raw_amount(-2.5, 0) == -3


def test_no_float_artefacts():
    # 1.005 * 100 is 100.49999... in binary floating point
    assert to_raw_amount(1.005, 2) == 101


def test_large_amount_keeps_every_digit():
    assert to_raw_amount(123456789012.5, 18) == 123456789012_500000000000000000


def test_decimals_out_of_range():
    with pytest.raises(ValueError, match="decimals"):
        to_raw_amount(1, 19)


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_amount(amount):
    with pytest.raises(AmountError, match="finite"):
        to_raw_amount(amount, 9)


def test_amount_too_large_for_raw_units():
    with pytest.raises(AmountError, match="too large"):
        to_raw_amount(1e75, 9)


def test_largest_convertible_amounts_still_work():
    assert to_raw_amount(1e70, 9) == 10 ** 79


def test_amount_error_is_value_error():
    with pytest.raises(ValueError, match="must be a number"):
        to_raw_amount("lots", 9)


def test_from_raw_amount():
    assert from_raw_amount("75000000", 6) == pytest.approx(75.0)
    assert from_raw_amount(1, 0) == 1.0


def test_lamports_to_sol():
    assert lamports_to_sol(1_500_000_000) == pytest.approx(1.5)


def test_resolve_sol_alias():
    assert resolve_mint("SOL") == SOL_MINT


def test_resolve_passes_other_mints_through():
    mint = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
    assert resolve_mint(mint) == mint
    # alias is case sensitive
    assert resolve_mint("sol") == "sol"
