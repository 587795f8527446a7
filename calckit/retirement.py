"""Retirement projectors: FIRE, compound growth and safe withdrawal."""
from __future__ import annotations

import math
from typing import List

from calckit.models import (
    CompoundInterestInputs,
    CompoundInterestResult,
    FIREInputs,
    FIREResult,
    WithdrawalInputs,
    WithdrawalProjection,
    WithdrawalResult,
    YearlyBreakdown,
    YearlyProjection,
)
from calckit.presets import FIRE_MAX_PROJECTION_YEARS, FIRE_MAX_YEARS
from core.utils import round_to, round_whole

SUSTAINABILITY_LABELS = {
    "excellent": "Excellent - Very sustainable",
    "good": "Good - Likely sustainable",
    "caution": "Caution - Monitor closely",
    "risky": "Risky - May deplete early",
}


def years_to_target(current_savings, annual_savings, return_rate, target):
    """Whole years of compounding plus contributions until ``target`` is met."""

    savings = current_savings
    years = 0
    while savings < target and years < FIRE_MAX_YEARS:
        savings += savings * return_rate + annual_savings
        years += 1
    return years


def fire_projections(current_savings, annual_savings, return_rate, years) -> List[YearlyProjection]:
    out: List[YearlyProjection] = []
    savings = current_savings
    for year in range(1, years + 1):
        interest = savings * return_rate
        savings += interest + annual_savings
        out.append(
            YearlyProjection(
                year=year,
                savings=round_whole(annual_savings * year + current_savings),
                interest_earned=round_whole(interest),
                total_savings=round_whole(savings),
            )
        )
    return out


def calculate_fire(inputs: FIREInputs) -> FIREResult:
    """Years until savings reach ``expenses / safe withdrawal rate``.

    ``years_to_retirement`` is ``-1`` when the target is out of reach (no
    positive savings and not already there) and ``0`` when it is already met.
    """

    annual_savings = inputs.annual_income - inputs.annual_expenses
    savings_rate = annual_savings / inputs.annual_income * 100 if inputs.annual_income else 0.0
    fire_number = inputs.annual_expenses / (inputs.safe_withdrawal_rate / 100)
    r = inputs.expected_return / 100

    if annual_savings <= 0 and inputs.current_savings < fire_number:
        years = None
    elif inputs.current_savings >= fire_number:
        years = 0
    else:
        years = years_to_target(inputs.current_savings, annual_savings, r, fire_number)

    horizon = FIRE_MAX_PROJECTION_YEARS if years is None else min(math.ceil(years) + 5, FIRE_MAX_PROJECTION_YEARS)

    return FIREResult(
        years_to_retirement=-1 if years is None else round_to(years, 1),
        fire_number=round_whole(fire_number),
        annual_savings=round_whole(annual_savings),
        savings_rate=round_to(savings_rate, 1),
        monthly_savings=round_whole(annual_savings / 12),
        projections=fire_projections(inputs.current_savings, annual_savings, r, horizon),
    )


def format_years(years_to_fire) -> str:
    if years_to_fire < 0:
        return "Never (negative savings)"
    if years_to_fire == 0:
        return "Already FI!"
    years = math.floor(years_to_fire)
    months = round_whole((years_to_fire - years) * 12)
    if months == 0:
        return f"{years} years"
    return f"{years} years, {months} months"


def calculate_compound_interest(inputs: CompoundInterestInputs) -> CompoundInterestResult:
    """Grow ``principal`` with a contribution at the start of every month.

    Interest is credited monthly, every third month, or in month 12 depending
    on ``compound_frequency``.  Contributions include the opening principal.
    """

    r = inputs.annual_rate / 100
    freq = inputs.compound_frequency
    balance = inputs.principal
    contributions = inputs.principal
    interest_total = 0.0
    breakdown: List[YearlyBreakdown] = []

    for year in range(1, inputs.years + 1):
        start = balance
        year_interest = 0.0
        year_contrib = 0.0
        for month in range(1, 13):
            balance += inputs.monthly_contribution
            year_contrib += inputs.monthly_contribution
            if freq == "monthly":
                credited = balance * r / 12
            elif freq == "quarterly" and month % 3 == 0:
                credited = balance * r / 4
            elif freq == "annually" and month == 12:
                credited = balance * r
            else:
                continue
            balance += credited
            year_interest += credited
        contributions += year_contrib
        interest_total += year_interest
        breakdown.append(
            YearlyBreakdown(
                year=year,
                start_balance=round_whole(start),
                contributions=round_whole(year_contrib),
                interest_earned=round_whole(year_interest),
                end_balance=round_whole(balance),
            )
        )

    return CompoundInterestResult(
        final_balance=round_whole(balance),
        total_contributions=round_whole(contributions),
        total_interest=round_whole(interest_total),
        yearly_breakdown=breakdown,
    )


def sustainability_score(final_balance, initial_balance, withdrawal_rate, depletion_year, planned_years) -> str:
    if depletion_year is not None and depletion_year < planned_years:
        return "risky"
    if withdrawal_rate <= 3.5 and final_balance >= initial_balance * 0.5:
        return "excellent"
    if withdrawal_rate <= 4 and final_balance >= initial_balance * 0.25:
        return "good"
    if withdrawal_rate <= 4.5:
        return "caution"
    return "risky"


def sustainability_label(score: str) -> str:
    return SUSTAINABILITY_LABELS.get(score, score)


def calculate_withdrawal(inputs: WithdrawalInputs) -> WithdrawalResult:
    """Simulate yearly inflation-adjusted withdrawals from a portfolio.

    Each year withdraws first and earns the return on what is left.  The
    simulation stops once the balance is exhausted; ``depletion_year`` is the
    last year that still had money to withdraw.
    """

    wr = inputs.withdrawal_rate / 100
    inflation = inputs.inflation_rate / 100
    ret = inputs.expected_return / 100

    balance = inputs.portfolio_value
    withdrawal = inputs.portfolio_value * wr
    total_withdrawn = 0.0
    depletion_year = None
    projections: List[WithdrawalProjection] = []

    for year in range(1, inputs.years_in_retirement + 1):
        if balance <= 0:
            if depletion_year is None:
                depletion_year = year - 1
            break
        start = balance
        scheduled = withdrawal
        actual = min(withdrawal, balance)
        balance -= actual
        earned = balance * ret
        balance += earned
        withdrawal *= 1 + inflation
        total_withdrawn += actual
        projections.append(
            WithdrawalProjection(
                year=year,
                start_balance=round_whole(start),
                withdrawal=round_whole(actual),
                inflation_adjusted_withdrawal=round_whole(scheduled),
                return_earned=round_whole(earned),
                end_balance=round_whole(max(0.0, balance)),
            )
        )
        if balance <= 0 and depletion_year is None:
            depletion_year = year

    return WithdrawalResult(
        initial_withdrawal=round_whole(inputs.portfolio_value * wr),
        monthly_income=round_whole(inputs.portfolio_value * wr / 12),
        final_portfolio_value=round_whole(max(0.0, balance)),
        total_withdrawn=round_whole(total_withdrawn),
        yearly_projections=projections,
        depletion_year=depletion_year,
        sustainability_score=sustainability_score(
            balance, inputs.portfolio_value, inputs.withdrawal_rate, depletion_year, inputs.years_in_retirement
        ),
    )
