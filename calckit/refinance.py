from __future__ import annotations

import math
from typing import List

from calckit.calculators import monthly_payment
from calckit.models import CumulativeSavings, RefinanceInputs, RefinanceResult
from calckit.presets import REFINANCE_INTEREST_WEIGHT, REFINANCE_WORTH_MAX_MONTHS
from core.utils import round_to, round_whole


def total_interest(loan_amount, annual_rate, term_years):
    return monthly_payment(loan_amount, annual_rate, term_years) * term_years * 12 - loan_amount


def interest_over_period(loan_amount, annual_rate, years):
    """Interest paid on a loan amortized over exactly ``years`` years."""

    r = annual_rate / 100 / 12
    payment = monthly_payment(loan_amount, annual_rate, years)
    balance = loan_amount
    paid = 0.0
    for _ in range(int(years * 12)):
        interest = balance * r
        balance = max(0.0, balance - (payment - interest))
        paid += interest
    return paid


def cumulative_savings(
    current_loan,
    current_rate,
    remaining_years,
    new_loan,
    new_rate,
    new_term_years,
    closing_costs,
    savings,
) -> List[CumulativeSavings]:
    """Year-by-year net position of refinancing.

    Closing costs start the running total negative; positive monthly savings
    accrue only while the old loan would still have been outstanding.  The
    interest difference counts at half weight toward the net position.
    """

    out: List[CumulativeSavings] = []
    running = -closing_costs
    for year in range(1, max(remaining_years, new_term_years) + 1):
        if year <= remaining_years and savings > 0:
            running += savings * 12
        current_interest = interest_over_period(current_loan, current_rate, min(year, remaining_years))
        new_interest = interest_over_period(new_loan, new_rate, min(year, new_term_years))
        diff = current_interest - new_interest
        out.append(
            CumulativeSavings(
                year=year,
                cumulative_monthly_savings=round_whole(running),
                cumulative_interest_difference=round_whole(diff),
                net_position=round_whole(running + diff * REFINANCE_INTEREST_WEIGHT),
            )
        )
    return out


def calculate_refinance(inputs: RefinanceInputs) -> RefinanceResult:
    """Compare the remaining current loan against a replacement loan.

    ``current_loan_amount`` is the outstanding balance; it is re-amortized over
    the remaining years rounded up.  ``break_even_months`` is ``-1`` whenever
    the new payment is not lower.
    """

    remaining = math.ceil(inputs.years_remaining_on_current_loan)
    new_loan = inputs.current_loan_amount + inputs.cash_out_amount
    new_term = inputs.new_loan_term_years

    current_payment = monthly_payment(inputs.current_loan_amount, inputs.current_interest_rate, remaining)
    new_payment = monthly_payment(new_loan, inputs.new_interest_rate, new_term)
    savings = current_payment - new_payment

    break_even = math.ceil(inputs.closing_costs / savings) if savings > 0 else -1

    current_interest = total_interest(inputs.current_loan_amount, inputs.current_interest_rate, remaining)
    new_interest = total_interest(new_loan, inputs.new_interest_rate, new_term)

    comparison_years = min(remaining, new_term)
    saved_over_term = interest_over_period(
        inputs.current_loan_amount, inputs.current_interest_rate, comparison_years
    ) - interest_over_period(new_loan, inputs.new_interest_rate, comparison_years)

    return RefinanceResult(
        current_monthly_payment=round_to(current_payment),
        new_monthly_payment=round_to(new_payment),
        monthly_savings=round_to(savings),
        total_closing_costs=inputs.closing_costs,
        break_even_months=break_even,
        break_even_years=round_to(break_even / 12, 1),
        total_interest_saved=round_whole(current_interest - new_interest),
        total_interest_saved_over_term=round_whole(saved_over_term),
        is_worth_refinancing=savings > 0 and 0 < break_even < REFINANCE_WORTH_MAX_MONTHS,
        current_total_interest_remaining=round_whole(current_interest),
        new_total_interest=round_whole(new_interest),
        new_loan_amount=round_whole(new_loan),
        cumulative_savings=cumulative_savings(
            inputs.current_loan_amount,
            inputs.current_interest_rate,
            remaining,
            new_loan,
            inputs.new_interest_rate,
            new_term,
            inputs.closing_costs,
            savings,
        ),
    )


def should_refinance(
    current_rate,
    new_rate,
    break_even_months,
    min_rate_differential=0.5,
    max_break_even_months=48,
) -> bool:
    """Quick screen: enough of a rate drop and a short enough payback."""

    return (
        current_rate - new_rate >= min_rate_differential
        and 0 < break_even_months <= max_break_even_months
    )
