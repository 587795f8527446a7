"""Fixed-rate versus adjustable-rate mortgage comparison."""
from __future__ import annotations

import math
from typing import List

from calckit.calculators import monthly_payment, principal_from_payment
from calckit.models import (
    ARMInputs,
    ARMResult,
    ComparisonResult,
    FixedRateInputs,
    FixedRateResult,
    RateComparisonResult,
    ScenarioAnalysis,
)
from core.utils import round_to, round_whole


def _balance_after_years(loan_amount, annual_rate, term_years, years_elapsed):
    payment = monthly_payment(loan_amount, annual_rate, term_years)
    # what is still owed is the present value of the payments left
    return principal_from_payment(payment, annual_rate, term_years - years_elapsed)


def _accrue_year(balance, annual_rate, payment):
    """Run 12 monthly payments; return the new balance and the interest paid."""

    r = annual_rate / 100 / 12
    paid = 0.0
    for _ in range(12):
        interest = balance * r
        balance = max(0.0, balance - (payment - interest))
        paid += interest
    return balance, paid


def calculate_fixed_rate(inputs: FixedRateInputs) -> FixedRateResult:
    payment = monthly_payment(inputs.loan_amount, inputs.interest_rate, inputs.loan_term_years)
    n = inputs.loan_term_years * 12
    return FixedRateResult(
        monthly_payment=round_to(payment),
        total_interest=round_whole(payment * n - inputs.loan_amount),
        total_payments=n,
    )


def calculate_arm(inputs: ARMInputs, loan_term_years: int) -> ARMResult:
    """Project an ARM's rate path and payments year by year.

    The rate holds for ``initial_period_years`` and then steps by the expected
    adjustment (limited by the per-adjustment cap) on each interval boundary,
    never exceeding ``initial_rate + lifetime_rate_cap``.  Each year's payment
    re-amortizes the balance over the years left.  The balance used for
    re-amortizing assumes the whole loan had run at the current rate.
    """

    initial = inputs.initial_period_years
    initial_payment = monthly_payment(inputs.loan_amount, inputs.initial_rate, loan_term_years)
    ceiling = inputs.initial_rate + inputs.lifetime_rate_cap

    payments: List[float] = []
    rates: List[float] = []
    rate = inputs.initial_rate
    balance = inputs.loan_amount
    projected_interest = 0.0
    for year in range(1, loan_term_years + 1):
        if year <= initial:
            rate = inputs.initial_rate
        elif (year - initial) % inputs.adjustment_interval_years == 0:
            step = min(inputs.expected_rate_adjustment, inputs.rate_cap_per_adjustment)
            rate = min(rate + step, ceiling)

        remaining_balance = _balance_after_years(inputs.loan_amount, rate, loan_term_years, year - 1)
        payment = monthly_payment(remaining_balance, rate, loan_term_years - (year - 1))
        payments.append(round_to(payment))
        rates.append(rate)

        balance, interest = _accrue_year(balance, rate, initial_payment if year <= initial else payment)
        projected_interest += interest

    worst_balance = inputs.loan_amount
    worst_interest = 0.0
    for _ in range(initial):
        worst_balance, interest = _accrue_year(worst_balance, inputs.initial_rate, initial_payment)
        worst_interest += interest
    worst_payment = monthly_payment(worst_balance, ceiling, loan_term_years - initial)
    for _ in range(initial, loan_term_years):
        worst_balance, interest = _accrue_year(worst_balance, ceiling, worst_payment)
        worst_interest += interest

    return ARMResult(
        initial_monthly_payment=round_to(initial_payment),
        worst_case_monthly_payment=round_to(worst_payment),
        projected_monthly_payments=payments,
        projected_rates=rates,
        total_interest_projected=round_whole(projected_interest),
        total_interest_worst_case=round_whole(worst_interest),
    )


def _scenario_rate(arm: ARMInputs, year: int) -> float:
    if year <= arm.initial_period_years:
        return arm.initial_rate
    steps = math.ceil((year - arm.initial_period_years) / arm.adjustment_interval_years)
    return min(arm.initial_rate + steps * arm.expected_rate_adjustment, arm.initial_rate + arm.lifetime_rate_cap)


def compare_rates(fixed_inputs: FixedRateInputs, arm_inputs: ARMInputs) -> RateComparisonResult:
    """Year-by-year fixed vs ARM comparison with a recommendation.

    ``break_even_year`` is the first year the ARM payment exceeds the fixed
    payment, or ``-1`` if it never does.
    """

    fixed = calculate_fixed_rate(fixed_inputs)
    arm = calculate_arm(arm_inputs, fixed_inputs.loan_term_years)
    initial = arm_inputs.initial_period_years
    initial_savings = fixed.monthly_payment - arm.initial_monthly_payment

    scenarios: List[ScenarioAnalysis] = []
    cumulative = 0.0
    break_even_year = -1
    for year in range(1, fixed_inputs.loan_term_years + 1):
        arm_payment = arm.initial_monthly_payment if year <= initial else arm.projected_monthly_payments[year - 1]
        cumulative += (fixed.monthly_payment - arm_payment) * 12
        scenarios.append(
            ScenarioAnalysis(
                year=year,
                fixed_payment=fixed.monthly_payment,
                arm_payment=arm_payment,
                arm_rate=_scenario_rate(arm_inputs, year),
                cumulative_savings=round_whole(cumulative),
            )
        )
        if break_even_year == -1 and arm_payment > fixed.monthly_payment:
            break_even_year = year

    payment_jump = arm.worst_case_monthly_payment - arm.initial_monthly_payment
    if initial >= 7 and payment_jump < fixed.monthly_payment * 0.3:
        recommendation, risk = "arm", "low"
    elif initial >= 5 and payment_jump < fixed.monthly_payment * 0.5:
        recommendation, risk = "arm", "medium"
    elif initial >= 3 and initial_savings > 0:
        recommendation, risk = "neutral", "high"
    else:
        recommendation, risk = "fixed", "low"

    # ARM overtakes fixed soon after the teaser period
    if 0 < break_even_year <= initial + 2:
        recommendation, risk = "fixed", "medium"

    return RateComparisonResult(
        fixed_rate=fixed,
        arm=arm,
        comparison=ComparisonResult(
            initial_savings=round_to(initial_savings),
            break_even_year=break_even_year,
            total_savings_over_term=round_whole(cumulative),
            recommendation=recommendation,
            risk_level=risk,
        ),
        scenarios=scenarios,
    )
