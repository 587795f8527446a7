"""Home affordability under the 28/36 qualifying rule."""
from __future__ import annotations

import math

from calckit.calculators import monthly_payment
from calckit.models import AffordabilityInputs, AffordabilityResult, MonthlyBreakdown, PurchaseReadiness
from calckit.presets import (
    BACK_END_LIMIT,
    FRONT_END_LIMIT,
    NON_HOUSING_DTI_LIMIT,
    PMI_THRESHOLD_PCT,
    READINESS_THRESHOLD,
    READINESS_WEIGHTS,
    SEARCH_HORIZON_YEARS,
    SEARCH_ITERATIONS,
)
from core.rules import action_items, evaluate_affordability_rules, evaluate_readiness_rules
from core.utils import round_to, round_whole


def monthly_housing_cost(
    loan_amount,
    home_price,
    annual_rate,
    term_years,
    property_tax_rate,
    insurance_rate,
    down_payment_pct,
    pmi_rate,
    hoa_monthly,
) -> dict:
    """Unrounded monthly PITI plus HOA for a purchase at ``home_price``.

    Tax and insurance rates are annual percentages of the price; PMI is an
    annual percentage of the loan and applies below 20% down.
    """

    pi = monthly_payment(loan_amount, annual_rate, term_years)
    tax = home_price * property_tax_rate / 100 / 12
    insurance = home_price * insurance_rate / 100 / 12
    pmi = loan_amount * pmi_rate / 100 / 12 if down_payment_pct < PMI_THRESHOLD_PCT else 0.0
    return {
        "principal_and_interest": pi,
        "property_tax": tax,
        "homeowners_insurance": insurance,
        "pmi": pmi,
        "hoa": hoa_monthly,
        "total": pi + tax + insurance + pmi + hoa_monthly,
    }


def find_max_home_price(
    max_monthly_payment,
    down_payment,
    annual_rate,
    term_years,
    property_tax_rate,
    insurance_rate,
    pmi_rate,
    hoa_monthly,
):
    """Binary-search the highest price whose monthly cost stays under budget.

    The down payment is a fixed dollar amount, so its percentage of the price
    shrinks as the price grows.  Runs a fixed number of halvings over
    ``[0, budget * 12 * 30]`` and returns the lower bound.
    """

    if max_monthly_payment <= 0:
        return 0.0

    low = 0.0
    high = max_monthly_payment * 12 * SEARCH_HORIZON_YEARS
    for _ in range(SEARCH_ITERATIONS):
        mid = (low + high) / 2
        down_pct = down_payment / mid * 100
        cost = monthly_housing_cost(
            max(0.0, mid - down_payment),
            mid,
            annual_rate,
            term_years,
            property_tax_rate,
            insurance_rate,
            down_pct,
            pmi_rate,
            hoa_monthly,
        )
        if cost["total"] < max_monthly_payment:
            low = mid
        else:
            high = mid
    return low


def affordability_score(front_end, back_end, down_payment_pct, non_housing_dti) -> int:
    """0-100 score; ``non_housing_dti`` is existing debt as a percent of income."""

    score = 100.0
    if front_end > FRONT_END_LIMIT:
        score -= min(30, (front_end - FRONT_END_LIMIT) * 3)
    if back_end > BACK_END_LIMIT:
        score -= min(30, (back_end - BACK_END_LIMIT) * 3)
    if down_payment_pct >= 20:
        score += 10
    elif down_payment_pct < 10:
        score -= 15
    if non_housing_dti > NON_HOUSING_DTI_LIMIT:
        score -= min(20, (non_housing_dti - NON_HOUSING_DTI_LIMIT) * 2)
    return max(0, min(100, round_whole(score)))


def calculate_affordability(inputs: AffordabilityInputs) -> AffordabilityResult:
    monthly_income = inputs.annual_gross_income / 12
    debt = inputs.monthly_debt_payments
    available = min(monthly_income * FRONT_END_LIMIT / 100, monthly_income * BACK_END_LIMIT / 100 - debt)

    max_price = find_max_home_price(
        max(0.0, available),
        inputs.down_payment_available,
        inputs.annual_interest_rate,
        inputs.loan_term_years,
        inputs.property_tax_rate,
        inputs.homeowners_insurance_rate,
        inputs.pmi_rate,
        inputs.hoa_monthly,
    )

    down_pct = inputs.down_payment_available / max_price * 100 if max_price > 0 else 0.0
    loan_amount = max(0.0, max_price - inputs.down_payment_available)
    cost = monthly_housing_cost(
        loan_amount,
        max_price,
        inputs.annual_interest_rate,
        inputs.loan_term_years,
        inputs.property_tax_rate,
        inputs.homeowners_insurance_rate,
        down_pct,
        inputs.pmi_rate,
        inputs.hoa_monthly,
    )

    if monthly_income > 0:
        front_end = cost["total"] / monthly_income * 100
        back_end = (cost["total"] + debt) / monthly_income * 100
        non_housing_dti = debt / monthly_income * 100
    else:
        front_end = back_end = non_housing_dti = 0.0

    findings = evaluate_affordability_rules(
        {
            "front_end_ratio": front_end,
            "back_end_ratio": back_end,
            "down_payment_percent": down_pct,
            "monthly_debt": debt,
            "monthly_income": monthly_income,
            "max_home_price": max_price,
        }
    )

    savings_needed = max(0.0, max_price * 0.20 - inputs.down_payment_available)
    if savings_needed > 0 and inputs.monthly_savings_available > 0:
        months_to_save = math.ceil(savings_needed / inputs.monthly_savings_available)
    elif savings_needed > 0:
        months_to_save = -1
    else:
        months_to_save = 0

    return AffordabilityResult(
        max_home_price=round_whole(max_price),
        max_monthly_payment=round_to(cost["total"]),
        monthly_income=round_whole(monthly_income),
        front_end_ratio=round_to(front_end, 1),
        back_end_ratio=round_to(back_end, 1),
        down_payment_percent=round_to(down_pct, 1),
        loan_amount=round_whole(loan_amount),
        estimated_monthly_breakdown=MonthlyBreakdown(**{k: round_to(v) for k, v in cost.items()}),
        can_afford_home=available > 0 and max_price > 0,
        affordability_score=affordability_score(front_end, back_end, down_pct, non_housing_dti),
        recommendations=[r.message for r in findings],
        savings_needed_for_down_payment=round_whole(savings_needed),
        months_to_save_for_down_payment=months_to_save,
    )


def calculate_purchase_readiness(inputs: AffordabilityInputs) -> PurchaseReadiness:
    """Score how ready the buyer is, using the rounded affordability figures."""

    aff = calculate_affordability(inputs)
    monthly_income = inputs.annual_gross_income / 12
    dti = inputs.monthly_debt_payments / monthly_income * 100 if monthly_income > 0 else 0.0
    down = inputs.down_payment_available

    gates = {
        "down_payment": down >= aff.max_home_price * 0.10,
        "emergency_fund": down >= aff.max_home_price * 0.25,
        "debt_to_income": dti <= NON_HOUSING_DTI_LIMIT,
        "cash_flow": inputs.monthly_savings_available >= aff.max_monthly_payment,
        "can_afford": aff.can_afford_home,
    }
    score = sum(READINESS_WEIGHTS[k] for k, ok in gates.items() if ok)

    findings = evaluate_readiness_rules(
        {
            "down_payment_available": down,
            "max_home_price": aff.max_home_price,
            "debt_to_income_ratio": dti,
            "monthly_savings_available": inputs.monthly_savings_available,
            "max_monthly_payment": aff.max_monthly_payment,
            "front_end_ratio": aff.front_end_ratio,
        }
    )

    return PurchaseReadiness(
        is_ready=score >= READINESS_THRESHOLD and gates["down_payment"] and aff.can_afford_home,
        readiness_score=score,
        strengths=[r.message for r in findings if r.severity == "info"],
        weaknesses=[r.message for r in findings if r.severity == "warn"],
        action_items=action_items(findings),
        down_payment_ready=gates["down_payment"],
        emergency_fund_ready=gates["emergency_fund"],
        debt_to_income_ready=gates["debt_to_income"],
        monthly_cash_flow_ready=gates["cash_flow"],
    )
