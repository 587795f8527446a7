from __future__ import annotations

from datetime import date
from typing import List, Optional

import pandas as pd

from calckit.models import (
    AmortizationPayment,
    AmortizationResult,
    ExtraPaymentImpact,
    LoanTerms,
    MonthlyPaymentInputs,
    MonthlyPaymentResult,
    PaymentBreakdown,
    YearlySummary,
)
from calckit.presets import PAYOFF_SAFETY_CAP_MONTHS, PMI_THRESHOLD_PCT
from core.utils import nz, round_to, round_whole


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``6.5`` for 6.5%), and ``term_years`` is
    the amortization period in years.  A zero rate spreads the principal
    evenly over the term.
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        return 0.0
    if r == 0:
        return L / n
    factor = (1 + r) ** n
    return L * r * factor / (factor - 1)


def principal_from_payment(payment, annual_rate_pct, term_years):
    """Reverse amortization to find the loan amount for a given payment."""

    P = nz(payment)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        return 0.0
    if r == 0:
        return P * n
    return P * (1 - (1 + r) ** (-n)) / r


def calculate_monthly_payment(inputs: MonthlyPaymentInputs) -> MonthlyPaymentResult:
    """Break a purchase into its monthly PITI components.

    PMI is charged on the loan balance only while the down payment is below
    20% of the price and a PMI rate was supplied.
    """

    loan_amount = inputs.home_price - inputs.down_payment
    down_pct = inputs.down_payment / inputs.home_price * 100 if inputs.home_price else 0.0
    n = inputs.loan_term_years * 12

    pi = monthly_payment(loan_amount, inputs.annual_interest_rate, inputs.loan_term_years)
    tax = inputs.property_tax_annual / 12
    insurance = inputs.homeowners_insurance_annual / 12
    pmi = 0.0
    if down_pct < PMI_THRESHOLD_PCT and inputs.pmi_rate > 0:
        pmi = loan_amount * (inputs.pmi_rate / 100) / 12
    total = pi + tax + insurance + pmi + inputs.hoa_monthly

    return MonthlyPaymentResult(
        loan_amount=round_whole(loan_amount),
        monthly_principal_and_interest=round_to(pi),
        monthly_property_tax=round_to(tax),
        monthly_insurance=round_to(insurance),
        monthly_pmi=round_to(pmi),
        monthly_hoa=round_to(inputs.hoa_monthly),
        total_monthly_payment=round_to(total),
        down_payment_percent=round_to(down_pct, 1),
        total_interest_paid=round_whole(pi * n - loan_amount),
        total_payments=n,
    )


def calculate_payment_breakdown(remaining_balance, monthly_rate, payment) -> PaymentBreakdown:
    interest = remaining_balance * monthly_rate
    principal = payment - interest
    return PaymentBreakdown(
        principal=max(0.0, principal),
        interest=interest,
        balance=max(0.0, remaining_balance - principal),
    )


def calculate_ltv(home_price, down_payment):
    """Loan-to-value ratio in percent."""

    price = nz(home_price)
    if price == 0:
        return 0.0
    return (price - nz(down_payment)) / price * 100


def _payment_label(start_date: date, months: int) -> str:
    return (pd.Timestamp(start_date) + pd.DateOffset(months=months)).strftime("%B %Y")


def yearly_summary(schedule: List[AmortizationPayment]) -> List[YearlySummary]:
    """Roll a monthly schedule up into 12-payment years."""

    if not schedule:
        return []
    df = pd.DataFrame([p.model_dump() for p in schedule])
    df["year"] = (df["payment_number"] - 1) // 12 + 1

    out: List[YearlySummary] = []
    for year, grp in df.groupby("year", sort=True):
        first = grp.iloc[0]
        last = grp.iloc[-1]
        out.append(
            YearlySummary(
                year=int(year),
                total_principal=round_to(grp["principal"].sum()),
                total_interest=round_to(grp["interest"].sum()),
                total_payments=round_to(grp["payment"].sum()),
                starting_balance=float(first["remaining_balance"] + first["principal"]),
                ending_balance=float(last["remaining_balance"]),
            )
        )
    return out


def calculate_amortization(terms: LoanTerms, start_date: Optional[date] = None) -> AmortizationResult:
    """Generate the full month-by-month schedule for ``terms``.

    Exactly ``term_years * 12`` rows are produced.  The final principal is
    capped at the outstanding balance so the loan closes at zero.
    """

    r = terms.annual_rate_pct / 100 / 12
    n = terms.term_years * 12
    payment = monthly_payment(terms.principal, terms.annual_rate_pct, terms.term_years)

    schedule: List[AmortizationPayment] = []
    balance = terms.principal
    cum_principal = 0.0
    cum_interest = 0.0
    for k in range(1, n + 1):
        interest = balance * r
        principal = min(payment - interest, balance)
        balance = max(0.0, balance - principal)
        cum_principal += principal
        cum_interest += interest
        schedule.append(
            AmortizationPayment(
                payment_number=k,
                payment=round_to(payment),
                principal=round_to(principal),
                interest=round_to(interest),
                remaining_balance=round_to(balance),
                cumulative_principal=round_to(cum_principal),
                cumulative_interest=round_to(cum_interest),
                date=_payment_label(start_date, k) if start_date else None,
            )
        )

    return AmortizationResult(
        monthly_payment=round_to(payment),
        total_payments=n,
        total_principal=round_to(cum_principal),
        total_interest=round_to(cum_interest),
        schedule=schedule,
        yearly_summary=yearly_summary(schedule),
    )


def calculate_remaining_balance(loan_amount, monthly_rate, payment, months_elapsed):
    balance = nz(loan_amount)
    for _ in range(int(months_elapsed)):
        interest = balance * monthly_rate
        balance = max(0.0, balance - (payment - interest))
    return balance


def _payoff(loan_amount, monthly_rate, payment):
    balance = loan_amount
    months = 0
    interest_paid = 0.0
    while balance > 0:
        interest = balance * monthly_rate
        balance -= min(payment - interest, balance)
        interest_paid += interest
        months += 1
        if months > PAYOFF_SAFETY_CAP_MONTHS:
            break
    return months, interest_paid


def calculate_extra_payment_impact(loan_amount, annual_rate, payment, extra_payment) -> ExtraPaymentImpact:
    """Compare payoff with and without an extra monthly principal payment.

    Payments that never retire the balance stop at the 50-year safety cap.
    """

    r = annual_rate / 100 / 12
    base_months, base_interest = _payoff(loan_amount, r, payment)
    extra_months, extra_interest = _payoff(loan_amount, r, payment + extra_payment)
    return ExtraPaymentImpact(
        months_saved=base_months - extra_months,
        interest_saved=round_whole(base_interest - extra_interest),
    )
