import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from calckit.models import CompoundInterestInputs, FIREInputs, WithdrawalInputs
from calckit.retirement import (
    calculate_compound_interest,
    calculate_fire,
    calculate_withdrawal,
    format_years,
    sustainability_label,
    sustainability_score,
    years_to_target,
)


def test_fire_typical_saver():
    res = calculate_fire(FIREInputs(annual_income=100000, annual_expenses=40000))
    assert res.fire_number == 1000000
    assert res.annual_savings == 60000
    assert res.savings_rate == 60.0
    assert res.monthly_savings == 5000
    assert res.years_to_retirement == 12
    assert len(res.projections) == 17
    assert res.projections[11].total_savings >= 1000000
    assert res.projections[10].total_savings < 1000000


def test_fire_already_independent():
    res = calculate_fire(FIREInputs(annual_income=80000, annual_expenses=40000, current_savings=2000000))
    assert res.years_to_retirement == 0
    assert len(res.projections) == 5


def test_fire_unreachable():
    res = calculate_fire(FIREInputs(annual_income=50000, annual_expenses=60000, current_savings=10000))
    assert res.years_to_retirement == -1
    assert res.annual_savings == -10000
    assert len(res.projections) == 50


def test_years_to_target_without_growth():
    assert years_to_target(0, 10000, 0, 50000) == 5
    assert years_to_target(60000, 10000, 0, 50000) == 0


def test_format_years():
    assert format_years(-1) == "Never (negative savings)"
    assert format_years(0) == "Already FI!"
    assert format_years(12) == "12 years"
    assert format_years(12.5) == "12 years, 6 months"


def test_compound_interest_frequencies():
    monthly = calculate_compound_interest(CompoundInterestInputs(principal=10000, years=1, annual_rate=12))
    quarterly = calculate_compound_interest(
        CompoundInterestInputs(principal=10000, years=1, annual_rate=12, compound_frequency="quarterly")
    )
    annually = calculate_compound_interest(
        CompoundInterestInputs(principal=10000, years=1, annual_rate=12, compound_frequency="annually")
    )
    assert monthly.final_balance == 11268
    assert quarterly.final_balance == 11255
    assert annually.final_balance == 11200
    assert annually.total_interest == 1200


def test_compound_interest_contributions_include_principal():
    res = calculate_compound_interest(
        CompoundInterestInputs(principal=10000, monthly_contribution=100, years=2, annual_rate=0)
    )
    assert res.total_contributions == 12400
    assert res.final_balance == 12400
    assert res.total_interest == 0
    assert len(res.yearly_breakdown) == 2
    assert res.yearly_breakdown[1].start_balance == 11200
    assert res.yearly_breakdown[1].contributions == 1200


def test_withdrawal_four_percent_rule_lasts():
    res = calculate_withdrawal(WithdrawalInputs(portfolio_value=1000000))
    assert res.initial_withdrawal == 40000
    assert res.monthly_income == 3333
    assert res.depletion_year is None
    assert len(res.yearly_projections) == 30
    assert res.yearly_projections[1].inflation_adjusted_withdrawal == 41200
    assert res.sustainability_score in ("excellent", "good")


def test_withdrawal_depletes_portfolio():
    res = calculate_withdrawal(
        WithdrawalInputs(portfolio_value=1000000, withdrawal_rate=12.5, inflation_rate=0, expected_return=0)
    )
    assert res.depletion_year == 8
    assert len(res.yearly_projections) == 8
    assert res.final_portfolio_value == 0
    assert res.total_withdrawn == 1000000
    assert res.sustainability_score == "risky"


def test_sustainability_score_bands():
    assert sustainability_score(900000, 1000000, 3.0, None, 30) == "excellent"
    assert sustainability_score(300000, 1000000, 4.0, None, 30) == "good"
    assert sustainability_score(100000, 1000000, 4.5, None, 30) == "caution"
    assert sustainability_score(100000, 1000000, 6.0, None, 30) == "risky"
    assert sustainability_score(900000, 1000000, 3.0, 20, 30) == "risky"
    assert sustainability_label("good") == "Good - Likely sustainable"
