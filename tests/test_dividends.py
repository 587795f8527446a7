import os
import sys
from datetime import date, timedelta

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from calckit.dividends import (
    build_dividend_history,
    calculate_annual_dividend,
    calculate_dividend_projections,
    calculate_dividends_per_period,
    calculate_growth_rate,
    detect_dividend_frequency,
    fetch_dividend_info,
    payments_per_year,
)
from calckit.models import DividendCalculatorInputs, DividendHistory, DividendPayment, StockInfo


def _spaced(start, days, amounts):
    return [DividendPayment(ex_date=start + timedelta(days=days * i), amount=a) for i, a in enumerate(amounts)]


def _history(annual=2.0, price=50.0, growth=0.0):
    return DividendHistory(
        dividends=[],
        stock_info=StockInfo(symbol="TEST", name="Test Co", price=price),
        dividend_frequency="quarterly",
        dividends_per_period=annual / 4,
        annual_dividend=annual,
        dividend_yield=annual / price * 100 if price else 0.0,
        average_growth_rate=growth,
    )


class FakeClient:
    def __init__(self, rows, quote, overview):
        self.rows = rows
        self.quote = quote
        self.overview = overview
        self.calls = []

    def fetch_dividends(self, symbol):
        self.calls.append(("dividends", symbol))
        return self.rows

    def fetch_quote(self, symbol):
        self.calls.append(("quote", symbol))
        return self.quote

    def fetch_overview(self, symbol):
        self.calls.append(("overview", symbol))
        return self.overview


def test_monthly_payer():
    amounts = [0.10 + 0.01 * i for i in range(12)]
    payments = _spaced(date(2024, 1, 15), 30, amounts)
    assert detect_dividend_frequency(payments) == "monthly"
    expected = sum(amounts) / 12 * 12
    assert calculate_annual_dividend(payments, "monthly") == pytest.approx(expected)


def test_quarterly_payer_uses_latest_four():
    payments = _spaced(date(2022, 2, 1), 91, [0.20, 0.20, 0.20, 0.20, 0.25, 0.25, 0.25, 0.25])
    assert detect_dividend_frequency(payments) == "quarterly"
    assert calculate_dividends_per_period(payments, "quarterly") == pytest.approx(0.25)
    assert calculate_annual_dividend(payments, "quarterly") == pytest.approx(1.0)


def test_per_period_ignores_input_order():
    payments = _spaced(date(2022, 2, 1), 91, [0.20, 0.20, 0.20, 0.20, 0.25, 0.25, 0.25, 0.25])
    assert calculate_dividends_per_period(list(reversed(payments)), "quarterly") == pytest.approx(0.25)


def test_single_payment_is_unknown():
    assert detect_dividend_frequency([DividendPayment(ex_date=date(2024, 5, 1), amount=1.0)]) == "unknown"
    assert payments_per_year("unknown") == 4


def test_frequency_falls_back_to_last_year_count():
    payments = [
        DividendPayment(ex_date=date(2023, 3, 1), amount=0.5),
        DividendPayment(ex_date=date(2023, 4, 30), amount=0.5),
    ]
    # a 60 day gap fits no interval window
    assert detect_dividend_frequency(payments, today=date(2024, 6, 1)) == "semi-annual"


def test_frequency_falls_back_to_average_per_year():
    payments = [
        DividendPayment(ex_date=date(2020, 3, 1), amount=0.5),
        DividendPayment(ex_date=date(2020, 4, 30), amount=0.5),
    ]
    assert detect_dividend_frequency(payments, today=date(2024, 6, 1)) == "semi-annual"


def test_growth_rate_drops_outliers():
    payments = [
        DividendPayment(ex_date=date(2020, 6, 1), amount=1.00),
        DividendPayment(ex_date=date(2021, 6, 1), amount=1.10),
        DividendPayment(ex_date=date(2022, 6, 1), amount=1.21),
        DividendPayment(ex_date=date(2023, 6, 1), amount=5.00),
    ]
    assert calculate_growth_rate(payments) == pytest.approx(0.10)


def test_growth_rate_drops_collapses():
    amounts = [1.0, 1.1, 4.0, 0.3, 0.33]
    payments = [DividendPayment(ex_date=date(2019 + i, 6, 1), amount=a) for i, a in enumerate(amounts)]
    # +264% and -92.5% are both dropped, leaving two +10% years
    assert calculate_growth_rate(payments) == pytest.approx(0.10)


def test_growth_rate_skips_near_zero_years():
    payments = [
        DividendPayment(ex_date=date(2020, 6, 1), amount=0.005),
        DividendPayment(ex_date=date(2021, 6, 1), amount=1.00),
        DividendPayment(ex_date=date(2022, 6, 1), amount=1.10),
    ]
    assert calculate_growth_rate(payments) == pytest.approx(0.10)


def test_growth_rate_needs_two_years():
    payments = _spaced(date(2024, 1, 15), 30, [0.1] * 6)
    assert calculate_growth_rate(payments) == 0.0


def test_build_history_yield():
    payments = _spaced(date(2023, 1, 10), 91, [0.5] * 4)
    history = build_dividend_history(payments, StockInfo(symbol="KO", price=40.0))
    assert history.dividend_frequency == "quarterly"
    assert history.annual_dividend == pytest.approx(2.0)
    assert history.dividend_yield == pytest.approx(5.0)
    assert history.dividends[0].ex_date > history.dividends[-1].ex_date


def test_build_history_zero_price():
    payments = _spaced(date(2023, 1, 10), 91, [0.5] * 4)
    history = build_dividend_history(payments, StockInfo(symbol="KO"))
    assert history.dividend_yield == 0.0


def test_fetch_dividend_info_with_client():
    rows = [
        {"ex_dividend_date": "2024-03-14", "amount": "0.485"},
        {"ex_dividend_date": "2023-11-30", "amount": "0.46"},
        {"ex_dividend_date": "2023-09-14", "amount": "0.46"},
        {"ex_dividend_date": "2023-06-15", "amount": "0.46"},
    ]
    client = FakeClient(rows, {"01. symbol": "KO", "05. price": "60.00"}, {"Name": "Coca-Cola Co", "Exchange": "NYSE"})
    history = fetch_dividend_info("ko", client)
    assert [c[0] for c in client.calls] == ["dividends", "quote", "overview"]
    assert history.stock_info.symbol == "KO"
    assert history.stock_info.name == "Coca-Cola Co"
    assert history.stock_info.exchange == "NYSE"
    assert history.stock_info.currency == "USD"
    assert history.dividend_frequency == "quarterly"
    assert history.dividends[0].ex_date == date(2024, 3, 14)
    assert history.annual_dividend == pytest.approx(0.485 + 0.46 * 3)


def test_fetch_dividend_info_name_falls_back_to_symbol():
    rows = [{"ex_dividend_date": "2024-03-14", "amount": "0.5"}, {"ex_dividend_date": "2023-12-14", "amount": "0.5"}]
    client = FakeClient(rows, {"05. price": "10"}, {})
    history = fetch_dividend_info("XYZ", client)
    assert history.stock_info.symbol == "XYZ"
    assert history.stock_info.name == "XYZ"


def test_projection_with_growth_override():
    res = calculate_dividend_projections(_history(annual=1.0), DividendCalculatorInputs(shares=100, years=3, growth_rate=10))
    annual = [p.projected_annual_dividend for p in res.projections]
    assert annual == [100.0, 110.0, 121.0]
    assert res.projections[0].projected_quarterly_dividend == 25.0
    assert res.total_projected_dividends == 331.0
    assert res.projections[-1].cumulative_dividends == 331.0
    assert res.total_investment == 5000.0
    assert not res.drip_enabled


def test_projection_uses_historical_growth():
    res = calculate_dividend_projections(_history(annual=1.0, growth=0.05), DividendCalculatorInputs(shares=10, years=2))
    assert res.projections[1].projected_annual_dividend == 10.5
    assert res.historical_growth_rate == 0.05


def test_drip_reinvests_at_share_price():
    res = calculate_dividend_projections(
        _history(annual=2.0, price=50.0),
        DividendCalculatorInputs(shares=100, years=2, growth_rate=0, drip_enabled=True, price_growth_rate=0),
    )
    assert res.drip_enabled
    first, second = res.projections
    assert first.shares_owned == 100
    assert first.new_shares_from_drip == 4
    assert second.shares_owned == 104
    assert second.projected_annual_dividend == 208.0
    assert res.final_shares_owned == pytest.approx(108.16)
    assert res.total_new_shares_from_drip == pytest.approx(8.16)
    assert res.final_portfolio_value == pytest.approx(5408.0)


def test_drip_with_zero_price_buys_nothing():
    res = calculate_dividend_projections(
        _history(annual=2.0, price=0.0),
        DividendCalculatorInputs(shares=100, years=3, growth_rate=0, drip_enabled=True),
    )
    assert res.final_shares_owned == 100
    assert res.total_new_shares_from_drip == 0
    assert res.total_projected_dividends == 600.0
