"""Dividend history analysis and income projections."""
from __future__ import annotations

from datetime import date
from typing import List, Optional

import pandas as pd

from calckit.models import (
    DividendCalculatorInputs,
    DividendCalculatorResult,
    DividendFrequency,
    DividendHistory,
    DividendPayment,
    DividendProjection,
    StockInfo,
)
from calckit.presets import DIVIDEND_INTERVAL_WINDOWS, GROWTH_RATE_BOUNDS, PAYMENTS_PER_YEAR
from core.utils import nz, round_to


def _frame(payments: List[DividendPayment]) -> pd.DataFrame:
    df = pd.DataFrame([{"ex_date": p.ex_date, "amount": p.amount} for p in payments])
    df["ex_date"] = pd.to_datetime(df["ex_date"])
    return df


def _most_recent_first(payments: List[DividendPayment]) -> List[DividendPayment]:
    return sorted(payments, key=lambda p: p.ex_date, reverse=True)


def average_interval_days(payments: List[DividendPayment]) -> float:
    if len(payments) < 2:
        return 0.0
    dates = _frame(payments)["ex_date"].sort_values()
    return float(dates.diff().dropna().dt.days.abs().mean())


def detect_dividend_frequency(payments: List[DividendPayment], today: Optional[date] = None) -> DividendFrequency:
    """Classify the payment schedule.

    The mean gap between ex-dates is matched against day windows first.  If it
    fits none, the count of payments in the last completed calendar year is
    used, and finally the average count per distinct calendar year.
    """

    if len(payments) < 2:
        return "unknown"

    avg = average_interval_days(payments)
    for name, lo, hi in DIVIDEND_INTERVAL_WINDOWS:
        if lo <= avg <= hi:
            return name

    today = today or date.today()
    years = [p.ex_date.year for p in payments]
    last_year = years.count(today.year - 1)
    if last_year >= 11:
        return "monthly"
    if 3 <= last_year <= 5:
        return "quarterly"
    if last_year == 2:
        return "semi-annual"
    if last_year == 1:
        return "annual"

    per_year = len(payments) / max(len(set(years)), 1)
    if per_year >= 10:
        return "monthly"
    if per_year >= 3:
        return "quarterly"
    if per_year >= 1.5:
        return "semi-annual"
    if per_year >= 0.5:
        return "annual"
    return "unknown"


def payments_per_year(frequency: DividendFrequency) -> int:
    # unknown schedules are treated as quarterly
    return PAYMENTS_PER_YEAR.get(frequency, 4)


def calculate_dividends_per_period(payments: List[DividendPayment], frequency: DividendFrequency) -> float:
    """Average of the most recent year's worth of payments."""

    if not payments:
        return 0.0
    recent = _most_recent_first(payments)[: payments_per_year(frequency)]
    return sum(p.amount for p in recent) / len(recent)


def calculate_annual_dividend(payments: List[DividendPayment], frequency: DividendFrequency) -> float:
    if not payments:
        return 0.0
    return calculate_dividends_per_period(payments, frequency) * payments_per_year(frequency)


def calculate_growth_rate(payments: List[DividendPayment]) -> float:
    """Mean year-over-year growth of calendar-year dividend totals.

    Years following a near-zero year are skipped, and changes outside
    (-90%, +200%) are dropped as special dividends or splits.  Returns a
    decimal fraction.
    """

    if len(payments) < 2:
        return 0.0
    df = _frame(payments)
    totals = df.groupby(df["ex_date"].dt.year)["amount"].sum().sort_index()
    if len(totals) < 2:
        return 0.0

    lo, hi = GROWTH_RATE_BOUNDS
    rates = []
    for prev, curr in zip(totals.iloc[:-1], totals.iloc[1:]):
        if prev > 0.01:
            g = (curr - prev) / prev
            if lo < g < hi:
                rates.append(g)
    if not rates:
        return 0.0
    return sum(rates) / len(rates)


def build_dividend_history(
    payments: List[DividendPayment], stock_info: StockInfo, today: Optional[date] = None
) -> DividendHistory:
    payments = _most_recent_first(payments)
    frequency = detect_dividend_frequency(payments, today=today)
    annual = calculate_annual_dividend(payments, frequency)
    return DividendHistory(
        dividends=payments,
        stock_info=stock_info,
        dividend_frequency=frequency,
        dividends_per_period=calculate_dividends_per_period(payments, frequency),
        annual_dividend=annual,
        dividend_yield=annual / stock_info.price * 100 if stock_info.price > 0 else 0.0,
        average_growth_rate=calculate_growth_rate(payments),
    )


def fetch_dividend_info(symbol: str, client, today: Optional[date] = None) -> DividendHistory:
    """Look up dividends, quote and company name (three throttled calls)."""

    rows = client.fetch_dividends(symbol)
    quote = client.fetch_quote(symbol)
    overview = client.fetch_overview(symbol)

    payments = [DividendPayment(ex_date=row["ex_dividend_date"], amount=nz(row.get("amount"))) for row in rows]
    quoted_symbol = quote.get("01. symbol") or symbol
    info = StockInfo(
        symbol=quoted_symbol,
        name=overview.get("Name") or quoted_symbol,
        price=nz(quote.get("05. price")),
        currency=overview.get("Currency") or "USD",
        exchange=overview.get("Exchange") or "Unknown",
    )
    return build_dividend_history(payments, info, today=today)


def _effective_growth(history: DividendHistory, inputs: DividendCalculatorInputs) -> float:
    if inputs.growth_rate is not None:
        return inputs.growth_rate / 100
    return history.average_growth_rate


def _result(history: DividendHistory, inputs: DividendCalculatorInputs, projections, cumulative, **extra):
    return DividendCalculatorResult(
        stock_info=history.stock_info,
        dividend_frequency=history.dividend_frequency,
        dividends_per_period=history.dividends_per_period,
        annual_dividend=history.annual_dividend,
        dividend_yield=history.dividend_yield,
        historical_growth_rate=history.average_growth_rate,
        projections=projections,
        total_projected_dividends=round_to(cumulative),
        total_investment=round_to(history.stock_info.price * inputs.shares),
        **extra,
    )


def calculate_dividend_projections(
    history: DividendHistory, inputs: DividendCalculatorInputs
) -> DividendCalculatorResult:
    """Project yearly dividend income on a fixed share count.

    Uses ``inputs.growth_rate`` (percent) when given, otherwise the historical
    average.  Delegates to the DRIP variant when reinvestment is enabled.
    """

    if inputs.drip_enabled:
        return calculate_dividend_projections_with_drip(history, inputs)

    growth = _effective_growth(history, inputs)
    per_share = history.annual_dividend
    cumulative = 0.0
    projections: List[DividendProjection] = []
    for year in range(1, inputs.years + 1):
        amount = per_share * inputs.shares
        cumulative += amount
        projections.append(
            DividendProjection(
                year=year,
                projected_annual_dividend=round_to(amount),
                projected_quarterly_dividend=round_to(amount / 4),
                total_dividends_received=round_to(amount),
                cumulative_dividends=round_to(cumulative),
            )
        )
        per_share *= 1 + growth
    return _result(history, inputs, projections, cumulative)


def calculate_dividend_projections_with_drip(
    history: DividendHistory, inputs: DividendCalculatorInputs
) -> DividendCalculatorResult:
    """Project income with every year's dividends reinvested at that year's price.

    The share price grows at ``price_growth_rate`` (percent), defaulting to
    the dividend growth rate.  ``shares_owned`` is the holding at the start of
    each year.
    """

    growth = _effective_growth(history, inputs)
    price_growth = inputs.price_growth_rate / 100 if inputs.price_growth_rate is not None else growth

    shares = inputs.shares
    per_share = history.annual_dividend
    price = history.stock_info.price
    cumulative = 0.0
    new_total = 0.0
    projections: List[DividendProjection] = []
    for year in range(1, inputs.years + 1):
        amount = per_share * shares
        cumulative += amount
        new_shares = amount / price if price > 0 else 0.0
        new_total += new_shares
        projections.append(
            DividendProjection(
                year=year,
                projected_annual_dividend=round_to(amount),
                projected_quarterly_dividend=round_to(amount / 4),
                total_dividends_received=round_to(amount),
                cumulative_dividends=round_to(cumulative),
                shares_owned=round_to(shares, 4),
                new_shares_from_drip=round_to(new_shares, 4),
            )
        )
        shares += new_shares
        per_share *= 1 + growth
        price *= 1 + price_growth

    return _result(
        history,
        inputs,
        projections,
        cumulative,
        drip_enabled=True,
        final_shares_owned=round_to(shares, 4),
        total_new_shares_from_drip=round_to(new_total, 4),
        final_portfolio_value=round_to(shares * price),
    )
