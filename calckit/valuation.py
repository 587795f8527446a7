"""Stock fair value estimates: Peter Lynch PEG and discounted cash flow.

Money amounts from statements are in millions, per-share figures in dollars,
and growth and discount rates are decimal fractions (``0.15`` for 15%).
"""
from __future__ import annotations

from typing import Optional

from calckit.models import (
    DCFDetails,
    DCFResult,
    FairValueResult,
    FairValueSummary,
    PeterLynchResult,
    StockData,
    StockInfo,
)
from calckit.presets import DCF_DEFAULTS
from core.integrations import NoDataError
from core.utils import nz, parse_growth_rate, round_to

MILLION = 1_000_000


def _upside(fair_value, price):
    if price <= 0:
        return 0.0
    return (fair_value - price) / price * 100


def calculate_peter_lynch_fair_value(eps, earnings_growth_rate, current_price) -> PeterLynchResult:
    """Fair price at a PEG of 1, i.e. ``EPS * growth%``."""

    if eps <= 0:
        return PeterLynchResult(
            fair_value=0,
            current_price=current_price,
            peg_ratio=float("inf"),
            is_undervalued=False,
            upside_percent=0,
            explanation="Cannot calculate: EPS must be positive for PEG analysis.",
        )
    if earnings_growth_rate <= 0:
        return PeterLynchResult(
            fair_value=0,
            current_price=current_price,
            peg_ratio=float("inf"),
            is_undervalued=False,
            upside_percent=0,
            explanation="Cannot calculate: Growth rate must be positive for PEG analysis.",
        )

    growth_pct = earnings_growth_rate * 100
    peg = current_price / eps / growth_pct
    fair_value = eps * growth_pct

    if peg < 0.5:
        explanation = (
            f"PEG of {peg:.2f} suggests the stock is significantly undervalued. "
            "Peter Lynch considers stocks with PEG < 1 as undervalued."
        )
    elif peg < 1:
        explanation = f"PEG of {peg:.2f} indicates the stock is undervalued. The P/E ratio is reasonable relative to growth."
    elif peg < 1.5:
        explanation = f"PEG of {peg:.2f} suggests the stock is slightly overvalued but still reasonable for a quality company."
    elif peg < 2:
        explanation = f"PEG of {peg:.2f} indicates the stock may be overvalued relative to its growth rate."
    else:
        explanation = (
            f"PEG of {peg:.2f} suggests significant overvaluation. "
            "The price may not be justified by growth prospects."
        )

    return PeterLynchResult(
        fair_value=round_to(fair_value),
        current_price=current_price,
        peg_ratio=round_to(peg),
        is_undervalued=peg < 1,
        upside_percent=round_to(_upside(fair_value, current_price)),
        explanation=explanation,
    )


def _dcf_unavailable(net_debt, shares, explanation) -> DCFResult:
    return DCFResult(
        fair_value=0,
        details=DCFDetails(net_debt=net_debt, shares_outstanding=shares),
        explanation=explanation,
    )


def calculate_dcf_fair_value(
    free_cash_flow,
    shares_outstanding,
    total_debt,
    total_cash,
    growth_rate,
    discount_rate,
    terminal_growth_rate,
    projection_years=10,
) -> DCFResult:
    """Per-share intrinsic value from projected free cash flow.

    Cash flows grow at ``growth_rate`` for ``projection_years`` and are
    discounted at ``discount_rate``; a Gordon-growth terminal value follows.
    The terminal rate is pulled to one point under the discount rate when it
    would otherwise meet or exceed it.  Price comparison is left to the caller.
    """

    net_debt = total_debt - total_cash
    if free_cash_flow <= 0:
        return _dcf_unavailable(
            net_debt, shares_outstanding, "Cannot calculate: Free Cash Flow must be positive for DCF analysis."
        )
    if shares_outstanding <= 0:
        return _dcf_unavailable(net_debt, 0, "Cannot calculate: Shares outstanding must be positive.")
    if discount_rate <= 0:
        return _dcf_unavailable(net_debt, shares_outstanding, "Cannot calculate: Discount rate must be positive.")

    if terminal_growth_rate >= discount_rate:
        terminal_growth_rate = discount_rate - 0.01

    projected = []
    discounted = []
    fcf = free_cash_flow
    for year in range(1, projection_years + 1):
        fcf *= 1 + growth_rate
        projected.append(fcf)
        discounted.append(fcf / (1 + discount_rate) ** year)

    terminal = fcf * (1 + terminal_growth_rate) / (discount_rate - terminal_growth_rate)
    discounted_terminal = terminal / (1 + discount_rate) ** projection_years
    enterprise = sum(discounted) + discounted_terminal
    equity = enterprise - net_debt
    fair_value = equity / shares_outstanding

    if fair_value > 0:
        explanation = (
            f"Based on projected free cash flows discounted at {discount_rate * 100:.1f}% WACC with "
            f"{terminal_growth_rate * 100:.1f}% terminal growth, the intrinsic value per share is estimated."
        )
    else:
        explanation = (
            "The DCF model produced a negative fair value, indicating potential financial distress "
            "or inappropriate assumptions."
        )

    return DCFResult(
        fair_value=round_to(fair_value),
        details=DCFDetails(
            projected_fcfs=[round_to(v) for v in projected],
            discounted_fcfs=[round_to(v) for v in discounted],
            terminal_value=round_to(terminal),
            discounted_terminal_value=round_to(discounted_terminal),
            total_enterprise_value=round_to(enterprise),
            net_debt=round_to(net_debt),
            equity_value=round_to(equity),
            shares_outstanding=shares_outstanding,
        ),
        explanation=explanation,
    )


def calculate_fair_value(
    stock: StockData,
    dcf_growth_rate: Optional[float] = None,
    dcf_discount_rate: float = DCF_DEFAULTS["discount_rate"],
    dcf_terminal_growth_rate: float = DCF_DEFAULTS["terminal_growth_rate"],
    dcf_projection_years: int = DCF_DEFAULTS["projection_years"],
) -> FairValueResult:
    """Run both models and summarize the ones that produced a positive value.

    DCF growth defaults to the earnings growth rate.
    """

    lynch = calculate_peter_lynch_fair_value(stock.eps, stock.earnings_growth_rate, stock.price)
    growth = dcf_growth_rate if dcf_growth_rate is not None else stock.earnings_growth_rate
    dcf = calculate_dcf_fair_value(
        stock.free_cash_flow,
        stock.shares_outstanding,
        stock.total_debt,
        stock.total_cash,
        growth,
        dcf_discount_rate,
        dcf_terminal_growth_rate,
        dcf_projection_years,
    )
    if dcf.fair_value > 0:
        dcf = dcf.model_copy(
            update={
                "current_price": stock.price,
                "upside_percent": round_to(_upside(dcf.fair_value, stock.price)),
                "is_undervalued": dcf.fair_value > stock.price,
            }
        )

    valid = [r for r in (lynch, dcf) if r.fair_value > 0]
    if valid:
        avg_value = sum(r.fair_value for r in valid) / len(valid)
        avg_upside = sum(r.upside_percent for r in valid) / len(valid)
        undervalued = sum(1 for r in valid if r.is_undervalued)
        if undervalued > len(valid) / 2:
            consensus = "undervalued"
        elif undervalued < len(valid) / 2:
            consensus = "overvalued"
        else:
            consensus = "fairly_valued"
    else:
        avg_value = avg_upside = 0.0
        consensus = "fairly_valued"

    return FairValueResult(
        stock_info=StockInfo(
            symbol=stock.symbol,
            name=stock.name,
            price=stock.price,
            currency=stock.currency,
            exchange=stock.exchange,
        ),
        peter_lynch=lynch,
        dcf=dcf,
        summary=FairValueSummary(
            average_fair_value=round_to(avg_value),
            consensus=consensus,
            average_upside_percent=round_to(avg_upside),
        ),
    )


def _latest_report(statement: dict) -> dict:
    reports = statement.get("annualReports") or []
    return reports[0] if reports else {}


def fetch_stock_data(symbol: str, client) -> StockData:
    """Gather overview, quote, cash flow and balance sheet (four throttled calls).

    Statement totals are converted to millions.  Free cash flow, debt and cash
    fall back to the latest annual statements when the overview omits them.
    """

    overview = client.fetch_overview(symbol)
    if not overview.get("Symbol"):
        raise NoDataError("No data available for this stock symbol.")
    quote = client.fetch_quote(symbol)
    cash_flow = client.fetch_cash_flow(symbol)
    balance_sheet = client.fetch_balance_sheet(symbol)

    fcf = nz(overview.get("FreeCashFlow")) / MILLION
    cf = _latest_report(cash_flow)
    if not fcf and cf:
        operating = nz(cf.get("operatingCashflow")) / MILLION
        capex = abs(nz(cf.get("capitalExpenditures")) / MILLION)
        fcf = operating - capex

    debt = nz(overview.get("TotalDebt")) / MILLION
    cash = nz(overview.get("Cash")) / MILLION
    bs = _latest_report(balance_sheet)
    if bs:
        if not debt:
            debt = (nz(bs.get("longTermDebt")) + nz(bs.get("shortTermDebt"))) / MILLION
        if not cash:
            cash = nz(bs.get("cashAndCashEquivalentsAtCarryingValue")) / MILLION

    return StockData(
        symbol=overview["Symbol"],
        name=overview.get("Name") or overview["Symbol"],
        price=nz(quote.get("05. price")),
        currency=overview.get("Currency") or "USD",
        exchange=overview.get("Exchange") or "Unknown",
        eps=nz(overview.get("EPS")),
        book_value_per_share=nz(overview.get("BookValue")),
        earnings_growth_rate=parse_growth_rate(overview.get("EarningsGrowth")),
        revenue_growth_rate=parse_growth_rate(overview.get("RevenueGrowth")),
        free_cash_flow=fcf,
        free_cash_flow_per_share=nz(overview.get("FreeCashFlowPerShare")),
        shares_outstanding=nz(overview.get("SharesOutstanding")) / MILLION,
        total_debt=debt,
        total_cash=cash,
        total_equity=nz(overview.get("TotalEquity")) / MILLION,
        pe_ratio=nz(overview.get("PERatio")),
        pb_ratio=nz(overview.get("PriceToBookRatio")),
        market_cap=nz(overview.get("MarketCapitalization")) / MILLION,
        dividend_yield=nz(overview.get("DividendYield")),
        dividend_per_share=nz(overview.get("DividendPerShare")),
    )
