from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from core.utils import format_currency


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_affordability_rules(state: dict) -> List[RuleResult]:
    """Findings for an affordability result, in display order.

    ``state`` carries ratios in percent points (``front_end_ratio``,
    ``back_end_ratio``, ``down_payment_percent``) plus ``monthly_debt``,
    ``monthly_income`` and ``max_home_price``.
    """
    res: List[RuleResult] = []

    FE = float(state.get("front_end_ratio", 0.0))
    BE = float(state.get("back_end_ratio", 0.0))
    target_FE = float(state.get("target_FE", 28.0))
    target_BE = float(state.get("target_BE", 36.0))
    down_pct = float(state.get("down_payment_percent", 0.0))
    monthly_debt = float(state.get("monthly_debt", 0.0))
    monthly_income = float(state.get("monthly_income", 0.0))
    max_price = float(state.get("max_home_price", 0.0))

    if FE > target_FE:
        res.append(
            RuleResult(
                code="HOUSING_RATIO_OVER_LIMIT",
                severity="warn",
                message="Your housing costs are above the recommended 28% of income. Consider a lower price range.",
                context={"actual": FE, "limit": target_FE},
            )
        )

    if BE > target_BE:
        res.append(
            RuleResult(
                code="TOTAL_DTI_OVER_LIMIT",
                severity="warn",
                message="Your total debt payments exceed 36% of income. Pay down existing debt before buying.",
                context={"actual": BE, "limit": target_BE},
            )
        )

    if down_pct < 20:
        res.append(
            RuleResult(
                code="DOWN_PAYMENT_PMI",
                severity="info",
                message=(
                    f"A 20% down payment would be {format_currency(max_price * 0.2)}. "
                    "You'll need PMI with less than 20% down."
                ),
                context={"down_payment_percent": down_pct},
            )
        )

    if down_pct < 10:
        res.append(
            RuleResult(
                code="DOWN_PAYMENT_LT_10",
                severity="warn",
                message="Aim for at least 10% down payment to qualify for most conventional loans.",
            )
        )

    if monthly_debt > monthly_income * 0.15:
        res.append(
            RuleResult(
                code="HIGH_EXISTING_DEBT",
                severity="warn",
                message="Consider paying off high-interest debt before taking on a mortgage.",
                context={"monthly_debt": monthly_debt, "monthly_income": monthly_income},
            )
        )

    if down_pct >= 20:
        res.append(
            RuleResult(
                code="DOWN_PAYMENT_NO_PMI",
                severity="info",
                message="Great job saving 20% or more for a down payment - you'll avoid PMI!",
            )
        )

    if FE <= 25 and BE <= 30:
        res.append(
            RuleResult(
                code="STRONG_POSITION",
                severity="info",
                message="You're in a strong financial position to purchase a home.",
            )
        )

    return res


def evaluate_readiness_rules(state: dict) -> List[RuleResult]:
    """Strengths (``info``) and weaknesses (``warn``) for a purchase.

    Weaknesses carry the suggested follow-up under ``context["action"]``.
    """
    res: List[RuleResult] = []

    down = float(state.get("down_payment_available", 0.0))
    max_price = float(state.get("max_home_price", 0.0))
    dti = float(state.get("debt_to_income_ratio", 0.0))
    savings = float(state.get("monthly_savings_available", 0.0))
    max_payment = float(state.get("max_monthly_payment", 0.0))
    FE = float(state.get("front_end_ratio", 0.0))

    if down >= max_price * 0.20:
        res.append(RuleResult(code="DOWN_20", severity="info", message="20% down payment available - no PMI required"))
    elif down >= max_price * 0.10:
        res.append(RuleResult(code="DOWN_10", severity="info", message="At least 10% down payment available"))
    else:
        res.append(
            RuleResult(
                code="DOWN_INSUFFICIENT",
                severity="warn",
                message="Insufficient down payment savings",
                context={"action": "Save at least 10% of home price for down payment"},
            )
        )

    if dti <= 10:
        res.append(RuleResult(code="DTI_EXCELLENT", severity="info", message="Excellent debt-to-income ratio"))
    elif dti <= 15:
        res.append(RuleResult(code="DTI_GOOD", severity="info", message="Good debt-to-income ratio"))
    elif dti <= 20:
        res.append(
            RuleResult(
                code="DTI_MODERATE",
                severity="warn",
                message="Moderate debt-to-income ratio",
                context={"action": "Consider paying down existing debt before buying", "actual": dti},
            )
        )
    else:
        res.append(
            RuleResult(
                code="DTI_HIGH",
                severity="warn",
                message="High debt-to-income ratio",
                context={"action": "Pay down debt significantly before purchasing a home", "actual": dti},
            )
        )

    if savings >= max_payment * 1.1:
        res.append(RuleResult(code="CASH_FLOW_STRONG", severity="info", message="Strong monthly cash flow"))
    elif savings >= max_payment:
        res.append(RuleResult(code="CASH_FLOW_ADEQUATE", severity="info", message="Adequate monthly cash flow"))
    else:
        res.append(
            RuleResult(
                code="CASH_FLOW_TIGHT",
                severity="warn",
                message="Tight monthly budget for housing costs",
                context={"action": "Increase monthly budget buffer for housing expenses"},
            )
        )

    if FE <= 25:
        res.append(RuleResult(code="HOUSING_CONSERVATIVE", severity="info", message="Conservative housing payment ratio"))
    elif FE <= 28:
        res.append(
            RuleResult(code="HOUSING_STANDARD", severity="info", message="Housing payment within standard guidelines")
        )

    return res


def action_items(res: List[RuleResult]) -> List[str]:
    return [r.context["action"] for r in res if "action" in r.context]
