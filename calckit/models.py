from __future__ import annotations

from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from calckit.presets import AFFORDABILITY_DEFAULTS

DividendFrequency = Literal["monthly", "quarterly", "semi-annual", "annual", "unknown"]
Gender = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active", "extra_active"]
DietType = Literal["balanced", "high_protein", "low_carb", "keto", "low_fat", "mediterranean"]
Somatotype = Literal["ectomorph", "mesomorph", "endomorph"]


class Record(BaseModel):
    """Immutable value record shared by every calculator."""

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Mortgage
# ---------------------------------------------------------------------------


class LoanTerms(Record):
    principal: float
    annual_rate_pct: float = Field(ge=0)
    term_years: int = Field(gt=0)


class MonthlyPaymentInputs(Record):
    home_price: float
    down_payment: float = 0.0
    annual_interest_rate: float = Field(ge=0)
    loan_term_years: int = Field(gt=0)
    property_tax_annual: float = 0.0
    homeowners_insurance_annual: float = 0.0
    hoa_monthly: float = 0.0
    pmi_rate: float = 0.0


class MonthlyPaymentResult(Record):
    loan_amount: float
    monthly_principal_and_interest: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_pmi: float
    monthly_hoa: float
    total_monthly_payment: float
    down_payment_percent: float
    total_interest_paid: float
    total_payments: int


class PaymentBreakdown(Record):
    principal: float
    interest: float
    balance: float


class AmortizationPayment(Record):
    payment_number: int
    payment: float
    principal: float
    interest: float
    remaining_balance: float
    cumulative_principal: float
    cumulative_interest: float
    date: Optional[str] = None


class YearlySummary(Record):
    year: int
    total_principal: float
    total_interest: float
    total_payments: float
    starting_balance: float
    ending_balance: float


class AmortizationResult(Record):
    monthly_payment: float
    total_payments: int
    total_principal: float
    total_interest: float
    schedule: List[AmortizationPayment]
    yearly_summary: List[YearlySummary]


class ExtraPaymentImpact(Record):
    months_saved: int
    interest_saved: float


# ---------------------------------------------------------------------------
# Affordability
# ---------------------------------------------------------------------------


class AffordabilityInputs(Record):
    annual_gross_income: float
    monthly_debt_payments: float = 0.0
    down_payment_available: float = 0.0
    monthly_savings_available: float = 0.0
    annual_interest_rate: float = Field(ge=0)
    loan_term_years: int = Field(gt=0)
    property_tax_rate: float = AFFORDABILITY_DEFAULTS["property_tax_rate"]
    homeowners_insurance_rate: float = AFFORDABILITY_DEFAULTS["homeowners_insurance_rate"]
    pmi_rate: float = AFFORDABILITY_DEFAULTS["pmi_rate"]
    hoa_monthly: float = 0.0


class MonthlyBreakdown(Record):
    principal_and_interest: float
    property_tax: float
    homeowners_insurance: float
    pmi: float
    hoa: float
    total: float


class AffordabilityResult(Record):
    max_home_price: float
    max_monthly_payment: float
    monthly_income: float
    front_end_ratio: float
    back_end_ratio: float
    down_payment_percent: float
    loan_amount: float
    estimated_monthly_breakdown: MonthlyBreakdown
    can_afford_home: bool
    affordability_score: int
    recommendations: List[str] = Field(default_factory=list)
    savings_needed_for_down_payment: float
    months_to_save_for_down_payment: int


class PurchaseReadiness(Record):
    is_ready: bool
    readiness_score: int
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)
    down_payment_ready: bool
    emergency_fund_ready: bool
    debt_to_income_ready: bool
    monthly_cash_flow_ready: bool


# ---------------------------------------------------------------------------
# Refinance and rate comparison
# ---------------------------------------------------------------------------


class RefinanceInputs(Record):
    current_loan_amount: float
    current_interest_rate: float = Field(ge=0)
    current_loan_term_years: int = Field(gt=0)
    years_remaining_on_current_loan: float = Field(gt=0)
    new_interest_rate: float = Field(ge=0)
    new_loan_term_years: int = Field(gt=0)
    closing_costs: float = 0.0
    cash_out_amount: float = 0.0


class CumulativeSavings(Record):
    year: int
    cumulative_monthly_savings: float
    cumulative_interest_difference: float
    net_position: float


class RefinanceResult(Record):
    current_monthly_payment: float
    new_monthly_payment: float
    monthly_savings: float
    total_closing_costs: float
    break_even_months: int
    break_even_years: float
    total_interest_saved: float
    total_interest_saved_over_term: float
    is_worth_refinancing: bool
    current_total_interest_remaining: float
    new_total_interest: float
    new_loan_amount: float
    cumulative_savings: List[CumulativeSavings]


class FixedRateInputs(Record):
    loan_amount: float
    interest_rate: float = Field(ge=0)
    loan_term_years: int = Field(gt=0)


class ARMInputs(Record):
    loan_amount: float
    initial_rate: float = Field(ge=0)
    initial_period_years: int = Field(ge=0)
    adjustment_interval_years: int = Field(gt=0)
    expected_rate_adjustment: float
    rate_cap_per_adjustment: float
    lifetime_rate_cap: float


class FixedRateResult(Record):
    monthly_payment: float
    total_interest: float
    total_payments: int


class ARMResult(Record):
    initial_monthly_payment: float
    worst_case_monthly_payment: float
    projected_monthly_payments: List[float]
    projected_rates: List[float]
    total_interest_projected: float
    total_interest_worst_case: float


class ComparisonResult(Record):
    initial_savings: float
    break_even_year: int
    total_savings_over_term: float
    recommendation: Literal["fixed", "arm", "neutral"]
    risk_level: Literal["low", "medium", "high"]


class ScenarioAnalysis(Record):
    year: int
    fixed_payment: float
    arm_payment: float
    arm_rate: float
    cumulative_savings: float


class RateComparisonResult(Record):
    fixed_rate: FixedRateResult
    arm: ARMResult
    comparison: ComparisonResult
    scenarios: List[ScenarioAnalysis]


# ---------------------------------------------------------------------------
# Retirement
# ---------------------------------------------------------------------------


class FIREInputs(Record):
    annual_income: float
    annual_expenses: float
    current_savings: float = 0.0
    expected_return: float = 7.0
    safe_withdrawal_rate: float = Field(default=4.0, gt=0)


class YearlyProjection(Record):
    year: int
    savings: float
    interest_earned: float
    total_savings: float


class FIREResult(Record):
    years_to_retirement: float
    fire_number: float
    annual_savings: float
    savings_rate: float
    monthly_savings: float
    projections: List[YearlyProjection]


class CompoundInterestInputs(Record):
    principal: float
    monthly_contribution: float = 0.0
    years: int = Field(ge=0)
    annual_rate: float
    compound_frequency: Literal["monthly", "quarterly", "annually"] = "monthly"


class YearlyBreakdown(Record):
    year: int
    start_balance: float
    contributions: float
    interest_earned: float
    end_balance: float


class CompoundInterestResult(Record):
    final_balance: float
    total_contributions: float
    total_interest: float
    yearly_breakdown: List[YearlyBreakdown]


class WithdrawalInputs(Record):
    portfolio_value: float
    withdrawal_rate: float = 4.0
    inflation_rate: float = 3.0
    years_in_retirement: int = Field(default=30, ge=0)
    expected_return: float = 6.0


class WithdrawalProjection(Record):
    year: int
    start_balance: float
    withdrawal: float
    inflation_adjusted_withdrawal: float
    return_earned: float
    end_balance: float


class WithdrawalResult(Record):
    initial_withdrawal: float
    monthly_income: float
    final_portfolio_value: float
    total_withdrawn: float
    yearly_projections: List[WithdrawalProjection]
    depletion_year: Optional[int] = None
    sustainability_score: Literal["excellent", "good", "caution", "risky"]


# ---------------------------------------------------------------------------
# Dividends and valuation
# ---------------------------------------------------------------------------


class DividendPayment(Record):
    ex_date: date
    amount: float


class StockInfo(Record):
    symbol: str
    name: str = ""
    price: float = 0.0
    currency: str = "USD"
    exchange: str = "Unknown"


class DividendHistory(Record):
    dividends: List[DividendPayment]
    stock_info: StockInfo
    dividend_frequency: DividendFrequency
    dividends_per_period: float
    annual_dividend: float
    dividend_yield: float
    average_growth_rate: float


class DividendCalculatorInputs(Record):
    shares: float
    years: int = Field(ge=0)
    growth_rate: Optional[float] = None  # percent; None uses historical growth
    drip_enabled: bool = False
    price_growth_rate: Optional[float] = None  # percent; None follows dividend growth


class DividendProjection(Record):
    year: int
    projected_annual_dividend: float
    projected_quarterly_dividend: float
    total_dividends_received: float
    cumulative_dividends: float
    shares_owned: Optional[float] = None
    new_shares_from_drip: Optional[float] = None


class DividendCalculatorResult(Record):
    stock_info: StockInfo
    dividend_frequency: DividendFrequency
    dividends_per_period: float
    annual_dividend: float
    dividend_yield: float
    historical_growth_rate: float
    projections: List[DividendProjection]
    total_projected_dividends: float
    total_investment: float
    drip_enabled: bool = False
    final_shares_owned: Optional[float] = None
    total_new_shares_from_drip: Optional[float] = None
    final_portfolio_value: Optional[float] = None


class StockData(Record):
    symbol: str
    name: str = ""
    price: float = 0.0
    currency: str = "USD"
    exchange: str = "Unknown"
    eps: float = 0.0
    book_value_per_share: float = 0.0
    earnings_growth_rate: float = 0.0  # decimal
    revenue_growth_rate: float = 0.0
    free_cash_flow: float = 0.0  # millions
    free_cash_flow_per_share: float = 0.0
    shares_outstanding: float = 0.0  # millions
    total_debt: float = 0.0  # millions
    total_cash: float = 0.0  # millions
    total_equity: float = 0.0  # millions
    pe_ratio: float = 0.0
    pb_ratio: float = 0.0
    market_cap: float = 0.0  # millions
    dividend_yield: float = 0.0
    dividend_per_share: float = 0.0


class PeterLynchResult(Record):
    fair_value: float
    current_price: float
    peg_ratio: float
    is_undervalued: bool
    upside_percent: float
    method: str = "Peter Lynch (PEG)"
    explanation: str


class DCFDetails(Record):
    projected_fcfs: List[float] = Field(default_factory=list)
    discounted_fcfs: List[float] = Field(default_factory=list)
    terminal_value: float = 0.0
    discounted_terminal_value: float = 0.0
    total_enterprise_value: float = 0.0
    net_debt: float = 0.0
    equity_value: float = 0.0
    shares_outstanding: float = 0.0


class DCFResult(Record):
    fair_value: float
    current_price: float = 0.0
    is_undervalued: bool = False
    upside_percent: float = 0.0
    method: str = "DCF (Discounted Cash Flow)"
    details: DCFDetails
    explanation: str


class FairValueSummary(Record):
    average_fair_value: float
    consensus: Literal["undervalued", "overvalued", "fairly_valued"]
    average_upside_percent: float


class FairValueResult(Record):
    stock_info: StockInfo
    peter_lynch: PeterLynchResult
    dcf: DCFResult
    summary: FairValueSummary


# ---------------------------------------------------------------------------
# Health and conversions
# ---------------------------------------------------------------------------


class WeightRange(Record):
    min: float
    max: float


class BMIResult(Record):
    bmi: float
    category: str
    health_risk: str
    healthy_weight_range: WeightRange
    weight_to_lose: Optional[float] = None
    weight_to_gain: Optional[float] = None


class TDEEInputs(Record):
    weight: float  # kg
    height: float  # cm
    age: float
    gender: Gender
    activity_level: ActivityLevel = "sedentary"
    goal: Literal["lose", "maintain", "gain"] = "maintain"
    goal_rate: float = 0.5  # kg per week


class TDEEResult(Record):
    bmr: int
    tdee: int
    maintenance_calories: int
    goal_calories: int
    protein_grams: WeightRange
    activity_multiplier: float
    activity_description: str


class BodyFatInputs(Record):
    gender: Gender
    height: float = Field(gt=0)  # cm
    waist: float  # cm
    weight: float = Field(gt=0)  # kg
    neck: Optional[float] = None
    hip: Optional[float] = None
    age: float = 30
    method: Literal["navy", "bmi"] = "navy"


class BodyFatResult(Record):
    body_fat_percent: float
    body_fat_mass: float
    lean_body_mass: float
    category: str
    health_risk: str
    ideal_range: WeightRange


class HeartRateZone(Record):
    name: str
    min_bpm: int
    max_bpm: int
    min_percent: int
    max_percent: int
    description: str


class HeartRateResult(Record):
    max_heart_rate: int
    heart_rate_reserve: Optional[int] = None
    zones: List[HeartRateZone]
    formula: str


class IdealWeightResult(Record):
    formula: str
    weight: float
    range: Optional[WeightRange] = None
    description: str = ""


class AllIdealWeightsResult(Record):
    formulas: Dict[str, IdealWeightResult]
    average: float
    recommended_range: WeightRange


class MealProtein(Record):
    meals: int
    protein_per_meal: WeightRange


class ProteinResult(Record):
    grams_per_day: WeightRange
    grams_per_kg: WeightRange
    calories_from_protein: WeightRange
    meal_breakdown: List[MealProtein]
    recommendations: List[str] = Field(default_factory=list)


class MacrosInputs(Record):
    calories: float = Field(ge=0)
    diet_type: DietType = "balanced"
    goal: Literal["lose", "maintain", "gain"] = "maintain"
    weight: Optional[float] = None  # kg, raises protein to a floor


class MacroDetail(Record):
    grams: float
    calories: float
    percentage: int


class MacroBreakdown(Record):
    protein: MacroDetail
    carbs: MacroDetail
    fat: MacroDetail


class MealMacros(Record):
    meal: str
    calories: int
    protein: int
    carbs: int
    fat: int


class MacrosResult(Record):
    total_calories: float
    macros: MacroBreakdown
    diet_type: str
    description: str
    meal_plan: List[MealMacros]
    recommendations: List[str] = Field(default_factory=list)


class DietTypeOption(Record):
    value: DietType
    label: str
    description: str


class FoodMacrosResult(Record):
    calories: float
    macro_percentages: MacroBreakdown


class BodyTypeAnswers(Record):
    frame_size: Literal["small", "medium", "large"] = "medium"
    weight_gain: Literal["easy", "moderate", "difficult"] = "moderate"
    weight_loss: Literal["easy", "moderate", "difficult"] = "moderate"
    muscle_definition: Literal["easy", "moderate", "difficult"] = "moderate"
    metabolism: Literal["fast", "average", "slow"] = "average"
    shoulders: Literal["narrow", "average", "broad"] = "average"
    wrists: Literal["small", "average", "large"] = "average"
    body_fat: Literal["low", "average", "high"] = "average"


class BodyTypeScores(Record):
    ectomorph: int = 0
    mesomorph: int = 0
    endomorph: int = 0


class BodyTypeInfo(Record):
    name: str
    description: str
    traits: List[str]
    train_tips: List[str]
    nutrition_tips: List[str]
    exercise_recommendations: List[str]


class BodyTypeResult(Record):
    primary_type: Somatotype
    secondary_type: Optional[Somatotype] = None
    scores: BodyTypeScores
    description: str
    traits: List[str]
    train_tips: List[str]
    nutrition_tips: List[str]
    exercise_recommendations: List[str]


class SetScheme(Record):
    sets: int
    reps: int
    percentage: float  # fraction of the 1RM, 0.65 = 65%
    weight: Optional[float] = None


class WeeklySession(Record):
    week: int
    session: Literal[1, 2]
    back_squat: List[SetScheme]
    front_squat: List[SetScheme]


class HatchSquatInputs(Record):
    back_squat_max: float = Field(ge=0)
    front_squat_max: float = Field(ge=0)
    use_kg: bool = False


class LiftMaxes(Record):
    back_squat: float
    front_squat: float
    unit: Literal["lbs", "kg"]


class HatchSquatResult(Record):
    weeks: List[WeeklySession]
    starting_maxes: LiftMaxes
    projected_maxes: LiftMaxes


class ConversionResult(Record):
    value: float
    from_unit: str
    to_unit: str
    result: float
