"""Body composition, energy and training formulas.

Inputs are metric (kg, cm) unless a function name says otherwise.
"""
from __future__ import annotations

import math
from typing import Dict, List, Optional

from calckit.models import (
    AllIdealWeightsResult,
    BMIResult,
    BodyFatInputs,
    BodyFatResult,
    HeartRateResult,
    HeartRateZone,
    IdealWeightResult,
    MealProtein,
    ProteinResult,
    TDEEInputs,
    TDEEResult,
    WeightRange,
)
from calckit.presets import (
    ACTIVITY_MULTIPLIERS,
    ATHLETE_MAINTENANCE_PROTEIN,
    BMI_CATEGORIES,
    BODY_FAT_BOUNDS,
    BODY_FAT_CATEGORIES,
    CALORIES_PER_KG,
    FRAME_SIZE_FACTORS,
    HEART_RATE_ZONES,
    IDEAL_BODY_FAT,
    IDEAL_WEIGHT_FORMULAS,
    MIN_GOAL_CALORIES,
    PROTEIN_REQUIREMENTS,
)
from core.utils import round_to, round_whole

CM_PER_INCH = 2.54
KG_PER_LB = 1 / 2.20462
FIVE_FEET_IN = 60

IDEAL_WEIGHT_DESCRIPTIONS = {
    "devine": "Most commonly used in clinical settings for medication dosing",
    "robinson": "Based on height and gender, commonly used for general estimates",
    "miller": "Formula developed from height-weight tables",
    "hamwi": "Originally developed for insurance tables",
}

PROTEIN_GOAL_TIPS = {
    "muscle_gain": [
        "Spread protein intake across 4-5 meals to optimize muscle protein synthesis.",
        "Include a protein-rich meal within 2 hours after training.",
        "Consider 20-40g of high-quality protein per meal for maximum muscle building.",
    ],
    "weight_loss": [
        "Higher protein intake helps preserve muscle mass during calorie deficit.",
        "Protein has higher satiety - it helps you feel fuller for longer.",
        "Include protein at every meal to maintain steady energy levels.",
    ],
    "endurance": [
        "Protein needs are elevated due to muscle breakdown during long training sessions.",
        "Focus on complete protein sources with all essential amino acids.",
    ],
    "strength": [
        "Time protein intake around training sessions for optimal recovery.",
        "Consider casein protein before bed for overnight recovery.",
    ],
}


def _lookup(categories: List[dict], value: float) -> dict:
    for cat in categories:
        if cat["min"] <= value < cat["max"]:
            return cat
    return categories[-1]


def _clamp_body_fat(value: float) -> float:
    lo, hi = BODY_FAT_BOUNDS
    return max(lo, min(hi, value))


# -- BMI ---------------------------------------------------------------------


def calculate_bmi(weight, height_cm):
    m = height_cm / 100
    return weight / (m * m)


def calculate_bmi_imperial(weight_lbs, height_feet, height_inches):
    inches = height_feet * 12 + height_inches
    return weight_lbs / (inches * inches) * 703


def bmi_category(bmi) -> dict:
    return _lookup(BMI_CATEGORIES, bmi)


def healthy_weight_range(height_cm) -> WeightRange:
    m = height_cm / 100
    return WeightRange(min=round_to(18.5 * m * m, 1), max=round_to(25 * m * m, 1))


def calculate_bmi_result(weight, height_cm) -> BMIResult:
    bmi = calculate_bmi(weight, height_cm)
    cat = bmi_category(bmi)
    healthy = healthy_weight_range(height_cm)
    to_lose = to_gain = None
    if weight > healthy.max:
        to_lose = round_to(weight - healthy.max, 1)
    elif weight < healthy.min:
        to_gain = round_to(healthy.min - weight, 1)
    return BMIResult(
        bmi=round_to(bmi, 1),
        category=cat["name"],
        health_risk=cat["risk"],
        healthy_weight_range=healthy,
        weight_to_lose=to_lose,
        weight_to_gain=to_gain,
    )


# -- Energy ------------------------------------------------------------------


def calculate_bmr(weight, height_cm, age, gender):
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    base = 10 * weight + 6.25 * height_cm - 5 * age
    return base + 5 if gender == "male" else base - 161


def calculate_tdee(inputs: TDEEInputs) -> TDEEResult:
    """Daily energy needs, with a goal target that never drops below 1200 kcal."""

    bmr = calculate_bmr(inputs.weight, inputs.height, inputs.age, inputs.gender)
    multiplier, description = ACTIVITY_MULTIPLIERS[inputs.activity_level]
    tdee = round_whole(bmr * multiplier)

    delta = round_whole(inputs.goal_rate * CALORIES_PER_KG / 7)
    if inputs.goal == "lose":
        goal_calories = max(tdee - delta, MIN_GOAL_CALORIES)
    elif inputs.goal == "gain":
        goal_calories = tdee + delta
    else:
        goal_calories = tdee

    return TDEEResult(
        bmr=round_whole(bmr),
        tdee=tdee,
        maintenance_calories=tdee,
        goal_calories=goal_calories,
        protein_grams=WeightRange(min=round_whole(inputs.weight * 1.6), max=round_whole(inputs.weight * 2.2)),
        activity_multiplier=multiplier,
        activity_description=description,
    )


# -- Body fat ----------------------------------------------------------------


def _navy_girth(gender, waist_cm, neck_cm, hip_cm=None):
    """Circumference term of the Navy formula, in inches."""

    w = waist_cm / CM_PER_INCH
    n = neck_cm / CM_PER_INCH
    if gender == "male":
        return w - n
    hip = hip_cm / CM_PER_INCH if hip_cm else w + 2
    return w + hip - n


def body_fat_navy(gender, height_cm, waist_cm, neck_cm, hip_cm=None):
    """U.S. Navy circumference method.  Missing hips default to waist + 2in.

    Measurements with no positive circumference term (a waist at or under the
    neck) give the lower bound.
    """

    girth = _navy_girth(gender, waist_cm, neck_cm, hip_cm)
    if girth <= 0 or height_cm <= 0:
        return BODY_FAT_BOUNDS[0]
    h = height_cm / CM_PER_INCH
    if gender == "male":
        density = 1.0324 - 0.19077 * math.log10(girth) + 0.15456 * math.log10(h)
    else:
        density = 1.29579 - 0.35004 * math.log10(girth) + 0.22100 * math.log10(h)
    return _clamp_body_fat(495 / density - 450)


def body_fat_from_bmi(gender, age, bmi):
    value = 1.20 * bmi + 0.23 * age - 16.2
    if gender == "female":
        value += 5.4
    return _clamp_body_fat(value)


def body_fat_skinfold(gender, age, chest=None, abdominal=None, thigh=None, tricep=None, suprailiac=None):
    """Jackson-Pollock three-site estimate; folds in millimetres."""

    if gender == "male":
        s = (chest or 10) + (abdominal or 15) + (thigh or 12)
        density = 1.10938 - 0.0008267 * s + 0.0000016 * s * s - 0.0002574 * age
    else:
        s = (tricep or 15) + (suprailiac or 20) + (thigh or 18)
        density = 1.0994921 - 0.0009929 * s + 0.0000023 * s * s - 0.0001392 * age
    return _clamp_body_fat(495 / density - 450)


def body_fat_category(gender, percent) -> dict:
    return _lookup(BODY_FAT_CATEGORIES[gender], percent)


def calculate_body_fat(inputs: BodyFatInputs) -> BodyFatResult:
    # the BMI estimate stands in when the tape measurements are unusable
    usable_tape = bool(inputs.neck) and _navy_girth(inputs.gender, inputs.waist, inputs.neck, inputs.hip) > 0
    if inputs.method == "navy" and usable_tape:
        pct = body_fat_navy(inputs.gender, inputs.height, inputs.waist, inputs.neck, inputs.hip)
    else:
        pct = body_fat_from_bmi(inputs.gender, inputs.age, calculate_bmi(inputs.weight, inputs.height))

    cat = body_fat_category(inputs.gender, pct)
    fat_mass = inputs.weight * pct / 100
    lo, hi = IDEAL_BODY_FAT[inputs.gender]
    return BodyFatResult(
        body_fat_percent=round_to(pct, 1),
        body_fat_mass=round_to(fat_mass, 1),
        lean_body_mass=round_to(inputs.weight - fat_mass, 1),
        category=cat["name"],
        health_risk=cat["risk"],
        ideal_range=WeightRange(min=lo, max=hi),
    )


# -- Heart rate --------------------------------------------------------------


def max_heart_rate(age, formula: str = "tanaka"):
    if formula == "fox":
        return 220 - age
    if formula == "gellish":
        return 207 - 0.7 * age
    return 208 - 0.7 * age


def zones_standard(max_hr) -> List[HeartRateZone]:
    return [
        HeartRateZone(
            name=name,
            min_bpm=round_whole(max_hr * lo / 100),
            max_bpm=round_whole(max_hr * hi / 100),
            min_percent=lo,
            max_percent=hi,
            description=desc,
        )
        for name, lo, hi, desc in HEART_RATE_ZONES
    ]


def zones_karvonen(max_hr, resting_hr) -> List[HeartRateZone]:
    """Zones as fractions of heart-rate reserve above resting."""
    reserve = max_hr - resting_hr
    return [
        HeartRateZone(
            name=name,
            min_bpm=round_whole(resting_hr + reserve * lo / 100),
            max_bpm=round_whole(resting_hr + reserve * hi / 100),
            min_percent=lo,
            max_percent=hi,
            description=desc,
        )
        for name, lo, hi, desc in HEART_RATE_ZONES
    ]


def calculate_heart_rate(age, resting_heart_rate: Optional[float] = None, formula: str = "tanaka") -> HeartRateResult:
    max_hr = round_whole(max_heart_rate(age, formula))
    if resting_heart_rate and resting_heart_rate > 0:
        return HeartRateResult(
            max_heart_rate=max_hr,
            heart_rate_reserve=round_whole(max_hr - resting_heart_rate),
            zones=zones_karvonen(max_hr, resting_heart_rate),
            formula="Karvonen (Heart Rate Reserve Method)",
        )
    return HeartRateResult(max_heart_rate=max_hr, zones=zones_standard(max_hr), formula="Standard Percentage Method")


# -- Ideal weight ------------------------------------------------------------


def ideal_weight(formula: str, gender, height_cm) -> IdealWeightResult:
    label, male_base, male_per_in, female_base, female_per_in = IDEAL_WEIGHT_FORMULAS[formula]
    over = max(0.0, height_cm / CM_PER_INCH - FIVE_FEET_IN)
    if gender == "male":
        kg = male_base + male_per_in * over
    else:
        kg = female_base + female_per_in * over
    return IdealWeightResult(formula=label, weight=round_to(kg, 1), description=IDEAL_WEIGHT_DESCRIPTIONS[formula])


def adjust_for_frame_size(weight, frame_size: Optional[str] = None):
    if not frame_size or frame_size == "medium":
        return weight
    return round_to(weight * FRAME_SIZE_FACTORS[frame_size], 1)


def calculate_all_ideal_weights(gender, height_cm, frame_size: Optional[str] = None) -> AllIdealWeightsResult:
    """Every ideal-weight formula plus the healthy-BMI band, frame adjusted."""

    raw = {name: ideal_weight(name, gender, height_cm) for name in IDEAL_WEIGHT_FORMULAS}
    band = healthy_weight_range(height_cm)
    weights = [r.weight for r in raw.values()]
    average = sum(weights) / len(weights)

    formulas: Dict[str, IdealWeightResult] = {
        name: r.model_copy(update={"weight": adjust_for_frame_size(r.weight, frame_size)}) for name, r in raw.items()
    }
    formulas["healthy_bmi"] = IdealWeightResult(
        formula="Healthy BMI Range",
        weight=adjust_for_frame_size(round_to((band.min + band.max) / 2, 1), frame_size),
        range=WeightRange(
            min=adjust_for_frame_size(band.min, frame_size),
            max=adjust_for_frame_size(band.max, frame_size),
        ),
        description="Based on healthy BMI range of 18.5-25",
    )

    return AllIdealWeightsResult(
        formulas=formulas,
        average=round_to(adjust_for_frame_size(average, frame_size), 1),
        recommended_range=WeightRange(
            min=round_to(adjust_for_frame_size(min(weights + [band.min]), frame_size), 1),
            max=round_to(adjust_for_frame_size(max(weights + [band.max]), frame_size), 1),
        ),
    )


def determine_frame_size(gender, wrist_cm) -> str:
    wrist = wrist_cm / CM_PER_INCH
    small, large = (6.5, 7.5) if gender == "male" else (5.5, 6.5)
    if wrist < small:
        return "small"
    if wrist > large:
        return "large"
    return "medium"


# -- Protein -----------------------------------------------------------------


def calculate_protein(weight, goal: str = "maintenance", is_athlete: bool = False) -> ProteinResult:
    lo, hi = PROTEIN_REQUIREMENTS[goal]
    if is_athlete and goal == "maintenance":
        lo, hi = ATHLETE_MAINTENANCE_PROTEIN

    min_g = round_whole(weight * lo)
    max_g = round_whole(weight * hi)

    tips = [f"Aim for {min_g}-{max_g}g of protein per day ({min_g / weight:.1f}-{max_g / weight:.1f}g per kg of body weight)."]
    tips.extend(PROTEIN_GOAL_TIPS.get(goal, []))
    tips.append("Good protein sources: chicken, fish, eggs, Greek yogurt, legumes, tofu, and whey protein.")

    return ProteinResult(
        grams_per_day=WeightRange(min=min_g, max=max_g),
        grams_per_kg=WeightRange(min=lo, max=hi),
        calories_from_protein=WeightRange(min=min_g * 4, max=max_g * 4),
        meal_breakdown=[
            MealProtein(meals=m, protein_per_meal=WeightRange(min=round_whole(min_g / m), max=round_whole(max_g / m)))
            for m in (3, 4, 5)
        ],
        recommendations=tips,
    )


# -- Unit helpers ------------------------------------------------------------


def lbs_to_kg(lbs):
    return lbs * KG_PER_LB


def kg_to_lbs(kg):
    return kg / KG_PER_LB


def feet_inches_to_cm(feet, inches):
    return (feet * 12 + inches) * CM_PER_INCH
