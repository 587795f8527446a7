"""Macronutrient split for a calorie target."""
from __future__ import annotations

from typing import List

from calckit.models import (
    DietTypeOption,
    FoodMacrosResult,
    MacroBreakdown,
    MacroDetail,
    MacrosInputs,
    MacrosResult,
    MealMacros,
)
from calckit.presets import (
    CALORIES_PER_GRAM,
    DEFAULT_DIET_TIPS,
    DIET_CONFIGS,
    DIET_TIPS,
    GOAL_MACRO_TIPS,
    MEAL_DISTRIBUTION,
    MIN_PROTEIN_G_PER_KG,
)
from core.utils import round_whole


def diet_label(diet_type: str) -> str:
    return diet_type.replace("_", " ").title()


def _detail(calories, macro, pct) -> MacroDetail:
    share = calories * pct / 100
    return MacroDetail(grams=round_whole(share / CALORIES_PER_GRAM[macro]), calories=round_whole(share), percentage=pct)


def meal_plan(total_calories, macros: MacroBreakdown) -> List[MealMacros]:
    return [
        MealMacros(
            meal=meal,
            calories=round_whole(total_calories * share),
            protein=round_whole(macros.protein.grams * share),
            carbs=round_whole(macros.carbs.grams * share),
            fat=round_whole(macros.fat.grams * share),
        )
        for meal, share in MEAL_DISTRIBUTION
    ]


def macro_recommendations(diet_type, goal) -> List[str]:
    return list(DIET_TIPS.get(diet_type, DEFAULT_DIET_TIPS)) + list(GOAL_MACRO_TIPS.get(goal, []))


def calculate_macros(inputs: MacrosInputs) -> MacrosResult:
    """Split ``inputs.calories`` across protein, carbs and fat.

    When a body weight is given, protein is lifted to at least 1.6 g/kg on
    every diet except keto.  Carbs and fat are left as they are, so the
    macro calories can then exceed the target.
    """

    protein_pct, carbs_pct, fat_pct, description = DIET_CONFIGS[inputs.diet_type]
    protein = _detail(inputs.calories, "protein", protein_pct)
    if inputs.weight and inputs.diet_type != "keto":
        floor_g = round_whole(inputs.weight * MIN_PROTEIN_G_PER_KG)
        if protein.grams < floor_g:
            protein = protein.model_copy(update={"grams": floor_g, "calories": floor_g * CALORIES_PER_GRAM["protein"]})

    macros = MacroBreakdown(
        protein=protein,
        carbs=_detail(inputs.calories, "carbs", carbs_pct),
        fat=_detail(inputs.calories, "fat", fat_pct),
    )
    return MacrosResult(
        total_calories=inputs.calories,
        macros=macros,
        diet_type=diet_label(inputs.diet_type),
        description=description,
        meal_plan=meal_plan(inputs.calories, macros),
        recommendations=macro_recommendations(inputs.diet_type, inputs.goal),
    )


def get_diet_types() -> List[DietTypeOption]:
    return [
        DietTypeOption(value=key, label=diet_label(key), description=cfg[3])
        for key, cfg in DIET_CONFIGS.items()
    ]


def calculate_food_macros(protein, carbs, fat) -> FoodMacrosResult:
    """Calories and calorie shares for a food's gram amounts.

    A food with no calories reports 0% for every macro.
    """

    parts = {
        "protein": protein * CALORIES_PER_GRAM["protein"],
        "carbs": carbs * CALORIES_PER_GRAM["carbs"],
        "fat": fat * CALORIES_PER_GRAM["fat"],
    }
    calories = sum(parts.values())
    grams = {"protein": protein, "carbs": carbs, "fat": fat}

    def share(macro):
        pct = round_whole(parts[macro] / calories * 100) if calories > 0 else 0
        return MacroDetail(grams=grams[macro], calories=parts[macro], percentage=pct)

    return FoodMacrosResult(
        calories=calories,
        macro_percentages=MacroBreakdown(protein=share("protein"), carbs=share("carbs"), fat=share("fat")),
    )
