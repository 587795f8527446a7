import os
import sys

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from calckit.macros import calculate_food_macros, calculate_macros, get_diet_types
from calckit.models import MacrosInputs


def test_balanced_split():
    res = calculate_macros(MacrosInputs(calories=2000))
    assert res.diet_type == "Balanced"
    assert res.macros.protein.grams == 125
    assert res.macros.protein.calories == 500
    assert res.macros.carbs.grams == 225
    assert res.macros.fat.grams == 67
    assert res.macros.fat.calories == 600
    assert res.recommendations == ["Focus on whole, unprocessed foods."]


def test_meal_plan_shares():
    res = calculate_macros(MacrosInputs(calories=2000))
    assert [m.meal for m in res.meal_plan] == ["Breakfast", "Lunch", "Dinner", "Snacks"]
    breakfast = res.meal_plan[0]
    assert breakfast.calories == 500
    assert breakfast.protein == 31
    assert breakfast.carbs == 56
    assert breakfast.fat == 17
    assert sum(m.calories for m in res.meal_plan) == 2000


def test_protein_floor_from_body_weight():
    res = calculate_macros(MacrosInputs(calories=2000, weight=100))
    assert res.macros.protein.grams == 160
    assert res.macros.protein.calories == 640
    assert res.macros.protein.percentage == 25


def test_keto_ignores_protein_floor():
    res = calculate_macros(MacrosInputs(calories=2000, diet_type="keto", weight=100))
    assert res.macros.protein.grams == 100
    assert res.macros.carbs.grams == 25
    assert res.macros.fat.grams == 167
    assert res.recommendations[0].startswith("Keep net carbs under")


def test_goal_adds_recommendations():
    res = calculate_macros(MacrosInputs(calories=2500, diet_type="high_protein", goal="lose"))
    assert res.diet_type == "High Protein"
    assert len(res.recommendations) == 4
    assert res.recommendations[-1] == "Consider cycling carbs higher on workout days."


def test_diet_types_listing():
    options = get_diet_types()
    assert len(options) == 6
    labels = {o.value: o.label for o in options}
    assert labels["low_carb"] == "Low Carb"
    assert labels["mediterranean"] == "Mediterranean"


def test_food_macros():
    res = calculate_food_macros(10, 20, 5)
    assert res.calories == 165
    assert res.macro_percentages.protein.percentage == 24
    assert res.macro_percentages.carbs.percentage == 48
    assert res.macro_percentages.fat.percentage == 27
    assert res.macro_percentages.fat.calories == 45


def test_food_macros_without_calories():
    res = calculate_food_macros(0, 0, 0)
    assert res.calories == 0
    assert res.macro_percentages.protein.percentage == 0


def test_negative_calories_rejected():
    with pytest.raises(ValidationError):
        MacrosInputs(calories=-1)
