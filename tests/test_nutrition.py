import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from calckit.models import BodyFatInputs, TDEEInputs
from calckit.nutrition import (
    body_fat_from_bmi,
    body_fat_navy,
    body_fat_skinfold,
    calculate_all_ideal_weights,
    calculate_bmi_imperial,
    calculate_bmi_result,
    calculate_bmr,
    calculate_body_fat,
    calculate_heart_rate,
    calculate_protein,
    calculate_tdee,
    determine_frame_size,
    feet_inches_to_cm,
    ideal_weight,
    kg_to_lbs,
    lbs_to_kg,
    max_heart_rate,
)


def test_bmi_normal():
    res = calculate_bmi_result(70, 175)
    assert res.bmi == 22.9
    assert res.category == "Normal"
    assert res.healthy_weight_range.min == 56.7
    assert res.healthy_weight_range.max == 76.6
    assert res.weight_to_lose is None
    assert res.weight_to_gain is None


def test_bmi_obese_weight_to_lose():
    res = calculate_bmi_result(100, 175)
    assert res.category == "Obese Class I"
    assert res.weight_to_lose == 23.4


def test_bmi_underweight_weight_to_gain():
    res = calculate_bmi_result(50, 175)
    assert res.category == "Underweight"
    assert res.weight_to_gain == 6.7


def test_bmi_imperial():
    assert calculate_bmi_imperial(154, 5, 9) == pytest.approx(22.74, abs=0.01)


def test_bmr_mifflin_st_jeor():
    assert calculate_bmr(80, 180, 30, "male") == 1780
    assert calculate_bmr(60, 165, 30, "female") == pytest.approx(1320.25)


def test_tdee_goals():
    base = dict(weight=80, height=180, age=30, gender="male", activity_level="moderate")
    maintain = calculate_tdee(TDEEInputs(**base))
    assert maintain.bmr == 1780
    assert maintain.tdee == 2759
    assert maintain.goal_calories == 2759
    assert maintain.protein_grams.min == 128
    assert maintain.protein_grams.max == 176
    assert maintain.activity_multiplier == 1.55

    assert calculate_tdee(TDEEInputs(goal="lose", **base)).goal_calories == 2209
    assert calculate_tdee(TDEEInputs(goal="gain", **base)).goal_calories == 3309


def test_tdee_goal_floor():
    res = calculate_tdee(TDEEInputs(weight=60, height=165, age=30, gender="female", goal="lose", goal_rate=1.0))
    assert res.tdee == 1584
    assert res.goal_calories == 1200


def test_body_fat_navy_male():
    res = calculate_body_fat(BodyFatInputs(gender="male", height=180, waist=85, neck=38, weight=80))
    assert 5 < res.body_fat_percent < 15
    assert res.category == "Athletes"
    assert res.body_fat_mass + res.lean_body_mass == pytest.approx(80, abs=0.1)
    assert res.ideal_range.min == 10


def test_body_fat_falls_back_to_bmi_without_neck():
    res = calculate_body_fat(BodyFatInputs(gender="female", height=165, waist=75, weight=60, age=30))
    expected = body_fat_from_bmi("female", 30, 60 / 1.65 ** 2)
    assert res.body_fat_percent == pytest.approx(expected, abs=0.05)


def test_body_fat_waist_under_neck_uses_bmi():
    res = calculate_body_fat(BodyFatInputs(gender="male", height=180, waist=38, neck=40, weight=80))
    expected = body_fat_from_bmi("male", 30, 80 / 1.8 ** 2)
    assert res.body_fat_percent == pytest.approx(expected, abs=0.05)


def test_navy_without_positive_girth_is_lower_bound():
    assert body_fat_navy("male", 180, 38, 40) == 2.0
    assert body_fat_navy("male", 180, 40, 40) == 2.0
    assert body_fat_navy("female", 165, 30, 80, hip_cm=40) == 2.0


def test_body_fat_is_clamped():
    assert body_fat_from_bmi("male", 20, 5) == 2.0
    assert body_fat_from_bmi("female", 80, 70) == 60.0


def test_max_heart_rate_formulas():
    assert max_heart_rate(30) == pytest.approx(187)
    assert max_heart_rate(30, "fox") == 190
    assert max_heart_rate(30, "gellish") == pytest.approx(186)


def test_heart_rate_standard_zones():
    res = calculate_heart_rate(30)
    assert res.max_heart_rate == 187
    assert res.heart_rate_reserve is None
    assert len(res.zones) == 5
    assert res.zones[0].min_bpm == 94
    assert res.zones[0].max_bpm == 112
    assert res.zones[-1].max_bpm == 187


def test_heart_rate_karvonen_zones():
    res = calculate_heart_rate(30, resting_heart_rate=60)
    assert res.heart_rate_reserve == 127
    assert res.zones[0].min_bpm == 124
    assert res.zones[-1].max_bpm == 187
    assert res.formula.startswith("Karvonen")


def test_ideal_weight_devine():
    assert ideal_weight("devine", "male", 180).weight == 75.0
    # no negative adjustment under five feet
    assert ideal_weight("devine", "male", 150).weight == 50.0


def test_all_ideal_weights_with_frame():
    medium = calculate_all_ideal_weights("male", 180)
    assert set(medium.formulas) == {"devine", "robinson", "miller", "hamwi", "healthy_bmi"}
    assert medium.formulas["healthy_bmi"].range is not None
    assert medium.recommended_range.min <= medium.average <= medium.recommended_range.max

    small = calculate_all_ideal_weights("male", 180, frame_size="small")
    assert small.formulas["devine"].weight == 67.5


def test_determine_frame_size():
    assert determine_frame_size("male", 15) == "small"
    assert determine_frame_size("male", 17.5) == "medium"
    assert determine_frame_size("male", 20) == "large"
    assert determine_frame_size("female", 15) == "medium"


def test_protein_targets():
    res = calculate_protein(80)
    assert res.grams_per_day.min == 64
    assert res.grams_per_day.max == 96

    athlete = calculate_protein(80, is_athlete=True)
    assert athlete.grams_per_day.min == 96

    gain = calculate_protein(80, goal="muscle_gain")
    assert gain.grams_per_day.max == 176
    assert gain.calories_from_protein.min == 512
    assert gain.meal_breakdown[0].meals == 3
    assert gain.meal_breakdown[0].protein_per_meal.min == 43
    assert gain.recommendations[0].startswith("Aim for 128-176g")
    assert len(gain.recommendations) == 5


def test_unit_helpers():
    assert lbs_to_kg(2.20462) == pytest.approx(1.0)
    assert kg_to_lbs(1) == pytest.approx(2.20462)
    assert feet_inches_to_cm(6, 0) == pytest.approx(182.88)


def test_skinfold_defaults_and_bounds():
    default_male = body_fat_skinfold("male", 30)
    assert default_male == body_fat_skinfold("male", 30, chest=10, abdominal=15, thigh=12)
    assert 2 <= default_male <= 60
    # thicker folds mean more fat
    assert body_fat_skinfold("female", 30, tricep=25, suprailiac=30, thigh=28) > body_fat_skinfold("female", 30)
