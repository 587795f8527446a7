import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from calckit.body_type import (
    calculate_body_type,
    calculate_body_type_scores,
    determine_body_type,
    get_all_body_types,
    get_body_type_info,
)
from calckit.models import BodyTypeAnswers, BodyTypeScores


def test_middle_answers_score_mesomorph():
    scores = calculate_body_type_scores(BodyTypeAnswers())
    assert scores == BodyTypeScores(ectomorph=0, mesomorph=8, endomorph=1)
    res = calculate_body_type(BodyTypeAnswers())
    assert res.primary_type == "mesomorph"
    assert res.secondary_type is None
    assert res.description == get_body_type_info("mesomorph").description


def test_lean_answers_score_ectomorph():
    answers = BodyTypeAnswers(
        frame_size="small",
        weight_gain="difficult",
        weight_loss="easy",
        muscle_definition="difficult",
        metabolism="fast",
        shoulders="narrow",
        wrists="small",
        body_fat="low",
    )
    res = calculate_body_type(answers)
    assert res.scores.ectomorph == 13
    assert res.primary_type == "ectomorph"
    assert res.secondary_type is None
    assert res.traits[0] == "Naturally thin and lean"


def test_close_runner_up_is_secondary():
    answers = BodyTypeAnswers(frame_size="large", weight_gain="easy", weight_loss="difficult", muscle_definition="easy")
    res = calculate_body_type(answers)
    assert res.scores == BodyTypeScores(ectomorph=0, mesomorph=6, endomorph=7)
    assert res.primary_type == "endomorph"
    assert res.secondary_type == "mesomorph"
    assert res.description.endswith("With some mesomorph tendencies.")
    assert res.train_tips == get_body_type_info("endomorph").train_tips


def test_ties_keep_listing_order():
    assert determine_body_type(BodyTypeScores(ectomorph=5, mesomorph=5, endomorph=1)) == ("ectomorph", "mesomorph")
    assert determine_body_type(BodyTypeScores(ectomorph=1, mesomorph=4, endomorph=4)) == ("mesomorph", "endomorph")


def test_all_body_types():
    assert get_all_body_types() == ["ectomorph", "mesomorph", "endomorph"]
    assert get_body_type_info("endomorph").name == "Endomorph"
