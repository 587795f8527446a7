"""Somatotype questionnaire scoring."""
from __future__ import annotations

from typing import List, Optional, Tuple

from calckit.models import BodyTypeAnswers, BodyTypeInfo, BodyTypeResult, BodyTypeScores
from calckit.presets import BODY_TYPE_INFO, BODY_TYPE_SCORING, SECONDARY_TYPE_MARGIN, SOMATOTYPES


def calculate_body_type_scores(answers: BodyTypeAnswers) -> BodyTypeScores:
    totals = dict.fromkeys(SOMATOTYPES, 0)
    for question, table in BODY_TYPE_SCORING.items():
        for somatotype, points in table[getattr(answers, question)].items():
            totals[somatotype] += points
    return BodyTypeScores(**totals)


def determine_body_type(scores: BodyTypeScores) -> Tuple[str, Optional[str]]:
    """Return ``(primary, secondary)``.

    Ties keep the ectomorph, mesomorph, endomorph order.  The runner-up is
    reported as secondary when it scores within two points of the leader.
    """

    ranked = sorted(SOMATOTYPES, key=lambda t: getattr(scores, t), reverse=True)
    primary, runner_up = ranked[0], ranked[1]
    if getattr(scores, runner_up) >= getattr(scores, primary) - SECONDARY_TYPE_MARGIN:
        return primary, runner_up
    return primary, None


def get_body_type_info(somatotype) -> BodyTypeInfo:
    return BodyTypeInfo(**BODY_TYPE_INFO[somatotype])


def get_all_body_types() -> List[str]:
    return list(SOMATOTYPES)


def calculate_body_type(answers: BodyTypeAnswers) -> BodyTypeResult:
    scores = calculate_body_type_scores(answers)
    primary, secondary = determine_body_type(scores)
    info = get_body_type_info(primary)

    description = info.description
    if secondary:
        description += f" With some {BODY_TYPE_INFO[secondary]['name'].lower()} tendencies."

    return BodyTypeResult(
        primary_type=primary,
        secondary_type=secondary,
        scores=scores,
        description=description,
        traits=info.traits,
        train_tips=info.train_tips,
        nutrition_tips=info.nutrition_tips,
        exercise_recommendations=info.exercise_recommendations,
    )
