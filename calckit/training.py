"""Hatch squat cycle: a 12-week, twice-weekly back and front squat program."""
from __future__ import annotations

from typing import List

import pandas as pd

from calckit.models import HatchSquatInputs, HatchSquatResult, LiftMaxes, SetScheme, WeeklySession
from calckit.presets import HATCH_PROGRAM, HATCH_PROJECTED_GAIN, PLATE_INCREMENT
from core.utils import round_whole

CSV_COLUMNS = ["Week", "Session", "Exercise", "Sets", "Reps", "Percentage", "Weight"]


def round_to_plate(weight, increment=PLATE_INCREMENT):
    """Nearest loadable bar weight, e.g. 67 -> 65 and 68 -> 70."""

    return round_whole(weight / increment) * increment


def _sets(scheme, one_rep_max) -> List[SetScheme]:
    return [
        SetScheme(sets=sets, reps=reps, percentage=pct, weight=round_to_plate(one_rep_max * pct))
        for sets, reps, pct in scheme
    ]


def calculate_hatch_cycle(inputs: HatchSquatInputs) -> HatchSquatResult:
    unit = "kg" if inputs.use_kg else "lbs"
    weeks = [
        WeeklySession(
            week=week,
            session=session,
            back_squat=_sets(back, inputs.back_squat_max),
            front_squat=_sets(front, inputs.front_squat_max),
        )
        for week, session, back, front in HATCH_PROGRAM
    ]
    return HatchSquatResult(
        weeks=weeks,
        starting_maxes=LiftMaxes(back_squat=inputs.back_squat_max, front_squat=inputs.front_squat_max, unit=unit),
        # week 11 tests a 103% single
        projected_maxes=LiftMaxes(
            back_squat=round_to_plate(inputs.back_squat_max * HATCH_PROJECTED_GAIN),
            front_squat=round_to_plate(inputs.front_squat_max * HATCH_PROJECTED_GAIN),
            unit=unit,
        ),
    )


def hatch_cycle_frame(result: HatchSquatResult) -> pd.DataFrame:
    """One row per set scheme, back squat rows before front squat rows in each session."""

    rows = []
    for day in result.weeks:
        for exercise, scheme in (("Back Squat", day.back_squat), ("Front Squat", day.front_squat)):
            for s in scheme:
                rows.append([day.week, day.session, exercise, s.sets, s.reps, s.percentage, s.weight or 0.0])
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def hatch_cycle_csv(result: HatchSquatResult) -> str:
    df = hatch_cycle_frame(result)
    df["Percentage"] = df["Percentage"].map(lambda p: f"{p * 100:.0f}%")
    df["Weight"] = df["Weight"].map(lambda w: f"{w:.1f}")
    return df.to_csv(index=False, lineterminator="\n")
