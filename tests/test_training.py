import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from calckit.models import HatchSquatInputs
from calckit.presets import HATCH_PROGRAM
from calckit.training import calculate_hatch_cycle, hatch_cycle_csv, hatch_cycle_frame, round_to_plate


def _cycle(**overrides):
    base = dict(back_squat_max=300, front_squat_max=200)
    base.update(overrides)
    return calculate_hatch_cycle(HatchSquatInputs(**base))


def test_round_to_plate():
    assert round_to_plate(67) == 65
    assert round_to_plate(68) == 70
    assert round_to_plate(67.5) == 70


def test_cycle_covers_twelve_weeks():
    res = _cycle()
    assert len(res.weeks) == 24
    assert {w.week for w in res.weeks} == set(range(1, 13))
    first = res.weeks[0]
    assert first.back_squat[0].weight == 180
    assert first.front_squat[0].weight == 120


def test_multi_set_session():
    week8 = _cycle().weeks[15]
    assert (week8.week, week8.session) == (8, 2)
    assert [(s.sets, s.weight) for s in week8.back_squat] == [(2, 195), (3, 210)]
    assert week8.front_squat[0].sets == 4


def test_peak_week_and_projection():
    res = _cycle()
    peak = res.weeks[20]
    assert peak.back_squat[-1].percentage == 1.03
    assert peak.back_squat[-1].weight == 310
    assert res.projected_maxes.back_squat == 310
    assert res.projected_maxes.front_squat == 205
    assert res.starting_maxes.back_squat == 300
    assert res.starting_maxes.unit == "lbs"


def test_kg_unit():
    res = _cycle(back_squat_max=140, front_squat_max=100, use_kg=True)
    assert res.starting_maxes.unit == "kg"
    assert res.projected_maxes.unit == "kg"


def test_frame_and_csv_export():
    res = _cycle()
    df = hatch_cycle_frame(res)
    assert len(df) == sum(len(back) + len(front) for _, _, back, front in HATCH_PROGRAM)

    lines = hatch_cycle_csv(res).splitlines()
    assert lines[0] == "Week,Session,Exercise,Sets,Reps,Percentage,Weight"
    assert lines[1] == "1,1,Back Squat,1,10,60%,180.0"
    assert len(lines) == len(df) + 1
    assert "11,1,Back Squat,1,1,103%,310.0" in lines
