import pytest

from fishfrenzy.constants import (
    MAX_STAGES,
    POINTS_FOR_STAGE_2,
    POINTS_FOR_STAGE_3,
    POINTS_TO_WIN,
)
from fishfrenzy.entity import Vec2
from fishfrenzy.growth_meter import INNER_WIDTH, STAGE_COLORS, WIDTH, GrowthMeter


def test_initial_state():
    meter = GrowthMeter()
    assert meter.current_stage == 1
    assert meter.max_progress == POINTS_FOR_STAGE_2
    assert meter.progress_text == "Points: 0/100"
    assert meter.stage_text == "Stage 1"
    assert meter.fill_width == 0.0
    assert not meter.is_stage_complete


def test_set_points_stage_one():
    meter = GrowthMeter()
    meter.set_points(40)
    assert meter.current_progress == 40.0
    assert meter.target_progress == 40.0
    assert meter.progress_text == "Points: 40/100"


def test_fill_width_proportional():
    meter = GrowthMeter()
    meter.set_points(POINTS_FOR_STAGE_2)
    full = meter.fill_width
    assert full == pytest.approx(INNER_WIDTH)
    meter.set_points(POINTS_FOR_STAGE_2 // 2)
    assert meter.fill_width == pytest.approx(full / 2)


def test_stage_complete_at_threshold():
    meter = GrowthMeter()
    meter.set_points(POINTS_FOR_STAGE_2)
    assert meter.is_stage_complete


def test_stage_two_progress_is_relative():
    meter = GrowthMeter()
    meter.set_points(POINTS_FOR_STAGE_2 + 30)
    meter.set_stage(2)
    assert meter.current_progress == 30.0
    assert meter.max_progress == POINTS_FOR_STAGE_3 - POINTS_FOR_STAGE_2
    assert meter.progress_text == f"Points: {POINTS_FOR_STAGE_2 + 30}/{POINTS_FOR_STAGE_3}"
    assert meter.stage_text == "Stage 2"
    assert meter.fill_color == STAGE_COLORS[1]


@pytest.mark.parametrize("stage, expected", [(0, 1), (-3, 1), (7, MAX_STAGES)])
def test_set_stage_clamps(stage, expected):
    meter = GrowthMeter()
    meter.set_stage(stage)
    assert meter.current_stage == expected
    assert meter.stage_text == f"Stage {expected}"
    assert meter.fill_color == STAGE_COLORS[expected - 1]


def test_stage_three_target():
    meter = GrowthMeter()
    meter.set_points(POINTS_FOR_STAGE_3)
    meter.set_stage(3)
    assert meter.max_progress == POINTS_TO_WIN - POINTS_FOR_STAGE_3
    assert meter.current_progress == 0.0
    assert meter.progress_text.endswith(f"/{POINTS_TO_WIN}")


def test_update_animates_towards_target():
    meter = GrowthMeter()
    meter.target_progress = 50.0
    meter.update(0.1)
    assert 0.0 < meter.current_progress < 50.0
    meter.update(10.0)
    assert meter.current_progress == 50.0


def test_update_glows_near_full():
    meter = GrowthMeter()
    base = meter.fill_color
    meter.set_points(90)
    meter.update(0.1)
    assert meter.fill_color.r > base.r
    assert meter.fill_color.b == base.b
    assert 0.5 <= meter.glow_intensity <= 1.0


def test_no_glow_when_low():
    meter = GrowthMeter()
    base = meter.fill_color
    meter.set_points(10)
    meter.update(0.1)
    assert meter.fill_color == base
    assert meter.glow_intensity == 0.0


def test_reset_clears_progress():
    meter = GrowthMeter()
    meter.set_points(60)
    meter.reset()
    assert meter.points == 0
    assert meter.current_progress == 0.0
    assert meter.fill_width == 0.0
    assert meter.progress_text == "Points: 0/100"


def test_set_position_moves_parts():
    meter = GrowthMeter()
    meter.set_position(10.0, 50.0)
    assert meter.position == Vec2(10.0, 50.0)
    assert meter.stage_text_position == Vec2(15.0, 25.0)
    assert meter.progress_text_anchor == Vec2(10.0 + WIDTH - 5.0, 25.0)
    assert meter.fill_position.x > meter.position.x