import pytest

from fishfrenzy.constants import PROGRESS_BAR_HEIGHT, PROGRESS_BAR_WIDTH
from fishfrenzy.entity import Vec2
from fishfrenzy.progress_bar import ProgressBar


def test_defaults():
    bar = ProgressBar()
    assert bar.size == Vec2(PROGRESS_BAR_WIDTH, PROGRESS_BAR_HEIGHT)
    assert bar.fill_width == 0.0
    assert bar.current_stage == 1


def test_set_progress_full_and_half():
    bar = ProgressBar()
    bar.set_progress(10.0, 10.0)
    assert bar.fill_width == pytest.approx(bar.size.x)
    bar.set_progress(5.0, 10.0)
    assert bar.fill_width == pytest.approx(bar.size.x / 2)


def test_fill_is_clamped():
    bar = ProgressBar()
    bar.set_progress(30.0, 10.0)
    assert bar.fill_width == bar.size.x
    bar.set_progress(-5.0, 10.0)
    assert bar.fill_width == 0.0


def test_zero_max_gives_empty_fill():
    bar = ProgressBar()
    bar.set_progress(5.0, 0.0)
    assert bar.fill_width == 0.0


def test_set_size_refits_fill():
    bar = ProgressBar()
    bar.set_progress(1.0, 1.0)
    bar.set_size(400.0, 30.0)
    assert bar.size == Vec2(400.0, 30.0)
    assert bar.fill_width == pytest.approx(400.0)


@pytest.mark.parametrize("stage, name", [
    (1, "Small Fish"), (2, "Medium Fish"), (3, "Large Fish"),
])
def test_stage_names(stage, name):
    bar = ProgressBar()
    bar.set_stage_info(stage, 200)
    assert bar.stage_text == f"Stage: {name}"
    assert bar.current_stage == stage


def test_stage_info_progress():
    bar = ProgressBar()
    bar.set_stage_info(1, 50)
    assert bar.progress_text == "50%"
    assert bar.max_progress == 100.0
    assert bar.fill_width == pytest.approx(bar.size.x / 2)


def test_stage_two_starts_at_hundred():
    bar = ProgressBar()
    bar.set_stage_info(2, 100)
    assert bar.current_progress == 0.0
    assert bar.progress_text == "0%"


def test_stage_three_complete():
    bar = ProgressBar()
    bar.set_stage_info(3, 400)
    assert bar.max_progress == 200.0
    assert bar.progress_text == "100%"
    assert bar.fill_width == pytest.approx(bar.size.x)


def test_set_position_layout():
    bar = ProgressBar()
    bar.set_position(10.0, 100.0)
    assert bar.position == Vec2(10.0, 110.0)
    assert bar.stage_text_position == Vec2(10.0, 85.5)
    assert bar.progress_text_position == Vec2(
        10.0 + PROGRESS_BAR_WIDTH / 2, 100.0 + PROGRESS_BAR_HEIGHT + 15.0)


def test_set_font():
    bar = ProgressBar()
    font = object()
    bar.set_font(font)
    assert bar.font is font