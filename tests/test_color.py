import pytest

from odatrek.color import RAINBOW_PERIOD_US, okhsv_to_srgb, rainbow_hue


def test_zero_value_is_black():
    assert okhsv_to_srgb(123.0, 0.75, 0.0) == (0.0, 0.0, 0.0)


def test_zero_saturation_full_value_is_white():
    r, g, b = okhsv_to_srgb(0.0, 0.0, 1.0)
    assert r == pytest.approx(1.0, abs=1e-6)
    assert g == pytest.approx(1.0, abs=1e-6)
    assert b == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("value", [0.2, 0.5, 0.8])
def test_zero_saturation_is_grey(value):
    r, g, b = okhsv_to_srgb(200.0, 0.0, value)
    assert r == pytest.approx(g, abs=1e-6)
    assert g == pytest.approx(b, abs=1e-6)
    assert 0.0 < r < 1.0


@pytest.mark.parametrize("hue", [0.0, 45.0, 90.0, 135.0, 180.0, 225.0, 270.0, 315.0])
def test_full_value_reaches_gamut_edge(hue):
    rgb = okhsv_to_srgb(hue, 0.75, 1.0)
    assert max(rgb) == pytest.approx(1.0, abs=1e-6)
    assert all(-1e-6 <= c <= 1.0 + 1e-6 for c in rgb)


@pytest.mark.parametrize("hue", [10.0, 100.0, 250.0])
def test_hue_wraps_at_full_circle(hue):
    first = okhsv_to_srgb(hue, 0.75, 1.0)
    second = okhsv_to_srgb(hue + 360.0, 0.75, 1.0)
    assert first == pytest.approx(second, abs=1e-9)


def test_lower_value_is_darker():
    bright = okhsv_to_srgb(60.0, 0.75, 1.0)
    dark = okhsv_to_srgb(60.0, 0.75, 0.4)
    assert sum(dark) < sum(bright)


def test_more_saturation_spreads_components():
    dull = okhsv_to_srgb(300.0, 0.1, 1.0)
    vivid = okhsv_to_srgb(300.0, 0.9, 1.0)
    assert max(vivid) - min(vivid) > max(dull) - min(dull)


def test_rainbow_hue_start_and_middle():
    assert rainbow_hue(0) == 0.0
    assert rainbow_hue(RAINBOW_PERIOD_US // 2) == pytest.approx(180.0)


@pytest.mark.parametrize("timestamp", [0, 123_456, 1_999_999, 1_700_000_000_000_000])
def test_rainbow_hue_is_periodic_and_bounded(timestamp):
    hue = rainbow_hue(timestamp)
    assert 0.0 <= hue < 360.0
    assert rainbow_hue(timestamp + RAINBOW_PERIOD_US) == pytest.approx(hue)


def test_rainbow_hue_increases_within_period():
    hues = [rainbow_hue(t) for t in range(0, RAINBOW_PERIOD_US, 250_000)]
    assert hues == sorted(hues)
    assert len(set(hues)) == len(hues)