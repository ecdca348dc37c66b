"""Okhsv colour conversion and the time-driven rainbow hue."""

from __future__ import annotations

import math

RAINBOW_PERIOD_US = 2_000_000


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _oklab_to_linear_srgb(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    l_ = lightness + 0.3963377774 * a + 0.2158037573 * b
    m_ = lightness - 0.1055613458 * a - 0.0638541728 * b
    s_ = lightness - 0.0894841775 * a - 1.2914855480 * b
    l, m, s = l_ ** 3, m_ ** 3, s_ ** 3
    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def _srgb_transfer(x: float) -> float:
    if x >= 0.0031308:
        return 1.055 * x ** (1.0 / 2.4) - 0.055
    return 12.92 * x


def _toe_inv(x: float) -> float:
    k1, k2 = 0.206, 0.03
    k3 = (1.0 + k1) / (1.0 + k2)
    return (x * x + k1 * x) / (k3 * (x + k2))


def _max_saturation(a: float, b: float) -> float:
    if -1.88170328 * a - 0.80936493 * b > 1:
        k = (1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245)
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1:
        k = (0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204)
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        k = (1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167)
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    saturation = k[0] + k[1] * a + k[2] * b + k[3] * a * a + k[4] * a * b

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    l_ = 1.0 + saturation * k_l
    m_ = 1.0 + saturation * k_m
    s_ = 1.0 + saturation * k_s

    f = wl * l_ ** 3 + wm * m_ ** 3 + ws * s_ ** 3
    f1 = 3.0 * (wl * k_l * l_ * l_ + wm * k_m * m_ * m_ + ws * k_s * s_ * s_)
    f2 = 6.0 * (wl * k_l * k_l * l_ + wm * k_m * k_m * m_ + ws * k_s * k_s * s_)
    return saturation - f * f1 / (f1 * f1 - 0.5 * f * f2)


def _cusp(a: float, b: float) -> tuple[float, float]:
    s_cusp = _max_saturation(a, b)
    rgb = _oklab_to_linear_srgb(1.0, s_cusp * a, s_cusp * b)
    l_cusp = _cbrt(1.0 / max(rgb))
    return l_cusp, l_cusp * s_cusp


def okhsv_to_srgb(hue: float, saturation: float, value: float) -> tuple[float, float, float]:
    """Convert an Okhsv colour (hue in degrees, saturation and value in 0..1)
    to gamma-encoded sRGB components in 0..1."""
    if value <= 0.0:
        return (0.0, 0.0, 0.0)

    angle = math.radians(hue)
    a_, b_ = math.cos(angle), math.sin(angle)

    l_cusp, c_cusp = _cusp(a_, b_)
    s_max = c_cusp / l_cusp
    t_max = c_cusp / (1.0 - l_cusp)
    s_0 = 0.5
    k = 1.0 - s_0 / s_max

    denominator = s_0 + t_max - t_max * k * saturation
    l_v = 1.0 - saturation * s_0 / denominator
    c_v = saturation * t_max * s_0 / denominator

    lightness = value * l_v
    chroma = value * c_v

    l_vt = _toe_inv(l_v)
    c_vt = c_v * l_vt / l_v

    l_new = _toe_inv(lightness)
    chroma = chroma * l_new / lightness
    lightness = l_new

    scale = _oklab_to_linear_srgb(l_vt, a_ * c_vt, b_ * c_vt)
    scale_l = _cbrt(1.0 / max(*scale, 0.0))
    lightness *= scale_l
    chroma *= scale_l

    r, g, b = _oklab_to_linear_srgb(lightness, chroma * a_, chroma * b_)
    return (_srgb_transfer(r), _srgb_transfer(g), _srgb_transfer(b))


def rainbow_hue(timestamp_us: int) -> float:
    """Hue in degrees that sweeps the full circle every two seconds."""
    return (timestamp_us % RAINBOW_PERIOD_US) / RAINBOW_PERIOD_US * 360.0