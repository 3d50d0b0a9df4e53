import json
import os
from pathlib import Path

from core.slider_model import InvalidArgumentError, to_decimal

SETTINGS_PATH = Path("material_slider_settings.json")

ENV_DEFAULTS = {
    "MATERIAL_SLIDER_QT_API": "auto",
    "MATERIAL_SLIDER_DEBUG": "0",
}

STYLE_DEFAULTS = {
    "minimum": "0",
    "maximum": "100",
    "value": "30",
    "small_step": "1",
    "large_step": "5",
    "wheel_partitions": "10",
    "orientation": "horizontal",
    "padding": "0",
    "bar_width": "100",
    "bar_height": "20",
    "track_color": "#000000",
    "elapsed_top_color": "#5f8cb4",
    "elapsed_bottom_color": "#6382d0",
    "border_top_color": "#373c4a",
    "border_bottom_color": "#575e6e",
    "fore_color": "#ffffff",
    "scale_divisions": "10",
    "scale_subdivisions": "5",
    "show_scale": "0",
    "show_sub_scale": "0",
    "show_division_labels": "1",
    "draw_focus_rectangle": "0",
    "mouse_effects": "1",
}

DEFAULTS = {**ENV_DEFAULTS, **STYLE_DEFAULTS}

COLOR_KEYS = (
    "track_color",
    "elapsed_top_color",
    "elapsed_bottom_color",
    "border_top_color",
    "border_bottom_color",
    "fore_color",
)

DECIMAL_KEYS = (
    "minimum",
    "maximum",
    "value",
    "small_step",
    "large_step",
    "scale_divisions",
    "scale_subdivisions",
)

FLAG_KEYS = {
    "show_scale": "show_scale",
    "show_sub_scale": "show_sub_scale",
    "show_division_labels": "show_division_labels",
    "draw_focus_rectangle": "draw_focus_rectangle",
    "mouse_effects": "mouse_effects_enabled",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_settings(path=SETTINGS_PATH):
    settings = dict(DEFAULTS)
    if not path.exists():
        return settings

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return settings

    if not isinstance(raw, dict):
        return settings

    for key in DEFAULTS:
        if key in raw and raw[key] is not None:
            settings[key] = str(raw[key]).strip()
    return settings


def save_settings(settings, path=SETTINGS_PATH):
    payload = {}
    for key, default in DEFAULTS.items():
        payload[key] = str(settings.get(key, default)).strip()
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def apply_settings_to_environ(settings, override=True):
    for key, value in settings.items():
        if key not in ENV_DEFAULTS:
            continue
        if override or key not in os.environ:
            os.environ[key] = str(value)


def parse_flag(value):
    return str(value).strip().lower() in _TRUE_VALUES


def _int_or_default(settings, key):
    try:
        return int(str(settings.get(key, STYLE_DEFAULTS[key])).strip())
    except ValueError:
        return int(STYLE_DEFAULTS[key])


def _text(settings, key):
    value = str(settings.get(key, STYLE_DEFAULTS[key])).strip()
    return value or STYLE_DEFAULTS[key]


def _parse_style(settings):
    # Qt is imported lazily so loading settings never picks the binding early.
    from qt.color_tools import to_color

    style = {key: to_decimal(_text(settings, key)) for key in DECIMAL_KEYS}
    if style["minimum"] >= style["maximum"]:
        raise InvalidArgumentError("Minimum has to be lower than maximum")
    if not style["minimum"] <= style["value"] <= style["maximum"]:
        raise InvalidArgumentError("Value has to be between minimum and maximum")
    for key in ("small_step", "large_step"):
        if style[key] <= 0:
            raise InvalidArgumentError(f"{key} has to be greater than zero")

    for key in COLOR_KEYS:
        to_color(_text(settings, key))
        style[key] = _text(settings, key)

    style["wheel_partitions"] = _int_or_default(settings, "wheel_partitions")
    style["padding"] = _int_or_default(settings, "padding")
    style["bar_size"] = (
        _int_or_default(settings, "bar_width"),
        _int_or_default(settings, "bar_height"),
    )
    if style["wheel_partitions"] <= 0 or style["padding"] < 0 or min(style["bar_size"]) <= 0:
        raise InvalidArgumentError("Wheel partitions, padding and bar size must be positive")

    orientation = _text(settings, "orientation").lower()
    if orientation not in {"horizontal", "vertical"}:
        orientation = STYLE_DEFAULTS["orientation"]
    style["orientation"] = orientation
    return style


def apply_settings_to_slider(slider, settings):
    """
    Push style settings onto a MaterialSlider.

    Every entry is parsed and checked before the slider is touched, so a bad
    file raises InvalidArgumentError and leaves the slider as it was.
    Malformed integers and unknown orientations fall back to defaults.
    """
    style = _parse_style(settings)

    if style["minimum"] >= slider.maximum:
        slider.maximum = style["maximum"]
        slider.minimum = style["minimum"]
    else:
        slider.minimum = style["minimum"]
        slider.maximum = style["maximum"]
    slider.value = style["value"]

    slider.small_step = style["small_step"]
    slider.large_step = style["large_step"]
    slider.wheel_partitions = style["wheel_partitions"]

    slider.orientation = style["orientation"]
    slider.padding = style["padding"]
    slider.bar_size = style["bar_size"]

    for key in COLOR_KEYS:
        slider.set_color(key, style[key])

    slider.scale_divisions = style["scale_divisions"]
    slider.scale_subdivisions = style["scale_subdivisions"]
    for key, attr in FLAG_KEYS.items():
        setattr(slider, attr, parse_flag(settings.get(key, STYLE_DEFAULTS[key])))
    return slider
