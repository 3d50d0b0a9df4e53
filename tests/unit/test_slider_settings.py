import json
from decimal import Decimal

import pytest

from core.slider_model import InvalidArgumentError
from system import slider_settings


def test_load_settings_returns_defaults_when_file_missing(tmp_path):
    settings_path = tmp_path / "missing_settings.json"

    settings = slider_settings.load_settings(path=settings_path)

    assert settings == slider_settings.DEFAULTS


def test_load_settings_returns_defaults_for_malformed_json(tmp_path):
    settings_path = tmp_path / "bad_settings.json"
    settings_path.write_text("{not valid json", encoding="utf-8")

    settings = slider_settings.load_settings(path=settings_path)

    assert settings == slider_settings.DEFAULTS


def test_load_settings_returns_defaults_for_non_object(tmp_path):
    settings_path = tmp_path / "list_settings.json"
    settings_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert slider_settings.load_settings(path=settings_path) == slider_settings.DEFAULTS


def test_load_settings_merges_and_normalizes_values(tmp_path):
    settings_path = tmp_path / "material_slider_settings.json"
    settings_path.write_text(
        json.dumps(
            {
                "padding": " 4 ",
                "wheel_partitions": 20,
                "track_color": None,
                "UNRELATED": "ignored",
            }
        ),
        encoding="utf-8",
    )

    settings = slider_settings.load_settings(path=settings_path)

    assert settings["padding"] == "4"
    assert settings["wheel_partitions"] == "20"
    assert settings["track_color"] == slider_settings.DEFAULTS["track_color"]
    assert "UNRELATED" not in settings


def test_save_settings_writes_defaults_for_missing_keys(tmp_path):
    settings_path = tmp_path / "out_settings.json"

    slider_settings.save_settings(
        {
            "orientation": " vertical ",
            "show_scale": 1,
        },
        path=settings_path,
    )

    payload = json.loads(settings_path.read_text(encoding="utf-8"))
    assert payload["orientation"] == "vertical"
    assert payload["show_scale"] == "1"
    assert payload["bar_width"] == slider_settings.DEFAULTS["bar_width"]
    assert set(payload) == set(slider_settings.DEFAULTS)


def test_apply_settings_to_environ_only_exports_env_keys(monkeypatch):
    monkeypatch.setenv("MATERIAL_SLIDER_QT_API", "pyside6")
    monkeypatch.delenv("MATERIAL_SLIDER_DEBUG", raising=False)

    slider_settings.apply_settings_to_environ(
        {"MATERIAL_SLIDER_QT_API": "pyqt6", "MATERIAL_SLIDER_DEBUG": "1", "padding": "3"},
        override=False,
    )

    environ = slider_settings.os.environ
    assert environ["MATERIAL_SLIDER_QT_API"] == "pyside6"
    assert environ["MATERIAL_SLIDER_DEBUG"] == "1"
    assert "padding" not in environ

    slider_settings.apply_settings_to_environ({"MATERIAL_SLIDER_QT_API": "pyqt6"}, override=True)
    assert environ["MATERIAL_SLIDER_QT_API"] == "pyqt6"


def test_parse_flag_accepts_common_truthy_spellings():
    for raw in ("1", "true", "Yes", " on "):
        assert slider_settings.parse_flag(raw) is True
    for raw in ("0", "false", "", "off"):
        assert slider_settings.parse_flag(raw) is False


class _FakeSlider:
    def __init__(self):
        self.minimum = 0
        self.maximum = 100
        self.colors = {}
        self.assigned = []

    def __setattr__(self, name, value):
        if name not in {"colors", "assigned"}:
            self.__dict__.setdefault("assigned", []).append(name)
        super().__setattr__(name, value)

    def set_color(self, name, color):
        self.colors[name] = color


def test_apply_settings_to_slider_orders_bounds_and_falls_back():
    slider = _FakeSlider()
    slider.assigned.clear()
    settings = dict(slider_settings.DEFAULTS)
    settings.update(
        {
            "minimum": "200",
            "maximum": "300",
            "value": "250",
            "padding": "abc",
            "orientation": "diagonal",
            "track_color": "#101010",
            "show_scale": "true",
        }
    )

    slider_settings.apply_settings_to_slider(slider, settings)

    assert slider.assigned.index("maximum") < slider.assigned.index("minimum")
    assert slider.minimum == Decimal("200")
    assert slider.maximum == Decimal("300")
    assert slider.value == Decimal("250")
    assert slider.padding == 0
    assert slider.orientation == "horizontal"
    assert slider.bar_size == (100, 20)
    assert slider.colors["track_color"] == "#101010"
    assert slider.show_scale is True
    assert slider.mouse_effects_enabled is True
    assert slider.draw_focus_rectangle is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"elapsed_bottom_color": "not-a-colour"},
        {"value": "NaN"},
        {"minimum": "-Infinity"},
        {"minimum": "50", "maximum": "40"},
        {"value": "500"},
        {"small_step": "0"},
        {"bar_height": "-4"},
    ],
)
def test_apply_settings_to_slider_rejects_bad_file_before_assigning(qapp, overrides):
    slider = _FakeSlider()
    slider.assigned.clear()
    settings = dict(slider_settings.DEFAULTS)
    settings.update({"minimum": "10", "maximum": "20", "value": "15", **overrides})

    with pytest.raises(InvalidArgumentError):
        slider_settings.apply_settings_to_slider(slider, settings)

    assert slider.assigned == []
    assert slider.colors == {}
    assert (slider.minimum, slider.maximum) == (0, 100)
