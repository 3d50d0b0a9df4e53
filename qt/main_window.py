from __future__ import annotations

from pathlib import Path

from qt.material_slider import MaterialSlider
from qt.qt_compat import QtWidgets
from qt.styles import STYLE_PROFILES, build_qss
from system.slider_settings import SETTINGS_PATH, apply_settings_to_slider, load_settings


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, debug: bool = False, settings_path: Path = SETTINGS_PATH, profile: str = "dark"):
        super().__init__()
        self.debug = debug
        self.setWindowTitle("Material Slider")
        self.resize(520, 320)
        if profile not in STYLE_PROFILES:
            profile = "dark"
        self.setStyleSheet(build_qss(profile))
        self._settings = load_settings(Path(settings_path))
        self._build_ui()

    def _build_ui(self):
        root = QtWidgets.QWidget(self)
        outer = QtWidgets.QHBoxLayout(root)
        outer.setContentsMargins(16, 16, 16, 16)
        outer.setSpacing(12)

        panel = QtWidgets.QFrame(root)
        panel.setObjectName("DemoPanel")
        v = QtWidgets.QVBoxLayout(panel)
        v.setContentsMargins(16, 16, 16, 16)
        v.setSpacing(10)

        self.value_label = QtWidgets.QLabel("")
        self.value_label.setObjectName("ValueLabel")
        self.scroll_label = QtWidgets.QLabel("")
        self.scroll_label.setObjectName("ScrollLabel")
        v.addWidget(self.value_label, 0)
        v.addWidget(self.scroll_label, 0)

        self.slider = MaterialSlider(parent=panel, debug=self.debug)
        apply_settings_to_slider(self.slider, self._settings)
        v.addWidget(self.slider, 0)

        self.effects_toggle = QtWidgets.QCheckBox("Mouse effects")
        self.effects_toggle.setChecked(self.slider.mouse_effects_enabled)
        self.effects_toggle.toggled.connect(self._on_effects_toggled)
        self.enabled_toggle = QtWidgets.QCheckBox("Enabled")
        self.enabled_toggle.setChecked(True)
        self.enabled_toggle.toggled.connect(self._on_enabled_toggled)
        self.scale_toggle = QtWidgets.QCheckBox("Show scale")
        self.scale_toggle.setChecked(self.slider.show_scale)
        self.scale_toggle.toggled.connect(self._on_scale_toggled)
        toggles = QtWidgets.QHBoxLayout()
        toggles.setSpacing(8)
        toggles.addWidget(self.effects_toggle, 0)
        toggles.addWidget(self.enabled_toggle, 0)
        toggles.addWidget(self.scale_toggle, 0)
        toggles.addStretch(1)
        v.addLayout(toggles)
        v.addStretch(1)
        outer.addWidget(panel, 1)

        self.vertical_slider = MaterialSlider(0, 10, 5, parent=root, debug=self.debug)
        self.vertical_slider.orientation = "vertical"
        self.vertical_slider.bar_size = (20, 100)
        self.vertical_slider.padding = 6
        outer.addWidget(self.vertical_slider, 0)

        self.slider.valueChanged.connect(self._refresh_value_label)
        self.slider.scrolled.connect(self._on_scrolled)
        self.vertical_slider.scrolled.connect(self._on_scrolled)
        self._refresh_value_label()
        self.setCentralWidget(root)

    def _refresh_value_label(self):
        self.value_label.setText(f"{self.slider.value:f}")

    def _on_scrolled(self, kind, value):
        self.scroll_label.setText(f"{kind.name.lower()} @ {value}")

    def _on_effects_toggled(self, checked):
        self.slider.mouse_effects_enabled = checked

    def _on_enabled_toggled(self, checked):
        self.slider.setEnabled(bool(checked))

    def _on_scale_toggled(self, checked):
        self.slider.show_scale = checked
