QSS = """
QWidget {
  background: #1f232a;
  color: #e6ebf2;
  font-family: "Segoe UI";
  font-size: 13px;
}

QFrame#DemoPanel {
  background: #242a33;
  border: 1px solid #3f4a5a;
  border-radius: 10px;
}

QLabel {
  background: transparent;
}

QLabel#ValueLabel {
  font-size: 22px;
  font-weight: 700;
}

QLabel#ScrollLabel {
  color: #aeb7c3;
  font-size: 12px;
}

QCheckBox {
  background: transparent;
}
"""

STYLE_PROFILES = {
    "dark": {
        "bg_root": "#1f232a",
        "bg_panel": "#242a33",
        "border_panel": "#3f4a5a",
        "text_main": "#e6ebf2",
        "text_muted": "#aeb7c3",
    },
    "light": {
        "bg_root": "#eef1f5",
        "bg_panel": "#ffffff",
        "border_panel": "#c9d1dc",
        "text_main": "#1f232a",
        "text_muted": "#5b6675",
    },
}


def build_qss(profile: str = "dark") -> str:
    selected = STYLE_PROFILES.get(profile, STYLE_PROFILES["dark"])
    qss = QSS
    replacements = {
        "#1f232a": selected["bg_root"],
        "#242a33": selected["bg_panel"],
        "#3f4a5a": selected["border_panel"],
        "#e6ebf2": selected["text_main"],
        "#aeb7c3": selected["text_muted"],
    }
    for source, target in replacements.items():
        qss = qss.replace(source, target)
    return qss
