import argparse
import os
import sys
from pathlib import Path

from system.slider_settings import SETTINGS_PATH, apply_settings_to_environ, load_settings, parse_flag


def build_parser():
    parser = argparse.ArgumentParser(description="Material Slider demo (Qt)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging in the slider widgets.",
    )
    parser.add_argument(
        "--settings",
        default=str(SETTINGS_PATH),
        help="Path of the JSON style settings file.",
    )
    parser.add_argument(
        "--profile",
        default="dark",
        help="Window style profile (dark or light).",
    )
    return parser


def prepare_qt_runtime():
    # Prevent loading Qt plugins from conda/system locations.
    for key in (
        "QT_PLUGIN_PATH",
        "QML2_IMPORT_PATH",
        "QT_QPA_PLATFORM_PLUGIN_PATH",
    ):
        os.environ.pop(key, None)


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings_path = Path(args.settings)
    apply_settings_to_environ(load_settings(settings_path))
    prepare_qt_runtime()
    from qt.qt_compat import QtWidgets, QT_API
    from qt.main_window import MainWindow

    debug = args.debug or parse_flag(os.getenv("MATERIAL_SLIDER_DEBUG", "0"))

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("Material Slider")
    app.setOrganizationName("Material Slider")
    if debug:
        print(f"[qt] backend={QT_API}", file=sys.stderr)

    window = MainWindow(debug=debug, settings_path=settings_path, profile=args.profile)
    window.show()

    return app.exec()
