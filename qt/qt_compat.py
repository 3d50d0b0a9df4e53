"""
Qt compatibility layer:
- Prefer PyQt6
- Fallback to PySide6
"""

QT_API = None
_requested = ""
try:
    import os

    _requested = os.getenv("MATERIAL_SLIDER_QT_API", "auto").strip().lower()
except Exception:
    _requested = "auto"

if _requested in {"pyqt6", "pyqt"}:
    from PyQt6 import QtCore, QtWidgets, QtGui  # type: ignore

    Signal = QtCore.pyqtSignal
    Slot = QtCore.pyqtSlot
    QT_API = "PyQt6"
elif _requested in {"pyside6", "pyside"}:
    from PySide6 import QtCore, QtWidgets, QtGui  # type: ignore

    Signal = QtCore.Signal
    Slot = QtCore.Slot
    QT_API = "PySide6"
else:
    try:
        from PyQt6 import QtCore, QtWidgets, QtGui  # type: ignore

        Signal = QtCore.pyqtSignal
        Slot = QtCore.pyqtSlot
        QT_API = "PyQt6"
    except ImportError:  # pragma: no cover
        from PySide6 import QtCore, QtWidgets, QtGui  # type: ignore

        Signal = QtCore.Signal
        Slot = QtCore.Slot
        QT_API = "PySide6"


def cursor_pos(widget):
    # Global cursor position mapped into the widget's coordinates.
    return widget.mapFromGlobal(QtGui.QCursor.pos())


def event_pos(event):
    # QMouseEvent.position() is Qt6; keep pos() for older bindings.
    try:
        return event.position().toPoint()
    except AttributeError:
        return event.pos()
