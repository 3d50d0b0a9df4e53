from core.slider_model import InvalidArgumentError
from qt.qt_compat import QtCore, QtGui


def to_color(color):
    """QColor from a name, hex string, QColor or RGB(A) tuple."""
    if isinstance(color, (tuple, list)):
        qcolor = QtGui.QColor(*color)
    else:
        qcolor = QtGui.QColor(color)
    if not qcolor.isValid():
        raise InvalidArgumentError(f"Invalid color: {color!r}")
    return qcolor


def desaturate_colors(*colors):
    """Luminance-weighted grayscale: gray = 0.3 R + 0.6 G + 0.1 B, fully opaque."""
    result = []
    for color in colors:
        c = QtGui.QColor(color)
        gray = int(c.red() * 0.3 + c.green() * 0.6 + c.blue() * 0.1)
        result.append(QtGui.QColor(gray, gray, gray, 255))
    return result


def lighten_colors(*colors):
    return [QtGui.QColor(color).lighter() for color in colors]


def rounded_rect_path(rect, radius):
    """
    Closed path with a quarter arc of ``radius`` at each corner of ``rect``.

    Arcs run clockwise on screen: top-left, top-right, bottom-right, bottom-left,
    joined by the straight edges.
    """
    r = QtCore.QRectF(rect)
    d = float(radius * 2)
    path = QtGui.QPainterPath()
    path.arcMoveTo(r.x(), r.y(), d, d, 180)
    path.arcTo(r.x(), r.y(), d, d, 180, -90)
    path.arcTo(r.right() - d, r.y(), d, d, 90, -90)
    path.arcTo(r.right() - d, r.bottom() - d, d, d, 0, -90)
    path.arcTo(r.x(), r.bottom() - d, d, d, 270, -90)
    path.closeSubpath()
    return path
