from core.graduations import division_values, format_label, subdivision_values, value_to_offset
from core.slider_model import (
    CORNER_RADIUS,
    InvalidArgumentError,
    Orientation,
    SliderKey,
    SliderModel,
)
from qt.color_tools import desaturate_colors, lighten_colors, rounded_rect_path, to_color
from qt.qt_compat import QtCore, QtGui, QtWidgets, Signal, cursor_pos, event_pos

Qt = QtCore.Qt

KEY_MAP = {
    Qt.Key.Key_Left.value: SliderKey.LEFT,
    Qt.Key.Key_Right.value: SliderKey.RIGHT,
    Qt.Key.Key_Up.value: SliderKey.UP,
    Qt.Key.Key_Down.value: SliderKey.DOWN,
    Qt.Key.Key_Home.value: SliderKey.HOME,
    Qt.Key.Key_End.value: SliderKey.END,
    Qt.Key.Key_PageUp.value: SliderKey.PAGE_UP,
    Qt.Key.Key_PageDown.value: SliderKey.PAGE_DOWN,
}

DEFAULT_COLORS = {
    "track_color": (0, 0, 0),
    "elapsed_top_color": (95, 140, 180),
    "elapsed_bottom_color": (99, 130, 208),
    "border_top_color": (55, 60, 74),
    "border_bottom_color": (87, 94, 110),
    "fore_color": (255, 255, 255),
}

TICK_LENGTH = 4
SUB_TICK_LENGTH = 2


def _key_code(event):
    key = event.key()
    return getattr(key, "value", key)


class MaterialSlider(QtWidgets.QWidget):
    """
    Flat slider with a rounded track and a gradient-filled elapsed region.

    Emits ``valueChanged()`` on every value mutation (setter, drag, wheel, keys)
    and ``scrolled(ScrollEventType, int)`` describing how the value moved.
    """

    valueChanged = Signal()
    scrolled = Signal(object, int)

    def __init__(self, minimum=0, maximum=100, value=30, parent=None, debug=False):
        super().__init__(parent)
        self.debug = debug
        self._draw_focus_rectangle = False
        self._mouse_effects = True
        self._colors = {key: to_color(rgb) for key, rgb in DEFAULT_COLORS.items()}

        self._model = SliderModel(minimum, maximum, value, invalidate=self.update)
        self._model.add_value_changed_listener(self.valueChanged.emit)
        self._model.add_scroll_listener(self.scrolled.emit)

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setFont(QtGui.QFont("Microsoft Sans Serif", 6))
        self.resize(200, 48)

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][MaterialSlider] {message}")

    @property
    def model(self):
        return self._model

    def sizeHint(self):
        if self._model.orientation == Orientation.VERTICAL:
            return QtCore.QSize(48, 200)
        return QtCore.QSize(200, 48)

    # -- numeric properties -------------------------------------------------

    @property
    def value(self):
        return self._model.value

    @value.setter
    def value(self, value):
        self._model.set_value(value)

    @property
    def minimum(self):
        return self._model.minimum

    @minimum.setter
    def minimum(self, value):
        self._model.set_minimum(value)

    @property
    def maximum(self):
        return self._model.maximum

    @maximum.setter
    def maximum(self, value):
        self._model.set_maximum(value)

    @property
    def small_step(self):
        return self._model.small_step

    @small_step.setter
    def small_step(self, value):
        self._model.set_small_step(value)

    @property
    def large_step(self):
        return self._model.large_step

    @large_step.setter
    def large_step(self, value):
        self._model.set_large_step(value)

    @property
    def wheel_partitions(self):
        return self._model.wheel_partitions

    @wheel_partitions.setter
    def wheel_partitions(self, value):
        self._model.set_wheel_partitions(value)

    # -- layout properties --------------------------------------------------

    @property
    def orientation(self):
        return self._model.orientation

    @orientation.setter
    def orientation(self, value):
        self._model.set_orientation(value)
        self.updateGeometry()

    @property
    def padding(self):
        return self._model.padding

    @padding.setter
    def padding(self, value):
        self._model.set_padding(value)

    @property
    def bar_size(self):
        return self._model.bar_size

    @bar_size.setter
    def bar_size(self, size):
        if isinstance(size, QtCore.QSize):
            size = (size.width(), size.height())
        width, height = size
        self._model.set_bar_size(width, height)

    # -- graduation properties ----------------------------------------------

    @property
    def scale_divisions(self):
        return self._model.scale_divisions

    @scale_divisions.setter
    def scale_divisions(self, value):
        self._model.set_scale_divisions(value)

    @property
    def scale_subdivisions(self):
        return self._model.scale_subdivisions

    @scale_subdivisions.setter
    def scale_subdivisions(self, value):
        self._model.set_scale_subdivisions(value)

    @property
    def show_sub_scale(self):
        return self._model.show_sub_scale

    @show_sub_scale.setter
    def show_sub_scale(self, value):
        self._model.set_show_sub_scale(value)

    @property
    def show_division_labels(self):
        return self._model.show_division_labels

    @show_division_labels.setter
    def show_division_labels(self, value):
        self._model.set_show_division_labels(value)

    @property
    def show_scale(self):
        return self._model.show_scale

    @show_scale.setter
    def show_scale(self, value):
        self._model.set_show_scale(value)

    # -- style properties ---------------------------------------------------

    @property
    def draw_focus_rectangle(self):
        return self._draw_focus_rectangle

    @draw_focus_rectangle.setter
    def draw_focus_rectangle(self, value):
        self._draw_focus_rectangle = bool(value)
        self.update()

    @property
    def mouse_effects_enabled(self):
        return self._mouse_effects

    @mouse_effects_enabled.setter
    def mouse_effects_enabled(self, value):
        self._mouse_effects = bool(value)
        self.update()

    def color(self, name):
        return QtGui.QColor(self._colors[name])

    def set_color(self, name, color):
        if name not in self._colors:
            raise InvalidArgumentError(f"Unknown color role: {name}")
        self._colors[name] = to_color(color)
        self.update()

    @property
    def track_color(self):
        return self.color("track_color")

    @track_color.setter
    def track_color(self, value):
        self.set_color("track_color", value)

    @property
    def elapsed_top_color(self):
        return self.color("elapsed_top_color")

    @elapsed_top_color.setter
    def elapsed_top_color(self, value):
        self.set_color("elapsed_top_color", value)

    @property
    def elapsed_bottom_color(self):
        return self.color("elapsed_bottom_color")

    @elapsed_bottom_color.setter
    def elapsed_bottom_color(self, value):
        self.set_color("elapsed_bottom_color", value)

    @property
    def border_top_color(self):
        return self.color("border_top_color")

    @border_top_color.setter
    def border_top_color(self, value):
        self.set_color("border_top_color", value)

    @property
    def border_bottom_color(self):
        return self.color("border_bottom_color")

    @border_bottom_color.setter
    def border_bottom_color(self, value):
        self.set_color("border_bottom_color", value)

    @property
    def fore_color(self):
        return self.color("fore_color")

    @fore_color.setter
    def fore_color(self, value):
        self.set_color("fore_color", value)

    # -- painting -----------------------------------------------------------

    def _paint_colors(self):
        names = (
            "track_color",
            "elapsed_top_color",
            "elapsed_bottom_color",
            "border_top_color",
            "border_bottom_color",
            "fore_color",
        )
        colors = [self._colors[name] for name in names]
        if not self.isEnabled():
            colors = desaturate_colors(*colors)
        elif self._mouse_effects and self._model.is_hovered:
            colors[1], colors[2] = lighten_colors(colors[1], colors[2])
        return dict(zip(names, colors))

    def track_rect(self):
        return QtCore.QRect(*self._model.track_rect(self.width(), self.height()))

    def elapsed_rect(self):
        track = self.track_rect()
        if self._model.orientation == Orientation.HORIZONTAL:
            elapsed = self._model.elapsed_length(track.width())
            if elapsed <= 0 or track.height() <= 0:
                return None
            return QtCore.QRect(track.x(), track.y(), elapsed, track.height())
        elapsed = self._model.elapsed_length(track.height())
        if elapsed <= 0 or track.width() <= 0:
            return None
        return QtCore.QRect(track.x(), track.y() + track.height() - elapsed, track.width(), elapsed)

    def paintEvent(self, _event):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        colors = self._paint_colors()
        horizontal = self._model.orientation == Orientation.HORIZONTAL

        track = self.track_rect()
        track_path = rounded_rect_path(track, CORNER_RADIUS)
        painter.fillPath(track_path, QtGui.QBrush(colors["track_color"]))

        elapsed = self.elapsed_rect()
        if elapsed is not None:
            x, y = float(elapsed.x()), float(elapsed.y())
            if horizontal:
                gradient = QtGui.QLinearGradient(x, y, x, y + elapsed.height())
            else:
                gradient = QtGui.QLinearGradient(x, y, x + elapsed.width(), y)
            gradient.setColorAt(0.0, colors["elapsed_top_color"])
            gradient.setColorAt(1.0, colors["elapsed_bottom_color"])
            painter.fillPath(rounded_rect_path(elapsed, CORNER_RADIUS), QtGui.QBrush(gradient))

        if self._mouse_effects and self._model.is_hovered and self.isEnabled():
            x, y = float(track.x()), float(track.y())
            if horizontal:
                border = QtGui.QLinearGradient(x, y, x, y + track.height())
            else:
                border = QtGui.QLinearGradient(x, y, x + track.width(), y)
            border.setColorAt(0.0, colors["border_top_color"])
            border.setColorAt(1.0, colors["border_bottom_color"])
            painter.strokePath(track_path, QtGui.QPen(QtGui.QBrush(border), 1.0))

        if self._model.show_scale:
            self._paint_scale(painter, track, colors["fore_color"])

        if self._draw_focus_rectangle and self._model.is_focused and self.isEnabled():
            pen = QtGui.QPen(colors["fore_color"], 1.0, Qt.PenStyle.DotLine)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(self.rect().adjusted(0, 0, -1, -1))
        painter.end()

    def _paint_scale(self, painter, track, fore_color):
        m = self._model
        horizontal = m.orientation == Orientation.HORIZONTAL
        length = track.width() if horizontal else track.height()
        painter.setPen(QtGui.QPen(fore_color, 1.0))
        painter.setFont(self.font())
        metrics = QtGui.QFontMetrics(self.font())

        def tick(value, size):
            offset = value_to_offset(value, m.minimum, m.maximum, length)
            if horizontal:
                px, y0 = track.x() + offset, track.y() + track.height() + 2
                painter.drawLine(px, y0, px, y0 + size)
                return px, y0 + size
            py, x0 = track.y() + track.height() - offset, track.x() + track.width() + 2
            painter.drawLine(x0, py, x0 + size, py)
            return x0 + size, py

        if m.show_sub_scale:
            for value in subdivision_values(m.minimum, m.maximum, m.scale_divisions, m.scale_subdivisions):
                tick(value, SUB_TICK_LENGTH)

        for value in division_values(m.minimum, m.maximum, m.scale_divisions):
            end_x, end_y = tick(value, TICK_LENGTH)
            if not m.show_division_labels:
                continue
            text = format_label(value)
            if horizontal:
                text_w = metrics.horizontalAdvance(text)
                painter.drawText(end_x - text_w // 2, end_y + metrics.ascent(), text)
            else:
                painter.drawText(end_x + 2, end_y + metrics.ascent() // 2, text)

    # -- input --------------------------------------------------------------

    def _drag_to(self, pos):
        kind = self._model.drag(pos.x(), pos.y(), self.width(), self.height())
        if kind is not None:
            self.debug_log(f"drag -> {self._model.value} ({kind.name})")

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event_pos(event)
        self._model.press(pos.x(), pos.y(), self.width(), self.height())
        event.accept()

    def mouseMoveEvent(self, event):
        if self._model.is_dragging and event.buttons() & Qt.MouseButton.LeftButton:
            self._drag_to(event_pos(event))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._model.is_dragging:
            self._model.release()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event):
        if self._model.wheel(event.angleDelta().y()):
            self.debug_log(f"wheel -> {self._model.value}")
            event.accept()
        else:
            event.ignore()

    def keyPressEvent(self, event):
        if _key_code(event) in KEY_MAP:
            event.accept()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        key = KEY_MAP.get(_key_code(event))
        if key is None:
            super().keyReleaseEvent(event)
            return
        self._model.key_up(key)
        self.debug_log(f"key {key.name} -> {self._model.value}")
        self._resync_with_cursor()
        event.accept()

    def _resync_with_cursor(self):
        # Mirrors a pointer move at the current cursor position.
        if self._model.is_dragging:
            self._drag_to(cursor_pos(self))
        else:
            self.update()

    def enterEvent(self, event):
        self._model.set_hovered(True)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self._model.set_hovered(False)
        super().leaveEvent(event)

    def focusInEvent(self, event):
        self._model.set_focused(True)
        super().focusInEvent(event)

    def focusOutEvent(self, event):
        self._model.set_focused(False)
        super().focusOutEvent(event)

    def changeEvent(self, event):
        if event.type() == QtCore.QEvent.Type.EnabledChange:
            self.update()
        super().changeEvent(event)

