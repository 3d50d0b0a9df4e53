from decimal import Decimal, InvalidOperation
from enum import Enum


WHEEL_DELTA = 120
CORNER_RADIUS = 4


class InvalidArgumentError(ValueError):
    pass


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ScrollEventType(Enum):
    FIRST = "first"
    LAST = "last"
    THUMB_TRACK = "thumb_track"
    THUMB_POSITION = "thumb_position"
    SMALL_INCREMENT = "small_increment"
    SMALL_DECREMENT = "small_decrement"
    LARGE_INCREMENT = "large_increment"
    LARGE_DECREMENT = "large_decrement"
    END_SCROLL = "end_scroll"


class SliderKey(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


def to_decimal(value) -> Decimal:
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(f"Not a decimal value: {value!r}") from exc
    if not value.is_finite():
        raise InvalidArgumentError(f"Not a finite decimal value: {value!r}")
    return value


def snap_to_step(value: Decimal, step: Decimal) -> Decimal:
    """Round ``value`` to the nearest multiple of ``step`` (ties to even)."""
    return Decimal(round(value / step)) * step


class SliderModel:
    """
    Numeric and layout state of a material slider, independent of any GUI toolkit.

    The host hands in an ``invalidate`` callable (its redraw request) and feeds
    pointer, wheel and key input through the ``press``/``drag``/``release``,
    ``wheel`` and ``key_up`` methods. Observers register with
    ``add_value_changed_listener`` and ``add_scroll_listener``.
    """

    def __init__(self, minimum=0, maximum=100, value=30, invalidate=None):
        self._invalidate = invalidate
        self._value_changed_listeners = []
        self._scroll_listeners = []

        self._minimum = Decimal(0)
        self._maximum = Decimal(100)
        self._value = Decimal(30)
        self._small_step = Decimal(1)
        self._large_step = Decimal(5)
        self._wheel_partitions = 10
        self._orientation = Orientation.HORIZONTAL
        self._padding = 0
        self._bar_size = (100, 20)
        self._scale_divisions = Decimal(10)
        self._scale_subdivisions = Decimal(5)
        self._show_sub_scale = False
        self._show_division_labels = True
        self._show_scale = False

        self.is_dragging = False
        self.is_hovered = False
        self.is_focused = False

        minimum = to_decimal(minimum)
        maximum = to_decimal(maximum)
        value = to_decimal(value)
        if minimum >= maximum:
            raise InvalidArgumentError("Minimum has to be lower than maximum")
        # Order the bound updates so the intermediate state stays valid.
        if minimum >= self._maximum:
            self.set_maximum(maximum)
            self.set_minimum(minimum)
        else:
            self.set_minimum(minimum)
            self.set_maximum(maximum)
        self.set_value(value)

    # -- notifications -------------------------------------------------

    def add_value_changed_listener(self, callback):
        self._value_changed_listeners.append(callback)

    def remove_value_changed_listener(self, callback):
        self._value_changed_listeners.remove(callback)

    def add_scroll_listener(self, callback):
        self._scroll_listeners.append(callback)

    def remove_scroll_listener(self, callback):
        self._scroll_listeners.remove(callback)

    def _fire_value_changed(self):
        for callback in list(self._value_changed_listeners):
            callback()

    def _fire_scroll(self, kind: ScrollEventType):
        value = int(self._value)
        for callback in list(self._scroll_listeners):
            callback(kind, value)

    def invalidate(self):
        if self._invalidate is not None:
            self._invalidate()

    # -- bounds and value ----------------------------------------------

    @property
    def value(self) -> Decimal:
        return self._value

    def set_value(self, value):
        value = to_decimal(value)
        if value < self._minimum or value > self._maximum:
            raise InvalidArgumentError(
                f"Value {value} is outside the range [{self._minimum}, {self._maximum}]"
            )
        self._value = value
        self._fire_value_changed()
        self.invalidate()

    def set_proper_value(self, value):
        value = to_decimal(value)
        if value < self._minimum:
            value = self._minimum
        elif value > self._maximum:
            value = self._maximum
        self.set_value(value)

    @property
    def minimum(self) -> Decimal:
        return self._minimum

    def set_minimum(self, minimum):
        minimum = to_decimal(minimum)
        if minimum >= self._maximum:
            raise InvalidArgumentError("Minimum has to be lower than maximum")
        self._minimum = minimum
        if self._value < minimum:
            self._value = minimum
            self._fire_value_changed()
        self.invalidate()

    @property
    def maximum(self) -> Decimal:
        return self._maximum

    def set_maximum(self, maximum):
        maximum = to_decimal(maximum)
        if maximum <= self._minimum:
            raise InvalidArgumentError("Maximum has to be greater than minimum")
        self._maximum = maximum
        if self._value > maximum:
            self._value = maximum
            self._fire_value_changed()
        self.invalidate()

    @property
    def span(self) -> Decimal:
        return self._maximum - self._minimum

    @property
    def ratio(self) -> Decimal:
        return (self._value - self._minimum) / self.span

    # -- steps -----------------------------------------------------------

    @property
    def small_step(self) -> Decimal:
        return self._small_step

    def set_small_step(self, step):
        step = to_decimal(step)
        if step <= 0:
            raise InvalidArgumentError("Small step has to be greater than zero")
        self._small_step = step

    @property
    def large_step(self) -> Decimal:
        return self._large_step

    def set_large_step(self, step):
        step = to_decimal(step)
        if step <= 0:
            raise InvalidArgumentError("Large step has to be greater than zero")
        self._large_step = step

    @property
    def wheel_partitions(self) -> int:
        return self._wheel_partitions

    def set_wheel_partitions(self, partitions):
        count = to_decimal(partitions)
        if count != count.to_integral_value():
            raise InvalidArgumentError(f"Wheel partitions must be a whole number: {partitions!r}")
        partitions = int(count)
        if partitions <= 0:
            raise InvalidArgumentError("Wheel partitions has to be greater than zero")
        self._wheel_partitions = partitions

    # -- layout ------------------------------------------------------------

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def set_orientation(self, orientation):
        try:
            orientation = Orientation(orientation)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown orientation: {orientation!r}") from exc
        if orientation != self._orientation:
            self._orientation = orientation
            self.invalidate()

    @property
    def padding(self) -> int:
        return self._padding

    def set_padding(self, padding):
        padding = int(padding)
        if padding < 0:
            raise InvalidArgumentError("Padding cannot be negative")
        if padding != self._padding:
            self._padding = padding
            self.invalidate()

    @property
    def bar_size(self):
        return self._bar_size

    def set_bar_size(self, width, height):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise InvalidArgumentError("Bar size has to be greater than zero")
        self._bar_size = (width, height)
        self.invalidate()

    def track_rect(self, width, height):
        """Return ``(x, y, w, h)`` of the track inside a ``width`` x ``height`` area."""
        bar_w, bar_h = self._bar_size
        pad = self._padding
        if self._orientation == Orientation.HORIZONTAL:
            return pad, (height - bar_h) // 2, width - 2 * pad, bar_h
        return (width - bar_w) // 2, pad, bar_w, height - 2 * pad

    def elapsed_length(self, track_length) -> int:
        if track_length <= 0:
            return 0
        # value >= minimum, so int() truncation is a floor here.
        return int(self.ratio * track_length)

    # -- graduations -------------------------------------------------------

    @property
    def scale_divisions(self) -> Decimal:
        return self._scale_divisions

    def set_scale_divisions(self, divisions):
        divisions = to_decimal(divisions)
        if divisions > 0:
            self._scale_divisions = divisions
        self.invalidate()

    def _subdivisions_fit(self, subdivisions) -> bool:
        if subdivisions <= 0 or self._scale_divisions <= 0:
            return False
        return self.span / ((subdivisions + 1) * self._scale_divisions) > 0

    @property
    def scale_subdivisions(self) -> Decimal:
        return self._scale_subdivisions

    def set_scale_subdivisions(self, subdivisions):
        subdivisions = to_decimal(subdivisions)
        if self._subdivisions_fit(subdivisions):
            self._scale_subdivisions = subdivisions
        self.invalidate()

    @property
    def show_sub_scale(self) -> bool:
        return self._show_sub_scale

    def set_show_sub_scale(self, show):
        if not show:
            self._show_sub_scale = False
            self.invalidate()
        elif self._subdivisions_fit(self._scale_subdivisions):
            self._show_sub_scale = True
            self.invalidate()
        else:
            self._show_sub_scale = False

    @property
    def show_division_labels(self) -> bool:
        return self._show_division_labels

    def set_show_division_labels(self, show):
        self._show_division_labels = bool(show)
        self.invalidate()

    @property
    def show_scale(self) -> bool:
        return self._show_scale

    def set_show_scale(self, show):
        self._show_scale = bool(show)
        self.invalidate()

    # -- pointer input -----------------------------------------------------

    def value_at(self, x, y, width, height) -> Decimal:
        """Map a pointer position to an unsnapped, unclamped value."""
        pad = self._padding
        if self._orientation == Orientation.HORIZONTAL:
            length = width - 2 * pad
            if length <= 0:
                return self._value
            return self._minimum + Decimal(x - pad) * self.span / Decimal(length)
        length = height - 2 * pad
        if length <= 0:
            return self._value
        return self._maximum - Decimal(y - pad) * self.span / Decimal(length)

    def press(self, x, y, width, height):
        self.is_dragging = True
        self._fire_scroll(ScrollEventType.THUMB_TRACK)
        self._fire_value_changed()
        self.drag(x, y, width, height)

    def drag(self, x, y, width, height):
        if not self.is_dragging:
            self.invalidate()
            return None
        value = snap_to_step(self.value_at(x, y, width, height), self._small_step)
        kind = ScrollEventType.THUMB_POSITION
        if value <= self._minimum:
            value = self._minimum
            kind = ScrollEventType.FIRST
        elif value >= self._maximum:
            value = self._maximum
            kind = ScrollEventType.LAST
        self._value = value
        self._fire_scroll(kind)
        self._fire_value_changed()
        self.invalidate()
        return kind

    def release(self):
        self.is_dragging = False
        self._fire_scroll(ScrollEventType.END_SCROLL)
        self._fire_value_changed()
        self.invalidate()

    def wheel(self, delta) -> bool:
        """Apply a raw wheel delta. Returns True when the event was handled."""
        if not self.is_hovered:
            return False
        notches = int(delta / WHEEL_DELTA)
        step = Decimal(notches) * self.span / Decimal(self._wheel_partitions)
        self.set_proper_value(self._value + step)
        return True

    # -- keyboard ----------------------------------------------------------

    def key_up(self, key):
        key = SliderKey(key)
        kind = None
        if key in (SliderKey.LEFT, SliderKey.DOWN):
            self.set_proper_value(self._value - self._small_step)
            kind = ScrollEventType.SMALL_DECREMENT
        elif key in (SliderKey.UP, SliderKey.RIGHT):
            self.set_proper_value(self._value + self._small_step)
            kind = ScrollEventType.SMALL_INCREMENT
        elif key == SliderKey.HOME:
            self.set_value(self._minimum)
        elif key == SliderKey.END:
            self.set_value(self._maximum)
        elif key == SliderKey.PAGE_DOWN:
            self.set_proper_value(self._value - self._large_step)
            kind = ScrollEventType.LARGE_DECREMENT
        elif key == SliderKey.PAGE_UP:
            self.set_proper_value(self._value + self._large_step)
            kind = ScrollEventType.LARGE_INCREMENT

        if kind is not None:
            self._fire_scroll(kind)
        if self._value == self._minimum:
            self._fire_scroll(ScrollEventType.FIRST)
        if self._value == self._maximum:
            self._fire_scroll(ScrollEventType.LAST)

    # -- hover / focus -----------------------------------------------------

    def set_hovered(self, hovered):
        self.is_hovered = bool(hovered)
        self.invalidate()

    def set_focused(self, focused):
        self.is_focused = bool(focused)
        self.invalidate()
