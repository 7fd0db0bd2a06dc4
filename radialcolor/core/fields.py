from .colors import Channel, ColorTuple, TupleType
from .events import ValueEdited
from .math import clamp


class NumericField:
    """
    Value side of a numeric spin-box: an integer in [minimum, maximum] bound to
    one (TupleType, Channel) slot. The widget that displays it lives in
    radialcolor.widgets.controls.
    """

    def __init__(self, tuple_type: TupleType, channel: Channel, name: str, minimum: int, maximum: int, /):
        self.tuple_type = tuple_type
        self.channel = channel
        self.name = name
        self.minimum = int(minimum)
        self.maximum = int(maximum)
        self._value = self.minimum

    @property
    def value(self) -> int:
        return self._value

    @property
    def span(self) -> int:
        return self.maximum - self.minimum

    def _clamped(self, value: int) -> int:
        return int(clamp(int(value), self.minimum, self.maximum))

    def scale(self) -> float:
        """The value as a ratio of the field's range; 0.0 when the range is empty."""
        span = self.span
        if span == 0:
            return 0.0
        return (self._value - self.minimum) / float(span)

    def edit(self, value: int) -> ValueEdited:
        """User path: store the edited value and return the event describing it."""
        self._value = self._clamped(value)
        return ValueEdited(self.tuple_type, self.channel, self._value)

    def update_from_tuple(self, tuple_: ColorTuple) -> None:
        self._value = self._clamped(tuple_.channel_as_int(self.channel, self.span) + self.minimum)

    def update_from_int(self, value: int) -> None:
        self._value = self._clamped(value)

    def __repr__(self):
        return f"NumericField[{self.name}={self._value}]"
