from dataclasses import dataclass

from .colors import Channel, TupleType


@dataclass(frozen=True)
class BandChanged:
    """A pointer moved an arc band; value in [0, 1]."""
    tuple_type: TupleType
    channel: Channel
    value: float


@dataclass(frozen=True)
class AlphaChanged:
    """A pointer moved the alpha slider; value in 0..255."""
    value: int


@dataclass(frozen=True)
class ValueEdited:
    """A numeric field was edited; value is the field's raw integer."""
    tuple_type: TupleType
    channel: Channel
    value: int


Event = BandChanged | AlphaChanged | ValueEdited
