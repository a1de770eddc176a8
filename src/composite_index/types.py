from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional, Tuple, Union

Segment = Union[str, int, float, Decimal]

# Called as encode(prefix, *segments); must accept the prefix-only call.
EncodingMethod = Callable[..., Any]

TransformValues = Callable[[Mapping[str, Any]], Mapping[str, Any]]


class IndexKind:
    """Labels used when reporting errors for a given kind of index."""

    COMPOSITE_INDEX = "CompositeIndex"
    GSI = "GSI"


@dataclass(frozen=True)
class KeySpec:
    """Shape of one key of an index.

    Attributes
    ----------
    prefix: str
        Literal segment always emitted first; identifies the access pattern.
    fields: Tuple[str, ...]
        Entity field names in segment order. May be empty.
    transform_values: Optional[TransformValues]
        Applied once to the input values before extraction. Its result
        replaces the input entirely; it is not merged with it.
    """

    prefix: str
    fields: Tuple[str, ...] = ()
    transform_values: Optional[TransformValues] = None

    def __post_init__(self) -> None:
        if isinstance(self.fields, (str, bytes)):
            raise TypeError(
                f"KeySpec fields must be a sequence of names, not {type(self.fields).__name__}: {self.fields!r}"
            )
        object.__setattr__(self, "fields", tuple(self.fields))


PartitionKeyOptions = KeySpec
SortKeyOptions = KeySpec


def read_field(values: Any, name: str) -> Any:
    """Return the value of ``name`` from a mapping or plain object, ``None`` if absent."""
    if isinstance(values, Mapping):
        return values.get(name)
    return getattr(values, name, None)
