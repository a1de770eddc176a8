from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .types import EncodingMethod, Segment

DEFAULT_DELIMITER = "#"
DELIMITER_ENV = "COMPOSITE_INDEX_DELIMITER"


@dataclass(frozen=True)
class EncodingConfig:
    """Immutable configuration for delimited key encoding.

    Attributes
    ----------
    delimiter: Optional[str]
        Separator placed between segments; if omitted, falls back to the
        environment or ``#``.
    """

    delimiter: Optional[str] = None


def resolve_delimiter(config: Optional[EncodingConfig] = None) -> str:
    # Prefer explicit, then env, otherwise the single-table convention
    explicit = config.delimiter if config is not None else None
    return explicit or os.getenv(DELIMITER_ENV) or DEFAULT_DELIMITER


def delimited_encoder(config: Optional[EncodingConfig] = None) -> EncodingMethod:
    """Return an encoding method joining segments with the configured delimiter.

    Example: encode("USER", "Josh", 10) -> USER#Josh#10

    Segments are joined as given; dropping empty sort key segments is done by
    the index before the encoder is called. A ``None`` segment (eg, a missing
    partition key field) raises ``ValueError`` rather than encoding ``None``.
    """
    delimiter = resolve_delimiter(config)

    def _encode(prefix: str, *segments: Segment) -> str:
        parts = (prefix, *segments)
        for position, part in enumerate(parts):
            if part is None:
                raise ValueError(f"Cannot encode None segment at position {position} of key {prefix!r}")
        return delimiter.join(str(p) for p in parts)

    return _encode


hash_encoder = delimited_encoder(EncodingConfig(delimiter=DEFAULT_DELIMITER))
