from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Generic, Optional, Type, TypeVar

from .exceptions import (
    MissingEncodingMethod,
    MissingIndexName,
    MissingPartitionKeySpec,
    MissingSortKeySpec,
)
from .types import EncodingMethod, IndexKind, KeySpec, read_field

logger = logging.getLogger(__name__)

Entity = TypeVar("Entity")


def _apply_transform(spec: KeySpec, values: Any) -> Any:
    if spec.transform_values is None:
        return values
    transformed = spec.transform_values(values)
    # A transform that returns nothing leaves the input as-is
    return values if transformed is None else transformed


@dataclass(frozen=True)
class IndexDescriptor(Generic[Entity]):
    """A fully configured index able to encode its partition and sort keys.

    Instances are produced by :meth:`IndexBuilder.build` and hold no entity
    state; every call recomputes the key from the values passed in.
    """

    index_name: str
    partition_key_spec: KeySpec
    sort_key_spec: KeySpec
    encoding_method: EncodingMethod
    kind: str = IndexKind.COMPOSITE_INDEX

    def name(self) -> str:
        return self.index_name

    def partition_key(self, fields: Any) -> Any:
        """Encode the partition key.

        Every field of the partition key spec is expected in ``fields``; a
        missing one is passed to the encoding method as ``None``.
        """
        spec = self.partition_key_spec
        values = _apply_transform(spec, fields)
        segments = [read_field(values, field) for field in spec.fields]
        return self.encoding_method(spec.prefix, *segments)

    def sort_key(self, partial_fields: Optional[Any] = None) -> Any:
        """Encode a possibly partial sort key.

        Fields that are missing or ``None`` are dropped from the encoded key,
        the remaining ones keep their relative order. It is the caller's
        responsibility to ensure the sparse key is meaningful for the records
        stored under this index.

        e.g. ``index.sort_key({"first_name": "Cher", "created_at": 10})``
        encodes ``["created-at", "Cher", 10]`` for fields
        ``[first_name, last_name, created_at]``.
        """
        spec = self.sort_key_spec
        values = _apply_transform(spec, {} if partial_fields is None else partial_fields)
        candidates = (read_field(values, field) for field in spec.fields)
        segments = [segment for segment in candidates if segment is not None]
        return self.encoding_method(spec.prefix, *segments)


@dataclass(frozen=True)
class IndexBuilder(Generic[Entity]):
    """Immutable builder for :class:`IndexDescriptor`.

    Every ``with_*`` call returns a new builder; the receiver is left
    untouched, so partially configured builders can be shared and branched.

    Example
    -------
    >>> index = (
    ...     IndexBuilder.for_entity(User)
    ...     .with_name("byName")
    ...     .with_partition_key(KeySpec("users-by-name", ["first_name", "last_name"]))
    ...     .with_sort_key(KeySpec("created-at", ["created_at"]))
    ...     .with_encoding_method(hash_encoder)
    ...     .build()
    ... )
    """

    kind: str = IndexKind.COMPOSITE_INDEX
    index_name: Optional[str] = None
    partition_key_spec: Optional[KeySpec] = None
    sort_key_spec: Optional[KeySpec] = None
    encoding_method: Optional[EncodingMethod] = None

    @classmethod
    def for_entity(
        cls,
        entity: Optional[Type[Entity]] = None,
        kind: str = IndexKind.COMPOSITE_INDEX,
    ) -> "IndexBuilder[Entity]":
        # entity only documents the shape the field names refer to
        return cls(kind=kind)

    def with_name(self, name: str) -> "IndexBuilder[Entity]":
        return replace(self, index_name=name)

    def with_encoding_method(self, encoding_method: EncodingMethod) -> "IndexBuilder[Entity]":
        return replace(self, encoding_method=encoding_method)

    def with_partition_key(self, spec: KeySpec) -> "IndexBuilder[Entity]":
        return replace(self, partition_key_spec=spec)

    def with_sort_key(self, spec: KeySpec) -> "IndexBuilder[Entity]":
        return replace(self, sort_key_spec=spec)

    def build(self) -> IndexDescriptor[Entity]:
        if not self.index_name:
            raise MissingIndexName(self.kind)
        if self.partition_key_spec is None:
            raise MissingPartitionKeySpec(self.kind)
        if self.sort_key_spec is None:
            raise MissingSortKeySpec(self.kind)
        if self.encoding_method is None:
            raise MissingEncodingMethod(self.kind)

        logger.debug("Built %s index %s", self.kind, self.index_name)
        return IndexDescriptor(
            index_name=self.index_name,
            partition_key_spec=self.partition_key_spec,
            sort_key_spec=self.sort_key_spec,
            encoding_method=self.encoding_method,
            kind=self.kind,
        )


def composite_index_builder(entity: Optional[Type[Entity]] = None) -> IndexBuilder[Entity]:
    """Builder for the table's primary composite index."""
    return IndexBuilder.for_entity(entity, kind=IndexKind.COMPOSITE_INDEX)


def gsi_builder(entity: Optional[Type[Entity]] = None) -> IndexBuilder[Entity]:
    """Builder for a global secondary index."""
    return IndexBuilder.for_entity(entity, kind=IndexKind.GSI)
