"""Declarative partition/sort key encoding for composite indexes.

Exposes the immutable index builder, the built index descriptor and
ready-made encoding methods.
"""
from .exceptions import (
    IndexBuildError,
    MissingEncodingMethod,
    MissingIndexName,
    MissingPartitionKeySpec,
    MissingSortKeySpec,
)
from .index import IndexBuilder, IndexDescriptor, composite_index_builder, gsi_builder
from .keys import EncodingConfig, delimited_encoder, hash_encoder, resolve_delimiter
from .types import (
    EncodingMethod,
    IndexKind,
    KeySpec,
    PartitionKeyOptions,
    Segment,
    SortKeyOptions,
    TransformValues,
)

__all__ = [
    "IndexBuilder",
    "IndexDescriptor",
    "composite_index_builder",
    "gsi_builder",
    "KeySpec",
    "PartitionKeyOptions",
    "SortKeyOptions",
    "IndexKind",
    "Segment",
    "EncodingMethod",
    "TransformValues",
    "EncodingConfig",
    "delimited_encoder",
    "hash_encoder",
    "resolve_delimiter",
    "IndexBuildError",
    "MissingIndexName",
    "MissingPartitionKeySpec",
    "MissingSortKeySpec",
    "MissingEncodingMethod",
]
