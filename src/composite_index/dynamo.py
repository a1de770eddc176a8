"""Helpers turning an index into DynamoDB item attributes and key conditions.

Nothing here performs I/O: the results are handed to a boto3 ``Table``
by the caller (``put_item(Item=...)``, ``query(KeyConditionExpression=...)``).
Key conditions use ``begins_with`` on the sort key, so they require an
encoding method that returns strings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from boto3.dynamodb.conditions import Key  # type: ignore[import]

from .index import IndexDescriptor


@dataclass(frozen=True)
class IndexAttributes:
    """Names of the item attributes holding an index's keys."""

    pk_attribute: str
    sk_attribute: str

    @classmethod
    def for_index(cls, index: IndexDescriptor[Any]) -> "IndexAttributes":
        # eg, gsi1 -> gsi1pk / gsi1sk
        name = index.name()
        return cls(pk_attribute=f"{name}pk", sk_attribute=f"{name}sk")


def _attributes(index: IndexDescriptor[Any], attributes: Optional[IndexAttributes]) -> IndexAttributes:
    return attributes if attributes is not None else IndexAttributes.for_index(index)


def key_attributes(
    index: IndexDescriptor[Any],
    entity: Any,
    attributes: Optional[IndexAttributes] = None,
) -> Dict[str, Any]:
    """Encode both keys of ``index`` for ``entity`` as item attributes."""
    names = _attributes(index, attributes)
    return {
        names.pk_attribute: index.partition_key(entity),
        names.sk_attribute: index.sort_key(entity),
    }


def key_condition(
    index: IndexDescriptor[Any],
    partition_fields: Any,
    sort_fields: Optional[Any] = None,
    attributes: Optional[IndexAttributes] = None,
):
    """Build a KeyConditionExpression for querying ``index``.

    Parameters
    ----------
    partition_fields: Any
        Values for every partition key field.
    sort_fields: Optional[Any]
        If provided, applies begins_with to the encoded (partial) sort key.
    attributes: Optional[IndexAttributes]
        Attribute names; derived from the index name when omitted.
    """
    names = _attributes(index, attributes)
    condition = Key(names.pk_attribute).eq(index.partition_key(partition_fields))
    if sort_fields is not None:
        condition &= Key(names.sk_attribute).begins_with(index.sort_key(sort_fields))
    return condition
