"""Outcome of a write issued against an existing product."""

from enum import Enum


class WriteResult(str, Enum):
    """Result of an update or delete keyed by product id.

    ``DECLINED`` is reserved for conditional writes (a precondition such as an
    etag match failed). The Cosmos DB repository issues unconditional writes,
    so against that backend it is only seen if a precondition is added.
    """

    APPLIED = "applied"  # backend accepted the write
    NOT_FOUND = "not_found"  # nothing matched the id
    DECLINED = "declined"  # record matched, backend refused the write

    @property
    def acknowledged(self) -> bool:
        return self is WriteResult.APPLIED
