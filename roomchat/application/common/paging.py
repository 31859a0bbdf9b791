"""Page size resolution shared by list queries."""

from typing import Optional

from roomchat.domain.exceptions import DomainValidationError


def resolve_limit(requested: Optional[int], default: int, maximum: int) -> int:
    """Apply the default when omitted and cap at the maximum."""
    if requested is None:
        return min(default, maximum)
    if requested < 1:
        raise DomainValidationError(f"limit must be at least 1, got {requested}")
    return min(requested, maximum)
