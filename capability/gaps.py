from __future__ import annotations

from typing import AbstractSet, FrozenSet, Optional

from schemas.capability_ir import ClusterCapabilities


def find_gaps(
    requested: Optional[AbstractSet[str]],
    enabled_elsewhere: Optional[AbstractSet[str]],
    cluster: ClusterCapabilities,
) -> Optional[FrozenSet[str]]:
    """Return the requested capabilities that nothing has enabled yet.

    None means nothing was requested. An empty frozenset means the request
    was checked and is fully covered.
    """
    if requested is None:
        return None
    return (
        frozenset(requested)
        - frozenset(enabled_elsewhere or ())
        - cluster.enabled
        - cluster.implicitly_enabled
    )
