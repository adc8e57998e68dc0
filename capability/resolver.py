from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Optional

from schemas.capability_ir import CapabilityCatalog, ClusterCapabilities, ClusterConfig

logger = logging.getLogger(__name__)


def resolve(
    baseline_key: Optional[str],
    additional: Optional[Iterable[str]],
    catalog: CapabilityCatalog,
    observed: Optional[AbstractSet[str]] = None,
) -> ClusterCapabilities:
    """Compute known, enabled and implicitly enabled capabilities.

    An empty or missing `baseline_key` selects `catalog.current`. A key the
    catalog does not define yields an empty baseline; there is no fallback
    to the default in that case. Capabilities in `additional` are enabled
    even when no catalog set names them.
    """
    key = baseline_key
    if not key:
        logger.debug("No baseline capability set selected, using %r", catalog.current)
        key = catalog.current
    if key not in catalog.sets:
        logger.debug("Baseline capability set %r is not in the catalog, starting empty", key)

    enabled = set(catalog.members(key))
    enabled.update(additional or ())
    enabled_frozen = frozenset(enabled)
    # Subtract enabled from observed, never the other way round.
    implicit = frozenset(observed or ()) - enabled_frozen
    return ClusterCapabilities(
        known=catalog.known(),
        enabled=enabled_frozen,
        implicitly_enabled=implicit,
    )


def set_capabilities(
    config: ClusterConfig,
    observed: Optional[AbstractSet[str]],
    catalog: CapabilityCatalog,
) -> ClusterCapabilities:
    spec = config.capabilities
    if spec is None:
        return resolve("", None, catalog, observed)
    return resolve(
        spec.baseline_capability_set,
        spec.additional_enabled_capabilities,
        catalog,
        observed,
    )
