from __future__ import annotations

import logging
from typing import Dict, FrozenSet

from schemas.capability_ir import CapabilitiesStatus, CapabilityState, ClusterCapabilities

logger = logging.getLogger(__name__)


def classify(state: ClusterCapabilities, capability: str) -> CapabilityState:
    # Enablement wins over catalog membership, so unknown overrides report as enabled.
    if capability in state.enabled:
        return CapabilityState.ENABLED
    if capability in state.implicitly_enabled:
        return CapabilityState.IMPLICITLY_ENABLED
    if capability in state.known:
        return CapabilityState.DISABLED
    return CapabilityState.UNKNOWN


def classify_all(state: ClusterCapabilities) -> Dict[str, CapabilityState]:
    universe = state.known | state.enabled | state.implicitly_enabled
    return {capability: classify(state, capability) for capability in sorted(universe)}


def capabilities_status(state: ClusterCapabilities) -> CapabilitiesStatus:
    """Build the status stanza a cluster reports for its capabilities."""
    return CapabilitiesStatus(
        enabled_capabilities=sorted(state.enabled | state.implicitly_enabled),
        known_capabilities=sorted(state.known),
    )


def unknown_enabled(state: ClusterCapabilities) -> FrozenSet[str]:
    unknown = (state.enabled | state.implicitly_enabled) - state.known
    if unknown:
        logger.warning("Enabled capabilities not in the catalog: %s", ", ".join(sorted(unknown)))
    return unknown
