"""Pydantic schemas for cluster capability resolution."""

from schemas.capability_ir import (
    CapabilitiesStatus,
    CapabilityCatalog,
    CapabilityState,
    ClusterCapabilities,
    ClusterCapabilitiesSpec,
    ClusterConfig,
)
from schemas.strict_base import FrozenBaseModel, StrictBaseModel

__all__ = [
    "CapabilitiesStatus",
    "CapabilityCatalog",
    "CapabilityState",
    "ClusterCapabilities",
    "ClusterCapabilitiesSpec",
    "ClusterConfig",
    "FrozenBaseModel",
    "StrictBaseModel",
]
