"""Cluster capability resolution."""

from capability.gaps import find_gaps
from capability.resolver import resolve, set_capabilities
from capability.status import capabilities_status, classify, classify_all, unknown_enabled

__all__ = [
    "capabilities_status",
    "classify",
    "classify_all",
    "find_gaps",
    "resolve",
    "set_capabilities",
    "unknown_enabled",
]
