from __future__ import annotations


class CapabilityConfigError(RuntimeError):
    """Raised when capability configuration cannot be loaded."""


class CatalogError(CapabilityConfigError):
    """Raised when a catalog, cluster config or observation file is malformed."""
