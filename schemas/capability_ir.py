from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set

from pydantic import Field, field_validator

from schemas.strict_base import FrozenBaseModel, StrictBaseModel


class CapabilityState(str, Enum):
    UNKNOWN = "unknown"
    ENABLED = "enabled"
    IMPLICITLY_ENABLED = "implicitly_enabled"
    DISABLED = "disabled"


class CapabilityCatalog(FrozenBaseModel):
    """Named baseline capability sets.

    `current` names the set used when a cluster selects no baseline. It is
    not required to exist in `sets`; a missing default resolves to nothing.
    """

    sets: Dict[str, FrozenSet[str]] = Field(default_factory=dict)
    current: str = "vCurrent"

    def known(self) -> FrozenSet[str]:
        known: Set[str] = set()
        for members in self.sets.values():
            known.update(members)
        return frozenset(known)

    def members(self, key: str) -> FrozenSet[str]:
        return self.sets.get(key, frozenset())


class ClusterCapabilitiesSpec(StrictBaseModel):
    baseline_capability_set: str = ""
    additional_enabled_capabilities: List[str] = Field(default_factory=list)

    @field_validator("baseline_capability_set", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        # YAML `baseline_capability_set:` with no value parses to None.
        return "" if value is None else value

    @field_validator("additional_enabled_capabilities", mode="before")
    @classmethod
    def _none_to_list(cls, value: object) -> object:
        return [] if value is None else value


class ClusterConfig(StrictBaseModel):
    capabilities: Optional[ClusterCapabilitiesSpec] = None


class ClusterCapabilities(FrozenBaseModel):
    # known: every capability named by any catalog set.
    # enabled: baseline members plus additional overrides.
    # implicitly_enabled: observed in use but not in enabled.
    known: FrozenSet[str] = frozenset()
    enabled: FrozenSet[str] = frozenset()
    implicitly_enabled: FrozenSet[str] = frozenset()


class CapabilitiesStatus(StrictBaseModel):
    enabled_capabilities: List[str] = Field(default_factory=list)
    known_capabilities: List[str] = Field(default_factory=list)
