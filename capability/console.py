from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, TextIO

from capability.status import capabilities_status, classify_all
from schemas.capability_ir import ClusterCapabilities


def _fmt_caps(caps: Iterable[str]) -> str:
    items = sorted(caps)
    return ", ".join(items) if items else "(none)"


@dataclass
class ConsoleUI:
    enabled: bool = True
    stream: TextIO = sys.stdout

    def header(self, catalog_path: str, baseline_key: str, default_key: str) -> None:
        if not self.enabled:
            return
        self._section("Capability resolution")
        self._kv("catalog", catalog_path)
        self._kv("baseline", baseline_key or f"(unset, default {default_key})")

    def state(self, state: ClusterCapabilities) -> None:
        if not self.enabled:
            return
        self._section("Cluster capabilities")
        self._kv("known", _fmt_caps(state.known))
        self._kv("enabled", _fmt_caps(state.enabled))
        self._kv("implicitly enabled", _fmt_caps(state.implicitly_enabled))

        self._section("Classification")
        for capability, cap_state in classify_all(state).items():
            self._kv(capability, cap_state.value)

        status = capabilities_status(state)
        self._section("Status")
        self._kv("enabledCapabilities", _fmt_caps(status.enabled_capabilities))
        self._kv("knownCapabilities", _fmt_caps(status.known_capabilities))

    def gaps(self, gaps: Optional[FrozenSet[str]]) -> None:
        if not self.enabled:
            return
        self._section("Requested capabilities")
        if gaps is None:
            self._kv("result", "not checked")
        elif not gaps:
            self._kv("result", "all enabled")
        else:
            self._kv("missing", _fmt_caps(gaps))

    def _section(self, title: str) -> None:
        self._print("")
        self._print(f"=== {title} ===")

    def _kv(self, key: str, value: str) -> None:
        self._print(f"- {key}: {value}")

    def _print(self, line: str) -> None:
        if not self.enabled:
            return
        self.stream.write(line + "\n")
        self.stream.flush()
