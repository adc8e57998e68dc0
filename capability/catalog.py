from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, List

import yaml
from pydantic import ValidationError

from capability.errors import CatalogError
from schemas.capability_ir import CapabilityCatalog, ClusterConfig

logger = logging.getLogger(__name__)


def load_yaml(path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"cannot read {path}: {exc}") from exc
    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"invalid YAML in {path}: {exc}") from exc


def _deep_merge_dicts(base: dict, overlay: dict) -> dict:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _local_overlay_path(path: Path) -> Path:
    return path.with_name(f"{path.stem}.local{path.suffix}")


def _load_mapping(path: Path) -> dict:
    raw = load_yaml(path)
    if not isinstance(raw, dict):
        raise CatalogError(f"{path} must contain a mapping")
    return raw


def load_catalog(path: Path) -> CapabilityCatalog:
    # Tracked catalog first, then the machine-local overlay if present.
    raw = _load_mapping(path)
    local_path = _local_overlay_path(path)
    if local_path.exists():
        logger.debug("Merging local catalog overlay %s", local_path)
        raw = _deep_merge_dicts(raw, _load_mapping(local_path))

    sets_raw = raw.get("sets") or {}
    if not isinstance(sets_raw, dict):
        raise CatalogError(f"{path}: `sets` must map set names to capability lists")
    sets: Dict[str, FrozenSet[str]] = {}
    for name, members in sets_raw.items():
        # Unquoted keys such as 4_11 parse as numbers; require the quoted form.
        if not isinstance(name, str):
            raise CatalogError(f"{path}: set name {name!r} must be a string, quote it")
        if members is None:
            members = []
        if not isinstance(members, list):
            raise CatalogError(f"{path}: set {name!r} must be a list")
        for member in members:
            if member is not None and not isinstance(member, str):
                raise CatalogError(f"{path}: set {name!r} member {member!r} must be a string")
        sets[name] = frozenset(member for member in members if member is not None)

    fields: Dict[str, object] = {"sets": sets}
    if raw.get("current") is not None:
        fields["current"] = raw["current"]
    try:
        return CapabilityCatalog(**fields)
    except ValidationError as exc:
        raise CatalogError(f"{path}: {exc}") from exc


def load_cluster_config(path: Path) -> ClusterConfig:
    raw = _load_mapping(path)
    if isinstance(raw.get("spec"), dict):
        raw = raw["spec"]
    try:
        return ClusterConfig(**raw)
    except ValidationError as exc:
        raise CatalogError(f"{path}: {exc}") from exc


def load_observed(path: Path) -> FrozenSet[str]:
    raw = load_yaml(path)
    if isinstance(raw, dict):
        raw = raw.get("observed") or []
    if not isinstance(raw, list):
        raise CatalogError(f"{path}: observed capabilities must be a list")
    items: List[str] = [str(item) for item in raw if item is not None]
    return frozenset(items)
