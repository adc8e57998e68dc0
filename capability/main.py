from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from capability.catalog import load_catalog, load_cluster_config, load_observed
from capability.console import ConsoleUI
from capability.errors import CapabilityConfigError
from capability.gaps import find_gaps
from capability.resolver import resolve
from capability.status import unknown_enabled
from schemas.capability_ir import ClusterConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve enabled cluster capabilities")
    parser.add_argument("--config-dir", default="configs", help="Config directory")
    parser.add_argument(
        "--catalog",
        default=None,
        help="Capability set catalog (default: <config-dir>/capability_sets.yaml)",
    )
    parser.add_argument("--cluster", default=None, help="Cluster config YAML with a capabilities stanza")
    parser.add_argument("--baseline", default=None, help="Baseline capability set name")
    parser.add_argument(
        "--additional",
        action="append",
        default=[],
        help="Additional capability to enable (repeatable)",
    )
    parser.add_argument(
        "--observed",
        action="append",
        default=[],
        help="Capability observed in use on the cluster (repeatable)",
    )
    parser.add_argument("--observed-file", default=None, help="YAML list of observed capabilities")
    parser.add_argument(
        "--request",
        action="append",
        default=None,
        help="Capability a resource requires; reports the ones not enabled (repeatable)",
    )
    parser.add_argument(
        "--ui",
        default="console",
        choices=["console", "quiet"],
        help="Console output mode",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def run(argv: Optional[List[str]] = None, ui: Optional[ConsoleUI] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config_dir = Path(args.config_dir)
    catalog_path = Path(args.catalog) if args.catalog else config_dir / "capability_sets.yaml"
    catalog = load_catalog(catalog_path)

    config = load_cluster_config(Path(args.cluster)) if args.cluster else ClusterConfig()
    spec = config.capabilities
    baseline_key = spec.baseline_capability_set if spec else ""
    additional = list(spec.additional_enabled_capabilities) if spec else []
    # Command-line values take precedence over the cluster file.
    if args.baseline is not None:
        baseline_key = args.baseline
    additional.extend(args.additional)

    observed = set(args.observed)
    if args.observed_file:
        observed |= load_observed(Path(args.observed_file))

    if ui is None:
        ui = ConsoleUI(enabled=args.ui == "console")
    ui.header(str(catalog_path), baseline_key, catalog.current)

    state = resolve(baseline_key, additional, catalog, frozenset(observed))
    unknown_enabled(state)
    ui.state(state)

    requested = frozenset(args.request) if args.request is not None else None
    gaps = find_gaps(requested, None, state)
    ui.gaps(gaps)
    return 1 if gaps else 0


def main() -> None:
    try:
        code = run()
    except CapabilityConfigError as exc:
        raise SystemExit(f"Configuration error: {exc}") from exc
    raise SystemExit(code)


if __name__ == "__main__":
    main()
