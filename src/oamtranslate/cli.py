"""oamtranslate: run translator chains over rendered workload manifests."""

import argparse
import os
import sys
from pathlib import Path

import yaml

from oamtranslate.core.constants import DEFAULT_LABEL_KEY
from oamtranslate.core.errors import TranslationError
from oamtranslate.core.translate import DEFAULT_CHAIN, available_translators, translate
from oamtranslate.pacts.helpers import to_manifests
from oamtranslate.pacts.types import TranslateContext, WorkloadIdentity


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_manifests(rendered_dir: str) -> list[dict]:
    """Load all YAML files from rendered_dir, keeping file and document order."""
    manifests: list[dict] = []
    rendered = Path(rendered_dir)
    for yaml_file in sorted([*rendered.rglob("*.yaml"), *rendered.rglob("*.yml")]):
        with open(yaml_file, encoding="utf-8") as f:
            for doc in yaml.safe_load_all(f):
                if not doc or not isinstance(doc, dict):
                    continue
                manifests.append(doc)
    return manifests


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(path: str) -> dict:
    """Load oamtranslate.yaml or return empty config."""
    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    else:
        cfg = {}
    cfg.setdefault("oamtranslateVersion", "v1")
    cfg.setdefault("labelKey", DEFAULT_LABEL_KEY)
    cfg.setdefault("translators", list(DEFAULT_CHAIN))
    cfg.setdefault("workload", {})
    return cfg


def _workload_from(config: dict, args) -> WorkloadIdentity:
    """Build the workload identity: CLI flags override the config's workload block."""
    wl = config.get("workload") or {}
    return WorkloadIdentity(
        name=args.workload_name or wl.get("name", ""),
        namespace=args.workload_namespace or wl.get("namespace", ""),
        uid=args.workload_uid or wl.get("uid", ""),
    )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def write_manifests(manifests: list[dict], output: str | None) -> None:
    """Write a multi-document YAML stream to output, or stdout."""
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write("# Generated by oamtranslate — do not edit manually\n")
            yaml.safe_dump_all(manifests, f, default_flow_style=False, sort_keys=False)
        print(f"Wrote {output}", file=sys.stderr)
    else:
        yaml.safe_dump_all(manifests, sys.stdout, default_flow_style=False, sort_keys=False)


def emit_warnings(warnings: list[str]) -> None:
    """Print all warnings to stderr."""
    for w in warnings:
        print(f"⚠ {w}", file=sys.stderr)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Apply OAM translators (service injection, KubernetesApplication "
                    "wrapping) to rendered workload manifests"
    )
    parser.add_argument(
        "--from-dir", required=True,
        help="Directory of rendered YAML manifests for one workload",
    )
    parser.add_argument("--workload-name", help="Workload name (overrides config)")
    parser.add_argument("--workload-namespace", help="Workload namespace (overrides config)")
    parser.add_argument("--workload-uid", help="Workload UID (overrides config)")
    parser.add_argument(
        "--config", default="oamtranslate.yaml",
        help="Path to oamtranslate.yaml (default: oamtranslate.yaml)",
    )
    parser.add_argument(
        "--translators",
        help=f"Comma-separated translator chain, overrides config "
             f"(available: {', '.join(available_translators())})",
    )
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    workload = _workload_from(config, args)
    if not workload.name or not workload.uid:
        parser.error("workload name and uid are required (flags or config 'workload' block)")

    chain = config["translators"]
    if args.translators:
        chain = [t.strip() for t in args.translators.split(",") if t.strip()]

    # Step 1: parse
    children = parse_manifests(args.from_dir)
    print(f"Parsed {len(children)} manifest(s) from {args.from_dir}", file=sys.stderr)

    # Step 2: translate
    ctx = TranslateContext(label_key=config["labelKey"])
    try:
        result = translate(workload, children, ctx, chain=chain)
    except TranslationError as exc:
        emit_warnings(ctx.warnings)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    # Step 3: emit warnings
    emit_warnings(ctx.warnings)

    # Step 4: write output
    if not result:
        print("No manifests produced — nothing to write.", file=sys.stderr)
        sys.exit(1)
    write_manifests(to_manifests(result), args.output)


if __name__ == "__main__":
    main()
