"""Command-line helpers for packaging asset generation."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

from packforge.assets.builder import ArtifactSet, AssetsBuilder, BuildRequest, validate_sources, write_artifacts
from packforge.assets.macros import describe_macros
from packforge.assets.manifests import metainfo_template
from packforge.errors import PackagingError
from packforge.formats import TargetFormat
from packforge.schemas.config import load_config

logger = logging.getLogger("packforge")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "metainfo-template":
        print(metainfo_template(), end="")
        return 0

    try:
        if args.command == "assets":
            return _handle_assets(args)
        if args.command == "rpm-spec":
            return _handle_rpm_spec(args)
        if args.command == "macros":
            return _handle_macros(args)
    except PackagingError as exc:
        logger.error("%s", exc)
        _print_json({"error": type(exc).__name__, "message": str(exc)})
        return 1

    parser.error(f"Unknown command '{args.command}'")
    return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="packforge", description="Packaging asset generation.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    assets = subparsers.add_parser("assets", help="Generate packaging assets for a target format.")
    _add_build_arguments(assets)
    assets.add_argument("--write", action="store_true", help="Write artifacts into the output directory.")

    spec = subparsers.add_parser("rpm-spec", help="Print the RPM spec file.")
    _add_build_arguments(spec, with_target=False)
    spec.add_argument("--file", action="append", help="Installed file path (repeatable).")

    macros = subparsers.add_parser("macros", help="List build macros and their values.")
    _add_build_arguments(macros)

    subparsers.add_parser("metainfo-template", help="Print a starter AppStream metainfo template.")
    return parser


def _add_build_arguments(parser: argparse.ArgumentParser, *, with_target: bool = True) -> None:
    parser.add_argument("--config", required=True, help="Application configuration (JSON or YAML).")
    if with_target:
        parser.add_argument(
            "--target",
            required=True,
            type=TargetFormat.parse,
            help="Target format: " + ", ".join(member.value for member in TargetFormat),
        )
    parser.add_argument("--runtime", help="Runtime identifier, e.g. linux-x64.")
    parser.add_argument("--arch", help="Override the package architecture token.")
    parser.add_argument("--output-dir")
    parser.add_argument("--default-icon-dir")
    parser.add_argument("--workspace-root")


def _handle_assets(args: argparse.Namespace) -> int:
    artifacts = _build(args, args.target)
    payload = artifacts.to_dict()
    if args.write:
        payload["written"] = [str(path) for path in write_artifacts(artifacts)]
    _print_json(payload)
    return 0


def _handle_rpm_spec(args: argparse.Namespace) -> int:
    artifacts = _build(args, TargetFormat.RPM_PACKAGE)
    print(artifacts.rpm_spec(args.file).rstrip("\n"))
    return 0


def _handle_macros(args: argparse.Namespace) -> int:
    artifacts = _build(args, args.target)
    _print_json({"target": artifacts.target.value, "macros": describe_macros(artifacts.macros)})
    return 0


def _build(args: argparse.Namespace, target: TargetFormat) -> ArtifactSet:
    workspace = _resolve_workspace(args.workspace_root)
    config = load_config(_resolve_path(args.config, workspace))
    validate_sources(config)

    output_dir = _resolve_path(args.output_dir, workspace) if args.output_dir else workspace / "deploy"
    request = BuildRequest(
        target=target,
        output_dir=output_dir,
        runtime=args.runtime,
        arch_override=args.arch,
        default_icon_dir=_resolve_optional_path(args.default_icon_dir, workspace),
    )
    return AssetsBuilder().build(config, request)


def _resolve_workspace(value: Optional[str]) -> Path:
    return Path(value).resolve() if value else Path.cwd()


def _resolve_path(value: str, workspace: Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = workspace / path
    return path.resolve()


def _resolve_optional_path(value: Optional[str], workspace: Path) -> Optional[Path]:
    if value is None:
        return None
    return _resolve_path(value, workspace)


def _print_json(payload: Mapping[str, object]) -> None:
    print(json.dumps(payload, indent=2, default=str))


if __name__ == "__main__":
    raise SystemExit(main())
