from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from showzup.adapters.manifest_file import load_manifest, resolve_type
from showzup.config import ConfigurationError, configure_logging, get_cli_config, get_manifest_path
from showzup.domain import (
    InvalidManifestError,
    InvalidVariantGroupError,
    Options,
    VariantProvider,
    ViewResolver,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from showzup.domain import ViewInfo

log = logging.getLogger(__name__)


def _add_manifest_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--manifest",
        type=str,
        help="Path of the manifest JSON file (defaults to $SHOWZUP_MANIFEST)",
    )
    parser.add_argument(
        "--groups",
        nargs="+",
        action="extend",
        default=[],
        metavar="GROUP",
        help="Qualified names of the variant groups used by the manifest",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect Showzup manifests")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Load and validate a manifest")
    _add_manifest_arguments(check)

    resolve = subparsers.add_parser("resolve", help="Resolve a view model or view type")
    _add_manifest_arguments(resolve)
    resolve.add_argument(
        "type_name",
        type=str,
        help="Qualified name of the view model or view type to resolve",
    )
    resolve.add_argument(
        "--variant",
        dest="variants",
        action="append",
        default=[],
        metavar="GROUP.MEMBER",
        help="Variant to request; may be repeated",
    )

    return parser.parse_args(list(argv))


def _resolve_group(name: str) -> type:
    try:
        return resolve_type(name)
    except InvalidManifestError as exc:
        raise InvalidVariantGroupError(
            f"Cannot import variant group {name!r} given to --groups (expected 'module:Group')"
        ) from exc


def _build_variant_provider(group_names: Sequence[str]) -> VariantProvider:
    return VariantProvider.from_types(*(_resolve_group(name) for name in group_names))


def _describe(view_info: ViewInfo) -> str:
    return (
        f"view_model_type={view_info.view_model_type}, "
        f"view_type={view_info.view_type}, "
        f"prefab_uri={view_info.prefab_uri}"
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        cli_config = get_cli_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(2)

    configure_logging(level=cli_config.log_level, trace_resolution=cli_config.trace_resolution)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        manifest_path = get_manifest_path(parsed_args.manifest)
        variant_provider = _build_variant_provider(parsed_args.groups)
        options = None
        if parsed_args.command == "resolve":
            options = Options(variants=variant_provider.parse_variants(parsed_args.variants))
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        manifest = load_manifest(manifest_path, variant_provider)
        if parsed_args.command == "check":
            log.info("Manifest %s is valid: %s", manifest_path, manifest)
        elif parsed_args.command == "resolve":
            resolver = ViewResolver(manifest, variant_provider)
            view_info = resolver.resolve(resolve_type(parsed_args.type_name), options)
            log.info("Resolved %s: %s", parsed_args.type_name, _describe(view_info))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while processing manifest")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env``, install the SIGINT handler, run."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
