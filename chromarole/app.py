"""Command-line front end and logging setup."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Sequence

from chromarole.config.settings import EngineSettings, default_settings_path, load_settings
from chromarole.core.optimizer import TARGET_STANDARDS, UseCase
from chromarole.core.roles import CONTEXTS, SemanticRole
from chromarole.errors import ChromaRoleError
from chromarole.service import assign_semantic_roles, compose_theme, optimize_for_accessibility
from chromarole.themes.constants import ACCESSIBILITY_LEVELS, STYLES, THEME_TYPES

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def configure_logging(settings: EngineSettings) -> logging.Logger:
    logger = logging.getLogger("chromarole")
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    log_file = settings.log_file
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _split(values: Sequence[str] | None) -> list[str] | None:
    """Flatten repeated and comma-separated option values."""
    if values is None:
        return None
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromarole",
        description="Accessible semantic color roles, themes and palette optimization.",
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    roles = sub.add_parser("roles", help="assign semantic roles to a palette")
    roles.add_argument("palette", nargs="+", help="hex colors")
    roles.add_argument(
        "--roles",
        action="append",
        help=f"roles to assign ({', '.join(r.value for r in SemanticRole)})",
    )
    roles.add_argument("--context", choices=CONTEXTS)
    roles.add_argument("--level", choices=ACCESSIBILITY_LEVELS)
    roles.add_argument(
        "--no-ensure-contrast",
        dest="ensure_contrast",
        action="store_false",
        default=None,
        help="report contrast failures without repairing them",
    )

    theme = sub.add_parser("theme", help="compose a theme from a primary color")
    theme.add_argument("theme_type", choices=THEME_TYPES)
    theme.add_argument("primary_color")
    theme.add_argument("--style", choices=STYLES)
    theme.add_argument("--level", choices=ACCESSIBILITY_LEVELS)
    theme.add_argument("--brand", action="append", help="brand colors to integrate")

    optimize = sub.add_parser("optimize", help="optimize a palette for use cases")
    optimize.add_argument("palette", nargs="+", help="hex colors")
    optimize.add_argument(
        "--use-case",
        dest="use_cases",
        action="append",
        required=True,
        help=f"use cases ({', '.join(u.value for u in UseCase)})",
    )
    optimize.add_argument("--standard", choices=list(TARGET_STANDARDS))
    optimize.add_argument(
        "--no-preserve-hue",
        dest="preserve_hue",
        action="store_false",
        default=None,
    )
    optimize.add_argument("--preserve", action="append", help="brand colors to leave untouched")

    config = sub.add_parser("config", help="show or update the settings file")
    config.add_argument("--level", choices=ACCESSIBILITY_LEVELS)
    config.add_argument("--context", choices=CONTEXTS)
    config.add_argument("--style", choices=STYLES)
    config.add_argument(
        "--ensure-contrast",
        action=argparse.BooleanOptionalAction,
        default=None,
    )
    config.add_argument("--save", action="store_true", help="write the settings file")
    return parser


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def update_settings(args: argparse.Namespace, settings: EngineSettings) -> dict[str, Any]:
    """Apply the given options to *settings*, saving them when asked."""
    if args.level is not None:
        settings.accessibility_level = args.level
    if args.context is not None:
        settings.context = args.context
    if args.style is not None:
        settings.style = args.style
    if args.ensure_contrast is not None:
        settings.ensure_contrast = args.ensure_contrast
    if args.save:
        path = settings.save(args.config or default_settings_path())
        logging.getLogger("chromarole").info("saved settings to %s", path)
    return settings.to_dict()


def dispatch(args: argparse.Namespace, settings: EngineSettings) -> dict[str, Any]:
    """Run the selected command and return its serialized result."""
    if args.command == "config":
        return update_settings(args, settings)
    if args.command == "roles":
        return assign_semantic_roles(
            args.palette,
            _split(args.roles),
            context=_pick(args.context, settings.context),
            ensure_contrast=_pick(args.ensure_contrast, settings.ensure_contrast),
            accessibility_level=_pick(args.level, settings.accessibility_level),
        ).to_dict()
    if args.command == "theme":
        return compose_theme(
            args.theme_type,
            args.primary_color,
            style=_pick(args.style, settings.style),
            accessibility_level=_pick(args.level, settings.accessibility_level),
            brand_colors=_split(args.brand),
        ).to_dict()
    return optimize_for_accessibility(
        args.palette,
        _split(args.use_cases) or [],
        target_standard=_pick(args.standard, settings.target_standard),
        preserve_hue=_pick(args.preserve_hue, settings.preserve_hue),
        preserve_brand_colors=_split(args.preserve),
    ).to_dict()


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run one command and print JSON."""
    args = build_parser().parse_args(argv)
    try:
        # An explicit file must exist unless the config command is creating it.
        required = args.config is not None and args.command != "config"
        settings = load_settings(args.config, required=required)
    except ChromaRoleError as exc:
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return EXIT_INPUT_ERROR

    logger = configure_logging(settings)
    logger.debug("running %s with config=%s", args.command, args.config)
    try:
        payload = dispatch(args, settings)
    except ChromaRoleError as exc:
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(json.dumps(payload, indent=2))
    return EXIT_OK
