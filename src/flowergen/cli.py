"""
CLI entry point for flower generation.

Usage:
    flowergen [--seed SEED] [--size N] [options]
    python -m flowergen [options]
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from flowergen.config import LOG_LEVELS, default_settings_path, load_settings, save_settings
from flowergen.core.params import generate_params
from flowergen.errors import FlowerError
from flowergen.io.storage import FlowerStore, markdown_link
from flowergen.pipeline import generate_flower_data_url
from flowergen.seeds import SeedChoice, parse_seed, resolve_seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowergen",
        description="Deterministic procedural flower image generator",
    )

    # Seed sources
    parser.add_argument("--seed", type=str, default=None, help="Integer seed (overrides other sources)")
    parser.add_argument("--title", type=str, default=None, help="Note title to extract a seed from")
    parser.add_argument(
        "--selection", type=str, default=None,
        help="Selected text in the form <seed><delimiter><size>",
    )
    parser.add_argument("--random-seed", action="store_true", help="Always use a random seed")

    # Output
    parser.add_argument("--size", type=int, default=None, help="Image size in pixels (default: from settings)")
    parser.add_argument("--images-folder", type=Path, default=None, help="Root folder for stored images")
    parser.add_argument("--data-url", action="store_true", help="Print a data URL instead of storing a file")
    parser.add_argument("--show-params", action="store_true", help="Print the generated parameters as JSON")

    # Settings
    parser.add_argument(
        "--settings", type=Path, default=None,
        help=f"Settings file (default: {default_settings_path()})",
    )
    parser.add_argument("--save-settings", action="store_true", help="Persist the effective settings")
    parser.add_argument("--log-level", type=str, default=None, choices=LOG_LEVELS, help="Logging level")

    return parser


def _choose_seed(args, settings) -> SeedChoice:
    if args.seed is not None:
        seed = str(parse_seed(args.seed))
        return SeedChoice(seed=seed, size=settings.size, source="argument")
    return resolve_seed(settings, title=args.title, selection=args.selection)


def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.settings)

    overrides = {}
    if args.images_folder is not None:
        overrides["images_folder"] = str(args.images_folder)
    if args.random_seed:
        overrides["random_seed"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    settings = replace(settings, **overrides)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.save_settings:
        path = save_settings(settings.validate(), args.settings)
        print(f"Settings saved to {path}")

    choice = _choose_seed(args, settings)
    size = args.size if args.size is not None else choice.size

    if args.show_params:
        print(json.dumps(generate_params(parse_seed(choice.seed)).to_dict(), indent=2))

    if args.data_url:
        print(generate_flower_data_url(size, choice.seed))
        return 0

    store = FlowerStore(settings.images_folder)
    path = store.save(size, choice.seed)
    print(f"Seed: {choice.seed} ({choice.source}), size: {size}")
    print(markdown_link(path), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except FlowerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
