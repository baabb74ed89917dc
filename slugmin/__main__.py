"""Command line entry point for slugmin."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from . import SettingsStore, SlugMode
from .transliteration import TransliteratorRegistry


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Convert text into ASCII slugs.")
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert. Reads one item per line from stdin when omitted.",
    )
    parser.add_argument(
        "--normal",
        action="store_true",
        help="Use the lenient alphabet that keeps spaces, dots and underscores.",
    )
    parser.add_argument(
        "--preserve-case",
        action="store_true",
        help="Keep letter case (implies --normal).",
    )
    parser.add_argument(
        "--transliterator",
        help="Override the configured transliteration backend.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML or JSON settings file to use instead of the user settings.",
    )
    parser.add_argument(
        "--list-transliterators",
        action="store_true",
        help="Print available transliteration backends and exit.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON list of input/slug pairs.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.list_transliterators:
        payload = [asdict(info) for info in TransliteratorRegistry.list_infos()]
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return

    store = SettingsStore()
    try:
        encoder = store.build_encoder(
            config_path=args.config,
            mode=SlugMode.LENIENT if args.normal or args.preserve_case else None,
            preserve_case=True if args.preserve_case else None,
            transliterator=args.transliterator,
        )
    except (FileNotFoundError, ValueError) as exc:
        parser.error(f"could not load settings: {exc}")
    except KeyError as exc:
        parser.error(str(exc.args[0]))

    items = args.text or [line.rstrip("\r\n") for line in sys.stdin]
    slugs = [encoder.encode(item) for item in items]

    if args.json:
        output = [{"input": item, "slug": slug} for item, slug in zip(items, slugs)]
        json.dump(output, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return

    for slug in slugs:
        sys.stdout.write(slug + "\n")


if __name__ == "__main__":  # pragma: no cover
    main()
