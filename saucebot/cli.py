"""Command line entry point: find the sauce of an image file."""

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger

from saucebot import __version__
from saucebot.config.loader import ConfigError, get_config_path, load_config
from saucebot.sauce.client import BACKENDS
from saucebot.sauce.errors import SauceError
from saucebot.sauce.service import SauceService
from saucebot.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="saucebot", description=__doc__)
    parser.add_argument("image", type=Path, help="path of the image to look up")
    parser.add_argument("--backend", choices=BACKENDS, default="google")
    parser.add_argument("--config", type=Path, default=None, help=f"config file (default: {get_config_path()})")
    parser.add_argument("--html", action="store_true", help="bold text with <b> tags")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logging)
    service = SauceService(config, html=args.html)

    try:
        reply = asyncio.run(service.lookup_or_raise(args.image, args.backend))
    except SauceError as e:
        logger.warning("Lookup of {} failed: {}", args.image, e)
        print(e, file=sys.stderr)
        return 1

    print(reply)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
