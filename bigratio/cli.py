#!/usr/bin/env python3
"""Parse rational literals and print their canonical form and expansions."""

import argparse
import decimal
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from . import rational
from .digits import int_to_str
from .rational import Rational

logger = logging.getLogger(__name__)

ROUNDING_MODES = (
    decimal.ROUND_DOWN,
    decimal.ROUND_UP,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP,
)


@dataclass
class Settings:
    scale: int = rational.DEFAULT_DECIMAL_SCALE
    rounding: str = rational.DEFAULT_ROUNDING
    continued_fraction: bool = False
    convergents: bool = False
    decimal: bool = False


def load_config(path: str, settings: Settings) -> Settings:
    """Override *settings* with the ``[bigratio]`` table of a TOML file."""
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with config_path.open("rb") as cf:
        params = tomllib.load(cf).get("bigratio", {})
    logger.debug("loaded %s: %r", config_path, params)

    if "scale" in params:
        settings.scale = int(params["scale"])
    if "rounding" in params:
        settings.rounding = str(params["rounding"])
    return settings


def validate(settings: Settings) -> None:
    if settings.scale < 0:
        raise ValueError(f"scale must be non-negative, got {settings.scale}")
    if settings.rounding not in ROUNDING_MODES:
        raise ValueError(
            f"Unknown rounding mode {settings.rounding!r}; expected one of {', '.join(ROUNDING_MODES)}"
        )


def format_continued_fraction(terms: Sequence[int]) -> str:
    head, tail = terms[0], terms[1:]
    if not tail:
        return f"[{int_to_str(head)}]"
    return f"[{int_to_str(head)}; {', '.join(int_to_str(term) for term in tail)}]"


def describe(value: Rational, settings: Settings) -> List[str]:
    lines = [str(value)]
    if settings.decimal:
        lines.append(f"  decimal: {value.to_decimal(settings.scale, settings.rounding)}")
    if settings.continued_fraction or settings.convergents:
        terms = value.to_continued_fraction()
        if settings.continued_fraction:
            lines.append(f"  continued fraction: {format_continued_fraction(terms)}")
        if settings.convergents:
            lines.append(f"  convergents: {', '.join(str(c) for c in value.convergents())}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Parse rational literals and print their canonical form and expansions.",
    )
    parser.add_argument("literals", nargs="+", help="Literals such as 41/152, -1.25 or 0._3")
    parser.add_argument("--cf", dest="continued_fraction", action="store_true",
                        help="Print the continued-fraction expansion")
    parser.add_argument("--convergents", action="store_true",
                        help="Print the convergents of the continued fraction")
    parser.add_argument("--decimal", action="store_true", help="Print a decimal expansion")
    parser.add_argument("--scale", type=int, help="Number of fractional decimal digits")
    parser.add_argument("--rounding", help="decimal rounding mode, e.g. ROUND_HALF_EVEN")
    parser.add_argument("--config", help="TOML file with a [bigratio] table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings(
        continued_fraction=args.continued_fraction,
        convergents=args.convergents,
        decimal=args.decimal,
    )
    if args.config is not None:
        load_config(args.config, settings)
    if args.scale is not None:
        settings.scale = args.scale
    if args.rounding is not None:
        settings.rounding = args.rounding
    validate(settings)

    for literal in args.literals:
        for line in describe(Rational.parse(literal), settings):
            print(line)


def run() -> None:
    try:
        main()
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
