"""CLI for pwdg: generate passwords with per-category minimums and exclusions."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .charset import SPECIAL_CHARS
from .config import load_config, resolve_configuration, save_config
from .errors import GenerationError
from .generator import MIN_LENGTH, PasswordGenerator
from .log import configure_logging

logger = logging.getLogger(__name__)


def _count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0, got {n}")
    return n


def _positive(value: str) -> int:
    n = _count(value)
    if n == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwdg",
        description="Generate random passwords with per-category minimums.",
    )
    # None means "not given": saved defaults fill the gap
    parser.add_argument("-l", "--length", type=_count, default=None,
                        help=f"Password length. Must be at least {MIN_LENGTH}.")
    parser.add_argument("--min-upper", type=_count, default=None,
                        help="Minimum number of uppercase characters (A to Z).")
    parser.add_argument("--min-lower", type=_count, default=None,
                        help="Minimum number of lowercase characters (a to z).")
    parser.add_argument("--min-digit", type=_count, default=None,
                        help="Minimum number of digit characters (0 to 9).")
    parser.add_argument("--min-special", type=_count, default=None,
                        help="Minimum number of special characters: "
                             + SPECIAL_CHARS.replace("%", "%%"))
    parser.add_argument("-e", "--exclude", type=str, default=None,
                        help="Characters to exclude from every character set.")
    parser.add_argument("-s", "--strong", action="store_true",
                        help="Require at least 1 upper, lower, digit and special "
                             "character. Overrides the --min-* options.")
    parser.add_argument("-n", "--copies", type=_positive, default=1,
                        help="How many passwords to generate")
    parser.add_argument("--save-defaults", action="store_true",
                        help="Save these options as defaults for later runs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG")

    out = Console(soft_wrap=True)
    err = Console(stderr=True, soft_wrap=True)

    overrides = {
        "length": args.length,
        "min_upper": args.min_upper,
        "min_lower": args.min_lower,
        "min_digit": args.min_digit,
        "min_special": args.min_special,
        "exclude": args.exclude,
    }
    try:
        cfg = resolve_configuration(load_config(), overrides, strong=args.strong)
        logger.debug(
            "length=%d minimums=%d/%d/%d/%d excluded=%d chars",
            cfg.length, cfg.min_upper, cfg.min_lower, cfg.min_digit,
            cfg.min_special, len(cfg.excluded),
        )
        passwords = PasswordGenerator(cfg).generate_many(args.copies)
    except GenerationError as e:
        err.print(f"[red]{escape(e.message)}[/red]")
        return 1
    except (TypeError, ValueError) as e:
        # bad values in the saved defaults file
        err.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        return 1

    for pw in passwords:
        out.print(pw, markup=False, highlight=False, emoji=False)

    if args.save_defaults:
        try:
            path = save_config({
                "length": cfg.length,
                "min_upper": cfg.min_upper,
                "min_lower": cfg.min_lower,
                "min_digit": cfg.min_digit,
                "min_special": cfg.min_special,
                "exclude": "".join(sorted(cfg.excluded)),
            })
        except OSError as e:
            err.print(f"[red]Failed to save defaults: {escape(str(e))}[/red]")
            return 1
        err.print(f"[green]Saved defaults to:[/green] {escape(path)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
