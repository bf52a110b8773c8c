#!/usr/bin/env python3
"""
Command-line front end for unit resolution and conversion.
"""

# Commands:
# 1) convert: resolve two free-text symbols (inferring the category when not
#    given) and convert a value between them.
# 2) table: print or export the alias/symbol/factor table of one category.
# 3) arc: arc-second <-> metre conversion at a latitude.
# 4) clamp: bound a temperature to [absolute zero, Planck temperature].
# 5) plot: write factor-ladder and temperature-scale figures.

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from unitwise import ALL_CATEGORIES, Distance, Temperature, find_categories, get_category
from unitwise.engine import LinearCategory
from unitwise.errors import UnresolvedSymbolError
from unitwise.reporting import format_quantity, format_value, unit_table

DEFAULT_SIG_FIGS = 10
DEFAULT_OUTPUT_DIR = "output"

EXIT_OK = 0
EXIT_USAGE = 2


def _configure_logging(log_file=None, verbose=False):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def _pick_category(from_symbol, to_symbol, category_name=None):
    """Return the category resolving both symbols.

    With no explicit category, the first category (in declaration order)
    that knows both symbols wins.
    """
    if category_name:
        return get_category(category_name)
    for symbol in (from_symbol, to_symbol):
        if not find_categories(symbol):
            raise UnresolvedSymbolError(symbol)
    shared = [c for c in find_categories(from_symbol) if c.try_guess_unit(to_symbol) is not None]
    if not shared:
        raise ValueError(f"No category resolves both {from_symbol!r} and {to_symbol!r}.")
    if len(shared) > 1:
        logging.info(
            "Symbols %r/%r fit %s; using %s",
            from_symbol,
            to_symbol,
            ", ".join(c.name for c in shared),
            shared[0].name,
        )
    return shared[0]


def cmd_convert(args):
    category = _pick_category(args.from_symbol, args.to_symbol, args.category)
    from_unit = category.resolve_unit(args.from_symbol)
    to_unit = category.resolve_unit(args.to_symbol)
    logging.info(
        "Converting %s %s -> %s (%s)",
        args.value,
        from_unit.name,
        to_unit.name,
        category.name,
    )
    result = category.convert(args.value, from_unit, to_unit)
    print(format_quantity(result, to_unit, category, sig_figs=args.sig_figs))
    return EXIT_OK


def cmd_table(args):
    table = unit_table(args.category)
    logging.info("Unit table for %s: %d units", args.category, len(table))
    if args.csv:
        table.to_csv(args.csv, index=False)
        logging.info("Saved unit table to %s", args.csv)
    else:
        print(table.to_string(index=False))
    return EXIT_OK


def cmd_arc(args):
    if args.direction == "to-metres":
        result = Distance.arc_seconds_to_metres(args.value, args.latitude)
        suffix = Distance.symbol(Distance.Unit.METRE)
    else:
        result = Distance.metres_to_arc_seconds(args.value, args.latitude)
        suffix = "arcsec"
    logging.info("Geospatial %s at latitude %s°", args.direction, args.latitude)
    print(f"{format_value(result, args.sig_figs)} {suffix}")
    return EXIT_OK


def cmd_clamp(args):
    unit = Temperature.resolve_unit(args.unit)
    result = Temperature.clamp_temperature(args.value, unit)
    print(format_quantity(result, unit, Temperature, sig_figs=args.sig_figs))
    return EXIT_OK


def cmd_plot(args):
    from unitwise.plotting import plot_factor_ladder, plot_temperature_scales

    categories = [get_category(args.category)] if args.category else ALL_CATEGORIES
    paths = [
        plot_factor_ladder(c, args.outdir) for c in categories if isinstance(c, LinearCategory)
    ]
    paths.append(plot_temperature_scales(args.outdir))
    logging.info("Generated %d figures", len(paths))
    for path in paths:
        logging.info("  - %s", path)
    return EXIT_OK


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Resolve unit symbols and convert quantities between units."
    )
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert", help="Convert a value between two unit symbols.")
    p.add_argument("value", help="Numeric value (decimal text keeps full precision).")
    p.add_argument("from_symbol", help="Source unit symbol, e.g. 'km'.")
    p.add_argument("to_symbol", help="Destination unit symbol, e.g. 'mi'.")
    p.add_argument("--category", default=None, help="Category name; inferred when omitted.")
    p.add_argument("--sig-figs", type=int, default=DEFAULT_SIG_FIGS)
    p.set_defaults(func=cmd_convert)

    p = sub.add_parser("table", help="Show the unit table of one category.")
    p.add_argument("category")
    p.add_argument("--csv", default=None, help="Write the table to this CSV path.")
    p.set_defaults(func=cmd_table)

    p = sub.add_parser("arc", help="Arc-second <-> metre conversion.")
    p.add_argument("direction", choices=["to-metres", "to-arc-seconds"])
    p.add_argument("value")
    p.add_argument("--latitude", default="0.0", help="Latitude in degrees (default: 0).")
    p.add_argument("--sig-figs", type=int, default=DEFAULT_SIG_FIGS)
    p.set_defaults(func=cmd_arc)

    p = sub.add_parser("clamp", help="Clamp a temperature to the physical range.")
    p.add_argument("value")
    p.add_argument("unit", help="Temperature symbol, e.g. 'K' or '°C'.")
    p.add_argument("--sig-figs", type=int, default=DEFAULT_SIG_FIGS)
    p.set_defaults(func=cmd_clamp)

    p = sub.add_parser("plot", help="Write diagnostic figures.")
    p.add_argument("--category", default=None, help="Only this category.")
    p.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    p.set_defaults(func=cmd_plot)
    return parser


def main(argv=None):
    """Parse arguments, run one command and return the exit code."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.log_file, args.verbose)
    try:
        return args.func(args)
    except (KeyError, ValueError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        logging.error("%s", message)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
