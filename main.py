#!/usr/bin/env python3
"""
Command-line entry point for zstats.
"""

# Subcommands:
# 1) ztable   - tabulate Phi(z) over a range and export CSV/JSON/HTML (+ figure).
# 2) interval - normal-theory confidence intervals at one or more levels.
# 3) zscore   - standardize a value and report its two-tailed p-value.
# 4) cdf      - evaluate the normal, t or chi-square CDF.
# 5) critical - two-sided critical z value for a significance level.

import argparse
import logging
import sys
import time

from zstats.errors import InvalidArgument
from zstats.output import EXPORT_FORMATS, save_z_table
from zstats.plotting import plot_z_table
from zstats.reporting import confidence_interval_table, format_interval
from zstats.stats import (
    chi_square_cdf,
    confidence_interval,
    critical_z_value,
    normal_cdf,
    p_value_from_z_score,
    t_distribution_cdf,
    z_score,
)
from zstats.ztable import DEFAULT_CONFIG, generate_z_table

LOG_FILE = "zstats.log"


def _configure_logging(log_file=LOG_FILE):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _run_ztable(args):
    start_time = time.time()
    table = generate_z_table(args.min, args.max, args.step)
    logging.info(
        "Generated z-table with %d entries over [%.2f, %.2f]",
        len(table),
        table[0].z,
        table[-1].z,
    )

    paths = save_z_table(table, args.outdir, args.formats)
    if args.plot:
        paths.append(plot_z_table(table, args.outdir))

    logging.info("Z-table export completed in %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    for path in paths:
        logging.info("  - %s", path)
    return 0


def _run_interval(args):
    levels = args.level or [0.95]
    if len(levels) == 1:
        ci = confidence_interval(args.mean, args.std, args.n, levels[0])
        print(f"{levels[0]:.0%} confidence interval: {format_interval(ci)}")
    else:
        print(confidence_interval_table(args.mean, args.std, args.n, levels).to_string(index=False))
    return 0


def _run_zscore(args):
    z = z_score(args.x, args.mean, args.std)
    print(f"z = {z:.6f}")
    print(f"two-tailed p-value = {p_value_from_z_score(z):.6f}")
    return 0


def _run_cdf(args):
    if args.distribution == "normal":
        value = normal_cdf(args.value)
    else:
        if args.df is None:
            raise InvalidArgument(f"--df is required for the {args.distribution} distribution.")
        if args.distribution == "t":
            value = t_distribution_cdf(args.value, args.df)
        else:
            value = chi_square_cdf(args.value, args.df, method=args.method)
    print(f"{value:.10f}")
    return 0


def _run_critical(args):
    print(f"{critical_z_value(args.alpha):.6f}")
    return 0


def _build_arg_parser():
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Normal, t and chi-square statistics and z-table export."
    )
    parser.add_argument(
        "--log-file",
        default=LOG_FILE,
        help=f"Log file path; empty string disables file logging (default: {LOG_FILE}).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("ztable", help="Generate and export the standard normal table.")
    p.add_argument("--min", type=float, default=DEFAULT_CONFIG.z_min)
    p.add_argument("--max", type=float, default=DEFAULT_CONFIG.z_max)
    p.add_argument("--step", type=float, default=DEFAULT_CONFIG.step)
    p.add_argument("--outdir", default="output", help="Output directory (default: output).")
    p.add_argument(
        "--formats",
        nargs="+",
        choices=EXPORT_FORMATS,
        default=["csv", "json"],
        help="Export formats (default: csv json).",
    )
    p.add_argument("--plot", action="store_true", help="Also save the CDF figure.")
    p.set_defaults(func=_run_ztable)

    p = sub.add_parser("interval", help="Confidence interval for a population mean.")
    p.add_argument("--mean", type=float, required=True)
    p.add_argument("--std", type=float, required=True)
    p.add_argument("--n", type=int, required=True)
    p.add_argument(
        "--level",
        type=float,
        action="append",
        help="Confidence level in (0, 1); repeat for a table (default: 0.95).",
    )
    p.set_defaults(func=_run_interval)

    p = sub.add_parser("zscore", help="Standardize a value.")
    p.add_argument("--x", type=float, required=True)
    p.add_argument("--mean", type=float, required=True)
    p.add_argument("--std", type=float, required=True)
    p.set_defaults(func=_run_zscore)

    p = sub.add_parser("cdf", help="Evaluate a cumulative distribution function.")
    p.add_argument("distribution", choices=["normal", "t", "chi2"])
    p.add_argument("value", type=float)
    p.add_argument("--df", type=int, default=None, help="Degrees of freedom (t, chi2).")
    p.add_argument(
        "--method",
        choices=["series", "gamma"],
        default="series",
        help="Chi-square evaluation method (default: series).",
    )
    p.set_defaults(func=_run_cdf)

    p = sub.add_parser("critical", help="Two-sided critical z value.")
    p.add_argument("--alpha", type=float, required=True)
    p.set_defaults(func=_run_critical)

    return parser


def main(argv=None):
    """CLI entrypoint; returns 0 on success and 2 on invalid input."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file)

    try:
        return args.func(args)
    except InvalidArgument as exc:
        logging.error("Invalid input: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
