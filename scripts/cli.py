"""CLI entry point for suffixtext (last, first, drop-last, drop-first, normalize, substrings)."""
import argparse
import logging
import sys
from pathlib import Path

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root / "src"))

from suffixtext import (  # noqa: E402
    InvalidArgumentError,
    first_scalar_value,
    last_scalar_value,
    normalize,
    remove_first_scalar_value,
    remove_last_scalar_value,
    scalar_length,
)
from suffixtext.config import load_config  # noqa: E402

logger = logging.getLogger(__name__)


def _format_code_point(cp: int) -> str:
    return f"U+{cp:04X}"


def cmd_last(args):
    print(_format_code_point(last_scalar_value(args.text)))
    return 0


def cmd_first(args):
    print(_format_code_point(first_scalar_value(args.text)))
    return 0


def cmd_drop_last(args):
    print(remove_last_scalar_value(args.text))
    return 0


def cmd_drop_first(args):
    print(remove_first_scalar_value(args.text))
    return 0


def cmd_normalize(args):
    print(normalize(args.text))
    return 0


def cmd_substrings(args):
    # Imported here so the oracle stays off the import path of the other commands.
    from suffixtext.testing import all_substrings
    limit = args.config["max_oracle_length"]
    n = scalar_length(args.text)
    if n > limit:
        print(f"Input has {n} characters; substrings is limited to {limit}.", file=sys.stderr)
        return 2
    subs = all_substrings(args.text)
    if args.sort:
        subs = sorted(subs, key=lambda s: (scalar_length(s), s))
    for s in subs:
        print(s)
    logger.info("%d distinct substrings", len(subs))
    return 0


def main(argv=None):
    p = argparse.ArgumentParser(prog="suffixtext", description="Code-point-safe string boundaries")
    p.add_argument("--config", default=None, help="JSON config file")
    p.add_argument("--normalize", action="store_true", help="Normalize text before the command")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name, func, help_ in (
        ("last", cmd_last, "Print the last code point"),
        ("first", cmd_first, "Print the first code point"),
        ("drop-last", cmd_drop_last, "Remove the last character"),
        ("drop-first", cmd_drop_first, "Remove the first character"),
        ("normalize", cmd_normalize, "Lower-case and keep only a-z, 0-9"),
    ):
        sp = sub.add_parser(name, help=help_)
        sp.add_argument("text")
        sp.set_defaults(func=func)
    ss_p = sub.add_parser("substrings", help="List every distinct substring")
    ss_p.add_argument("text")
    ss_p.add_argument("--sort", action="store_true")
    ss_p.set_defaults(func=cmd_substrings)

    args = p.parse_args(argv)
    # Undecodable argv bytes arrive as lone surrogates; keep them printable.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="backslashreplace")
    try:
        args.config = load_config(args.config)
    except InvalidArgumentError as e:
        print(f"Bad config: {e}", file=sys.stderr)
        return 1
    level = getattr(logging, str(args.config["log_level"]).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")
    if args.normalize or args.config["normalize_input"]:
        args.text = normalize(args.text)
    try:
        return args.func(args) or 0
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
