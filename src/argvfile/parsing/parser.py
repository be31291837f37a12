# argvfile/parsing/parser.py
from __future__ import annotations

import argparse

from argvfile.constants import DEFAULT_ENCODING, DEFAULT_PREFIX


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser of the `argvfile` command.

    Notes:
        - Options of the command itself come first. Everything after a
          literal "--" is treated as a token to expand, even if it looks
          like an option.
    """
    p = argparse.ArgumentParser(
        prog="argvfile",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] [TOKEN …] [-- TOKEN …]",
        description=(
            "argvfile – expand @file hints in a token list and print the result\n"
            "Each hint is replaced by the shell-split contents of the file it names."
        ),
    )

    g_hint = p.add_argument_group("Hints")
    g_start = p.add_argument_group("Startup files")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_hint.add_argument(
        "-p",
        "--prefix",
        metavar="CHAR",
        default=DEFAULT_PREFIX,
        help="Character marking an option-file hint (default '@'). '#', '=', '-' and '+' are reserved.",
    )
    g_hint.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an existing option file cannot be read instead of skipping it.",
    )
    g_hint.add_argument(
        "--encoding",
        metavar="CODEC",
        default=DEFAULT_ENCODING,
        help="Text encoding of option files (default utf-8).",
    )

    g_start.add_argument(
        "--default",
        action="store_true",
        help="Read the startup file found next to the program (see --program).",
    )
    g_start.add_argument(
        "--home",
        action="store_true",
        help="Read the startup file found in $HOME. Ignored when HOME is not set.",
    )
    g_start.add_argument(
        "--current",
        action="store_true",
        help="Read the startup file found in the current directory.",
    )
    g_start.add_argument(
        "--startup-filename",
        metavar="NAME",
        dest="startup_filename",
        help="Name of the startup files. Defaults to '.' + basename of --program.",
    )
    g_start.add_argument(
        "--program",
        metavar="PATH",
        help=(
            "Program path used to locate the default startup file and to derive the\n"
            "startup filename. Defaults to this command's own path."
        ),
    )

    g_out.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="Separate output tokens with NUL instead of newlines.",
    )
    g_out.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the expanded tokens as a JSON array.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics as JSON lines on stderr (or set ARGVFILE_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every expansion decision on stderr.",
    )
    p.add_argument("tokens", nargs="*", metavar="TOKEN", help=argparse.SUPPRESS)
    return p
