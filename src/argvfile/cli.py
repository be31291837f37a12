from __future__ import annotations

import json
import logging
import os
import sys
from typing import List, NoReturn, Optional, Sequence, TextIO, Tuple

from argvfile.errors import ArgvFileError
from argvfile.expander import expand_argv
from argvfile.logging.factory import DefaultLoggerFactory
from argvfile.logging.helpers import get_logger
from argvfile.parsing.parser import _build_parser


logger = get_logger('argvfile')


def _configure_logging(enable_json: bool, verbose: bool) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('argvfile')


def _split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split *argv* at the first '--' into (command options, verbatim tokens)."""
    args = list(argv)
    if '--' in args:
        idx = args.index('--')
        return args[:idx], args[idx + 1:]
    return args, []


def _write_tokens(tokens: List[str], *, null: bool, as_json: bool, stream: TextIO) -> None:
    if as_json:
        stream.write(json.dumps(tokens, ensure_ascii=False) + '\n')
    elif null:
        stream.write(''.join(f'{tok}\0' for tok in tokens))
    else:
        stream.write(''.join(f'{tok}\n' for tok in tokens))


class ArgvFileCommand:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stream: Optional[TextIO] = None) -> List[str]:
        """Expand the tokens given in *argv*, print them and return them."""
        own, verbatim = _split_argv(argv)
        ns = _build_parser().parse_args(own)

        json_logs = ns.json_logs or os.getenv('ARGVFILE_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        tokens = list(ns.tokens) + verbatim
        expand_argv(
            tokens,
            prefix=ns.prefix,
            startup_filename=ns.startup_filename,
            default=ns.default,
            home=ns.home,
            current=ns.current,
            program=ns.program,
            strict=ns.strict,
            encoding=ns.encoding,
        )
        _write_tokens(tokens, null=ns.null, as_json=ns.as_json, stream=stream or sys.stdout)
        return tokens


def main() -> NoReturn:
    """Entry point for `argvfile` and `python -m argvfile`."""
    try:
        ArgvFileCommand.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except ArgvFileError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
