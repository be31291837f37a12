from __future__ import annotations

"""
expander – Entry points tying configuration, startup files and expansion together.

    >>> args = ['-A', 'A', '@cfg', 'par1']
    >>> expand_argv(args, current=True)     # doctest: +SKIP
    ['-A', 'A', '-ccc', 'ccc ccc ccc', 'par1']

`expand_argv` always works on the list it is given. `argv_file` is the thin
convenience wrapper that targets the process argument list.
"""

import logging
import sys
from typing import Any, List, Optional

from argvfile.config import ExpansionConfig, pairs_to_options
from argvfile.core.interfaces.fs import HostEnvironmentProtocol
from argvfile.engine import ExpansionEngine
from argvfile.logging.helpers import get_logger
from argvfile.parsing.reader import OptionFileReader
from argvfile.startup import StartupPathResolver
from argvfile.utils.paths import SystemHostEnvironment


class ArgvFileExpander:
    """Run one expansion described by an `ExpansionConfig`."""

    def __init__(
        self,
        config: ExpansionConfig,
        *,
        host: Optional[HostEnvironmentProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._host = host or SystemHostEnvironment(
            program=config.program,
            environ=config.environ,
            case_sensitive=config.case_sensitive,
        )
        self._log = logger or get_logger("expander")

    def expand(self) -> List[str]:
        """Expand the configured list in place and return it."""
        cfg = self._cfg
        filename = cfg.startup_filename.resolve(self._host.program_path())

        tokens: List[str] = list(cfg.array)
        if cfg.tiers:
            resolver = StartupPathResolver(self._host, logger=get_logger("startup"))
            tokens = resolver.inject(tokens, resolver.candidates(cfg, filename), cfg.prefix)

        engine = ExpansionEngine(
            prefix=cfg.prefix,
            host=self._host,
            reader=OptionFileReader(encoding=cfg.encoding, logger=get_logger("reader")),
            strict=cfg.strict,
            logger=get_logger("engine"),
        )
        expanded = engine.run(tokens)

        cfg.array[:] = expanded
        self._log.debug("expanded %d token(s) into %d", len(tokens), len(expanded))
        return cfg.array


def expand_argv(array: List[str], **options: Any) -> List[str]:
    """Expand option-file hints in *array* in place and return it.

    Keyword options: ``prefix``, ``startup_filename``, ``default``, ``home``,
    ``current``, ``program``, ``strict``, ``encoding``, ``case_sensitive``
    and ``environ`` (see `ExpansionConfig.build`).

    Raises:
        InvalidConfigError: The options are malformed; nothing was read.
        OptionFileReadError: ``strict`` is set and an option file is unreadable.
    """
    return ArgvFileExpander(ExpansionConfig.build(array, **options)).expand()


def argv_file(*pairs: Any, **options: Any) -> List[str]:
    """Expand hints in ``sys.argv[1:]`` unless an ``array`` option is given.

    Options may be passed as keywords or as flat name/value pairs, e.g.
    ``argv_file('home', True, 'startupFilename', '.toolrc')``.
    """
    merged = pairs_to_options(pairs)
    merged.update(options)
    if "array" in merged:
        return expand_argv(merged.pop("array"), **merged)

    args = sys.argv[1:]
    expand_argv(args, **merged)
    sys.argv[1:] = args
    return args
