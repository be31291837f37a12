from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from argvfile.constants import BLANK_RE, COMMENT_RE, DEFAULT_ENCODING, POD_CLOSE_RE, POD_OPEN_RE
from argvfile.logging.helpers import get_logger, trace_io
from argvfile.parsing.source import OptionFileSource
from argvfile.parsing.tokenizer import OptionLineTokenizer


class OptionFileReader:
    """Turn the text of an option file into a flat token list.

    File format:
        * blank lines are ignored;
        * lines whose first non-blank character is '#' are ignored;
        * a line starting with '=' and a word character ('=pod', '=head1', ...)
          opens a POD block, a line starting with '=cut' closes it, and
          everything in between, markers included, is ignored;
        * every other line is trimmed and split with shell-word rules.

    Hints found in the file are returned as ordinary tokens; resolving them
    is the expansion engine's job.
    """

    def __init__(
        self,
        *,
        encoding: str = DEFAULT_ENCODING,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._encoding = encoding
        self._log = logger or get_logger("reader")

    def read(self, path: Path) -> List[str]:
        """Read and tokenize an option file.

        Raises:
            OSError: The file cannot be opened or read.
            UnicodeDecodeError: The file is not valid in the configured encoding.
        """
        trace_io(self._log, "reading option file", path=str(path), encoding=self._encoding)
        with path.open("r", encoding=self._encoding) as fp:
            return self.parse_lines(fp, src=OptionFileSource(path=path))

    def parse_lines(self, lines: Iterable[str], src: Optional[OptionFileSource] = None) -> List[str]:
        """Tokenize option-file *lines* (trailing newlines allowed)."""
        base = src or OptionFileSource()
        tokens: List[str] = []
        in_pod = False

        for lno, raw in enumerate(lines, start=1):
            if POD_OPEN_RE.match(raw):
                in_pod = True
            if POD_CLOSE_RE.match(raw):
                in_pod = False
                continue
            if in_pod or BLANK_RE.match(raw) or COMMENT_RE.match(raw):
                continue

            toks, err = OptionLineTokenizer.safe_tokenize_line(raw, base.with_line(lno))
            if err:
                self._log.warning(err)
            tokens.extend(toks)

        if in_pod:
            self._log.debug("unterminated POD block at end of %s", base.format())
        return tokens
