from __future__ import annotations

"""
OptionLineTokenizer – shell-word tokenizer for option-file lines.

Lines are split with POSIX shell rules (`shlex.split`): single quotes,
double quotes and backslash escapes are honored, and a '#' inside a line is
an ordinary character. Whole-line comments are filtered upstream by the
reader, before a line ever reaches this class.
"""

import shlex
from typing import List, Optional, Tuple

from argvfile.parsing.source import OptionFileSource


class OptionLineTokenizer:
    @staticmethod
    def tokenize_line(raw: str) -> List[str]:
        stripped = raw.strip()
        if not stripped:
            return []
        return shlex.split(stripped)

    @staticmethod
    def safe_tokenize_line(raw: str, src: OptionFileSource) -> Tuple[List[str], Optional[str]]:
        """Tokenize *raw*, returning ``([], message)`` instead of raising.

        An unbalanced quote makes the whole line yield no words.
        """
        try:
            return (OptionLineTokenizer.tokenize_line(raw), None)
        except ValueError as exc:
            msg = f"tokenization error at {src.format()}: {exc}"
            return ([], msg)
