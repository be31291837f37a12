from __future__ import annotations

"""Project-wide constants used across modules."""

import re

DEFAULT_PREFIX: str = '@'

# Characters that start plain comments, POD blocks or typical options.
RESERVED_PREFIXES = frozenset({'#', '=', '-', '+'})

DEFAULT_ENCODING: str = 'utf-8'

HOME_ENV_VAR: str = 'HOME'

POD_OPEN_RE = re.compile(r'^=\w')
POD_CLOSE_RE = re.compile(r'^=cut\b')
BLANK_RE = re.compile(r'^\s*$')
COMMENT_RE = re.compile(r'^\s*#')
