from __future__ import annotations

from argvfile.config import (
    DerivedStartupName,
    ExpansionConfig,
    LiteralStartupName,
    default_startup_name,
)
from argvfile.constants import DEFAULT_PREFIX, RESERVED_PREFIXES
from argvfile.core.models import CascadedHint, StartupTier
from argvfile.engine import ExpansionEngine
from argvfile.errors import ArgvFileError, InvalidConfigError, OptionFileReadError
from argvfile.expander import ArgvFileExpander, argv_file, expand_argv
from argvfile.parsing.reader import OptionFileReader
from argvfile.startup import StartupPathResolver
from argvfile.utils.paths import SystemHostEnvironment

__version__ = '1.0.0'


__all__ = [
    'ArgvFileError',
    'ArgvFileExpander',
    'CascadedHint',
    'DEFAULT_PREFIX',
    'DerivedStartupName',
    'ExpansionConfig',
    'ExpansionEngine',
    'InvalidConfigError',
    'LiteralStartupName',
    'OptionFileReadError',
    'OptionFileReader',
    'RESERVED_PREFIXES',
    'StartupPathResolver',
    'StartupTier',
    'SystemHostEnvironment',
    'argv_file',
    'default_startup_name',
    'expand_argv',
]
