from __future__ import annotations

"""
config – Normalized options for one expansion call.

Options arrive either as keywords (`ExpansionConfig.build(...)`) or as a flat
sequence of name/value pairs (`ExpansionConfig.from_pairs(...)`). Both paths
validate everything up front, so a malformed call fails before any file is
touched.

The startup filename rule is a small tagged variant:

    LiteralStartupName('.toolrc')           → always '.toolrc'
    DerivedStartupName(lambda prog: ...)    → computed once from the program path
"""

import codecs
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from argvfile.constants import DEFAULT_ENCODING, DEFAULT_PREFIX, RESERVED_PREFIXES
from argvfile.core.models import STARTUP_ORDER, StartupTier
from argvfile.errors import InvalidConfigError


def default_startup_name(program: str) -> str:
    """Return '.' + basename(program), the conventional startup filename."""
    return "." + os.path.basename(program)


@dataclass(frozen=True)
class LiteralStartupName:
    name: str

    def resolve(self, program: str) -> str:
        return self.name


@dataclass(frozen=True)
class DerivedStartupName:
    func: Callable[[str], str]

    def resolve(self, program: str) -> str:
        name = self.func(program)
        if isinstance(name, os.PathLike):
            name = os.fspath(name)
        if not isinstance(name, str) or not name:
            raise InvalidConfigError(
                f"startup filename function returned {name!r}, expected a non-empty string"
            )
        return name


StartupName = Union[LiteralStartupName, DerivedStartupName]

# Flat-pair spellings accepted in addition to the keyword names.
_OPTION_ALIASES: Dict[str, str] = {
    "startupFilename": "startup_filename",
    "caseSensitive": "case_sensitive",
}

_OPTION_NAMES = frozenset({
    "array",
    "prefix",
    "startup_filename",
    "default",
    "home",
    "current",
    "program",
    "strict",
    "encoding",
    "case_sensitive",
    "environ",
})


@dataclass(frozen=True)
class ExpansionConfig:
    """Validated options for a single expansion call."""

    array: List[str] = field(compare=False)
    prefix: str = DEFAULT_PREFIX
    startup_filename: StartupName = DerivedStartupName(default_startup_name)
    tiers: FrozenSet[StartupTier] = frozenset()
    program: Optional[str] = None
    strict: bool = False
    encoding: str = DEFAULT_ENCODING
    case_sensitive: Optional[bool] = None
    environ: Optional[Mapping[str, str]] = field(default=None, compare=False)

    @classmethod
    def build(
        cls,
        array: Any,
        *,
        prefix: Any = DEFAULT_PREFIX,
        startup_filename: Any = None,
        default: Any = False,
        home: Any = False,
        current: Any = False,
        program: Any = None,
        strict: Any = False,
        encoding: Any = DEFAULT_ENCODING,
        case_sensitive: Any = None,
        environ: Any = None,
    ) -> "ExpansionConfig":
        """Validate keyword options and return a frozen config."""
        enabled = {
            StartupTier.DEFAULT: default,
            StartupTier.HOME: home,
            StartupTier.CURRENT: current,
        }
        if environ is not None and not isinstance(environ, Mapping):
            raise InvalidConfigError('the "environ" option must be a mapping')
        return cls(
            array=_check_array(array),
            prefix=_check_prefix(prefix),
            startup_filename=_check_startup_filename(startup_filename),
            tiers=frozenset(t for t in STARTUP_ORDER if enabled[t]),
            program=_check_program(program),
            strict=bool(strict),
            encoding=_check_encoding(encoding),
            case_sensitive=None if case_sensitive is None else bool(case_sensitive),
            environ=environ,
        )

    @classmethod
    def from_pairs(cls, *items: Any) -> "ExpansionConfig":
        """Build a config from flat ``name, value, name, value, ...`` items."""
        options = pairs_to_options(items)
        if "array" not in options:
            raise InvalidConfigError('the "array" option is required')
        return cls.build(**options)

    def tier_enabled(self, tier: StartupTier) -> bool:
        return tier in self.tiers


def pairs_to_options(items: Iterable[Any]) -> Dict[str, Any]:
    """Turn flat name/value items into a keyword mapping."""
    flat = list(items)
    if len(flat) % 2:
        raise InvalidConfigError(
            f"options must be given as name/value pairs, got {len(flat)} items"
        )
    options: Dict[str, Any] = {}
    for name, value in zip(flat[::2], flat[1::2]):
        if not isinstance(name, str):
            raise InvalidConfigError(f"option name must be a string, got {name!r}")
        key = _OPTION_ALIASES.get(name, name)
        if key not in _OPTION_NAMES:
            raise InvalidConfigError(f"unknown option {name!r}")
        options[key] = value
    return options


def _check_array(array: Any) -> List[str]:
    if not isinstance(array, list):
        raise InvalidConfigError(
            f'the "array" option must be a list of strings, got {type(array).__name__}'
        )
    for idx, tok in enumerate(array):
        if not isinstance(tok, str):
            raise InvalidConfigError(
                f'the "array" option holds a non-string item at index {idx}: {tok!r}'
            )
    return array


def _check_prefix(prefix: Any) -> str:
    if not isinstance(prefix, str):
        raise InvalidConfigError(f'the "prefix" option must be a string, got {prefix!r}')
    if len(prefix) != 1:
        raise InvalidConfigError(f'the "prefix" option must be a single character, got {prefix!r}')
    if prefix in RESERVED_PREFIXES:
        reserved = ", ".join(sorted(RESERVED_PREFIXES))
        raise InvalidConfigError(f'invalid "prefix" {prefix!r}: {reserved} are reserved')
    return prefix


def _check_startup_filename(value: Any) -> StartupName:
    if value is None:
        return DerivedStartupName(default_startup_name)
    if isinstance(value, (LiteralStartupName, DerivedStartupName)):
        return value
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, str):
        if not value:
            raise InvalidConfigError('the "startup_filename" option must not be empty')
        return LiteralStartupName(value)
    if callable(value):
        return DerivedStartupName(value)
    raise InvalidConfigError(
        f'the "startup_filename" option must be a string or a callable, got {type(value).__name__}'
    )


def _check_program(program: Any) -> Optional[str]:
    if program is None:
        return None
    if isinstance(program, os.PathLike):
        program = os.fspath(program)
    if not isinstance(program, str):
        raise InvalidConfigError(f'the "program" option must be a path, got {program!r}')
    return program


def _check_encoding(encoding: Any) -> str:
    if not isinstance(encoding, str) or not encoding:
        raise InvalidConfigError(f'the "encoding" option must be a codec name, got {encoding!r}')
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise InvalidConfigError(f"unknown encoding {encoding!r}") from exc
    return encoding
