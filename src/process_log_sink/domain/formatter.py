"""Formatter variants and the guarded invocation boundary.

Purpose
-------
Represent the optional message formatter as an explicit variant and convert
every failure raised while formatting into a result value, so a broken
formatter can never escape into the dispatcher that feeds the sink.

Contents
--------
* :class:`Direct` / :class:`Indirect` – the two formatter shapes.
* :class:`Formatted` / :class:`FormatError` – outcome of one invocation.
* :func:`coerce_formatter` – option parsing.
* :func:`apply_formatter` – the single invocation path.

System Role
-----------
Used by :class:`~process_log_sink.domain.config.SinkConfig` for validation and
by the handle use case as the last step before delivery.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from datetime import datetime
from types import ModuleType
from typing import Any, Callable, Mapping, Optional, Union

from .errors import ConfigError
from .levels import LogLevel

FormatterCallable = Callable[[LogLevel, Any, datetime, Mapping[str, Any]], Any]


@dataclass(frozen=True)
class Direct:
    """Formatter given as a callable taking ``(level, message, timestamp, metadata)``."""

    function: FormatterCallable


@dataclass(frozen=True)
class Indirect:
    """Formatter given as a module reference plus a function name.

    ``module`` is either a dotted import path or an already imported module
    (or any object carrying the attribute). The attribute is looked up on every
    invocation, so reloading the module picks up the new function.
    """

    module: Union[str, ModuleType, Any]
    function: str

    def resolve(self) -> FormatterCallable:
        target = importlib.import_module(self.module) if isinstance(self.module, str) else self.module
        return getattr(target, self.function)


Formatter = Union[Direct, Indirect]


@dataclass(frozen=True)
class Formatted:
    """Successful formatter outcome carrying the message to deliver."""

    value: Any


@dataclass(frozen=True)
class FormatError:
    """Failed formatter outcome carrying the exception that was raised."""

    cause: BaseException


FormatResult = Union[Formatted, FormatError]


def coerce_formatter(value: Any) -> Optional[Formatter]:
    """Translate a user-facing option value into a :data:`Formatter`.

    Accepted shapes are ``None``, a callable, a ``(module, function_name)``
    pair, or a ``"package.module:function"`` string.

    Examples
    --------
    >>> coerce_formatter(None) is None
    True
    >>> coerce_formatter("json:dumps")
    Indirect(module='json', function='dumps')
    >>> coerce_formatter(("json", "dumps"))
    Indirect(module='json', function='dumps')
    """

    if value is None or isinstance(value, (Direct, Indirect)):
        return value
    if isinstance(value, str):
        module, sep, function = value.partition(":")
        if not sep or not module or not function:
            raise ConfigError(f"formatter string must look like 'module:function', got {value!r}")
        return Indirect(module, function)
    if isinstance(value, tuple):
        if len(value) != 2 or not isinstance(value[1], str) or not value[1]:
            raise ConfigError(f"formatter tuple must be (module, function_name), got {value!r}")
        return Indirect(value[0], value[1])
    if callable(value):
        return Direct(value)
    raise ConfigError(f"formatter must be a callable, a (module, function) pair, or None, got {value!r}")


def apply_formatter(
    formatter: Optional[Formatter],
    level: LogLevel,
    message: Any,
    timestamp: datetime,
    metadata: Mapping[str, Any],
) -> FormatResult:
    """Run ``formatter`` and wrap the outcome; never raises.

    Without a formatter the message passes through untouched.

    Examples
    --------
    >>> from datetime import timezone
    >>> ts = datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> apply_formatter(None, LogLevel.INFO, "hi", ts, {})
    Formatted(value='hi')
    >>> outcome = apply_formatter(Direct(lambda *args: 1 / 0), LogLevel.INFO, "hi", ts, {})
    >>> isinstance(outcome.cause, ZeroDivisionError)
    True
    """

    if formatter is None:
        return Formatted(message)
    try:
        if isinstance(formatter, Indirect):
            function = formatter.resolve()
        else:
            function = formatter.function
        return Formatted(function(level, message, timestamp, metadata))
    except Exception as exc:
        return FormatError(exc)


__all__ = [
    "Direct",
    "FormatError",
    "FormatResult",
    "Formatted",
    "Formatter",
    "FormatterCallable",
    "Indirect",
    "apply_formatter",
    "coerce_formatter",
]
