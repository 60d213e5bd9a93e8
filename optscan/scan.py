# Yuio project, MIT license.
#
# https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
This module scans an argument list against a :class:`~optscan.registry.Registry`.

The first token is the program name, and it is skipped. Every other token
is classified by its shape, and then resolved against the registry:

=============== ==============================================================
``-x``          boolean short switch, or a short option that takes
                the next token as its value.
``--xx``        boolean long switch, or a long option that takes
                the next token as its value.
``-x=v``        short option with an inline value.
``--xx=v``      long option with an inline value.
``-xyz``        combined boolean short switches, if all of ``x``, ``y``
                and ``z`` are known short forms.
``-xVAL``       short option with a value attached, otherwise.
anything else   positional argument. This includes ``-`` and ``--``.
=============== ==============================================================

A value is only taken from the next token if that token doesn't look
like an option itself:

.. code-block:: python

    registry = optscan.registry.Registry()
    registry.register("file", "file", "f")

    result = optscan.scan.scan(registry, ["prog", "-f", "-", "--file", "--x"])
    assert result.get_string("file") == "-"
    assert isinstance(result.error, optscan.scan.MissingValue)

Scanning stops at the first error. The error is recorded
in :attr:`ScanResult.error <optscan.result.ScanResult.error>`,
and everything bound before the failing token stays in the result.

.. autofunction:: scan

.. autoclass:: Scanner
    :members:


Token classification
--------------------

.. autofunction:: classify

.. autoclass:: InlineValue
    :members:

.. autoclass:: LongFlag
    :members:

.. autoclass:: ShortFlag
    :members:

.. autoclass:: Positional
    :members:


Scan errors
-----------

.. autoclass:: ScanError

.. autoclass:: UnknownOption

.. autoclass:: BooleanWithValue

.. autoclass:: MissingValue

.. autoclass:: CombinedNonBoolean

.. autoclass:: MissingRequired

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import optscan
import optscan.registry
import optscan.result

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import typing_extensions as _t
else:
    from optscan import _typing as _t

__all__ = [
    "BooleanWithValue",
    "CombinedNonBoolean",
    "InlineValue",
    "LongFlag",
    "MissingRequired",
    "MissingValue",
    "Positional",
    "ScanError",
    "Scanner",
    "ShortFlag",
    "Token",
    "UnknownOption",
    "classify",
    "scan",
]

_logger = logging.getLogger(__name__)


class ScanError(ValueError):
    """
    Base class for errors that halt a scan.

    :param arg:
        the offending token or option form. Available
        as :attr:`~ScanError.arg`.
    :param message:
        overrides the default error message.

    """

    _prefix = ""

    def __init__(self, arg: str, /, message: str | None = None):
        super().__init__(message or self._prefix + arg)
        self.arg = arg


class UnknownOption(ScanError):
    """
    Raised when a token refers to an option that is not registered.

    """

    _prefix = "No such option: "


class BooleanWithValue(ScanError):
    """
    Raised when a boolean option is given a value.

    """

    _prefix = "Boolean options can't be passed values: "


class MissingValue(ScanError):
    """
    Raised when an option that takes a value doesn't get one.

    """

    _prefix = "Missing value for option: "


class CombinedNonBoolean(ScanError):
    """
    Raised when a group of combined short switches contains
    an option that takes a value.

    :param arg:
        the whole group, i.e. ``-abc``.
    :param key:
        short form of the offending option. Available
        as :attr:`~CombinedNonBoolean.key`.

    """

    _prefix = "Combined options can't be non-boolean: "

    def __init__(self, arg: str, key: str, /):
        super().__init__(arg, f"{self._prefix}-{key} in {arg}")
        self.key = key


class MissingRequired(ScanError):
    """
    Raised after a scan if some required options were not given.

    :param missing:
        descriptions of missing options. Available
        as :attr:`~MissingRequired.missing`.

    """

    _prefix = "Required option(s) not provided: "

    def __init__(self, missing: list[str], /):
        super().__init__(", ".join(missing))
        self.missing = missing


@dataclass(frozen=True)
class InlineValue:
    """
    An option with a value after an equals sign: ``-x=v`` or ``--xx=v``.

    """

    token: str
    """
    Original token.

    """

    name: str
    """
    Option form without dashes, everything before the first ``=``.

    """

    value: str
    """
    Everything after the first ``=``, may be empty.

    """

    is_long: bool
    """
    Whether the token started with ``--``.

    """

    @property
    def flag(self) -> str:
        """
        Option form with its dashes.

        """

        return ("--" if self.is_long else "-") + self.name


@dataclass(frozen=True)
class LongFlag:
    """
    A long option without a value: ``--xx``.

    """

    token: str
    """
    Original token.

    """

    name: str
    """
    Option form without dashes.

    """


@dataclass(frozen=True)
class ShortFlag:
    """
    A short option, a group of combined short switches,
    or a short option with an attached value: ``-x``, ``-xyz``, ``-xVAL``.

    """

    token: str
    """
    Original token.

    """

    chars: str
    """
    Everything after the dash.

    """


@dataclass(frozen=True)
class Positional:
    """
    A token that doesn't look like an option.

    """

    token: str
    """
    Original token.

    """


Token: _t.TypeAlias = _t.Union[InlineValue, LongFlag, ShortFlag, Positional]
"""
Result of token classification.

"""


def classify(token: str, /) -> Token:
    """
    Classify a token by its shape, without looking at the registry.

    :example:
        ::

            >>> classify("--foo=bar")
            InlineValue(token='--foo=bar', name='foo', value='bar', is_long=True)
            >>> classify("-abc")
            ShortFlag(token='-abc', chars='abc')
            >>> classify("--")
            Positional(token='--')

    """

    if token in ("-", "--") or not token.startswith("-"):
        return Positional(token)

    is_long = token.startswith("--")
    body = optscan.registry.strip_dashes(token)

    if "=" in token[2:]:
        name, _, value = body.partition("=")
        return InlineValue(token, name, value, is_long)
    elif is_long:
        return LongFlag(token, body)
    else:
        return ShortFlag(token, body)


def _lookahead(tokens: _t.Sequence[str], pos: int, /) -> str | None:
    if pos + 1 >= len(tokens):
        return None
    value = tokens[pos + 1]
    if not value or not isinstance(classify(value), Positional):
        return None
    return value


class Scanner:
    """
    Scans argument lists against a registry.

    :param registry:
        registry with options. Scan results are stored
        in :attr:`Registry.result <optscan.registry.Registry.result>`.

    """

    def __init__(self, registry: optscan.registry.Registry, /):
        self.__registry = registry
        self.__result = registry.result
        self.__found: set[str] = set()

    def scan(
        self, tokens: _t.Sequence[str] | None = None, /
    ) -> optscan.result.ScanResult:
        """
        Scan the given tokens and bind option values.

        A registry can only be scanned once; call
        :meth:`Registry.clear_all() <optscan.registry.Registry.clear_all>`
        before scanning it again.

        :param tokens:
            command line arguments, starting with the program name.
            If :data:`None`, use :data:`sys.argv` instead.
        :returns:
            scan result. Check :attr:`~optscan.result.ScanResult.has_error`
            before using any values.
        :raises:
            :class:`RuntimeError` if the registry was already scanned.

        """

        if tokens is None:
            tokens = sys.argv
            if not tokens:
                optscan._logger.warning("sys.argv is empty")
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(f"expected a list of strings, got {token!r}")

        self.__result = self.__registry.result
        if self.__result.scanned:
            raise RuntimeError(
                "registry was already scanned, call clear_all() before scanning again"
            )
        self.__result.scanned = True
        self.__found = set()

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("scanning %s", " ".join(map(repr, tokens[1:])))

        try:
            pos = 1
            while pos < len(tokens):
                pos += self._step(tokens, pos)
            self._check_required()
        except ScanError as e:
            _logger.debug("scan halted: %s", e)
            self.__result._set_error(e)

        return self.__result

    def _step(self, tokens: list[str], pos: int) -> int:
        # Returns number of consumed tokens.
        token = classify(tokens[pos])

        if isinstance(token, InlineValue):
            self._handle_inline_value(token)
            return 1
        elif isinstance(token, LongFlag):
            option = self.__registry.by_long(token.name)
            return self._handle_flag(option, token.token, tokens, pos)
        elif isinstance(token, ShortFlag) and len(token.chars) == 1:
            option = self.__registry.by_short(token.chars)
            return self._handle_flag(option, token.token, tokens, pos)
        elif isinstance(token, ShortFlag):
            self._handle_short_group(token)
            return 1
        else:
            self.__result.args.append(token.token)
            return 1

    def _handle_inline_value(self, token: InlineValue):
        if token.is_long:
            option = self.__registry.by_long(token.name)
        else:
            option = self.__registry.by_short(token.name)

        if option is None:
            raise UnknownOption(token.flag)
        if option.is_bool:
            raise BooleanWithValue(token.token)
        if not token.value:
            raise MissingValue(token.token)

        self._bind_string(option, token.value)

    def _handle_flag(
        self,
        option: optscan.registry.Option | None,
        flag: str,
        tokens: list[str],
        pos: int,
    ) -> int:
        if option is None:
            raise UnknownOption(flag)

        if option.is_bool:
            self._bind_bool(option)
            return 1

        value = _lookahead(tokens, pos)
        if value is None:
            raise MissingValue(flag)
        self._bind_string(option, value)
        return 2

    def _handle_short_group(self, token: ShortFlag):
        options = [self.__registry.by_short(ch) for ch in token.chars]

        if all(option is not None for option in options):
            # Combined switches, i.e. `-abc` -> `-a -b -c`.
            for ch, option in zip(token.chars, options):
                assert option is not None
                if not option.is_bool:
                    raise CombinedNonBoolean(token.token, ch)
            for option in options:
                assert option is not None
                self._bind_bool(option)
        else:
            # Attached value, i.e. `-fVAL` -> `-f VAL`.
            option = options[0]
            if option is None:
                raise UnknownOption("-" + token.chars[0])
            if option.is_bool:
                raise BooleanWithValue(token.token)
            self._bind_string(option, token.chars[1:])

    def _bind_bool(self, option: optscan.registry.Option):
        self.__result.bools[option.key] = True

    def _bind_string(self, option: optscan.registry.Option, value: str):
        self.__result.strings[option.key] = value
        if option.required:
            self.__found.add(option.key)

    def _check_required(self):
        missing = []
        for key in self.__registry.required_keys:
            if key not in self.__found:
                option = self.__registry.get(key)
                assert option is not None
                missing.append(option.describe())
        if missing:
            raise MissingRequired(missing)


def scan(
    registry: optscan.registry.Registry, tokens: _t.Sequence[str] | None = None, /
) -> optscan.result.ScanResult:
    """
    Scan tokens against the registry.

    Shortcut for ``Scanner(registry).scan(tokens)``.

    """

    return Scanner(registry).scan(tokens)
