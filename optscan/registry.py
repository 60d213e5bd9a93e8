# Yuio project, MIT license.
#
# https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
This module keeps track of registered options.

Each option has a caller-chosen key, and can be reached from the command line
by a short form (``-x``), a long form (``--xxx``), or both. Boolean options
are switches that are either present or absent; other options take a value.

.. code-block:: python

    registry = optscan.registry.Registry()
    registry.register("all", "all", "a", is_bool=True, usage="show everything")
    registry.register("name", "name", "n", required=True, usage="who to greet")

    assert registry.by_short("a").key == "all"
    assert registry.by_long("name").required
    assert "name" in registry

Registration fails fast: a call that raises a :class:`RegistrationError`
leaves the registry exactly as it was.

.. autoclass:: Option
    :members:

.. autoclass:: Registry
    :members:

.. autofunction:: strip_dashes


Registration errors
-------------------

.. autoclass:: RegistrationError

.. autoclass:: BooleanRequiredConflict

.. autoclass:: NoKeyProvided

.. autoclass:: ShortFormTooLong

.. autoclass:: LongFormTooShort

.. autoclass:: DuplicateKey

.. autoclass:: DuplicateShortForm

.. autoclass:: DuplicateLongForm

"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import optscan
import optscan.result

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import typing_extensions as _t

    import optscan.scan
else:
    from optscan import _typing as _t

__all__ = [
    "BooleanRequiredConflict",
    "DuplicateKey",
    "DuplicateLongForm",
    "DuplicateShortForm",
    "LongFormTooShort",
    "NoKeyProvided",
    "Option",
    "RegistrationError",
    "Registry",
    "ShortFormTooLong",
    "strip_dashes",
]

_logger = logging.getLogger(__name__)


class RegistrationError(ValueError):
    """
    Base class for errors raised when an option can't be registered.

    :param arg:
        option key or form that caused the error. Available
        as :attr:`~RegistrationError.arg`.

    """

    _prefix = ""

    def __init__(self, arg: str, /):
        super().__init__(self._prefix + arg)
        self.arg = arg


class BooleanRequiredConflict(RegistrationError):
    """
    Raised when an option is both boolean and required.

    """

    _prefix = "An option can't be both boolean and required: "


class NoKeyProvided(RegistrationError):
    """
    Raised when an option has neither a short nor a long form.

    """

    _prefix = "An option must contain either a long or short key (or both): "


class ShortFormTooLong(RegistrationError):
    """
    Raised when a short form is longer than one character.

    """

    _prefix = "A short option can be no longer than one character: "


class LongFormTooShort(RegistrationError):
    """
    Raised when a long form is shorter than two characters.

    """

    _prefix = "A long option must be longer than one character: "


class DuplicateKey(RegistrationError):
    """
    Raised when an option with the same key is already registered.

    """

    _prefix = "An option was already registered with key: "


class DuplicateShortForm(RegistrationError):
    """
    Raised when another option already uses the same short form.

    """

    _prefix = "An option was already registered with short key: "


class DuplicateLongForm(RegistrationError):
    """
    Raised when another option already uses the same long form.

    """

    _prefix = "An option was already registered with long key: "


def strip_dashes(text: str, /) -> str:
    """
    Remove leading ``--`` or ``-`` from an option form.

    Dashes are only removed if something follows them.

    :example:
        ::

            >>> strip_dashes("--long")
            'long'
            >>> strip_dashes("-s")
            's'
            >>> strip_dashes("-")
            '-'
            >>> strip_dashes("--")
            '-'

    """

    if text.startswith("--") and len(text) > 2:
        return text[2:]
    elif text.startswith("-") and len(text) > 1:
        return text[1:]
    else:
        return text


@dataclass(frozen=True)
class Option:
    """
    A single registered option.

    """

    key: str
    """
    Caller-chosen identifier, used to look up option's value.

    """

    long: str
    """
    Long form without leading dashes, or an empty string.

    """

    short: str
    """
    Short form without a leading dash, or an empty string.

    """

    is_bool: bool = False
    """
    Whether this option is a switch that doesn't take a value.

    """

    required: bool = False
    """
    Whether scanning fails if this option is not given.

    """

    usage: str = ""
    """
    Help text for this option.

    """

    @property
    def flags(self) -> list[str]:
        """
        Dash-prefixed forms of this option, short form first.

        """

        flags = []
        if self.short:
            flags.append("-" + self.short)
        if self.long:
            flags.append("--" + self.long)
        return flags

    def describe(self) -> str:
        """
        Name this option the way users would type it.

        :example:
            ::

                >>> Option("test", "test", "t").describe()
                '-t or --test'
                >>> Option("test", "test", "").describe()
                '--test'

        """

        return " or ".join(self.flags)

    def usage_line(self) -> str:
        """
        Format a single line of usage text for this option.

        :example:
            ::

                >>> option = Option("out", "output", "o", required=True, usage="output file")
                >>> option.usage_line()
                '-o --output REQUIRED <value> output file'

        """

        parts = self.flags
        if self.required:
            parts.append("REQUIRED")
        if not self.is_bool:
            parts.append("<value>")
        if self.usage:
            parts.append(self.usage)
        return " ".join(parts)


class Registry:
    """
    A collection of options, indexed by key, by short form and by long form.

    Registry also holds the result of the most recent scan,
    see :meth:`~optscan.scan.Scanner.scan`.

    """

    def __init__(self):
        self.__options: dict[str, Option] = {}
        self.__short: dict[str, Option] = {}
        self.__long: dict[str, Option] = {}
        self.__required: dict[str, None] = {}
        self.__result = optscan.result.ScanResult()

    def register(
        self,
        key: str,
        /,
        long: str | None = None,
        short: str | None = None,
        *,
        is_bool: bool = False,
        required: bool = False,
        usage: str = "",
    ) -> Option:
        """
        Register a new option.

        Long and short forms may be given with or without leading dashes.

        :param key:
            unique identifier of the option.
        :param long:
            long form, at least two characters.
        :param short:
            short form, exactly one character.
        :param is_bool:
            make this option a switch that doesn't take values.
        :param required:
            fail scanning if this option is not given. Boolean options
            can't be required.
        :param usage:
            help text.
        :returns:
            the registered option.
        :raises:
            :class:`RegistrationError`.

        """

        if not isinstance(key, str) or not key:
            raise TypeError(f"option key should be a non-empty string, got {key!r}")

        long = strip_dashes(long or "")
        short = strip_dashes(short or "")

        if is_bool and required:
            raise BooleanRequiredConflict(key)
        if not short and not long:
            raise NoKeyProvided(key)
        if short and len(short) > 1:
            raise ShortFormTooLong(short)
        if long and len(long) < 2:
            raise LongFormTooShort(long)
        if key in self.__options:
            raise DuplicateKey(key)
        if short and short in self.__short:
            raise DuplicateShortForm(short)
        if long and long in self.__long:
            raise DuplicateLongForm(long)

        # `--` is a positional, and `--a=b` always splits at the first `=`.
        unmatchable = []
        if "=" in long:
            unmatchable.append("--" + long)
        if short == "-":
            unmatchable.append("--")
        for flag in unmatchable:
            warnings.warn(
                f"option {key!r} can never be matched by {flag!r}",
                category=optscan.OptscanWarning,
                stacklevel=2,
            )

        option = Option(key, long, short, is_bool, required, usage)

        self.__options[key] = option
        if short:
            self.__short[short] = option
        if long:
            self.__long[long] = option
        if required:
            self.__required[key] = None

        _logger.debug("registered option %s", option)

        return option

    def clear(self, key: str, /):
        """
        Remove an option and discard its value from the last scan result.

        Does nothing if there's no option with the given key.

        """

        option = self.__options.pop(key, None)
        if option is None:
            _logger.debug("no option with key %r, nothing to clear", key)
            return

        if option.short:
            del self.__short[option.short]
        if option.long:
            del self.__long[option.long]
        self.__required.pop(key, None)
        self.__result.discard(key)

        _logger.debug("cleared option %r", key)

    def clear_all(self):
        """
        Remove all options and reset scan state.

        This is the only way to prepare a registry for another scan.

        """

        for key in list(self.__options):
            self.clear(key)
        self.__result = optscan.result.ScanResult()

    def get(self, key: str, /) -> Option | None:
        """
        Find option by its key.

        """

        return self.__options.get(key)

    def by_short(self, short: str, /) -> Option | None:
        """
        Find option by its short form, given without a dash.

        """

        return self.__short.get(short)

    def by_long(self, long: str, /) -> Option | None:
        """
        Find option by its long form, given without dashes.

        """

        return self.__long.get(long)

    @property
    def required_keys(self) -> list[str]:
        """
        Keys of all required options, in registration order.

        """

        return list(self.__required)

    @property
    def result(self) -> optscan.result.ScanResult:
        """
        Result of the last scan.

        Before the first scan, and after :meth:`clear_all`, this is an empty result.

        """

        return self.__result

    def usage(self) -> str:
        """
        Format usage text, one line per option.

        Each line lists option's forms, a ``REQUIRED`` marker for required options,
        a ``<value>`` placeholder for non-boolean options, and option's help.

        """

        return "".join(option.usage_line() + "\n" for option in self)

    def get_bool(self, key: str, /) -> bool:
        """
        Shortcut for :meth:`ScanResult.get_bool() <optscan.result.ScanResult.get_bool>`.

        """

        return self.__result.get_bool(key)

    def get_string(self, key: str, /) -> str:
        """
        Shortcut for :meth:`ScanResult.get_string() <optscan.result.ScanResult.get_string>`.

        """

        return self.__result.get_string(key)

    @property
    def args(self) -> list[str]:
        """
        Positional arguments from the last scan.

        """

        return self.__result.args

    @property
    def has_error(self) -> bool:
        """
        Whether the last scan has failed.

        """

        return self.__result.has_error

    @property
    def error(self) -> optscan.scan.ScanError | None:
        """
        Error that halted the last scan.

        """

        return self.__result.error

    def __contains__(self, key: object) -> bool:
        return key in self.__options

    def __iter__(self) -> _t.Iterator[Option]:
        return iter(list(self.__options.values()))

    def __len__(self) -> int:
        return len(self.__options)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.__options)!r})"
