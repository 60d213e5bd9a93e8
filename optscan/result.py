# Yuio project, MIT license.
#
# https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Scan results are accumulated in a :class:`ScanResult`. The scanner fills it
once; after that it should be treated as read-only.

.. autoclass:: ScanResult
    :members:

"""

from __future__ import annotations

from dataclasses import dataclass, field

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import optscan.scan

__all__ = [
    "ScanResult",
]


@dataclass
class ScanResult:
    """
    Values bound during a single scan.

    Boolean options are either present or absent: a key is added to
    :attr:`bools` when its switch is seen, and is never stored as :data:`False`.

    """

    bools: dict[str, bool] = field(default_factory=dict)
    """
    Boolean switches that were seen on the command line, by option key.

    """

    strings: dict[str, str] = field(default_factory=dict)
    """
    Values of value-bearing options, by option key.

    """

    args: list[str] = field(default_factory=list)
    """
    Positional arguments, in the order they were encountered.

    """

    error: optscan.scan.ScanError | None = None
    """
    The first error that halted the scan, if any.

    """

    scanned: bool = False
    """
    Set once a scan has filled this result.

    """

    @property
    def has_error(self) -> bool:
        """
        Whether the scan has failed.

        """

        return self.error is not None

    def get_bool(self, key: str, /) -> bool:
        """
        Check whether a boolean option was given.

        Returns :data:`False` for unknown keys and for options that
        weren't seen.

        """

        return key in self.bools

    def get_string(self, key: str, /) -> str:
        """
        Get value of a value-bearing option.

        Returns an empty string for unknown keys and for options that
        weren't seen.

        """

        return self.strings.get(key, "")

    def raise_for_error(self):
        """
        Raise the recorded error, if there is one.

        :raises:
            :class:`~optscan.scan.ScanError`.

        """

        if self.error is not None:
            raise self.error

    def discard(self, key: str, /):
        """
        Forget any value bound to the given key.

        """

        self.bools.pop(key, None)
        self.strings.pop(key, None)

    def _set_error(self, error: optscan.scan.ScanError):
        assert self.error is None, "scan error is already recorded"
        self.error = error

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"bools={sorted(self.bools)!r}, "
            f"strings={self.strings!r}, "
            f"args={self.args!r}, "
            f"error={self.error!r})"
        )
