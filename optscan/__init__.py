# Yuio project, MIT license.
#
# https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Optscan is a getopt-style command line scanner.

A program registers its options in a :class:`~optscan.registry.Registry`,
then runs a :class:`~optscan.scan.Scanner` over its argument list once.
Bound values, positional arguments and the first error encountered
are available from the resulting :class:`~optscan.result.ScanResult`.

.. code-block:: python

    import optscan.registry
    import optscan.scan

    registry = optscan.registry.Registry()
    registry.register("verbose", "verbose", "v", is_bool=True, usage="talk more")
    registry.register("output", "output", "o", required=True, usage="where to write")

    result = optscan.scan.scan(registry, ["prog", "-v", "--output=out.txt", "in.txt"])
    assert not result.has_error
    assert result.get_bool("verbose")
    assert result.get_string("output") == "out.txt"
    assert result.args == ["in.txt"]

Registries and their results are plain mutable objects with no internal
locking. Register and scan from a single thread, or serialize access
externally.

.. autoclass:: OptscanWarning

.. autofunction:: enable_internal_logging

"""

from __future__ import annotations

import logging as _logging
import os as _os
import sys as _sys
import warnings

try:
    from optscan._version import *  # noqa: F403
except ImportError:
    raise ImportError(
        "optscan._version not found. if you are developing locally, "
        "run `pip install -e .` to generate it"
    )

__all__ = [
    "OptscanWarning",
    "enable_internal_logging",
]


class OptscanWarning(RuntimeWarning):
    """
    Base class for all runtime warnings.

    """


_logger = _logging.getLogger("optscan.internal")
_logger.propagate = False

__stderr_handler = _logging.StreamHandler(_sys.__stderr__)
__stderr_handler.setLevel("CRITICAL")
_logger.addHandler(__stderr_handler)


def enable_internal_logging(
    path: str | None = None, level: str | int | None = None, propagate=None
):  # pragma: no cover
    """
    Enable Optscan's internal logging.

    This function enables :func:`logging.captureWarnings`, enables printing
    of :class:`OptscanWarning` messages, and sets up logging channels
    ``optscan.internal`` and ``py.warnings``.

    :param path:
        if given, adds handlers that output internal log messages to the given file.
    :param level:
        configures logging level for file handler. Default is ``DEBUG``.
    :param propagate:
        if given, enables or disables log message propagation from ``optscan.internal``
        and ``py.warnings`` to the root logger.

    """

    if path:
        if level is None:
            level = _os.environ.get("OPTSCAN_DEBUG", "").strip().upper() or "DEBUG"
        if level in ["1", "Y", "YES", "TRUE"]:
            level = "DEBUG"
        file_handler = _logging.FileHandler(path, delay=True)
        file_handler.setFormatter(
            _logging.Formatter("%(filename)s:%(lineno)d: %(levelname)s: %(message)s")
        )
        file_handler.setLevel(level)
        _logger.addHandler(file_handler)
        _logging.getLogger("optscan").addHandler(file_handler)
        _logging.getLogger("py.warnings").addHandler(file_handler)

    _logging.captureWarnings(True)
    warnings.simplefilter("default", category=OptscanWarning)

    if propagate is not None:
        _logging.getLogger("py.warnings").propagate = propagate
        _logger.propagate = propagate


_debug = "OPTSCAN_DEBUG" in _os.environ or "OPTSCAN_DEBUG_FILE" in _os.environ
if _debug:  # pragma: no cover
    enable_internal_logging(
        path=_os.environ.get("OPTSCAN_DEBUG_FILE") or "optscan.log", propagate=False
    )
else:
    warnings.simplefilter("ignore", category=OptscanWarning, append=True)
