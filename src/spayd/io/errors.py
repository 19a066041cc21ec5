"""
Custom exceptions for the spayd.io module.

Purpose
- Provide IO-layer error types distinct from spayd.core errors (parse/checksum).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """Base class for IO-related errors in spayd.io."""


class IoWriteError(IoError):
    """
    Raised when a report cannot be written.

    Notes:
        Covers unsupported output suffixes and failures on the
        tmp write → os.replace(tmp, final) path.
    """
