"""Failures raised by the sync pipeline.

Every stage raises a subclass of SyncError; only the driver in
fetch_and_sync turns one into a process exit status.
"""
from typing import Optional, Sequence


class SyncError(Exception):
    """Base class for all terminal pipeline failures."""


class FetchError(SyncError):
    """The feed request failed at the transport or HTTP level."""


class ReadError(SyncError):
    """The feed response body could not be read completely."""


class ParseError(SyncError):
    """The feed payload is not a well-formed Atom document."""


class StoreOpenError(SyncError):
    """The data file exists but could not be opened or read."""


class StoreDecodeError(SyncError):
    """The data file does not hold an ID -> incident JSON object."""


class StoreWriteError(SyncError):
    """The data file could not be created or replaced."""


class StoreEncodeError(SyncError):
    """The incident mapping could not be serialized to JSON."""


class CommandError(SyncError):
    def __init__(
        self,
        args_list: Sequence[str],
        returncode: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.args_list = list(args_list)
        self.returncode = returncode
        detail = reason if reason is not None else f"exit status {returncode}"
        super().__init__(
            f"Error running command '{self.args_list[0]} {self.args_list[1:]}': {detail}"
        )
