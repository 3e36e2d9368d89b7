"""pyrecords - In-memory keyed entity store with a rebuildable group index."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrecords")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrecords.config import RecordsConfig
from pyrecords.exceptions import (
    DuplicateKeyError,
    InsufficientFundsError,
    InvalidScoreFormatError,
    InvalidValueError,
    MissingFieldError,
    NotFoundError,
    RecordsError,
    ScoreFileError,
    SnapshotError,
    StoreError,
)
from pyrecords.index import GroupIndex
from pyrecords.snapshot import SnapshotFile
from pyrecords.store import EntityStore

__all__ = [
    "__version__",
    "DuplicateKeyError",
    "EntityStore",
    "GroupIndex",
    "InsufficientFundsError",
    "InvalidScoreFormatError",
    "InvalidValueError",
    "MissingFieldError",
    "NotFoundError",
    "RecordsConfig",
    "RecordsError",
    "ScoreFileError",
    "SnapshotError",
    "SnapshotFile",
    "StoreError",
]
