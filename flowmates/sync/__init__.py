"""Init pipeline: source discovery, idempotent copying and repo hygiene."""

from flowmates.sync.models import (
    CopyResult,
    InitOptions,
    SourceInfo,
    SourceNotFoundError,
    SyncError,
    SyncReport,
)
from flowmates.sync.runner import run_init
from flowmates.sync.sources import (
    CursorHomeSource,
    FlowmatesRepoSource,
    SourceProvider,
    discover_source,
)

__all__ = [
    "CopyResult",
    "CursorHomeSource",
    "FlowmatesRepoSource",
    "InitOptions",
    "SourceInfo",
    "SourceNotFoundError",
    "SourceProvider",
    "SyncError",
    "SyncReport",
    "discover_source",
    "run_init",
]
