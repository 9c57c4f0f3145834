"""Configuration models and error types."""

from .config import (
    CatConfig,
    CutConfig,
    Extract,
    GrepConfig,
    HeadConfig,
    TailConfig,
    TakeValue,
    UniqConfig,
    WcConfig,
    parse_positions,
    parse_positive_int,
)
from .errors import (
    ArgumentError,
    SinkError,
    SourceError,
    SourceNotFoundError,
    TextrError,
)

__all__ = [
    "ArgumentError",
    "CatConfig",
    "CutConfig",
    "Extract",
    "GrepConfig",
    "HeadConfig",
    "SinkError",
    "SourceError",
    "SourceNotFoundError",
    "TailConfig",
    "TakeValue",
    "TextrError",
    "UniqConfig",
    "WcConfig",
    "parse_positions",
    "parse_positive_int",
]
