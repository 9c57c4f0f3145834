"""Resolved per-command configuration.

Every command builds exactly one of these models from its options before
any input is opened. The models are frozen: a run never changes its own
configuration halfway through.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, List, Literal, Optional, Tuple

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from .errors import ArgumentError

DEFAULT_LINE_COUNT = 10

NumberingMode = Literal["none", "all", "nonblank"]

_DIGITS_RE = re.compile(r"[0-9]+")
_TAKE_RE = re.compile(r"([+-])?([0-9]+)")


def parse_positive_int(value: Any, kind: str) -> int:
    """Parse a count that must be an integer strictly greater than zero.

    Args:
        value: Raw option value (usually the string typed by the user)
        kind: What is being counted ("line" or "byte"), used in the message

    Returns:
        The parsed count

    Raises:
        ArgumentError: ``illegal <kind> count -- <value>`` with the
            original value preserved
    """
    # int() alone would also take " 7", "1_0" and non-ASCII digits
    text = str(value)
    if not _DIGITS_RE.fullmatch(text) or int(text) <= 0:
        raise ArgumentError(f"illegal {kind} count -- {value}")
    return int(text)


def _default_files(value: Any) -> List[str]:
    files = list(value or [])
    return files or ["-"]


FileList = Annotated[List[str], BeforeValidator(_default_files)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TakeValue(_Frozen):
    """A tail count: either "start at N" (``+N``) or "the last N"."""

    from_start: bool = False
    count: int = Field(default=DEFAULT_LINE_COUNT, ge=0)

    @classmethod
    def parse(cls, value: str, kind: str) -> "TakeValue":
        """Parse ``[+-]digits``; a bare number means "the last N".

        Raises:
            ArgumentError: ``illegal <kind> count -- <value>``
        """
        match = _TAKE_RE.fullmatch(str(value))
        if not match:
            raise ArgumentError(f"illegal {kind} count -- {value}")
        sign, digits = match.groups()
        return cls(from_start=sign == "+", count=int(digits))

    def __str__(self) -> str:
        return f"+{self.count}" if self.from_start else str(self.count)


class CatConfig(_Frozen):
    """Options for ``textr cat``."""

    files: FileList = Field(default_factory=lambda: ["-"])
    number_lines: bool = False
    number_nonblank_lines: bool = False

    @model_validator(mode="after")
    def _exclusive_numbering(self) -> "CatConfig":
        if self.number_lines and self.number_nonblank_lines:
            raise ValueError("--number and --number-nonblank are mutually exclusive")
        return self

    @property
    def numbering(self) -> NumberingMode:
        if self.number_lines:
            return "all"
        if self.number_nonblank_lines:
            return "nonblank"
        return "none"


class UniqConfig(_Frozen):
    """Options for ``textr uniq``: one input, optional output file."""

    in_file: str = "-"
    out_file: Optional[str] = None
    show_count: bool = False


class HeadConfig(_Frozen):
    """Options for ``textr head`` (and the ``head-args`` stub).

    At most one of ``line_count``/``byte_count`` is set; when neither is
    given the line bound defaults to 10.
    """

    files: FileList = Field(default_factory=lambda: ["-"])
    line_count: Optional[int] = Field(default=None, gt=0)
    byte_count: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="before")
    @classmethod
    def _default_bound(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("line_count") is None
            and data.get("byte_count") is None
        ):
            data = {**data, "line_count": DEFAULT_LINE_COUNT}
        return data

    @model_validator(mode="after")
    def _exclusive_bounds(self) -> "HeadConfig":
        if self.line_count is not None and self.byte_count is not None:
            raise ValueError("--lines and --bytes are mutually exclusive")
        return self


class TailConfig(_Frozen):
    """Options for ``textr tail``."""

    files: FileList = Field(default_factory=lambda: ["-"])
    line_count: Optional[TakeValue] = None
    byte_count: Optional[TakeValue] = None
    quiet: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_bound(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("line_count") is None
            and data.get("byte_count") is None
        ):
            data = {**data, "line_count": TakeValue()}
        return data

    @model_validator(mode="after")
    def _exclusive_bounds(self) -> "TailConfig":
        if self.line_count is not None and self.byte_count is not None:
            raise ValueError("--lines and --bytes are mutually exclusive")
        return self


class WcConfig(_Frozen):
    """Options for ``textr wc``; no flags means lines, words and bytes."""

    files: FileList = Field(default_factory=lambda: ["-"])
    show_lines: bool = False
    show_words: bool = False
    show_bytes: bool = False
    show_chars: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_counts(cls, data: Any) -> Any:
        flags = ("show_lines", "show_words", "show_bytes", "show_chars")
        if isinstance(data, dict) and not any(data.get(flag) for flag in flags):
            data = {**data, "show_lines": True, "show_words": True, "show_bytes": True}
        return data

    @model_validator(mode="after")
    def _exclusive_units(self) -> "WcConfig":
        if self.show_bytes and self.show_chars:
            raise ValueError("--bytes and --chars are mutually exclusive")
        return self


ExtractKind = Literal["bytes", "chars", "fields"]


def parse_positions(text: str) -> List[Tuple[int, int]]:
    """Parse a cut list such as ``1,3-5`` into zero-based half-open ranges.

    Ranges keep the order they were given in; positions are 1-based and
    must be ASCII digits. A range must go strictly upwards.

    Raises:
        ArgumentError: ``illegal list value: "<part>"`` or a range error
    """
    if not text:
        raise ArgumentError("position list cannot be empty")

    positions: List[Tuple[int, int]] = []
    for part in text.split(","):
        bounds = part.split("-")
        if len(bounds) > 2 or not all(_DIGITS_RE.fullmatch(b) for b in bounds):
            raise ArgumentError(f'illegal list value: "{part}"')
        for bound in bounds:
            if int(bound) == 0:
                raise ArgumentError(f'illegal list value: "{bound}"')

        numbers = [int(b) for b in bounds]
        if len(numbers) == 1:
            positions.append((numbers[0] - 1, numbers[0]))
        elif numbers[0] >= numbers[1]:
            raise ArgumentError(
                f"First number in range ({numbers[0]}) must be lower than "
                f"second number ({numbers[1]})"
            )
        else:
            positions.append((numbers[0] - 1, numbers[1]))
    return positions


class Extract(_Frozen):
    """What cut selects from each line: bytes, characters or fields."""

    kind: ExtractKind
    positions: List[Tuple[int, int]] = Field(min_length=1)


class CutConfig(_Frozen):
    """Options for ``textr cut``."""

    files: FileList = Field(default_factory=lambda: ["-"])
    delimiter: str = "\t"
    extract: Extract

    @field_validator("delimiter")
    @classmethod
    def _single_byte(cls, value: str) -> str:
        if len(value.encode("utf-8")) != 1:
            raise ValueError(f'--delim "{value}" must be a single byte')
        return value


class GrepConfig(_Frozen):
    """Options for ``textr grep``; the pattern must compile."""

    pattern: str
    files: FileList = Field(default_factory=lambda: ["-"])
    insensitive: bool = False
    invert_match: bool = False
    show_count: bool = False
    recursive: bool = False

    @model_validator(mode="after")
    def _compiles(self) -> "GrepConfig":
        try:
            self.regex
        except re.error as exc:
            raise ValueError(f'Invalid pattern "{self.pattern}"') from exc
        return self

    @property
    def regex(self) -> re.Pattern:
        return re.compile(self.pattern, re.IGNORECASE if self.insensitive else 0)


__all__ = [
    "CatConfig",
    "CutConfig",
    "DEFAULT_LINE_COUNT",
    "Extract",
    "GrepConfig",
    "HeadConfig",
    "NumberingMode",
    "TailConfig",
    "TakeValue",
    "UniqConfig",
    "WcConfig",
    "parse_positions",
    "parse_positive_int",
]
