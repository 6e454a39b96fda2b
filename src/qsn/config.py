from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from qsn.constants import MAX_PADDING, MIN_PADDING
from qsn.error import ConfigError
from qsn.types import Case, UnicodeMode


class EncoderConfig(BaseModel):
    """
    Escaping policy of an `Encoder`.

    `case` selects the letter case of hex digits in `\\xHH` and `\\u{...}`
    escapes. `mode` decides what happens to non-ASCII bytes:

    * `raw`: forwarded verbatim, without any UTF-8 validation.
    * `hex`: every byte becomes a `\\xHH` escape.
    * `unicode`: well-formed UTF-8 sequences become one `\\u{...}` escape,
      anything else falls back to `\\xHH`.

    `padding` is the minimum number of digits of a `\\u{...}` escape.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    case: Case = Case.LOWER
    mode: UnicodeMode = UnicodeMode.RAW
    padding: int = Field(default=MIN_PADDING, ge=MIN_PADDING, le=MAX_PADDING)

    @classmethod
    def build(cls, **options: Any) -> EncoderConfig:
        try:
            return cls(**options)
        except ValidationError as e:
            raise ConfigError(_summarize(e)) from e

    def validate_bounds(self) -> None:
        # Instances created through `model_construct` skip field validation.
        if not MIN_PADDING <= self.padding <= MAX_PADDING:
            raise ConfigError(
                f"padding must be between {MIN_PADDING} and {MAX_PADDING}, got {self.padding}"
            )


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )
