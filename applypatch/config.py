import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

LENIENT_MATCH_ENV = "APPLYPATCH_LENIENT_MATCH"
ERROR_SNIPPET_CHARS_ENV = "APPLYPATCH_ERROR_SNIPPET_CHARS"

DEFAULT_ERROR_SNIPPET_CHARS = 200


def _env_truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, value)
        return default


class PatchSettings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    lenient_match: bool = False
    error_snippet_chars: int = Field(default=DEFAULT_ERROR_SNIPPET_CHARS, ge=20)

    @classmethod
    def from_env(cls) -> "PatchSettings":
        snippet_chars = _env_int(ERROR_SNIPPET_CHARS_ENV, DEFAULT_ERROR_SNIPPET_CHARS)
        if snippet_chars < 20:
            logger.warning(
                "%s=%d is below the minimum, using %d",
                ERROR_SNIPPET_CHARS_ENV,
                snippet_chars,
                DEFAULT_ERROR_SNIPPET_CHARS,
            )
            snippet_chars = DEFAULT_ERROR_SNIPPET_CHARS
        return cls(
            lenient_match=_env_truthy(LENIENT_MATCH_ENV),
            error_snippet_chars=snippet_chars,
        )
