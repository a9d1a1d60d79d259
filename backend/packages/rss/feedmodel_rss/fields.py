"""
Annotated field types shared by entities and extensions.

Validation runs on assignment; defaults are not validated, so a required
field may start unset and still reject ``None`` later.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator

from feedmodel_core.values import normalize_text, try_parse_uri


def _optional_uri(value: str | None) -> str | None:
    if value is None:
        return None
    parsed = try_parse_uri(value)
    if parsed is None:
        raise ValueError(f"'{value}' is not a valid URI")
    return parsed


def _required_uri(value: str | None) -> str:
    if value is None:
        raise ValueError("value must not be None")
    return _optional_uri(value)


def _to_second(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.replace(microsecond=0)


# URI that may be cleared with None
OptionalUri = Annotated[str | None, AfterValidator(_optional_uri)]

# URI that starts unset but cannot be set back to None
RequiredUri = Annotated[str | None, AfterValidator(_required_uri)]

# Trimmed text where None means empty
Text = Annotated[str, BeforeValidator(normalize_text)]

# Timestamp to the second, naive values taken as UTC
Timestamp = Annotated[datetime | None, AfterValidator(_to_second)]
