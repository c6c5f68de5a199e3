"""
Validation Helpers

Reusable field constraints with human-readable messages, tag name
normalization, and a tagged result form for validating outside FastAPI.

Field Constraints:
==================
Each helper returns a pydantic ``AfterValidator`` that raises a
``PydanticCustomError`` carrying the exact message given. Errors therefore
reach clients as-is instead of pydantic's generic wording:

    Username = Annotated[
        str,
        length(3, 20,
               too_short="Username must be at least 3 characters",
               too_long="Username cannot be longer than 20 characters"),
    ]

Normalize, Then Validate:
=========================
Transforms run as ``BeforeValidator``s, constraints as ``AfterValidator``s,
so a value is normalized before it is checked. Every transform is
idempotent: feeding an already-normalized value through it changes nothing.

    TagName: "#Machine Learning " → "machine-learning" → matches ^[a-z0-9-]+$

Tagged Results:
===============
    result = validate(TechnicalIssueCreate, wizard_payload)
    if result.ok:
        submit(result.value)
    else:
        for error in result.errors:
            print(error.field, error.message)
"""

import re
from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, Generic, Optional, Type, TypeVar

from pydantic import AfterValidator, AnyUrl, BaseModel, BeforeValidator, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError


SchemaT = TypeVar("SchemaT", bound=BaseModel)

TAG_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")
TAG_NAME_MAX_LENGTH = 50

_WHITESPACE = re.compile(r"\s+")
_LEADING_MARKS = re.compile(r"^[#\s]+")
_URL_ADAPTER = TypeAdapter(AnyUrl)


# ═══════════════════════════════════════════════════════════════════════════════
# FIELD CONSTRAINTS
# ═══════════════════════════════════════════════════════════════════════════════


def length(
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    *,
    too_short: Optional[str] = None,
    too_long: Optional[str] = None,
) -> AfterValidator:
    """
    String length constraint with custom messages.

    Args:
        min_length: Minimum number of characters (inclusive)
        max_length: Maximum number of characters (inclusive)
        too_short: Message when shorter than min_length
        too_long: Message when longer than max_length
    """

    def check(value: str) -> str:
        if min_length is not None and len(value) < min_length:
            raise PydanticCustomError(
                "string_too_short",
                too_short or f"Must be at least {min_length} characters",
            )
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError(
                "string_too_long",
                too_long or f"Cannot exceed {max_length} characters",
            )
        return value

    return AfterValidator(check)


def email(message: str) -> AfterValidator:
    """Email format constraint. The address is returned unchanged."""

    def check(value: str) -> str:
        try:
            validate_email(value)
        except PydanticCustomError:
            raise PydanticCustomError("value_error", message) from None
        return value

    return AfterValidator(check)


def url(message: str = "Must be a valid URL") -> AfterValidator:
    """Absolute URL constraint. The original string is kept."""

    def check(value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            _URL_ADAPTER.validate_python(value)
        except PydanticValidationError:
            raise PydanticCustomError("url_parsing", message) from None
        return value

    return AfterValidator(check)


def matches(pattern: "re.Pattern[str]", message: str) -> AfterValidator:
    """Regular expression constraint on the whole value."""

    def check(value: str) -> str:
        if not pattern.fullmatch(value):
            raise PydanticCustomError("string_pattern_mismatch", message)
        return value

    return AfterValidator(check)


def transform(func: Callable[[Any], Any]) -> BeforeValidator:
    """Apply a normalizing transform to strings before any constraint runs."""

    def apply(value: Any) -> Any:
        return func(value) if isinstance(value, str) else value

    return BeforeValidator(apply)


# ═══════════════════════════════════════════════════════════════════════════════
# TAG NAMES
# ═══════════════════════════════════════════════════════════════════════════════


def strip_hash(value: str) -> str:
    """Drop leading '#' marks and blanks typed by users ("#python" → "python")."""
    return _LEADING_MARKS.sub("", value)


def normalize_tag_name(value: str) -> str:
    """
    Normalize a tag name for storage and lookup.

    Steps: drop leading '#' marks and blanks, trim, lowercase, join
    whitespace runs with a hyphen.

    Example:
        normalize_tag_name("#Machine  Learning") == "machine-learning"
        normalize_tag_name("machine-learning") == "machine-learning"
    """
    value = strip_hash(value).strip().lower()
    return _WHITESPACE.sub("-", value)


def normalize_search_query(value: str) -> str:
    """Search terms only lose the '#' prefix and case, not inner spacing."""
    return strip_hash(value).strip().lower()


TagName = Annotated[
    str,
    transform(normalize_tag_name),
    length(
        1,
        TAG_NAME_MAX_LENGTH,
        too_short="Tag name is required",
        too_long="Tag name cannot exceed 50 characters",
    ),
    matches(TAG_NAME_PATTERN, "Tags can only contain letters, numbers, and hyphens"),
]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalUrl = Annotated[Optional[str], BeforeValidator(_blank_to_none), url()]


# ═══════════════════════════════════════════════════════════════════════════════
# TAGGED RESULTS
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FieldError:
    """One failed constraint: dotted field path and its message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[SchemaT]):
    """
    Outcome of validate().

    Exactly one of ``value`` (on success) or ``errors`` (on failure) is
    populated.
    """

    ok: bool
    value: Optional[SchemaT] = None
    errors: list[FieldError] = field(default_factory=list)


def field_errors(errors: list[Any]) -> list[FieldError]:
    """
    Convert pydantic error dicts into FieldErrors.

    Location prefixes FastAPI adds ("body", "query", "path") are dropped.
    """
    converted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        converted.append(FieldError(field=".".join(location), message=error.get("msg", "Invalid value")))
    return converted


def validate(schema: Type[SchemaT], raw: Any) -> ValidationResult[SchemaT]:
    """
    Validate raw input against a schema without raising.

    Args:
        schema: Pydantic model class
        raw: Mapping (or model) to validate

    Returns:
        ValidationResult with the typed value or the per-field errors
    """
    try:
        return ValidationResult(ok=True, value=schema.model_validate(raw))
    except PydanticValidationError as e:
        return ValidationResult(ok=False, errors=field_errors(e.errors()))
