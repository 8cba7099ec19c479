"""
Input schemas and the form validator.

Every calculator declares its form as an InputSchema subclass: one pydantic
field per form input, with bounds, option sets and defaults. validate() turns
raw form values into a frozen InputRecord or raises FieldErrors with one
message per offending field.

Pure: no logging, no global state.
"""

import typing
from typing import ClassVar, Optional

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, ValidationError, ValidationInfo, field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Re-exported so calculator modules declare toggles from one place
Toggle = StrictBool

# Values a form sends for an untouched input
EMPTY_VALUES = ("", None)


class FieldErrors(ValueError):
    """Validation failed. errors maps the field's form name to a message."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{key}: {msg}" for key, msg in errors.items()))


class InputSchema(BaseModel):
    """Base for all calculator forms. A validated instance is an InputRecord."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    # field -> (controlling field, tag or tuple of tags).
    # The field is required whenever the controlling field holds one of the tags.
    REQUIRED_WHEN: ClassVar[dict[str, tuple]] = {}

    @field_validator("*", mode="before")
    @classmethod
    def reject_bool_numbers(cls, value, info: ValidationInfo):
        # Lax mode would read true/false as 1/0
        if isinstance(value, bool) and _is_numeric(cls.model_fields[info.field_name].annotation):
            raise PydanticCustomError("bool_not_number", "Input should be a number")
        return value


class RecordSchema(InputSchema):
    """Base for nested records inside a form (e.g. one room of many)."""


# --- Field constructors ---

def measure(default=..., *, ge: Optional[float] = None, le: Optional[float] = None,
            gt: Optional[float] = None, message: Optional[str] = None,
            label: Optional[str] = None):
    """Decimal/integer field with bounds and an optional out-of-range message."""
    extra = {"message": message} if message else None
    return Field(default, ge=ge, le=le, gt=gt, title=label, json_schema_extra=extra)


def waste(default: float = 10, low: float = 0, high: float = 50):
    """Waste percentage field. Message matches the published forms."""
    return measure(default, ge=low, le=high,
                   message="Waste percentage must be between %g-%g%%" % (low, high))


def choice(default=..., label: Optional[str] = None):
    """Enumerated field. The option set comes from the Literal annotation."""
    return Field(default, title=label)


# --- Introspection used by the validator, the API and the tests ---

def options(schema: type[InputSchema]) -> dict[str, tuple]:
    """Return {field_name: option tuple} for every enumerated field of a schema."""
    found = {}
    for name, info in schema.model_fields.items():
        values = _literal_values(info.annotation)
        if values:
            found[name] = values
    return found


def form_name(schema: type[InputSchema], name: str) -> str:
    """The camelCase name a form uses for a field."""
    info = schema.model_fields[name]
    return info.alias or name


def label_for(schema: type[InputSchema], name: str) -> str:
    info = schema.model_fields[name]
    if info.title:
        return info.title
    return name.replace("_", " ").capitalize()


def _literal_values(annotation) -> tuple:
    if typing.get_origin(annotation) is typing.Literal:
        return typing.get_args(annotation)
    # Optional[Literal[...]]
    for arg in typing.get_args(annotation):
        if typing.get_origin(arg) is typing.Literal:
            return typing.get_args(arg)
    return ()


def _is_numeric(annotation) -> bool:
    """int, float or Optional of either."""
    if annotation in (int, float):
        return True
    if typing.get_origin(annotation) is typing.Union:
        return any(arg in (int, float) for arg in typing.get_args(annotation))
    return False


def _nested_schema(annotation) -> Optional[type]:
    """Record type of a list-of-records field, else None."""
    if typing.get_origin(annotation) is list:
        args = typing.get_args(annotation)
        if args and isinstance(args[0], type) and issubclass(args[0], BaseModel):
            return args[0]
    return None


def _field_name(schema: type[InputSchema], key: str) -> Optional[str]:
    if key in schema.model_fields:
        return key
    for name, info in schema.model_fields.items():
        if info.alias == key:
            return name
    return None


# --- Validation ---

def validate(schema: type[InputSchema], raw: dict) -> InputSchema:
    """
    Validate raw form values against a schema.

    Returns the InputRecord. Raises FieldErrors listing every bad field,
    including conditionally required fields left empty.
    """
    cleaned = {key: value for key, value in dict(raw or {}).items()
               if not _is_empty(value)}

    errors = {}
    record = None
    try:
        record = schema.model_validate(cleaned)
    except ValidationError as exc:
        errors.update(_collect_errors(schema, exc))

    for key, message in _conditional_errors(schema, cleaned).items():
        errors.setdefault(key, message)

    if errors:
        raise FieldErrors(errors)
    return record


def _is_empty(value) -> bool:
    return isinstance(value, str) and value.strip() == "" or value is None


def _collect_errors(schema: type[InputSchema], exc: ValidationError) -> dict[str, str]:
    errors = {}
    for err in exc.errors():
        key, model, name = _resolve_location(schema, err["loc"])
        if key in errors:
            continue
        errors[key] = _message(model, name, err)
    return errors


def _resolve_location(schema, loc):
    """Walk an error location. Returns (form key, owning schema, field name)."""
    parts = []
    model = schema
    owner, name = schema, None
    for part in loc:
        if isinstance(part, int):
            parts.append(str(part))
            continue
        field = _field_name(model, str(part)) if model is not None else None
        if field is None:
            # Union/literal branch tags and the like
            continue
        owner, name = model, field
        parts.append(form_name(model, field))
        model = _nested_schema(model.model_fields[field].annotation)
    return ".".join(parts) or "form", owner, name


def _message(model, name, err) -> str:
    if name is None:
        return "Invalid input"

    info = model.model_fields[name]
    label = label_for(model, name)
    custom = (info.json_schema_extra or {}).get("message") if isinstance(
        info.json_schema_extra, dict) else None
    kind = err["type"]
    ctx = err.get("ctx") or {}

    if kind == "missing":
        return f"{label} is required"
    if kind in ("greater_than_equal", "greater_than"):
        return custom or "%s must be at least %s" % (label, _fmt(ctx.get("ge", ctx.get("gt"))))
    if kind in ("less_than_equal", "less_than"):
        return custom or "%s must be at most %s" % (label, _fmt(ctx.get("le", ctx.get("lt"))))
    if kind == "literal_error":
        values = _literal_values(info.annotation)
        return "%s must be one of: %s" % (label, ", ".join(str(v) for v in values))
    if kind in ("int_from_float", "int_parsing", "int_type"):
        return f"{label} must be a whole number"
    if kind in ("float_parsing", "float_type", "finite_number", "bool_not_number"):
        return f"{label} must be a number"
    if kind in ("bool_type", "bool_parsing"):
        return f"{label} must be true or false"
    if kind in ("too_short", "string_too_short"):
        return custom or f"{label} is required"
    if kind in ("list_type", "model_type", "dict_type"):
        return f"{label} is not in the expected format"
    return f"{label}: {err['msg']}"


def _conditional_errors(schema: type[InputSchema], cleaned: dict) -> dict[str, str]:
    errors = {}
    for names, (controller, tags) in schema.REQUIRED_WHEN.items():
        if isinstance(tags, str):
            tags = (tags,)
        tag = _raw_value(schema, cleaned, controller)
        if tag not in tags:
            continue
        # A tuple of names means any one of them satisfies the requirement
        if isinstance(names, str):
            names = (names,)
        if any(_raw_value(schema, cleaned, name) is not None for name in names):
            continue
        labels = " or ".join(label_for(schema, name).lower() for name in names)
        errors[form_name(schema, names[0])] = "%s is required when %s is %s" % (
            labels[0].upper() + labels[1:], label_for(schema, controller).lower(), tag)
    return errors


def _raw_value(schema, cleaned, name):
    """Raw value by field name or alias, falling back to the field default."""
    if name in cleaned:
        return cleaned[name]
    alias = form_name(schema, name)
    if alias in cleaned:
        return cleaned[alias]
    info = schema.model_fields[name]
    if info.is_required():
        return None
    return info.default


def _fmt(value) -> str:
    if value is None:
        return ""
    return "%g" % value
