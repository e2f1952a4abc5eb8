"""
Comparison options and their validation.

Options arrive from callers as plain mappings (often straight from JSON with
the camelCase wire names) and are validated here, once, before any alignment
runs. The engine itself assumes a well-formed ComparisonOptions.
"""
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from .exceptions import InvalidArgumentError


class ComparisonOptions(BaseModel):
    """
    Immutable option set for one alignment run.

    Attributes:
        case_sensitive (bool): Compare lines with their original case.
        ignore_whitespace (bool): Collapse whitespace runs and trim before comparing.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    case_sensitive: StrictBool = Field(default=False, alias="caseSensitive")
    ignore_whitespace: StrictBool = Field(default=False, alias="ignoreWhitespace")


OptionsLike = Union[ComparisonOptions, Mapping[str, Any], None]


def parse_options(raw: OptionsLike = None) -> ComparisonOptions:
    """
    Validates a raw option structure.

    Args:
        raw: A ComparisonOptions instance, a mapping using either the
            snake_case or camelCase flag names, or None for the defaults.

    Returns:
        ComparisonOptions: The validated, frozen options.

    Raises:
        InvalidArgumentError: If the structure is not a mapping, has unknown
            keys, or a flag is not a boolean.
    """
    if raw is None:
        return ComparisonOptions()
    if isinstance(raw, ComparisonOptions):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidArgumentError(
            f"comparison options must be a mapping, got {type(raw).__name__}")
    try:
        return ComparisonOptions.model_validate(dict(raw))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidArgumentError(f"invalid comparison options: {problems}") from e
