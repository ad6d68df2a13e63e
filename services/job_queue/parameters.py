from typing import Dict

from pydantic import TypeAdapter, ValidationError

from core.utils.exceptions import InvalidParametersError

_parameters_adapter = TypeAdapter(Dict[str, str])


def parse_parameters(raw: str) -> Dict[str, str]:
    """Parse run parameters from a flat JSON object of strings.

    An empty string means no parameters. Validation is strict: every value
    must be a JSON string, so ``{"fast": 10}`` is rejected rather than coerced
    to ``{"fast": "10"}``, the same as nested objects, arrays and null.
    """
    if raw == "":
        return {}

    try:
        return _parameters_adapter.validate_json(raw)
    except ValidationError as e:
        raise InvalidParametersError(
            f"Run parameters must be a flat JSON object of strings: {e.error_count()} error(s)",
            raw_parameters=raw,
            details={"errors": e.errors(include_url=False)},
        ) from e
