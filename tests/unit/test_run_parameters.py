import pytest

from core.utils.exceptions import InvalidParametersError
from services.job_queue import parse_parameters


def test_empty_string_yields_empty_mapping():
    assert parse_parameters("") == {}


def test_flat_string_object_is_parsed():
    assert parse_parameters('{"fast": "10", "slow": "30"}') == {"fast": "10", "slow": "30"}


@pytest.mark.parametrize("raw", [
    "{not json",
    '["fast", "10"]',
    '{"fast": {"period": "10"}}',
    '{"fast": 10}',
    '{"fast": null}',
])
def test_malformed_parameters_raise(raw):
    with pytest.raises(InvalidParametersError) as exc_info:
        parse_parameters(raw)

    assert exc_info.value.raw_parameters == raw
    assert exc_info.value.details["errors"]


@pytest.mark.parametrize("raw", ['{"fast": 10}', '{"fast": 1.5}', '{"live": true}'])
def test_non_string_values_are_not_coerced(raw):
    with pytest.raises(InvalidParametersError) as exc_info:
        parse_parameters(raw)

    assert exc_info.value.details["errors"][0]["type"] == "string_type"
