from core.config.validator import ConfigurationValidator
from services.brokerages import create_default_registry


def _validator(settings):
    return ConfigurationValidator(settings, create_default_registry(settings))


def _errors(validator):
    return [r for r in validator.validation_results if r.severity == "error"]


def _warnings(validator):
    return [r for r in validator.validation_results if r.severity == "warning"]


def test_valid_backtest_configuration(make_settings, algorithm_file):
    settings = make_settings(**{
        "algorithm-location": str(algorithm_file),
        "algorithm-type-name": "BasicTemplateAlgorithm",
    })
    validator = _validator(settings)

    assert validator.validate_all() is True
    assert _errors(validator) == []


def test_missing_python_algorithm_is_an_error(make_settings, tmp_path):
    settings = make_settings(**{
        "algorithm-language": "Python",
        "algorithm-location": str(tmp_path / "main.py"),
    })
    validator = _validator(settings)

    assert validator.validate_all() is False
    assert [r.component for r in _errors(validator)] == ["Algorithm"]


def test_bad_language_and_parameters_are_errors(make_settings):
    settings = make_settings(**{"algorithm-language": "Cobol", "parameters": "{not json"})
    validator = _validator(settings)

    assert validator.validate_all() is False
    assert {r.component for r in _errors(validator)} == {"Algorithm", "Parameters"}


def test_unregistered_live_brokerage_is_only_a_warning(make_settings):
    settings = make_settings(**{
        "live-mode": True,
        "live-mode-brokerage": "UnknownBroker",
        "api-access-token": "token",
        "algorithm-type-name": "LiveAlgo",
    })
    validator = _validator(settings)

    assert validator.validate_all() is True
    assert any("UnknownBroker" in r.message for r in _warnings(validator))


def test_qualified_brokerage_name_is_recognized(make_settings):
    settings = make_settings(**{
        "live-mode": True,
        "live-mode-brokerage": "brokerages.zerodha.ZerodhaBrokerage",
        "api-access-token": "token",
        "algorithm-type-name": "LiveAlgo",
        "zerodha": {"api_key": "kite-key", "access_token": "kite-token"},
    })
    validator = _validator(settings)

    assert validator.validate_all() is True
    assert _warnings(validator) == []


def test_brokerage_without_credentials_is_a_warning(make_settings):
    settings = make_settings(**{
        "live-mode": True,
        "live-mode-brokerage": "brokerages.zerodha.ZerodhaBrokerage",
        "api-access-token": "token",
        "algorithm-type-name": "LiveAlgo",
    })
    validator = _validator(settings)

    assert validator.validate_all() is True
    messages = [r.message for r in _warnings(validator)]
    assert len(messages) == 1
    assert "access_token" in messages[0]
