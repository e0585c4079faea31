"""
Тесты чтения переменных окружения
"""

import pytest

from apiutil.env import (
    EnvVar,
    EnvVarMissingError,
    EnvVarTypeError,
    parse_bool,
    parse_int,
    read_env_vars,
)


VARIABLES = (
    EnvVar("name", "APP_NAME", required=True),
    EnvVar("verbose", "APP_VERBOSE", parser=parse_bool),
    EnvVar("workers", "APP_WORKERS", parser=parse_int),
    EnvVar("region", "APP_REGION", default="eu"),
)


class TestReadEnvVars:
    """Тесты для read_env_vars"""

    def test_all_values_present(self):
        environ = {
            "APP_NAME": "comments",
            "APP_VERBOSE": "true",
            "APP_WORKERS": "4",
            "APP_REGION": "us",
        }

        result = read_env_vars(VARIABLES, environ)

        assert result == {
            "name": "comments",
            "verbose": True,
            "workers": 4,
            "region": "us",
        }

    def test_missing_required_names_variable(self):
        with pytest.raises(EnvVarMissingError) as exc_info:
            read_env_vars(VARIABLES, {"APP_WORKERS": "2"})

        assert exc_info.value.name == "APP_NAME"
        assert "APP_NAME" in str(exc_info.value)

    def test_missing_optional_gets_zero_value(self):
        result = read_env_vars(VARIABLES, {"APP_NAME": "comments"})

        assert result["verbose"] is False
        assert result["workers"] == 0
        assert result["region"] == "eu"

    def test_empty_value_is_not_parsed(self):
        result = read_env_vars(VARIABLES, {"APP_NAME": "comments", "APP_WORKERS": ""})

        assert result["workers"] == 0

    def test_required_present_but_empty_is_accepted(self):
        result = read_env_vars(VARIABLES, {"APP_NAME": ""})

        assert result["name"] == ""

    def test_bad_int_names_variable_and_value(self):
        with pytest.raises(EnvVarTypeError) as exc_info:
            read_env_vars(VARIABLES, {"APP_NAME": "x", "APP_WORKERS": "four"})

        message = str(exc_info.value)
        assert "APP_WORKERS" in message
        assert "four" in message
        assert "int" in message

    def test_bad_bool_names_variable_and_value(self):
        with pytest.raises(EnvVarTypeError) as exc_info:
            read_env_vars(VARIABLES, {"APP_NAME": "x", "APP_VERBOSE": "yes"})

        assert exc_info.value.name == "APP_VERBOSE"
        assert exc_info.value.value == "yes"

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "from-env")
        monkeypatch.delenv("APP_WORKERS", raising=False)

        result = read_env_vars(VARIABLES)

        assert result["name"] == "from-env"


class TestParsers:
    """Тесты парсеров значений"""

    @pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
    def test_parse_bool_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
    def test_parse_bool_false(self, value):
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", ["yes", "on", "tRuE", " true"])
    def test_parse_bool_rejects(self, value):
        with pytest.raises(ValueError):
            parse_bool(value)

    def test_parse_int_signed(self):
        assert parse_int("-15") == -15
        assert parse_int("+8080") == 8080

    @pytest.mark.parametrize("value", ["1_000", " 42", "0x10", "4.2", "8080\n", "\n"])
    def test_parse_int_rejects(self, value):
        with pytest.raises(ValueError):
            parse_int(value)

    def test_trailing_newline_is_type_error(self):
        variables = (EnvVar("port", "APP_PORT", parser=parse_int),)

        with pytest.raises(EnvVarTypeError, match="APP_PORT"):
            read_env_vars(variables, {"APP_PORT": "8080\n"})
