"""Tests for loader error and value formatting."""

from pydantic import BaseModel, ValidationError

from depwatch.io.errors import LoaderError
from depwatch.utils.error_formatting import format_dependencies, format_expectation_failure, format_value


class _Sample(BaseModel):
    a: int
    b: int
    c: int
    d: int


def _validation_error() -> ValidationError:
    try:
        _Sample.model_validate({})
    except ValidationError as exc:
        return exc
    raise AssertionError("expected validation error")


def test_loader_error_without_cause():
    err = LoaderError("scenarios/x.yaml", "Scenario file must contain a mapping")
    assert str(err).startswith("Scenario file must contain a mapping (")
    assert "x.yaml" in str(err)


def test_loader_error_with_plain_cause():
    err = LoaderError("x.yaml", "Invalid strategy", cause=ValueError("nope"))
    assert str(err).endswith(": nope")
    assert err.message == "Invalid strategy"


def test_loader_error_truncates_validation_errors():
    err = LoaderError("x.yaml", "Invalid scenario definition", cause=_validation_error())
    message = str(err)
    assert "a: Field required" in message
    assert "c: Field required" in message
    assert "d: Field required" not in message
    assert "... (1 more)" in message


def test_format_value_truncates():
    assert format_value("abc") == "'abc'"
    long_text = format_value("x" * 100, max_length=10)
    assert len(long_text) == 10
    assert long_text.endswith("...")


def test_format_dependencies():
    assert format_dependencies(None) == "<none>"
    assert format_dependencies([]) == "[]"
    assert format_dependencies([1, "a", None]) == "[1, 'a', None]"


def test_format_expectation_failure():
    assert format_expectation_failure("s1", False, True) == "s1: expected changed=False (actual: True)"


def test_loader_error_reports_yaml_position(tmp_path):
    import yaml

    try:
        yaml.safe_load("scenarios:\n  - name: [unclosed\n")
    except yaml.MarkedYAMLError as exc:
        err = LoaderError(str(tmp_path / "broken.yaml"), "Invalid YAML", cause=exc)
    else:
        raise AssertionError("expected YAML error")

    assert err.location.rsplit(":", 2)[0].endswith("broken.yaml")
    assert err.location.count(":") >= 2
    assert str(err).startswith("Invalid YAML (")
