import textwrap
from pathlib import Path

import pytest

from depwatch.io.errors import LoaderError
from depwatch.io.scenario_loader import load_scenarios


def _write(path, content: str) -> None:
    path.write_text(textwrap.dedent(content), encoding="utf-8")


def test_load_single_file(tmp_path):
    _write(
        tmp_path / "basic.yaml",
        """
        scenarios:
          - name: unchanged
            previous: [1, "a"]
            next: [1, "a"]
            expected: false
          - name: first_run
            next: [1]
        """,
    )

    scenarios = load_scenarios(str(tmp_path / "basic.yaml"))

    assert [s.name for s in scenarios] == ["unchanged", "first_run"]
    assert scenarios[0].strategy == "identity"
    assert scenarios[1].previous is None
    assert scenarios[1].expected is None
    assert scenarios[0].source == str(tmp_path / "basic.yaml")


def test_load_directory_recursive_sorted(tmp_path):
    nested = tmp_path / "nested"
    nested.mkdir()
    _write(tmp_path / "b.yaml", "scenarios:\n  - {name: b, next: [1]}\n")
    _write(tmp_path / "a.yml", "scenarios:\n  - {name: a, next: [1]}\n")
    _write(nested / "c.yaml", "scenarios:\n  - {name: c, next: [1]}\n")

    names = [s.name for s in load_scenarios(str(tmp_path))]

    assert sorted(names) == ["a", "b", "c"]
    assert len(names) == 3


def test_missing_path_returns_empty(tmp_path):
    assert load_scenarios(str(tmp_path / "absent")) == []


def test_empty_file(tmp_path):
    _write(tmp_path / "empty.yaml", "")
    assert load_scenarios(str(tmp_path)) == []


def test_schema_error(tmp_path):
    _write(
        tmp_path / "bad.yaml",
        """
        scenarios:
          - name: missing_next
            previous: [1]
        """,
    )

    with pytest.raises(LoaderError) as excinfo:
        load_scenarios(str(tmp_path))

    assert "Invalid scenario definition" in str(excinfo.value)
    assert "next" in str(excinfo.value)


def test_unknown_field_rejected(tmp_path):
    _write(tmp_path / "bad.yaml", "scenarios:\n  - {name: x, next: [1], equality: deep}\n")

    with pytest.raises(LoaderError):
        load_scenarios(str(tmp_path))


def test_negative_tolerance_rejected(tmp_path):
    _write(tmp_path / "bad.yaml", "scenarios:\n  - {name: x, next: [1], strategy: approx, tolerance: -1}\n")

    with pytest.raises(LoaderError):
        load_scenarios(str(tmp_path))


def test_unknown_strategy(tmp_path):
    _write(tmp_path / "bad.yaml", "scenarios:\n  - {name: x, next: [1], strategy: deep}\n")

    with pytest.raises(LoaderError) as excinfo:
        load_scenarios(str(tmp_path))

    message = str(excinfo.value)
    assert "Invalid strategy for scenario 'x'" in message
    assert "Unknown equality strategy: deep" in message


def test_tolerance_on_non_approx_strategy(tmp_path):
    _write(tmp_path / "bad.yaml", "scenarios:\n  - {name: x, next: [1], strategy: value, tolerance: 0.1}\n")

    with pytest.raises(LoaderError, match="does not accept a tolerance"):
        load_scenarios(str(tmp_path))


def test_duplicate_names(tmp_path):
    _write(tmp_path / "a.yaml", "scenarios:\n  - {name: dup, next: [1]}\n")
    _write(tmp_path / "b.yaml", "scenarios:\n  - {name: dup, next: [2]}\n")

    with pytest.raises(LoaderError, match="Duplicate scenario 'dup'"):
        load_scenarios(str(tmp_path))


def test_invalid_yaml(tmp_path):
    _write(tmp_path / "broken.yaml", "scenarios: [\n")

    with pytest.raises(LoaderError, match="Invalid YAML"):
        load_scenarios(str(tmp_path))


def test_non_mapping_document(tmp_path):
    _write(tmp_path / "list.yaml", "- 1\n- 2\n")

    with pytest.raises(LoaderError, match="must contain a mapping"):
        load_scenarios(str(tmp_path))


def test_evaluate_scenarios(tmp_path):
    _write(
        tmp_path / "eval.yaml",
        """
        scenarios:
          - name: approx
            previous: [1.0000]
            next: [1.0001]
            strategy: approx
            tolerance: 0.001
            expected: false
          - name: wrong_expectation
            previous: [1]
            next: [2]
            expected: false
          - name: no_expectation
            previous: [[1]]
            next: [[1]]
        """,
    )

    results = [s.evaluate() for s in load_scenarios(str(tmp_path))]

    assert results[0].diff.changed is False
    assert results[0].passed is True
    assert results[1].passed is False
    assert results[1].diff.changed_indices == [0]
    assert results[2].passed is None
    assert results[2].diff.changed is True


def test_bundled_scenarios_pass():
    path = Path(__file__).resolve().parents[1] / "scenarios"
    results = [s.evaluate() for s in load_scenarios(str(path))]

    assert results
    assert all(r.passed for r in results)
