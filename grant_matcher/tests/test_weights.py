"""Tests for fit weight configuration files."""

import json

import pytest
import yaml

from grant_matcher.scorer import DEFAULT_WEIGHTS, FitWeights, load_weights, save_weights


def test_no_path_returns_defaults():
    assert load_weights() is DEFAULT_WEIGHTS
    assert load_weights(None) is DEFAULT_WEIGHTS


def test_load_partial_json_keeps_defaults(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"deadline_rolling": 3, "version": "1.1"}))

    weights = load_weights(str(path))

    assert weights.deadline_rolling == 3
    assert weights.version == "1.1"
    assert weights.program_type_match == DEFAULT_WEIGHTS.program_type_match


def test_load_yaml(tmp_path):
    path = tmp_path / "weights.yml"
    path.write_text("industry_match: 25\ncompetition_low: 0\n")

    weights = load_weights(str(path))

    assert weights.industry_match == 25
    assert weights.competition_low == 0


def test_empty_yaml_file_gives_defaults(tmp_path):
    path = tmp_path / "weights.yaml"
    path.write_text("")

    assert load_weights(str(path)) == DEFAULT_WEIGHTS


def test_save_then_load_yaml(tmp_path):
    path = tmp_path / "tuned.yaml"
    weights = FitWeights(funding_perfect_fit=30, version="tuned")

    save_weights(weights, str(path))

    assert yaml.safe_load(path.read_text())["funding_perfect_fit"] == 30
    assert load_weights(str(path)) == weights


def test_save_json(tmp_path):
    path = tmp_path / "tuned.json"

    save_weights(DEFAULT_WEIGHTS, str(path))

    assert json.loads(path.read_text()) == DEFAULT_WEIGHTS.to_dict()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_weights(str(tmp_path / "absent.json"))


def test_unsupported_extension_raises(tmp_path):
    path = tmp_path / "weights.toml"
    path.write_text("deadline_rolling = 3\n")

    with pytest.raises(ValueError, match="Unsupported file format"):
        load_weights(str(path))

    with pytest.raises(ValueError):
        save_weights(DEFAULT_WEIGHTS, str(path))


@pytest.mark.parametrize("value", [-1, 101])
def test_points_out_of_range_rejected(tmp_path, value):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"geography_match": value}))

    with pytest.raises(ValueError):
        load_weights(str(path))


def test_weights_are_immutable():
    with pytest.raises(Exception):
        DEFAULT_WEIGHTS.program_type_match = 99


def test_misspelled_signal_rejected(tmp_path):
    path = tmp_path / "weights.yaml"
    path.write_text("industy_match: 25\n")

    with pytest.raises(ValueError, match="industy_match"):
        load_weights(str(path))


def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps([10, 20]))

    with pytest.raises(ValueError, match="mapping"):
        load_weights(str(path))


def test_empty_json_file_gives_defaults(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text("\n")

    assert load_weights(str(path)) == DEFAULT_WEIGHTS


def test_suffix_case_insensitive(tmp_path):
    path = tmp_path / "WEIGHTS.YML"

    save_weights(FitWeights(geography_match=0), str(path))

    assert load_weights(str(path)).geography_match == 0


def test_saved_yaml_keeps_signal_order(tmp_path):
    path = tmp_path / "tuned.yaml"

    save_weights(DEFAULT_WEIGHTS, str(path))

    assert list(yaml.safe_load(path.read_text())) == list(DEFAULT_WEIGHTS.to_dict())
