import json

import pytest

from src.evaluation.config import AnalysisConfig, load_config


def test_defaults():
    config = AnalysisConfig()
    assert config.policy == "null"
    assert config.num_cores == 1
    assert config.log_level == "INFO"
    assert config.parity_phases is False


def test_policy_name_is_normalised():
    assert AnalysisConfig(policy=" P-RM ").policy == "p-rm"


@pytest.mark.parametrize("data", [
    {"policy": "edf"},
    {"num_cores": 0},
    {"log_level": "LOUD"},
    {"cores": 2},
])
def test_invalid_configuration(data):
    with pytest.raises(ValueError):
        AnalysisConfig.from_dict(data)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"policy": "cw", "num_cores": 4}))
    config = load_config(path)
    assert config.policy == "cw"
    assert config.num_cores == 4


def test_load_config_requires_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(path)


def test_merged_ignores_missing_overrides():
    config = AnalysisConfig(policy="aer", num_cores=2).merged(policy=None, num_cores=3, log_level="DEBUG")
    assert config.policy == "aer"
    assert config.num_cores == 3
    assert config.log_level == "DEBUG"
