import yaml

from astar_grid.config import CONFIG_PATH


def test_config_contains_expected_keys():
    data = yaml.safe_load(CONFIG_PATH.read_text())
    assert data["search"]["straight_cost"] == 1.0
    assert data["search"]["diagonal_cost"] == 1.41421
    assert "max_expansions" in data["search"]
    assert data["logging"]["global_level"] == "INFO"
