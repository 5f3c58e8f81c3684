import numpy as np

from hexgame.core import Player
from hexgame.players import AutomatedConfig, AutomatedMoveSource

from scripts.evaluate_sources import load_config, make_factory


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "match.yaml"
    path.write_text("episodes: 3\nsize: 5\nfirst:\n  strategy: random\n")
    cfg = load_config(str(path))
    assert cfg == {"episodes": 3, "size": 5, "first": {"strategy": "random"}}


def test_missing_config_is_empty(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == {}


def test_factory_builds_configured_sources():
    factory = make_factory(AutomatedConfig(strategy="random"), np.random.default_rng(0))
    source = factory(6, Player.SECOND)
    assert isinstance(source, AutomatedMoveSource)
    assert source.player == Player.SECOND
    assert source.size == 6
    assert source.config.strategy == "random"
