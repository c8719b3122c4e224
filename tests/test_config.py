from pathlib import Path

import pytest

from langton_ca.config import (PlacementStrategy, ResetConfig, SpawnVariant,
                               clamp_agent_count, load_config)

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


def _write(tmp_path, text):
    path = tmp_path / "sim.yaml"
    path.write_text(text)
    return path


def test_empty_file_gives_defaults(tmp_path):
    config = load_config(_write(tmp_path, ""))
    assert config.reset.agent_count == 1
    assert config.reset.strategy == PlacementStrategy.CLUSTERED
    assert config.reset.spawn_variant == SpawnVariant.PER_COLLISION
    assert config.reset.max_agents == 0
    assert config.placement.retry_budget == 1000
    assert config.placement.scatter_radius == 20
    assert config.spawn.initial_radius == 100
    assert config.spawn.radius_step == 2
    assert config.step_rate == 60
    assert config.theme == "classic"


def test_full_file(tmp_path):
    config = load_config(_write(tmp_path, """
simulation:
  max_steps: 250
  step_rate: 600
  seed: 5
reset:
  agent_count: 12
  strategy: scattered
  max_agents: 40
  spawn_variant: capped
placement:
  heading: 3
  retry_budget: 50
spawn:
  initial_radius: 30
display:
  theme: neon
export:
  csv: false
  gif: true
"""))
    assert config.max_steps == 250
    assert config.step_rate == 600
    assert config.seed == 5
    assert config.reset == ResetConfig(12, PlacementStrategy.SCATTERED, 40, SpawnVariant.CAPPED)
    assert config.placement.heading == 3
    assert config.placement.retry_budget == 50
    assert config.spawn.initial_radius == 30
    assert config.theme == "neon"
    assert config.csv_enabled is False
    assert config.gif_enabled is True
    assert config.snapshot_enabled is True


@pytest.mark.parametrize("text", [
    "reset:\n  agent_count: ten\n",
    "reset:\n  agent_count: 2.5\n",
    "reset:\n  max_agents: -1\n",
    "reset:\n  max_agents: yes\n",
    "reset:\n  strategy: spiral\n",
    "reset:\n  spawn_variant: triple\n",
    "placement:\n  heading: 4\n",
    "simulation:\n  step_rate: fast\n",
    "display:\n  theme: sepia\n",
    "- just\n- a list\n",
])
def test_invalid_values_fail_fast(tmp_path, text):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, text))


@pytest.mark.parametrize("name", ["classic.yaml", "swarm.yaml", "capped.yaml"])
def test_bundled_configs_load(name):
    config = load_config(CONFIG_DIR / name)
    assert 1 <= config.reset.agent_count <= 100


@pytest.mark.parametrize("value, expected", [
    (-5, 1), (0, 1), (1, 1), (50, 50), (100, 100), (500, 100),
    ("7", 7), ("abc", 1), (None, 1), (3.9, 3),
])
def test_clamp_agent_count(value, expected):
    assert clamp_agent_count(value) == expected


def test_reset_config_validate_rejects_strings():
    with pytest.raises(ValueError):
        ResetConfig(agent_count="5").validate()
    with pytest.raises(ValueError):
        ResetConfig(strategy="clustered").validate()
