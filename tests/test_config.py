import pytest

from termtris.config import GameConfig


def test_defaults_match_reference_game():
    config = GameConfig()
    assert (config.width, config.height) == (20, 30)
    assert config.update_interval == pytest.approx(1.0)
    assert config.frame_interval == pytest.approx(1 / 30)
    assert config.spawn_anchor == (10, 29)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 3},
        {"height": 0},
        {"update_interval_ms": 0},
        {"fps": -1},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
