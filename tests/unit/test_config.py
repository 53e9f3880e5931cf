import pytest

from warehouse_robot.config import DEFAULT_GRID_SIZE, EngineConfig


def test_default_grid_is_ten_by_ten() -> None:
    config = EngineConfig()
    assert DEFAULT_GRID_SIZE == 10
    assert config.grid_size == 10
    assert config.bound == 9


def test_custom_grid_size() -> None:
    assert EngineConfig(grid_size=3).bound == 2


@pytest.mark.parametrize("grid_size", [0, -4, 2.5, True])
def test_invalid_grid_size_raises(grid_size: object) -> None:
    with pytest.raises(ValueError):
        EngineConfig(grid_size=grid_size)  # type: ignore[arg-type]
