import numpy as np
import pytest

from odeapprox.config import Config, InvalidConfigError


def test_config():
    config = Config(1.0, 2.0, 10.0, 0.1)

    assert config.x_0 == 1.0
    assert config.y_0 == 2.0
    assert config.x_end == 10.0
    assert config.h == 0.1


def test_config_with_zero_step_size():
    config = Config(0.0, 1.0, 1.0, 0.0)

    assert config.h == 0.0


def test_config_with_negative_step_size():
    with pytest.raises(InvalidConfigError):
        Config(0.0, 1.0, 1.0, -0.1)


@pytest.mark.parametrize('x_end', [0.0, -1.0])
def test_config_with_right_endpoint_not_past_left_endpoint(x_end):
    with pytest.raises(InvalidConfigError):
        Config(0.0, 1.0, x_end, 0.1)


@pytest.mark.parametrize('value', [np.nan, np.inf, -np.inf])
def test_config_with_non_finite_value(value):
    with pytest.raises(InvalidConfigError):
        Config(0.0, value, 1.0, 0.1)


@pytest.mark.parametrize('value', [None, '1.0', True])
def test_config_with_non_numeric_value(value):
    with pytest.raises(InvalidConfigError):
        Config(0.0, value, 1.0, 0.1)


def test_invalid_config_error_is_value_error():
    with pytest.raises(ValueError):
        Config(0.0, 1.0, 1.0, -0.1)


def test_config_from_step_count():
    config = Config.from_step_count(1.0, 2.0, 10.0, 20)

    assert config.h == pytest.approx(0.45)
    assert config.x_0 == 1.0
    assert config.x_end == 10.0


@pytest.mark.parametrize('n', [0, -3, 2.5, True])
def test_config_from_invalid_step_count(n):
    with pytest.raises(InvalidConfigError):
        Config.from_step_count(0.0, 1.0, 1.0, n)


def test_config_with_step_count():
    config = Config(0.0, 1.0, 2.0, 0.1).with_step_count(8)

    assert config.h == pytest.approx(0.25)
    assert config.y_0 == 1.0


def test_config_from_dict_with_step_size():
    config = Config.from_dict({'x0': 1.0, 'y0': 2.0, 'X': 10.0, 'h': 0.1})

    assert config == Config(1.0, 2.0, 10.0, 0.1)


def test_config_from_dict_with_step_count():
    config = Config.from_dict({'x0': 0.0, 'y0': 2.0, 'X': 1.0, 'N': 4})

    assert config == Config(0.0, 2.0, 1.0, 0.25)


def test_config_from_dict_with_both_step_size_and_step_count():
    with pytest.raises(InvalidConfigError):
        Config.from_dict({'x0': 0.0, 'y0': 2.0, 'X': 1.0, 'h': 0.1, 'N': 4})


def test_config_from_dict_without_step():
    with pytest.raises(InvalidConfigError):
        Config.from_dict({'x0': 0.0, 'y0': 2.0, 'X': 1.0})


def test_config_from_dict_with_missing_parameters():
    with pytest.raises(InvalidConfigError):
        Config.from_dict({'x0': 0.0, 'h': 0.1})


def test_config_replace():
    config = Config(1.0, 2.0, 10.0, 0.1)
    new_config = config.replace(h=0.05, y_0=3.0)

    assert new_config == Config(1.0, 3.0, 10.0, 0.05)
    assert config == Config(1.0, 2.0, 10.0, 0.1)


def test_config_replace_with_invalid_value():
    config = Config(1.0, 2.0, 10.0, 0.1)

    with pytest.raises(InvalidConfigError):
        config.replace(x_end=0.5)


def test_config_replace_with_unknown_parameter():
    config = Config(1.0, 2.0, 10.0, 0.1)

    with pytest.raises(InvalidConfigError):
        config.replace(n=5)


def test_config_to_dict():
    assert Config(1.0, 2.0, 10.0, 0.1).to_dict() == {
        'x_0': 1.0,
        'y_0': 2.0,
        'x_end': 10.0,
        'h': 0.1,
    }


def test_config_equality_and_hash():
    assert Config(1, 2, 10, 0.5) == Config(1.0, 2.0, 10.0, 0.5)
    assert hash(Config(1, 2, 10, 0.5)) == hash(Config(1.0, 2.0, 10.0, 0.5))
    assert Config(1.0, 2.0, 10.0, 0.5) != Config(1.0, 2.0, 10.0, 0.25)
