# -*- coding: utf-8 -*-
"""
test_config.py

@author: LKouadio <etanoyau@gmail.com>
"""
import logging

import numpy as np
import pytest

from statnotes import _util, config
from statnotes.compat import sklearn as sklearn_compat
from statnotes.compat.sklearn import InvalidParameterError
from statnotes.config import Configure, config_context, get_config, set_config
from statnotes.exceptions import ConfigError


@pytest.fixture
def restore_config():
    original = config._config
    yield
    config._config = original
    get_config()._setup_logging()


def test_defaults(monkeypatch):
    monkeypatch.delenv("STATNOTES_SEED", raising=False)
    monkeypatch.delenv("STATNOTES_OUTPUT_DIR", raising=False)
    conf = Configure()
    assert conf.random_seed == 42
    assert conf.output_dir.endswith("statnotes_output")
    assert conf.figure_format == "png"
    assert conf.dpi == 100
    assert conf.verbosity == 2


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STATNOTES_SEED", "7")
    monkeypatch.setenv("STATNOTES_OUTPUT_DIR", str(tmp_path))
    conf = Configure()
    assert conf.random_seed == 7
    assert conf.output_dir == str(tmp_path)
    assert Configure(random_seed=3).random_seed == 3


def test_invalid_settings():
    with pytest.raises(InvalidParameterError):
        Configure(figure_format="gif")
    with pytest.raises(InvalidParameterError):
        Configure(dpi=5)
    with pytest.raises(ConfigError):
        Configure().set_verbosity(9)


def test_set_config(restore_config):
    updated = set_config(dpi=150, figure_format="svg")
    assert get_config() is updated
    assert updated.dpi == 150
    assert updated.as_dict()["figure_format"] == "svg"
    with pytest.raises(ConfigError, match="Unknown configuration"):
        set_config(colour="blue")


def test_config_context_restores(restore_config):
    before = get_config()
    with config_context(random_seed=11, verbosity=4) as conf:
        assert conf.random_seed == 11
        assert get_config().random_seed == 11
        assert logging.getLogger("statnotes").level == logging.DEBUG
    assert get_config() is before


def test_set_random_seed_seeds_numpy(restore_config):
    conf = Configure(random_seed=0)
    conf.set_random_seed(5)
    first = np.random.rand()
    np.random.seed(5)
    assert first == np.random.rand()
    assert conf.random_seed == 5
    assert "random_seed=5" in repr(conf)


@pytest.mark.parametrize("module", [_util, sklearn_compat])
def test_exported_names_resolve(module):
    for name in module.__all__:
        assert hasattr(module, name), name
    assert not {"get_logger", "HasMethods", "SKLEARN_VERSION"} & set(module.__all__)


if __name__ == '__main__':
    pytest.main([__file__])
