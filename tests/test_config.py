import json
import logging
import os

import pytest

from sparks.config import ConfigError, SimConfig, config_from_dict, load_config
from sparks.logger_setup import LOGGER_NAME, setup_logging


def _write(tmp_path, data, name="config.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return str(path)


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "absent.json"))
    assert cfg == SimConfig()
    assert cfg.variant == "fireworks"
    assert cfg.fps == 60


def test_full_file_is_loaded(tmp_path):
    path = _write(tmp_path, {
        "run_id": "trial",
        "master_seed": 9,
        "logging": {"level": "debug", "format": "%(message)s", "log_dir": None},
        "simulation": {"variant": "laser", "fps": 30, "max_frames": 120, "show_hud": True, "stats_every": 10},
    })
    cfg = load_config(path)
    assert cfg == SimConfig(
        run_id="trial", master_seed=9, log_level="DEBUG", log_format="%(message)s", log_dir=None,
        variant="laser", fps=30, max_frames=120, show_hud=True, stats_every=10,
    )


def test_partial_file_keeps_other_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, {"simulation": {"variant": "dot"}}))
    assert cfg.variant == "dot"
    assert cfg.master_seed == 42
    assert cfg.log_level == "INFO"


@pytest.mark.parametrize("bad", [
    {"simulation": {"variant": "comet"}},
    {"simulation": {"fps": 0}},
    {"simulation": {"fps": "fast"}},
    {"simulation": {"max_frames": 0}},
    {"simulation": {"stats_every": -1}},
    {"master_seed": -5},
    {"logging": {"level": "LOUD"}},
    {"simulation": {"show_hud": "false"}},
    {"simulation": {"show_hud": 1}},
])
def test_invalid_values_raise(bad):
    with pytest.raises(ConfigError):
        config_from_dict(bad)


def test_malformed_json_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "{not json"))


def test_non_object_json_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, [1, 2, 3]))


def test_overrides_ignore_none_and_validate():
    cfg = SimConfig().with_overrides(variant="dot", master_seed=None, fps=24)
    assert cfg.variant == "dot"
    assert cfg.master_seed == 42
    assert cfg.fps == 24

    with pytest.raises(ConfigError):
        SimConfig().with_overrides(variant="nope")


def test_setup_logging_writes_run_log(tmp_path):
    logger = setup_logging(run_id="unit", level="DEBUG", fmt="%(levelname)s %(message)s", log_dir=str(tmp_path))
    try:
        assert logger is logging.getLogger(LOGGER_NAME)
        assert logger.propagate is False
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logger.debug("hello from the test")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "unit" / "simulation.log"
        assert log_file.exists()
        assert "DEBUG hello from the test" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path):
    setup_logging(run_id="a", log_dir=str(tmp_path))
    logger = setup_logging(run_id="b", log_dir=None)
    try:
        assert len(logger.handlers) == 1
        assert os.path.isdir(tmp_path / "a")
    finally:
        logger.handlers.clear()


def test_show_hud_accepts_json_booleans():
    assert config_from_dict({"simulation": {"show_hud": True}}).show_hud is True
    assert config_from_dict({"simulation": {"show_hud": False}}).show_hud is False
