"""
Tests for logging setup and the client CLI wiring.
"""

import logging

import pytest

import client_demo

from wireframe_cube_renderer.cube import build_unit_cube
from wireframe_cube_renderer.logging_config import (
    LOGGER_NAME, hold_console_output, setup_logging)


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_log_file_receives_mesh_warning(tmp_path, restore_logger):
    log_file = tmp_path / "render.log"
    setup_logging(logging.WARNING, str(log_file))
    build_unit_cube(limit=5)
    for h in restore_logger.handlers:
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "wireframe_cube_renderer.mesh - WARNING" in text
    assert "too big" in text


def test_repeated_setup_does_not_duplicate_handlers(restore_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert len(restore_logger.handlers) == 1
    assert restore_logger.level == logging.INFO


def test_client_arguments_build_config(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    args = client_demo.parse_args(["--fov", "60", "--radians-fov", "--ascii",
                                   "--depth-offset", "5"])
    cfg = client_demo.build_config(args)
    assert cfg.fov == 60.0
    assert cfg.convert_fov is True
    assert cfg.use_braille is False
    assert cfg.depth_offset == 5.0
    assert cfg.far_plane == 1000.0


def test_console_records_held_until_terminal_released(capsys, restore_logger):
    setup_logging(logging.INFO)
    with hold_console_output():
        restore_logger.info("Display 160x96 pixels")
        assert "Display" not in capsys.readouterr().err
    err = capsys.readouterr().err
    assert "Display 160x96 pixels" in err
    assert len(restore_logger.handlers) == 1
    assert isinstance(restore_logger.handlers[0], logging.StreamHandler)


def test_file_handler_not_held(tmp_path, restore_logger):
    log_file = tmp_path / "render.log"
    setup_logging(logging.INFO, str(log_file))
    with hold_console_output():
        restore_logger.info("resize")
        for h in restore_logger.handlers:
            h.flush()
        assert "resize" in log_file.read_text(encoding="utf-8")
