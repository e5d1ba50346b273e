import logging

import pytest

from kmeansplayground.__main__ import build_parser, resolve_config, resolve_theme
from kmeansplayground.logging_config import setup_logging, resolve_level, LOGGER_NAMESPACE
from kmeansplayground.view.themes import DARK, LIGHT


def test_defaults():
    args = build_parser().parse_args([])
    assert args.preset == "classic"
    assert resolve_config(args).default_k == 3
    assert resolve_theme(args) is DARK
    assert args.seed is None


def test_overrides():
    args = build_parser().parse_args(["--preset", "lesson", "--k", "4", "--light", "--seed", "9"])
    cfg = resolve_config(args)
    assert cfg.auto_step_interval_frames == 10
    assert cfg.default_k == 4
    assert resolve_theme(args) is LIGHT
    assert args.seed == 9


def test_k_outside_bounds_is_rejected():
    args = build_parser().parse_args(["--k", "0"])
    with pytest.raises(ValueError):
        resolve_config(args)


def test_unknown_preset_is_a_usage_error():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--preset", "turbo"])


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "playground.log"
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger.name == LOGGER_NAMESPACE
    assert len(logger.handlers) == 2

    logging.getLogger("kmeansplayground.model.state").info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


@pytest.mark.parametrize("given, expected", [
    ("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR),
])
def test_setup_logging_accepts_names_and_numbers(given, expected):
    logger = setup_logging(level=given)
    assert logger.level == expected
    assert all(h.level == expected for h in logger.handlers)
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


def test_unknown_log_level_name_is_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_level("chatty")


def test_log_level_flag_is_case_insensitive():
    assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "chatty"])
