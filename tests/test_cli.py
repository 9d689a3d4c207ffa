"""Unit tests for command-line parsing and logging setup."""

import logging

import pytest

from circlefield.config import MERGE_THRESHOLD, SEED_COUNT
from circlefield.logging_config import LOGGER_NAME, setup_logging
from circlefield.main import build_config, parse_args


def test_defaults_come_from_config():
    cfg = build_config(parse_args([]))
    assert cfg.seed is None
    assert cfg.seed_count == SEED_COUNT
    assert cfg.merge_threshold == MERGE_THRESHOLD


def test_seed_and_count_override():
    args = parse_args(["--seed", "7", "--count", "3", "--debug", "--log-file", "out.log"])
    cfg = build_config(args)

    assert (cfg.seed, cfg.seed_count) == (7, 3)
    assert args.debug
    assert args.log_file == "out.log"


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        build_config(parse_args(["--count", "-2"]))


def test_setup_logging_replaces_handlers_and_writes_file(tmp_path):
    log_file = tmp_path / "field.log"
    setup_logging(level="debug")
    logger = setup_logging(level=logging.INFO, log_file=str(log_file))

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    logging.getLogger(f"{LOGGER_NAME}.model.merge").info("merged 2 circles")
    for handler in logger.handlers:
        handler.flush()
    assert "merged 2 circles" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_unknown_level_name_rejected():
    with pytest.raises(ValueError):
        setup_logging(level="chatty")
