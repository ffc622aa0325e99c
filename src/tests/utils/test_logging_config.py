import logging

import pytest

from src.main.utils.logging_config import setup_logging


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        pytest.param(False, False, logging.WARNING, id="default"),
        pytest.param(True, False, logging.DEBUG, id="verbose"),
        pytest.param(True, True, logging.ERROR, id="quiet-wins"),
    ],
)
def test_setup_logging_levels(verbose, quiet, expected):
    logger = setup_logging(verbose=verbose, quiet=quiet)
    assert logger.name == "src"
    assert logger.level == expected


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "metrics.log"
    logger = setup_logging(log_file=str(log_file))
    logger.warning("walk failed")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "walk failed" in log_file.read_text(encoding="utf-8")
