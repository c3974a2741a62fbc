# nosec B101


import json
import logging

import pytest

from config.logger import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(msg='Fetched 3 quotes', exc_info=None):
    return logging.LogRecord(
        name='infrastructure.providers.bankofisrael',
        level=logging.ERROR,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_outputs_structured_entry():
    entry = json.loads(JSONFormatter().format(make_record()))

    assert entry['level'] == 'ERROR'
    assert entry['logger'] == 'infrastructure.providers.bankofisrael'
    assert entry['message'] == 'Fetched 3 quotes'
    assert entry['line'] == 42
    assert 'exception' not in entry


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('upstream down')
    except RuntimeError:
        import sys
        record = make_record(exc_info=sys.exc_info())

    entry = json.loads(JSONFormatter().format(record))

    assert entry['exception']['type'] == 'RuntimeError'
    assert entry['exception']['message'] == 'upstream down'


def test_setup_logging_configures_root(restore_root_logger):
    setup_logging(level='debug', json_logs=True)

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
    assert logging.getLogger('httpx').level == logging.WARNING


def test_setup_logging_plain_format(restore_root_logger):
    setup_logging()

    assert restore_root_logger.level == logging.INFO
    assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
