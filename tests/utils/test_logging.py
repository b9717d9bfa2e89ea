import logging

from gridref.utils.logging import LOGGER, warn_once


def test_logger():
    assert LOGGER.name == 'gridref'
    assert LOGGER.level == logging.WARNING


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr('gridref.utils.logging._WARNINGS', set())

    warn_once('test')
    assert caplog.text.count('test') == 1

    warn_once('test')
    assert caplog.text.count('test') == 1

    warn_once('another test')
    assert caplog.text.count('another test') == 1


def test_warn_once_arguments(caplog, monkeypatch):
    monkeypatch.setattr('gridref.utils.logging._WARNINGS', set())

    warn_once('value is %s', 1)
    warn_once('value is %s', 2)
    assert 'value is 1' in caplog.text
    assert 'value is 2' not in caplog.text
