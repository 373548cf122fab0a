import logging

from zancommon.support import Config, Debug


def test_dump_is_silent_outside_debug(caplog):
    caplog.set_level(logging.DEBUG, logger='zancommon.debug')

    Debug.dump({'a': 1})

    assert caplog.records == []


def test_dump_logs_values_in_debug(caplog):
    Config.set('app.APP_DEBUG', True)
    caplog.set_level(logging.DEBUG, logger='zancommon.debug')

    Debug.dump({'a': 1}, 'two')

    assert [record.getMessage() for record in caplog.records] == ["{'a': 1}", "'two'"]
