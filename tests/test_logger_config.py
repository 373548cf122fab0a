import json
import logging

import pytest

from zancommon.logging import JSONFormatter, LoggerConfig, SensitiveDataFilter
from zancommon.support import Config


def test_redacts_query_string_credentials():
    redacted = SensitiveDataFilter().redact('GET /login?email=a@b.c&password=hunter2&next=/')

    assert redacted == 'GET /login?email=a@b.c&password=[REDACTED]&next=/'


def test_redacts_repeated_query_credentials():
    redacted = SensitiveDataFilter().redact('token=abc&token=def&page=1')

    assert redacted == 'token=[REDACTED]&token=[REDACTED]&page=1'


def test_leaves_similar_names_alone():
    assert SensitiveDataFilter().redact('tokens_left=3&mytoken=1') == 'tokens_left=3&mytoken=1'


def test_redacts_percent_encoded_query_names():
    redacted = SensitiveDataFilter().redact('pass%77ord=hunter2&token%5B%5D=abc&API%5Fkey=k&page=1')

    assert redacted == 'pass%77ord=[REDACTED]&token%5B%5D=[REDACTED]&API%5Fkey=[REDACTED]&page=1'


def test_redacts_query_string_nested_in_value():
    redacted = SensitiveDataFilter().redact('GET /auth?next=/login?token=abc&page=2')

    assert redacted == 'GET /auth?next=/login?token=[REDACTED]&page=2'


def test_redacts_json_fields():
    redacted = SensitiveDataFilter().redact('{"user": "jim", "password": "hunter2"}')

    assert redacted == '{"user": "jim", "password": "[REDACTED]"}'


def test_additional_fields():
    assert SensitiveDataFilter(['pin']).redact('pin=1234') == 'pin=[REDACTED]'


def test_filter_redacts_args():
    record = logging.LogRecord('t', logging.INFO, __file__, 1, 'query %s', ('password=x',), None)

    assert SensitiveDataFilter().filter(record) is True
    assert record.getMessage() == 'query password=[REDACTED]'


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord('zancommon.http', logging.DEBUG, __file__, 10, 'decoded %s', ('a=1',), None)
    record.parameter_names = ['a']

    data = json.loads(JSONFormatter().format(record))

    assert data['message'] == 'decoded a=1'
    assert data['level'] == 'DEBUG'
    assert data['logger'] == 'zancommon.http'
    assert data['parameter_names'] == ['a']


@pytest.mark.parametrize('environment, level', [
    ('production', logging.WARNING),
    ('Development', logging.DEBUG),
    ('testing', logging.ERROR),
    ('local', logging.INFO),
])
def test_level_by_environment(environment, level):
    assert LoggerConfig.get_level_by_environment(environment) == level


def test_setup_logger_writes_json_file(tmp_path):
    Config.set('app.APP_ENV', 'development')
    log_file = tmp_path / 'logs' / 'common.log'

    logger = LoggerConfig.setup_logger('zancommon_test_file', log_file=log_file)
    try:
        logger.debug('request %s', 'a=1&password=secret')
        for handler in logger.handlers:
            handler.flush()

        data = json.loads(log_file.read_text(encoding='utf-8').strip())
        assert data['message'] == 'request a=1&password=[REDACTED]'
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_setup_logger_text_stream():
    logger = LoggerConfig.setup_logger('zancommon_test_stream', format_type='text', filter_sensitive=False)
    try:
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler.formatter, JSONFormatter)
        assert handler.filters == []
    finally:
        logger.handlers.clear()
