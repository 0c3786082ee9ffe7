import io
import json
import logging
import uuid

from renderlayout.logging import JSONFormatter, LoggerConfig, SensitiveDataFilter, getLogger


def make_record(msg, *args, **extra):
    record = logging.LogRecord('renderlayout.test', logging.ERROR, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_dump_is_redacted():
    dump = json.dumps({'user': 'ann', 'password': 'hunter2', 'api_key': 'abc'}, indent=2)
    record = make_record(f"render failed with data => \n{dump}")

    assert SensitiveDataFilter().filter(record) is True
    assert 'hunter2' not in record.msg
    assert 'abc' not in record.msg
    assert '"password": "[REDACTED]"' in record.msg
    assert '"user": "ann"' in record.msg


def test_text_fields_and_args_are_redacted():
    record = make_record('internal error => %s', 'login failed token=xyz123 for ann')

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == 'internal error => login failed token=[REDACTED] for ann'


def test_additional_fields():
    record = make_record('{"pin": "1234"}')

    SensitiveDataFilter(['pin']).filter(record)

    assert record.msg == '{"pin": "[REDACTED]"}'


def test_json_formatter_includes_extra_fields():
    record = make_record('render failed', view='home', extension='.html')

    data = json.loads(JSONFormatter().format(record))

    assert data['message'] == 'render failed'
    assert data['level'] == 'ERROR'
    assert data['view'] == 'home'
    assert data['extension'] == '.html'


def test_setup_logger_writes_redacted_json():
    stream = io.StringIO()
    name = f"renderlayout-test-{uuid.uuid4().hex}"
    logger = LoggerConfig.setup_logger(name, level=logging.INFO, stream=stream)

    logger.error('render failed with data => {"secret": "s3"}', extra={'view': 'home'})

    line = json.loads(stream.getvalue().strip())
    assert line['message'] == 'render failed with data => {"secret": "[REDACTED]"}'
    assert line['view'] == 'home'
    assert logger.propagate is False


def test_setup_logger_text_format():
    stream = io.StringIO()
    logger = LoggerConfig.setup_logger(
        f"renderlayout-test-{uuid.uuid4().hex}", format_type='text', environment='development', stream=stream
    )

    logger.debug('traced')

    assert logger.level == logging.DEBUG
    assert ' - DEBUG - traced' in stream.getvalue()


def test_level_by_environment():
    assert LoggerConfig.get_level_by_environment('production') == logging.WARNING
    assert LoggerConfig.get_level_by_environment('Testing') == logging.ERROR
    assert LoggerConfig.get_level_by_environment('unknown') == logging.INFO


def test_get_logger_nests_under_package():
    assert getLogger().name == 'renderlayout'
    assert getLogger('renderlayout.view.pipeline').name == 'renderlayout.view.pipeline'
    assert getLogger('myapp.views').name == 'renderlayout.myapp.views'
