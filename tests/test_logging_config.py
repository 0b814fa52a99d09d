import io
import json
import logging

import pytest
import structlog

from ts_type_graph.configuration.logging_config import configure_logging, truncate_type_text


def test_truncate_type_text_processor():
    long_type = "{ " + "a: Foo; " * 100 + "}"
    event_dict = {'type': long_type, 'name': 'Dog', 'matches': ['is_object']}
    processed = truncate_type_text(None, None, event_dict)
    assert processed['type'] == long_type[:200] + '...'
    assert processed['name'] == 'Dog'
    assert processed['matches'] == ['is_object']


def test_logging_produces_json_on_given_stream():
    log_capture_stream = io.StringIO()
    configure_logging(log_level=logging.INFO, stream=log_capture_stream, force_reconfigure=True)

    logger = structlog.get_logger("ts_type_graph.test")
    logger.warning("decompose.unparseable_type", type="{ a: Foo }", matches=["is_object"])

    log_output = log_capture_stream.getvalue().strip()
    try:
        log_json = json.loads(log_output)
    except json.JSONDecodeError:
        pytest.fail(f"Log output is not valid JSON: {log_output!r}")

    assert log_json['event'] == 'decompose.unparseable_type'
    assert log_json['matches'] == ['is_object']
    assert log_json['level'] == 'warning'
    assert log_json['logger'] == 'ts_type_graph.test'
    assert 'timestamp' in log_json


def test_level_filtering_and_console_format():
    stream = io.StringIO()
    configure_logging(log_level=logging.WARNING, stream=stream, log_format="console", force_reconfigure=True)

    logger = structlog.get_logger("ts_type_graph.test")
    logger.info("walk.done", edge_count=3)
    logger.warning("analyze.duplicate_class", name="Dog")

    output = stream.getvalue()
    assert "walk.done" not in output
    assert "analyze.duplicate_class" in output
    assert "name=Dog" in output


def test_defaults_to_stderr(capsys):
    configure_logging(force_reconfigure=True)
    structlog.get_logger("ts_type_graph.test").warning("diagnostic")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "diagnostic" in captured.err
