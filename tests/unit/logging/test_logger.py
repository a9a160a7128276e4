import json
import logging

from typed_widget.logging import (
    LoggingSettings,
    LogLevel,
    StructuredFormatter,
    WidgetLogger,
    get_logger,
)


def make_record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("typed_widget.test", logging.INFO, "", 0, message, (), None)
    record.__dict__.update(extra)
    return record


def test_text_formatter_renders_context():
    formatter = StructuredFormatter(include_timestamp=False)
    output = formatter.format(make_record("Building widget", depth=2, kind="number"))
    assert output == "Building widget [INFO] depth=2 kind=number"


def test_text_formatter_quotes_values_with_spaces():
    formatter = StructuredFormatter(include_timestamp=False, include_level=False)
    output = formatter.format(make_record("done", reason="no form"))
    assert output == 'done reason="no form"'


def test_json_formatter():
    formatter = StructuredFormatter(json_format=True, include_timestamp=False)
    data = json.loads(formatter.format(make_record("hello", entity_type_id="node")))
    assert data == {
        "message": "hello",
        "logger": "typed_widget.test",
        "entity_type_id": "node",
        "level": "INFO",
    }


def test_logger_writes_context_to_stdout(capsys):
    settings = LoggingSettings(level="DEBUG", include_timestamp=False)
    logger = WidgetLogger("typed_widget.test.stdout", settings=settings)
    logger.debug("Building widget", depth=0)
    captured = capsys.readouterr()
    assert "Building widget [DEBUG] depth=0" in captured.out


def test_logger_respects_level(capsys):
    settings = LoggingSettings(level="WARNING", include_timestamp=False)
    logger = WidgetLogger("typed_widget.test.level", settings=settings)
    logger.info("hidden")
    logger.warning("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_bind_and_context(capsys):
    settings = LoggingSettings(include_timestamp=False, include_level=False)
    logger = WidgetLogger("typed_widget.test.bind", settings=settings)
    bound = logger.bind(request="abc")
    with bound.context(step="select"):
        bound.info("inside")
    bound.info("outside")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["inside request=abc step=select", "outside request=abc"]


def test_reserved_keys_are_prefixed(capsys):
    settings = LoggingSettings(include_timestamp=False, include_level=False)
    logger = WidgetLogger("typed_widget.test.reserved", settings=settings)
    logger.info("clash", name="value")
    assert capsys.readouterr().out.strip() == "clash ctx_name=value"


def test_set_level(capsys):
    settings = LoggingSettings(include_timestamp=False)
    logger = WidgetLogger("typed_widget.test.set_level", settings=settings)
    logger.set_level(LogLevel.ERROR)
    logger.warning("quiet")
    assert capsys.readouterr().out == ""


def test_get_logger_returns_configured_logger():
    logger = get_logger("typed_widget.test.factory", level=LogLevel.DEBUG)
    assert isinstance(logger, WidgetLogger)
    assert logger.name == "typed_widget.test.factory"
    assert callable(logger.bind)


def test_record_context_holds_only_record_extras():
    record = make_record("hello", depth=1)
    assert StructuredFormatter.record_context(record) == {"depth": 1}
