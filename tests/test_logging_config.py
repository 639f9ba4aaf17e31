import io
import json
import logging
from identitypool.logging_config import configure_logging, get_logger, with_context


def test_json_output_includes_context(clean_env):
    clean_env.setenv("LOG_JSON", "true")
    stream = io.StringIO()
    configure_logging(level="debug", service="tests", stream=stream)

    with_context(get_logger("identitypool.tests"), pool_id="pool-1").info("loaded %s", "config")

    payload = json.loads(stream.getvalue())
    assert payload["level"] == "INFO"
    assert payload["service"] == "tests"
    assert payload["message"] == "loaded config"
    assert payload["context"] == {"pool_id": "pool-1"}
    assert logging.getLogger().level == logging.DEBUG


def test_json_is_default_in_lambda(clean_env):
    clean_env.setenv("AWS_LAMBDA_FUNCTION_NAME", "fn")
    stream = io.StringIO()
    configure_logging(stream=stream)
    get_logger("identitypool.tests").info("hello")
    assert json.loads(stream.getvalue())["message"] == "hello"


def test_text_output(clean_env):
    stream = io.StringIO()
    configure_logging(level="bogus", stream=stream)
    get_logger("identitypool.tests").warning("careful", extra={"region": "eu-west-1"})

    line = stream.getvalue().strip()
    assert " WARNING identitypool.tests service=identitypool message=careful region='eu-west-1'" in line
    assert logging.getLogger().level == logging.INFO
