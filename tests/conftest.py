import logging
import pytest
from identitypool.logging_config import JsonFormatter, TextFormatter


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    # Drop handlers installed by configure_logging; pytest manages its own.
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (JsonFormatter, TextFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "AWS_COGNITO_IDENTITY_POOL_ID",
        "AWS_COGNITO_IDENTITY_ENDPOINT",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "LOG_LEVEL",
        "LOG_JSON",
        "AWS_LAMBDA_FUNCTION_NAME",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
