from __future__ import annotations
import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from identitypool.config.identity_pool_config import IdentityPoolConfiguration
from identitypool.logging_config import get_logger, with_context

CREDENTIALS_PROVIDER_KEY = "CredentialsProvider"
COGNITO_IDENTITY_KEY = "CognitoIdentity"
DEFAULT_SECTION_KEY = "Default"
# Where the auth plugin object sits inside amplifyconfiguration.json.
AUTH_PLUGIN_PATH = ("auth", "plugins", "awsCognitoAuthPlugin")

POOL_ID_ENV_VAR = "AWS_COGNITO_IDENTITY_POOL_ID"
ENDPOINT_ENV_VAR = "AWS_COGNITO_IDENTITY_ENDPOINT"

logger = get_logger(__name__)


class IdentityPoolConfigError(ValueError):
    pass


def _child(node: Any, key: str) -> Mapping[str, Any] | None:
    if not isinstance(node, Mapping):
        return None
    value = node.get(key)
    return value if isinstance(value, Mapping) else None


def _walk(node: Any, path: tuple[str, ...]) -> Mapping[str, Any] | None:
    for key in path:
        node = _child(node, key)
        if node is None:
            return None
    return node


def identity_pool_from_plugin_json(plugin_json: Mapping[str, Any]) -> IdentityPoolConfiguration | None:
    section = _walk(plugin_json, (CREDENTIALS_PROVIDER_KEY, COGNITO_IDENTITY_KEY, DEFAULT_SECTION_KEY))
    if section is None:
        return None
    return IdentityPoolConfiguration.from_json(section).build()


def identity_pool_to_plugin_json(config: IdentityPoolConfiguration) -> dict[str, Any]:
    return {
        CREDENTIALS_PROVIDER_KEY: {
            COGNITO_IDENTITY_KEY: {
                DEFAULT_SECTION_KEY: config.to_gen1_json(),
            }
        }
    }


def load_gen1_config_file(path: str | Path) -> IdentityPoolConfiguration | None:
    """
    Read the identity pool out of a Gen1 config file.
    Accepts a whole amplifyconfiguration.json or just the awsCognitoAuthPlugin object.
    Returns None when the file has no identity pool section.
    """
    config_path = Path(path)
    log = with_context(logger, config_path=str(config_path))
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise IdentityPoolConfigError(f"Config file not found at '{config_path}'") from exc
    except OSError as exc:
        raise IdentityPoolConfigError(f"Could not read config file '{config_path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise IdentityPoolConfigError(f"Config file '{config_path}' is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise IdentityPoolConfigError(f"Config file '{config_path}' is not valid UTF-8 JSON: {exc}") from exc

    plugin_json = _walk(raw, AUTH_PLUGIN_PATH) if isinstance(raw, Mapping) and "auth" in raw else raw
    config = identity_pool_from_plugin_json(plugin_json) if plugin_json is not None else None
    if config is None:
        log.warning("No identity pool section found in config file")
        return None
    log.info("Loaded identity pool config from file: pool_id=%s region=%s", config.pool_id, config.region)
    return config


def require_env(var_name: str) -> str:
    value = os.getenv(var_name) or None
    if value is None:
        raise IdentityPoolConfigError(f"Environment variable '{var_name}' is required but not set.")
    return value


def get_identity_pool_config() -> IdentityPoolConfiguration:
    pool_id = require_env(POOL_ID_ENV_VAR)
    region = os.getenv('AWS_REGION') or os.getenv('AWS_DEFAULT_REGION') or None
    endpoint = os.getenv(ENDPOINT_ENV_VAR) or None

    builder = IdentityPoolConfiguration.builder().pool_id(pool_id)
    if region:
        builder.region(region)
    if endpoint:
        builder.endpoint(endpoint)
    config = builder.build()
    logger.info("Loaded identity pool config from environment: pool_id=%s region=%s", config.pool_id, config.region)
    return config
