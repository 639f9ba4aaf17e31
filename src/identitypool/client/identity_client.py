from typing import Any
import boto3
from botocore.client import Config
from identitypool.config.identity_pool_config import DEFAULT_REGION, IdentityPoolConfiguration
from identitypool.logging_config import get_logger

SERVICE_NAME = "cognito-identity"

logger = get_logger(__name__)


def _endpoint_url(endpoint: str) -> str:
    # Gen1 files usually carry a bare host.
    if "://" in endpoint:
        return endpoint
    return f"https://{endpoint}"


def client_kwargs(config: IdentityPoolConfiguration) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"region_name": config.region or DEFAULT_REGION}
    if config.endpoint:
        kwargs["endpoint_url"] = _endpoint_url(config.endpoint)
    return kwargs


def create_identity_client(config: IdentityPoolConfiguration, botocore_config: Config | None = None):
    """
    Build a cognito-identity client from the configuration.
    Construction sends no request; callers own every call made with the client.
    """
    kwargs = client_kwargs(config)
    kwargs["config"] = botocore_config or Config()
    logger.debug("Creating %s client: region=%s endpoint=%s", SERVICE_NAME, kwargs["region_name"], kwargs.get("endpoint_url"))
    return boto3.client(SERVICE_NAME, **kwargs)
