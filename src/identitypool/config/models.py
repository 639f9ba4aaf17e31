from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from identitypool.logging_config import get_logger

logger = get_logger(__name__)


class Gen1Key:
    """Wire keys of the Gen1 identity pool JSON object."""
    REGION = "Region"
    POOL_ID = "PoolId"
    ENDPOINT = "Endpoint"


class Gen1IdentityPoolJson(BaseModel):
    # Aliases only: wire keys are case-sensitive.
    model_config = ConfigDict(extra='ignore')
    region: Optional[str] = Field(None, alias=Gen1Key.REGION, description="Amazon Cognito service endpoint region.")
    pool_id: Optional[str] = Field(None, alias=Gen1Key.POOL_ID, description="Identity pool identifier.")
    endpoint: Optional[str] = Field(None, alias=Gen1Key.ENDPOINT, description="Identity pool endpoint host.")

    # Anything but a non-empty string reads as an absent key.
    @field_validator("region", "pool_id", "endpoint", mode="before")
    @classmethod
    def _empty_as_absent(cls, value: Any, info: ValidationInfo) -> Optional[str]:
        if isinstance(value, str) and value:
            return value
        if value is not None and value != "":
            logger.debug("Ignoring non-string identity pool value: field=%s type=%s", info.field_name, type(value).__name__)
        return None
