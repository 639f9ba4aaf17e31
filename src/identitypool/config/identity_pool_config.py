from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable
from identitypool.config.models import Gen1IdentityPoolJson

DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class IdentityPoolConfiguration:
    """Cognito identity pool settings. Build through `builder()` or `from_json()`."""
    region: str | None
    pool_id: str | None
    endpoint: str | None

    def to_gen1_json(self) -> dict[str, str]:
        # None fields are omitted.
        wire = Gen1IdentityPoolJson.model_construct(
            region=self.region,
            pool_id=self.pool_id,
            endpoint=self.endpoint,
        )
        return wire.model_dump(by_alias=True, exclude_none=True)

    @staticmethod
    def builder() -> IdentityPoolConfigurationBuilder:
        return IdentityPoolConfigurationBuilder()

    @staticmethod
    def from_json(config_json: Mapping[str, Any] | None) -> IdentityPoolConfigurationBuilder:
        """
        Builder populated from a Gen1 JSON object.
        Absent, empty or non-string values leave the field unset, including region,
        which does not fall back to DEFAULT_REGION on this path.
        """
        return IdentityPoolConfigurationBuilder(config_json if config_json is not None else {})

    @staticmethod
    def configure(block: Callable[[IdentityPoolConfigurationBuilder], Any]) -> IdentityPoolConfiguration:
        builder = IdentityPoolConfigurationBuilder()
        block(builder)
        return builder.build()


class IdentityPoolConfigurationBuilder:
    def __init__(self, config_json: Mapping[str, Any] | None = None):
        self._region: str | None = DEFAULT_REGION
        self._pool_id: str | None = None
        self._endpoint: str | None = None

        if config_json is not None:
            raw = dict(config_json) if isinstance(config_json, Mapping) else {}
            parsed = Gen1IdentityPoolJson.model_validate(raw)
            self._region = parsed.region
            self._pool_id = parsed.pool_id
            self._endpoint = parsed.endpoint

    def region(self, region: str) -> IdentityPoolConfigurationBuilder:
        self._region = region
        return self

    def pool_id(self, pool_id: str) -> IdentityPoolConfigurationBuilder:
        self._pool_id = pool_id
        return self

    def endpoint(self, endpoint: str) -> IdentityPoolConfigurationBuilder:
        self._endpoint = endpoint
        return self

    def build(self) -> IdentityPoolConfiguration:
        return IdentityPoolConfiguration(
            region=self._region,
            pool_id=self._pool_id,
            endpoint=self._endpoint,
        )
