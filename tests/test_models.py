import logging
from identitypool.config.models import Gen1IdentityPoolJson, Gen1Key


def test_reads_wire_aliases():
    wire = Gen1IdentityPoolJson.model_validate({"Region": "eu-west-1", "PoolId": "pool-1", "Endpoint": "host"})
    assert (wire.region, wire.pool_id, wire.endpoint) == ("eu-west-1", "pool-1", "host")


def test_ignores_unknown_keys():
    wire = Gen1IdentityPoolJson.model_validate({"PoolId": "pool-1", "AppClientId": "abc"})
    assert wire.model_dump(by_alias=True, exclude_none=True) == {Gen1Key.POOL_ID: "pool-1"}


def test_non_string_values_logged_and_dropped(caplog):
    with caplog.at_level(logging.DEBUG, logger="identitypool.config.models"):
        wire = Gen1IdentityPoolJson.model_validate({"Region": 7, "PoolId": ""})
    assert wire.region is None
    assert wire.pool_id is None
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Ignoring non-string identity pool value: field=region type=int"]
