# Prints the Gen1 identity pool JSON resolved from a config file or the environment.

from __future__ import annotations
import argparse
import json
import sys
from identitypool.config.loader import IdentityPoolConfigError, get_identity_pool_config, load_gen1_config_file
from identitypool.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the resolved identity pool configuration as Gen1 JSON")
    parser.add_argument('--file', default=None, help='amplifyconfiguration.json or auth plugin JSON (default: read environment)')
    parser.add_argument('--log-level', default=None, help='Overrides LOG_LEVEL')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, service="scripts.show_identity_pool", stream=sys.stderr)
    try:
        config = load_gen1_config_file(args.file) if args.file else get_identity_pool_config()
    except IdentityPoolConfigError:
        logger.exception("Failed to load identity pool config")
        return 1
    if config is None:
        logger.error("No identity pool configured: file=%s", args.file)
        return 1
    print(json.dumps(config.to_gen1_json(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
