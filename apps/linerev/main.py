from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from apps.linerev.core import ConfigManager, LineReverser, LineReverserError, StructuredLogger

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_BAD_CONFIG = 2


def build_logger(config_manager: ConfigManager) -> StructuredLogger:
    config = config_manager.config or config_manager.load()
    return StructuredLogger(log_file=config.log_file, level=config.log_level)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reverse the first line of input.txt into output.txt")
    parser.add_argument("--config", type=str, help="override the linerev.yaml path")
    parser.add_argument("--env", type=str, help="override the .env path")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config_manager = ConfigManager(env_path=args.env, config_path=args.config)
    config = config_manager.load()

    errors = config_manager.validate()
    if errors:
        print("Configuration errors:", file=sys.stderr)
        for err in errors:
            print(f"- {err}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    logger = build_logger(config_manager)
    logger.debug("settings", **config.to_dict())

    reverser = LineReverser.from_config(config, logger=logger)
    try:
        reverser.run()
    except LineReverserError:
        return EXIT_RUN_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
