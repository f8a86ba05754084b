#!/usr/bin/env python3
"""Print the effective SideEffects API configuration as JSON.

Usage:
    PYTHONPATH=. python scripts/show_config.py [--env-file PATH]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from side_effects.settings import Settings


def load_settings(env_file: Path | None = None) -> Settings:
    if env_file is None:
        return Settings()
    if not env_file.is_file():
        raise SystemExit(f"env file not found: {env_file}")
    return Settings(_env_file=env_file)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dump the effective configuration.")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Read settings from this dotenv file instead of .env",
    )
    args = parser.parse_args(argv)
    settings = load_settings(args.env_file)
    print(json.dumps(settings.model_dump(mode="json"), indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
