#!/usr/bin/env python3
"""
Connection verification against the project's Supabase instance.
Reads ../.env relative to this script. Exits 0 only if the probe succeeds.
"""
import sys
from pathlib import Path

from preflight.config import PreflightConfig
from preflight.exceptions import ConfigurationError
from preflight.main import run, EXIT_FAILURE

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"

if __name__ == "__main__":
    try:
        config = PreflightConfig.from_env(ENV_FILE)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    sys.exit(run(config))
