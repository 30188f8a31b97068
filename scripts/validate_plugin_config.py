#!/usr/bin/env python3
"""
Script to validate the cloudwatch plugin section of a load test script (JSON or YAML).
"""

import json
import sys
from pathlib import Path
from typing import Any

import yaml

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loadwatch.core.config import validate_config
from loadwatch.core.exceptions import PluginConfigError


def load_script(path: Path) -> Any:
    """Load a script file, picking the parser from its extension."""
    with path.open() as f:
        if path.suffix in (".yml", ".yaml"):
            return yaml.safe_load(f)
        return json.load(f)


def validate_script(path: Path) -> bool:
    try:
        script = load_script(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Could not load script '{path}': {e}")
        return False

    # Test scripts nest the plugins under `config`
    script_config = script.get("config", script) if isinstance(script, dict) else script

    try:
        plugin_config = validate_config(script_config)
    except PluginConfigError as e:
        print(f"Invalid plugin configuration [{e.error_code}]: {e.message}")
        return False

    print(
        f"✓ Plugin configuration is valid "
        f"(namespace={plugin_config.namespace}, region={plugin_config.region})"
    )
    return True


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <script.json|script.yml>")
        sys.exit(2)

    success = validate_script(Path(sys.argv[1]))
    sys.exit(0 if success else 1)
