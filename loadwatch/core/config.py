from collections.abc import Mapping
from typing import Any

from loadwatch.constants import (
    PLUGIN_NAME,
    PLUGIN_PARAM_DIMENSIONS,
    PLUGIN_PARAM_NAMESPACE,
    PLUGIN_PARAM_REGION,
)
from loadwatch.core.exceptions import (
    ConfigMissingError,
    DimensionsNotObjectError,
    NamespaceEmptyError,
    NamespaceMissingError,
    NamespaceNotStringError,
    PluginConfigError,
    RegionEmptyError,
    RegionMissingError,
    RegionNotStringError,
)
from loadwatch.domains.plugin_config import PluginConfig


def get_plugin_section(script_config: Any) -> Mapping[str, Any]:
    """Return `<script>.config.plugins.cloudwatch` or raise ConfigMissingError."""
    if not isinstance(script_config, Mapping):
        raise ConfigMissingError()

    plugins = script_config.get("plugins")
    if not isinstance(plugins, Mapping) or PLUGIN_NAME not in plugins:
        raise ConfigMissingError()

    section = plugins[PLUGIN_NAME]
    if not isinstance(section, Mapping):
        raise ConfigMissingError()
    return section


def _validate_string_param(
    section: Mapping[str, Any],
    param: str,
    missing: type[PluginConfigError],
    not_string: type[PluginConfigError],
    empty: type[PluginConfigError],
) -> str:
    if param not in section:
        raise missing()
    value = section[param]
    if not isinstance(value, str):
        raise not_string()
    if len(value) == 0:
        raise empty()
    return value


def validate_config(script_config: Any) -> PluginConfig:
    """
    Validate the plugin section of a test script configuration.

    Checks run in a fixed order (section, namespace, region, dimensions) and the
    first failure is raised. On success an immutable PluginConfig is returned.

    Raises:
        PluginConfigError: the subclass matching the first failed check.
    """
    section = get_plugin_section(script_config)

    namespace = _validate_string_param(
        section,
        PLUGIN_PARAM_NAMESPACE,
        NamespaceMissingError,
        NamespaceNotStringError,
        NamespaceEmptyError,
    )
    region = _validate_string_param(
        section,
        PLUGIN_PARAM_REGION,
        RegionMissingError,
        RegionNotStringError,
        RegionEmptyError,
    )

    dimensions = None
    if PLUGIN_PARAM_DIMENSIONS in section:
        raw_dimensions = section[PLUGIN_PARAM_DIMENSIONS]
        if not isinstance(raw_dimensions, Mapping):
            raise DimensionsNotObjectError()
        dimensions = tuple((str(name), str(value)) for name, value in raw_dimensions.items())

    return PluginConfig(namespace=namespace, region=region, dimensions=dimensions)
