from enum import StrEnum

from loadwatch.constants import (
    PLUGIN_NAME,
    PLUGIN_PARAM_DIMENSIONS,
    PLUGIN_PARAM_NAMESPACE,
    PLUGIN_PARAM_REGION,
)


class ConfigErrorCode(StrEnum):
    """
    Error codes of the plugin configuration validation
    """

    CONFIG_MISSING = "CONFIG_MISSING"
    NAMESPACE_MISSING = "NAMESPACE_MISSING"
    NAMESPACE_NOT_STRING = "NAMESPACE_NOT_STRING"
    NAMESPACE_EMPTY = "NAMESPACE_EMPTY"
    REGION_MISSING = "REGION_MISSING"
    REGION_NOT_STRING = "REGION_NOT_STRING"
    REGION_EMPTY = "REGION_EMPTY"
    DIMENSIONS_NOT_OBJECT = "DIMENSIONS_NOT_OBJECT"


class _BaseMessageException(Exception):
    """Base class for exceptions that only need a message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class PluginConfigError(_BaseMessageException):
    """Base class for fatal plugin configuration errors."""

    error_code: ConfigErrorCode

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        return f'{class_name}(message="{self.message}", error_code={self.error_code})'


def _param_required(param: str) -> str:
    return f'The "{param}" parameter is required'


def _param_must_be_string(param: str) -> str:
    return f'The "{param}" param must have a string value'


def _param_must_not_be_empty(param: str) -> str:
    return f'The "{param}" param must have a length of at least one'


class ConfigMissingError(PluginConfigError):
    error_code = ConfigErrorCode.CONFIG_MISSING

    def __init__(
        self,
        message: str = f'The "{PLUGIN_NAME}" plugin requires configuration under '
        f"<script>.config.plugins.{PLUGIN_NAME}",
    ) -> None:
        super().__init__(message)


class NamespaceMissingError(PluginConfigError):
    error_code = ConfigErrorCode.NAMESPACE_MISSING

    def __init__(self, message: str = _param_required(PLUGIN_PARAM_NAMESPACE)) -> None:
        super().__init__(message)


class NamespaceNotStringError(PluginConfigError):
    error_code = ConfigErrorCode.NAMESPACE_NOT_STRING

    def __init__(self, message: str = _param_must_be_string(PLUGIN_PARAM_NAMESPACE)) -> None:
        super().__init__(message)


class NamespaceEmptyError(PluginConfigError):
    error_code = ConfigErrorCode.NAMESPACE_EMPTY

    def __init__(self, message: str = _param_must_not_be_empty(PLUGIN_PARAM_NAMESPACE)) -> None:
        super().__init__(message)


class RegionMissingError(PluginConfigError):
    error_code = ConfigErrorCode.REGION_MISSING

    def __init__(self, message: str = _param_required(PLUGIN_PARAM_REGION)) -> None:
        super().__init__(message)


class RegionNotStringError(PluginConfigError):
    error_code = ConfigErrorCode.REGION_NOT_STRING

    def __init__(self, message: str = _param_must_be_string(PLUGIN_PARAM_REGION)) -> None:
        super().__init__(message)


class RegionEmptyError(PluginConfigError):
    error_code = ConfigErrorCode.REGION_EMPTY

    def __init__(self, message: str = _param_must_not_be_empty(PLUGIN_PARAM_REGION)) -> None:
        super().__init__(message)


class DimensionsNotObjectError(PluginConfigError):
    error_code = ConfigErrorCode.DIMENSIONS_NOT_OBJECT

    def __init__(
        self, message: str = f'The "{PLUGIN_PARAM_DIMENSIONS}" param must have an object value'
    ) -> None:
        super().__init__(message)


class PluginStateError(_BaseMessageException):
    def __init__(self, message: str = "Invalid plugin state transition") -> None:
        super().__init__(message)
