from loadwatch.services.reporting_plugin import ReportingPlugin, create_plugin

__all__ = ["ReportingPlugin", "create_plugin"]
