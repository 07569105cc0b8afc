"""Infrastructure modules for the site configuration service.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (get_module_logger, bind_request_context)
- i18n: Translation catalogs, key accessors and locale resolution
- operations: Operation results and status codes
- services: Dependency injection providers (SettingsDep, get_settings)
"""
