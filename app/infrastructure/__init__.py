"""Infrastructure modules for the Weblate translation client.

Centralized infrastructure components:
- configuration: Settings management (Settings, WeblateSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and error classification
- services: Settings-driven factories (get_settings, get_translation_service)
"""
