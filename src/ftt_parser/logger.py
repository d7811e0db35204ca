"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``ftt_parser.logging`` directly:
    from ftt_parser.logging import get_logger
"""

from ftt_parser.logging import get_logger, list_active_loggers, set_debug

__all__ = ["get_logger", "list_active_loggers", "set_debug"]
