"""Configuration module for the Form3 client."""

from form3_client.config.logging import setup_logging, get_logger, mask_sensitive_data
from form3_client.config.settings import Settings, settings

__all__ = ["setup_logging", "get_logger", "mask_sensitive_data", "Settings", "settings"]
