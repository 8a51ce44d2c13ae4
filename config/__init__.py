"""Configuration module for declarative selection requests."""

from .loader import ConfigLoader, ConfigError, load_requests

__all__ = ['ConfigLoader', 'ConfigError', 'load_requests']
