"""
Utility modules for pyquake3
"""

from .logging_config import ModuleLogger, ModulePrefixFormatter, configure_logging, reset_logging

__all__ = ['ModuleLogger', 'ModulePrefixFormatter', 'configure_logging', 'reset_logging']
