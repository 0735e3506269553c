"""
Logging configuration for pyquake3 with clear module prefixes
"""

import logging
from typing import Dict, List


class ModuleLogger:
    """Attaches prefixed handlers to the package's module loggers"""

    # Module prefix mapping
    MODULE_PREFIXES: Dict[str, str] = {
        'pyquake3.connection.builder': '[BUILDER]',
        'pyquake3.connection.query_channel': '[CHANNEL]',
        'pyquake3.protocol.status_decoder': '[DECODER]',
        'pyquake3.client': '[CLIENT]',
        'pyquake3.cli': '[CLI]',
    }

    @classmethod
    def prefix_for(cls, name: str) -> str:
        """Find the prefix for a logger name"""
        for module_name, module_prefix in cls.MODULE_PREFIXES.items():
            if name.startswith(module_name):
                return module_prefix
        return '[PYQUAKE3]'

    @classmethod
    def get_logger(cls, name: str, level: int = logging.INFO) -> logging.Logger:
        """Get a logger with appropriate prefix for the module"""
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # one handler per logger
        if logger.handlers:
            return logger

        handler = logging.StreamHandler()
        handler.setFormatter(ModulePrefixFormatter(cls.prefix_for(name)))

        logger.addHandler(handler)
        logger.propagate = False

        return logger


class ModulePrefixFormatter(logging.Formatter):
    """Stamps each record with the owning module's prefix, e.g. ``[CHANNEL]``"""

    FORMAT = '%(asctime)s - %(prefix)s %(levelname)s - %(message)s'
    DATE_FORMAT = '%H:%M:%S'

    def __init__(self, prefix: str):
        super().__init__(fmt=self.FORMAT, datefmt=self.DATE_FORMAT)
        self.prefix = prefix

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def configure_logging(level: int = logging.INFO) -> List[logging.Logger]:
    """Configure prefixed console logging for every pyquake3 module"""
    return [ModuleLogger.get_logger(module_name, level) for module_name in ModuleLogger.MODULE_PREFIXES]


def reset_logging() -> None:
    """Remove handlers installed by configure_logging"""
    for module_name in ModuleLogger.MODULE_PREFIXES:
        logger = logging.getLogger(module_name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
