from .logger_interface import LoggerInterface, LogLevel
from .structured_logger import StructuredLogger, configure_logging, get_logger

__all__ = [
    'LoggerInterface',
    'LogLevel',
    'StructuredLogger',
    'configure_logging',
    'get_logger'
]
