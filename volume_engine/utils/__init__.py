from .logger import get_logger, log_performance, setup_logging

__all__ = ['get_logger', 'log_performance', 'setup_logging']
