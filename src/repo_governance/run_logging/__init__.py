"""Run logging exports."""

from .log_format import LOG_DATE_FORMAT, LOG_FORMAT, ROOT_LOGGER_NAME, configure_run_logging

__all__ = ["LOG_DATE_FORMAT", "LOG_FORMAT", "ROOT_LOGGER_NAME", "configure_run_logging"]
