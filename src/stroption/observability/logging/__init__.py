"""Observability – structured logging helpers."""
from stroption.observability.logging.factory import JsonLoggerFactory
from stroption.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
