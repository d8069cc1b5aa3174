"""Contextual logging helpers."""

from eventhub.log_config.logger import ContextualLogger

__all__ = ["ContextualLogger"]
