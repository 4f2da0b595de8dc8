"""Use case implementations for application workflows."""

from blepo.application.use_cases.build_queue import BuildQueueUseCase
from blepo.application.use_cases.validate_config import ValidateConfigUseCase
from blepo.application.use_cases.watch_video import WatchVideoUseCase

__all__ = [
    "BuildQueueUseCase",
    "ValidateConfigUseCase",
    "WatchVideoUseCase",
]
