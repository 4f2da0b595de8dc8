"""Application services for business logic orchestration."""

from blepo.application.services.fetch_orchestrator import FetchOrchestrator

__all__ = [
    "FetchOrchestrator",
]
