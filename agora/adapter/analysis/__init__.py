"""Analysis service adapter."""

from .client import HttpAnalysisService, MockAnalysisService

__all__ = ["HttpAnalysisService", "MockAnalysisService"]
