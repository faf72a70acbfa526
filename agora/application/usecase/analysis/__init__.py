"""Analysis report use cases."""

from .apply_feedback import (
    ApplyFeedbackRequest,
    ApplyFeedbackResponse,
    ApplyFeedbackUseCase,
)

__all__ = [
    "ApplyFeedbackRequest",
    "ApplyFeedbackResponse",
    "ApplyFeedbackUseCase",
]
