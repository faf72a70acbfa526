"""Domain services."""

from .access_control import TalkSessionAccessControl
from .action_item_service import SEQUENCE_STRIDE, ActionItemService
from .analysis_service import AnalysisService
from .base import Service
from .image_service import ImageInspector, ImageStorage
from .opinion_service import OpinionService
from .talk_session_consent_service import TalkSessionConsentService

__all__ = [
    "ActionItemService",
    "AnalysisService",
    "ImageInspector",
    "ImageStorage",
    "OpinionService",
    "SEQUENCE_STRIDE",
    "Service",
    "TalkSessionAccessControl",
    "TalkSessionConsentService",
]
