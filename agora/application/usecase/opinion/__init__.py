"""Opinion use cases."""

from .get_opinion import (
    GetOpinionRequest,
    GetOpinionResponse,
    GetOpinionUseCase,
    OpinionView,
)
from .get_report_summary import (
    GetReportSummaryRequest,
    GetReportSummaryResponse,
    GetReportSummaryUseCase,
)
from .report_opinion import (
    ReportOpinionRequest,
    ReportOpinionResponse,
    ReportOpinionUseCase,
)
from .solve_report import SolveReportRequest, SolveReportResponse, SolveReportUseCase
from .submit_opinion import (
    SubmitOpinionRequest,
    SubmitOpinionResponse,
    SubmitOpinionUseCase,
)

__all__ = [
    "GetOpinionRequest",
    "GetOpinionResponse",
    "GetOpinionUseCase",
    "OpinionView",
    "GetReportSummaryRequest",
    "GetReportSummaryResponse",
    "GetReportSummaryUseCase",
    "ReportOpinionRequest",
    "ReportOpinionResponse",
    "ReportOpinionUseCase",
    "SolveReportRequest",
    "SolveReportResponse",
    "SolveReportUseCase",
    "SubmitOpinionRequest",
    "SubmitOpinionResponse",
    "SubmitOpinionUseCase",
]
