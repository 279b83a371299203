from .report_guard import ReportGuard
from .trigger import IngestionTrigger, PollResult

__all__ = ["ReportGuard", "IngestionTrigger", "PollResult"]
