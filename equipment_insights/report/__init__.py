from .summary import STATS_HEADERS, ReportSummary, StatisticsRow, build_report_summary

__all__ = ["STATS_HEADERS", "ReportSummary", "StatisticsRow", "build_report_summary"]
