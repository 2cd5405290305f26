"""Report generation modules for togglpy."""

from .summary import ProjectReport, Report, aggregate_summary
from .report_generator import ReportGenerator, format_report

__all__ = ['ProjectReport', 'Report', 'aggregate_summary', 'ReportGenerator', 'format_report']
