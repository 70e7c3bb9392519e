"""Final report compilation and PDF export."""

from context_wizard.report.exporter import ReportExporter, export_file_name
from context_wizard.report.view import ReportView, build_report_view, sort_tows

__all__ = ["ReportExporter", "ReportView", "build_report_view", "export_file_name", "sort_tows"]
