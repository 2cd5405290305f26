"""ReportGenerator class for rendering a Report as text."""
from io import StringIO

from .summary import Report, ProjectReport
from ..utils.format_utils import format_hm


class ReportGenerator:
    """Class for rendering the weekly report text."""

    def __init__(self, report: Report):
        """Initialize a ReportGenerator.

        Args:
            report: Aggregated report to render
        """
        self.report = report

    def generate_report(self) -> str:
        """Generate the complete report.

        Returns:
            Report as a string
        """
        output = StringIO()
        self._generate_header(output)
        for idx, project in enumerate(self.report.projects):
            if idx:
                output.write("\n")
            self._generate_project_block(output, project)
        return output.getvalue()

    def _generate_header(self, output: StringIO):
        total = format_hm(self.report.total_hours, self.report.total_minutes)
        output.write(f"Total Hours: {total}\n\n")

    def _generate_project_block(self, output: StringIO, project: ProjectReport):
        """Write one project heading followed by its entries.

        Args:
            output: StringIO to write to
            project: Project to render
        """
        output.write(f"PROJECT: {project.project_name}\n\n")
        for entry in project.entries:
            output.write(f"- {entry}\n")


def format_report(report: Report) -> str:
    """Render a Report as the text that is printed and copied."""
    return ReportGenerator(report).generate_report()
