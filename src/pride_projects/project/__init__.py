"""Project records, JSON mapping and tabular output."""

from pride_projects.project.summary import ProjectSummary
from pride_projects.project.collection import ProjectSummaryList
from pride_projects.project.mapper import from_json, from_json_page
from pride_projects.project.table import to_data_frame, to_row, to_rows

__all__ = [
    "ProjectSummary",
    "ProjectSummaryList",
    "from_json",
    "from_json_page",
    "to_row",
    "to_rows",
    "to_data_frame",
]
