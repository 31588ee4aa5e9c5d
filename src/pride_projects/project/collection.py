"""
ProjectSummaryList - One page of PRIDE Archive project search results.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from pride_projects.config import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from pride_projects.exceptions import ValidationError
from pride_projects.project.summary import ProjectSummary


@dataclass(frozen=True)
class ProjectSummaryList:
    """
    A page of projects together with the query that produced it.

    An empty query means a plain listing.  Projects keep the order in which
    the service returned them.
    """

    query: str = ""
    projects: Tuple[ProjectSummary, ...] = ()
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if not isinstance(self.projects, tuple):
            object.__setattr__(self, "projects", tuple(self.projects))

        if not isinstance(self.query, str):
            raise ValidationError("query", "must be a string", self.query)
        for project in self.projects:
            if not isinstance(project, ProjectSummary):
                raise ValidationError("projects", "must only hold ProjectSummary objects", project)
        if isinstance(self.page_number, bool) or not isinstance(self.page_number, int) or self.page_number < 0:
            raise ValidationError("page_number", "must be a non-negative integer", self.page_number)
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size <= 0:
            raise ValidationError("page_size", "must be a positive integer", self.page_size)

    def __len__(self) -> int:
        return len(self.projects)

    def __iter__(self) -> Iterator[ProjectSummary]:
        return iter(self.projects)

    def __getitem__(self, index):
        return self.projects[index]

    def summary(self) -> str:
        """Multi-line description of the page for display."""
        lines = [
            f"A {type(self).__name__} representing the search results for query {self.query} with",
            f"    Projects in page: {len(self.projects)}",
            f"    Page number: {self.page_number}",
            f"    Page size: {self.page_size} projects per page",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()
