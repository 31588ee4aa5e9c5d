"""
Flatten ProjectSummary records into table rows and pandas DataFrames.
"""

import logging
from typing import Any, Dict, Iterable, List, Union

import pandas as pd

from pride_projects.config import MULTI_VALUE_SEPARATOR, MULTI_VALUED_FIELDS, TABLE_COLUMNS
from pride_projects.project.collection import ProjectSummaryList
from pride_projects.project.summary import ProjectSummary

logger = logging.getLogger(__name__)

Projects = Union[ProjectSummary, ProjectSummaryList, Iterable[ProjectSummary]]


def to_row(project: ProjectSummary) -> Dict[str, Any]:
    """
    Flatten a project into a single row.

    Multi-valued fields are joined with ``MULTI_VALUE_SEPARATOR`` in their
    original order.  Keys follow ``TABLE_COLUMNS``.
    """
    row = {}
    for column in TABLE_COLUMNS:
        value = getattr(project, column)
        if column in MULTI_VALUED_FIELDS:
            value = MULTI_VALUE_SEPARATOR.join(value)
        row[column] = value
    return row


def to_rows(projects: Projects) -> List[Dict[str, Any]]:
    """One row per project, in input order."""
    if isinstance(projects, ProjectSummary):
        return [to_row(projects)]
    return [to_row(project) for project in projects]


def to_data_frame(projects: Projects) -> pd.DataFrame:
    """
    Build a DataFrame from one project, a ProjectSummaryList or any iterable
    of projects.

    Rows are labelled by accession; columns follow ``TABLE_COLUMNS``.
    """
    rows = to_rows(projects)
    df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    df.index = pd.Index([row["accession"] for row in rows], dtype=object)
    logger.debug(f"Built project table with {len(df)} rows")
    return df
