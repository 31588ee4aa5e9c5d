"""
PRIDE Projects - Read project metadata from the PRIDE Archive web service.

Fetches public proteomics projects by accession, as listings or as paged
search results, and flattens them into tables for downstream analysis.
"""

__version__ = "1.0.0"
__author__ = "PRIDE Team"

import logging

from pride_projects.client import PrideArchiveClient, create_client
from pride_projects.exceptions import (
    MappingError,
    PrideProjectsError,
    RemoteAccessError,
    ValidationError,
)
from pride_projects.project import (
    ProjectSummary,
    ProjectSummaryList,
    from_json,
    to_data_frame,
    to_rows,
)
from pride_projects.utils.logging import PACKAGE_LOGGER, setup_logging

# Silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

__all__ = [
    "PrideArchiveClient",
    "create_client",
    "ProjectSummary",
    "ProjectSummaryList",
    "from_json",
    "to_rows",
    "to_data_frame",
    "setup_logging",
    "PrideProjectsError",
    "ValidationError",
    "MappingError",
    "RemoteAccessError",
    "__version__",
]
