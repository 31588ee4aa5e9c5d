"""
Configuration constants and defaults for the PRIDE Archive project client.

Field catalog
~~~~~~~~~~~~~
Project records are read from the PRIDE Archive web service JSON
representation.  Each record field is taken from one JSON key:

* Single-valued keys (``accession``, ``title``, ``projectDescription``,
  ``publicationDate``, ``numAssays``, ``submissionType``) are passed through.
* Multi-valued keys (``species``, ``tissues``, ``ptmNames``,
  ``instrumentNames``, ``projectTags``) are always turned into a non-empty
  sequence of strings.

Missing descriptions and empty multi-valued fields are replaced by
``MISSING_VALUE``.
"""

from typing import Dict, List

# =============================================================================
# Web service
# =============================================================================

# PRIDE Archive web service base URLs
PRIDE_ARCHIVE_URL = "http://www.ebi.ac.uk/pride/ws/archive"
PRIDE_ARCHIVE_URL_DEV = "http://wwwdev.ebi.ac.uk/pride/ws/archive"

ARCHIVE_URLS: Dict[str, str] = {
    "production": PRIDE_ARCHIVE_URL,
    "development": PRIDE_ARCHIVE_URL_DEV,
}

# Seconds to wait for the service before giving up on a request
DEFAULT_TIMEOUT = 60

# =============================================================================
# Paging
# =============================================================================

# Number of projects returned by a plain listing
DEFAULT_LIST_COUNT = 10

# Defaults of a ProjectSummaryList built without page metadata
DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 10

# Page size requested by a search when the caller does not give one
DEFAULT_SEARCH_PAGE_SIZE = 100

# =============================================================================
# Record values
# =============================================================================

# Placeholder for data the service did not provide
MISSING_VALUE = "Not available"

# Joins multi-valued fields into a single table cell
MULTI_VALUE_SEPARATOR = " || "

# Record field -> JSON key in the service representation
JSON_FIELDS: Dict[str, str] = {
    "accession": "accession",
    "title": "title",
    "description": "projectDescription",
    "publication_date": "publicationDate",
    "num_assays": "numAssays",
    "species": "species",
    "tissues": "tissues",
    "ptm_names": "ptmNames",
    "instrument_names": "instrumentNames",
    "tags": "projectTags",
    "submission_type": "submissionType",
}

MULTI_VALUED_FIELDS: List[str] = [
    "species",
    "tissues",
    "ptm_names",
    "instrument_names",
    "tags",
]

# Column order of tabular output
TABLE_COLUMNS: List[str] = [
    "accession",
    "title",
    "description",
    "publication_date",
    "num_assays",
    "species",
    "tissues",
    "ptm_names",
    "instrument_names",
    "tags",
    "submission_type",
]
