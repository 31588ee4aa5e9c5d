"""
Map PRIDE Archive JSON documents to ProjectSummary records.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pride_projects.config import JSON_FIELDS, MISSING_VALUE, MULTI_VALUED_FIELDS
from pride_projects.exceptions import MappingError, ValidationError
from pride_projects.project.summary import ProjectSummary

logger = logging.getLogger(__name__)

# Fields that must be present in every project document
REQUIRED_FIELDS = [
    "accession",
    "title",
    "publication_date",
    "num_assays",
    "submission_type",
]


def parse_date(value: Any) -> datetime:
    """
    Parse an ISO 8601 date or date-time string.

    Accepts ``2014-01-01``, ``2014-01-01T10:20:30`` and the same with a
    ``Z`` or numeric UTC offset.

    Raises:
        ValueError: If the value is not a string or not an ISO date
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def normalize_values(value: Any) -> Tuple[Any, ...]:
    """
    Turn a multi-valued JSON field into a non-empty tuple.

    A missing, null or empty field becomes ``(MISSING_VALUE,)`` and a lone
    string becomes a one-element tuple.  Elements are not checked here.

    Raises:
        ValueError: If the value is neither a string nor a list
    """
    if value is None:
        return (MISSING_VALUE,)
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(value) if value else (MISSING_VALUE,)
    raise ValueError(f"expected a string or a list, got {type(value).__name__}")


def _describe_payload(payload: Dict[str, Any]) -> str:
    accession = payload.get(JSON_FIELDS["accession"])
    return f"project {accession}" if accession else "project document"


def from_json(payload: Any) -> ProjectSummary:
    """
    Build a ProjectSummary from a decoded project JSON object.

    Args:
        payload: Decoded JSON object as returned by the service

    Returns:
        The validated ProjectSummary

    Raises:
        MappingError: If a required key is missing, a value has an
            unexpected shape, or the resulting record is invalid
    """
    if not isinstance(payload, dict):
        raise MappingError(
            f"Expected a JSON object for a project, got {type(payload).__name__}",
            payload,
        )

    for name in REQUIRED_FIELDS:
        key = JSON_FIELDS[name]
        if key not in payload:
            raise MappingError(
                f"Missing required key '{key}' in {_describe_payload(payload)}",
                payload,
            )

    description = payload.get(JSON_FIELDS["description"])
    fields: Dict[str, Any] = {
        "accession": payload[JSON_FIELDS["accession"]],
        "title": payload[JSON_FIELDS["title"]],
        "description": MISSING_VALUE if description is None else description,
        "num_assays": payload[JSON_FIELDS["num_assays"]],
        "submission_type": payload[JSON_FIELDS["submission_type"]],
    }

    try:
        fields["publication_date"] = parse_date(payload[JSON_FIELDS["publication_date"]])
        for name in MULTI_VALUED_FIELDS:
            fields[name] = normalize_values(payload.get(JSON_FIELDS[name]))
    except ValueError as e:
        raise MappingError(
            f"Malformed {_describe_payload(payload)}: {e}", payload
        ) from e

    try:
        return ProjectSummary(**fields)
    except ValidationError as e:
        raise MappingError(
            f"Invalid {_describe_payload(payload)}: {e}", payload
        ) from e


def from_json_page(payload: Any, key: Optional[str] = None) -> List[ProjectSummary]:
    """
    Build ProjectSummary records from a project list document.

    The service wraps the list in a JSON object; unless ``key`` is given,
    the first field of that object is taken as the list.  Mapping stops at
    the first malformed element.

    Args:
        payload: Decoded JSON object as returned by a list request
        key: Name of the field holding the project list

    Returns:
        Records in the order of the document

    Raises:
        MappingError: If the document has no project list or any element
            cannot be mapped
    """
    if not isinstance(payload, dict) or not payload:
        raise MappingError("Expected a non-empty JSON object for a project list", payload)

    if key is None:
        items = next(iter(payload.values()))
    elif key in payload:
        items = payload[key]
    else:
        raise MappingError(f"Missing project list key '{key}'", payload)

    if not isinstance(items, list):
        raise MappingError(
            f"Expected a JSON array of projects, got {type(items).__name__}", payload
        )

    projects = [from_json(item) for item in items]
    logger.debug(f"Mapped {len(projects)} projects")
    return projects
