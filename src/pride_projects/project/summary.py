"""
ProjectSummary - Validated record of a single PRIDE Archive project.
"""

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence, Tuple

import pandas as pd

from pride_projects.config import MULTI_VALUED_FIELDS
from pride_projects.exceptions import ValidationError


def _check_string(name: str, value: Any) -> None:
    if not isinstance(value, str) or len(value) == 0:
        raise ValidationError(name, "must be a single valid string", value)


def _check_strings(name: str, value: Any) -> None:
    if not isinstance(value, tuple) or len(value) == 0:
        raise ValidationError(name, "must be one or multiple valid strings", value)
    for item in value:
        if not isinstance(item, str) or len(item) == 0:
            raise ValidationError(name, "must be one or multiple valid strings", value)


def _check_date(name: str, value: Any) -> None:
    # pd.NaT passes the isinstance check
    if not isinstance(value, datetime) or pd.isna(value):
        raise ValidationError(name, "must be a single valid date", value)


def _check_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, "must be a non-negative integer", value)
    if value < 0:
        raise ValidationError(name, "must be a non-negative integer", value)


@dataclass(frozen=True)
class ProjectSummary:
    """
    A project (dataset) submitted to PRIDE Archive.

    Instances are immutable and always valid: every field is checked when the
    object is built, and ``replace`` builds a new, re-checked instance.
    Multi-valued fields accept lists or tuples of strings and are stored as
    tuples.
    """

    accession: str
    title: str
    description: str
    publication_date: datetime
    num_assays: int
    species: Tuple[str, ...]
    tissues: Tuple[str, ...]
    ptm_names: Tuple[str, ...]
    instrument_names: Tuple[str, ...]
    tags: Tuple[str, ...]
    submission_type: str

    def __post_init__(self):
        for name in MULTI_VALUED_FIELDS:
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))
        self.validate()

    def validate(self) -> None:
        """
        Check every field of the record.

        Raises:
            ValidationError: On the first field that is empty, missing,
                of the wrong type, negative or not a valid date
        """
        _check_string("accession", self.accession)
        _check_string("title", self.title)
        _check_string("description", self.description)
        _check_date("publication_date", self.publication_date)
        _check_count("num_assays", self.num_assays)
        _check_strings("species", self.species)
        _check_strings("tissues", self.tissues)
        _check_strings("ptm_names", self.ptm_names)
        _check_strings("instrument_names", self.instrument_names)
        _check_strings("tags", self.tags)
        _check_string("submission_type", self.submission_type)

    def replace(self, **changes: Any) -> "ProjectSummary":
        """
        Return a copy of this record with some fields replaced.

        Args:
            **changes: New field values, keyed by field name

        Returns:
            A new validated ProjectSummary

        Raises:
            ValidationError: If a field name is unknown or a new value is invalid
        """
        known = {f.name for f in dataclasses.fields(self)}
        for name in changes:
            if name not in known:
                raise ValidationError(name, "is not a project field")
        return dataclasses.replace(self, **changes)

    @property
    def label(self) -> str:
        """Short form: accession and title."""
        return f"{self.accession}, {self.title}"

    def describe(self) -> str:
        """Multi-line, human readable rendering of the record."""

        def joined(values: Sequence[str]) -> str:
            return " ".join(values)

        lines = [
            f"An object of class {type(self).__name__}",
            f" with {self.num_assays} assays and made public in {self.publication_date}",
            f"    Accession: {self.accession}",
            f"    Title: {self.title}",
            f"    Description: {self.description}",
            f"    Species: {joined(self.species)}",
            f"    Tissues: {joined(self.tissues)}",
            f"    PTMs: {joined(self.ptm_names)}",
            f"    Instruments: {joined(self.instrument_names)}",
            f"    Tags: {joined(self.tags)}",
            f"    Submission type: {self.submission_type}",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()
