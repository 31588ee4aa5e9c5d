"""
Pytest configuration and fixtures for PRIDE Projects tests.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from pride_projects.project.summary import ProjectSummary


@pytest.fixture
def project_json():
    """Return a fully populated project document as decoded from the service."""
    return {
        "accession": "PXD000001",
        "title": "TMT spikes - Using R and Bioconductor for proteomics data analysis",
        "projectDescription": "Expected reporter ion ratios: Erwinia peptides 1:1:1:1",
        "publicationDate": "2012-03-07",
        "numAssays": 1,
        "species": ["Erwinia carotovora"],
        "tissues": ["whole body"],
        "ptmNames": ["iTRAQ4plex-116 reporter+balance reagent acylated residue"],
        "instrumentNames": ["LTQ Orbitrap Velos"],
        "projectTags": ["Technical"],
        "submissionType": "COMPLETE",
    }


@pytest.fixture
def minimal_project_json():
    """Return a project document with no description and no multi-valued fields."""
    return {
        "accession": "PXD000001",
        "title": "Test",
        "numAssays": 3,
        "submissionType": "COMPLETE",
        "publicationDate": "2014-01-01",
    }


@pytest.fixture
def make_project():
    """Return a factory building valid ProjectSummary objects."""

    def _make(**overrides):
        fields = {
            "accession": "PXD000001",
            "title": "Test project",
            "description": "A test project",
            "publication_date": datetime(2014, 1, 1),
            "num_assays": 3,
            "species": ("Homo sapiens (Human)",),
            "tissues": ("liver",),
            "ptm_names": ("monohydroxylated residue",),
            "instrument_names": ("Q Exactive",),
            "tags": ("Biomedical",),
            "submission_type": "COMPLETE",
        }
        fields.update(overrides)
        return ProjectSummary(**fields)

    return _make


@pytest.fixture
def mock_session():
    """Return a MagicMock standing in for a requests.Session."""
    return MagicMock()


@pytest.fixture
def make_response():
    """Return a factory building mock HTTP responses whose json() returns a payload."""

    def _make(payload=None, status_code=200):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = payload
        return resp

    return _make
