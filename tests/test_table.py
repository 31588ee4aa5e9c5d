"""
Tests for tabular projection of projects.
"""

from datetime import datetime

import pandas as pd

from pride_projects.config import TABLE_COLUMNS
from pride_projects.project.collection import ProjectSummaryList
from pride_projects.project.table import to_data_frame, to_row, to_rows


class TestToRow:
    """Tests for flattening a single project."""

    def test_column_order(self, make_project):
        """Test that row keys follow the table column order."""
        row = to_row(make_project())

        assert list(row.keys()) == TABLE_COLUMNS
        assert list(row.keys()) == [
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

    def test_multi_values_joined(self, make_project):
        """Test that multi-valued fields are joined with ' || '."""
        row = to_row(make_project(species=("human", "mouse")))

        assert row["species"] == "human || mouse"

    def test_all_multi_valued_fields_joined(self, make_project):
        project = make_project(
            tissues=("liver", "brain"),
            ptm_names=("a", "b", "c"),
            instrument_names=("Q Exactive",),
            tags=("Biomedical", "Technical"),
        )
        row = to_row(project)

        assert row["tissues"] == "liver || brain"
        assert row["ptm_names"] == "a || b || c"
        assert row["instrument_names"] == "Q Exactive"
        assert row["tags"] == "Biomedical || Technical"

    def test_scalars_unchanged(self, make_project):
        row = to_row(make_project())

        assert row["accession"] == "PXD000001"
        assert row["publication_date"] == datetime(2014, 1, 1)
        assert row["num_assays"] == 3
        assert row["submission_type"] == "COMPLETE"


class TestToRows:
    """Tests for flattening several projects."""

    def test_collection_order(self, make_project):
        """Test one row per project in collection order."""
        accessions = ["PXD000003", "PXD000001", "PXD000002"]
        page = ProjectSummaryList(projects=[make_project(accession=a) for a in accessions])

        rows = to_rows(page)

        assert len(rows) == 3
        assert [row["accession"] for row in rows] == accessions

    def test_single_project(self, make_project):
        assert len(to_rows(make_project())) == 1

    def test_plain_list(self, make_project):
        projects = [make_project(accession="PXD000002"), make_project(accession="PXD000001")]

        assert [row["accession"] for row in to_rows(projects)] == ["PXD000002", "PXD000001"]

    def test_empty_collection(self):
        assert to_rows(ProjectSummaryList()) == []


class TestToDataFrame:
    """Tests for DataFrame output."""

    def test_collection_frame(self, make_project):
        page = ProjectSummaryList(
            projects=[
                make_project(accession="PXD000001", species=("human", "mouse")),
                make_project(accession="PXD000002"),
            ]
        )

        df = to_data_frame(page)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == TABLE_COLUMNS
        assert list(df.index) == ["PXD000001", "PXD000002"]
        assert df.loc["PXD000001", "species"] == "human || mouse"
        assert df.loc["PXD000002", "num_assays"] == 3

    def test_single_project_frame(self, make_project):
        df = to_data_frame(make_project())

        assert len(df) == 1
        assert df.index[0] == "PXD000001"
        assert df.iloc[0]["title"] == "Test project"

    def test_empty_frame(self):
        df = to_data_frame([])

        assert df.empty
        assert list(df.columns) == TABLE_COLUMNS
