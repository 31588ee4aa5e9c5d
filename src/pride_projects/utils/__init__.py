"""Utility functions."""

from pride_projects.utils.logging import PACKAGE_LOGGER, setup_logging

__all__ = ["setup_logging", "PACKAGE_LOGGER"]
