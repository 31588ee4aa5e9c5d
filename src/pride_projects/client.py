"""
PrideArchiveClient - Read project metadata from the PRIDE Archive web service.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from pride_projects.config import (
    ARCHIVE_URLS,
    DEFAULT_LIST_COUNT,
    DEFAULT_SEARCH_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    PRIDE_ARCHIVE_URL,
)
from pride_projects.exceptions import RemoteAccessError
from pride_projects.project.collection import ProjectSummaryList
from pride_projects.project.mapper import from_json, from_json_page
from pride_projects.project.summary import ProjectSummary

logger = logging.getLogger(__name__)


def _require_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")


class PrideArchiveClient:
    """
    Client for the project endpoints of the PRIDE Archive web service.

    Every operation is a single GET request; nothing is cached and failed
    requests are not retried.
    """

    def __init__(
        self,
        base_url: str = PRIDE_ARCHIVE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Web service base URL (production by default)
            timeout: Seconds to wait for each request (None = no timeout)
            session: HTTP session to reuse; a new one is created if omitted
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _endpoint(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self.base_url}{path}"
        if not params:
            return url
        return requests.Request("GET", url, params=params).prepare().url

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``path`` relative to the base URL and decode the JSON body.

        Raises:
            RemoteAccessError: On connection errors, non-2xx responses or an
                undecodable body
        """
        url = f"{self.base_url}{path}"
        endpoint = self._endpoint(path, params)
        logger.debug(f"GET {endpoint}")

        try:
            resp = self.session.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"PRIDE Archive request failed: {endpoint} (HTTP {status})")
            raise RemoteAccessError(endpoint, e, status) from e
        except requests.RequestException as e:
            logger.error(f"PRIDE Archive request failed: {endpoint}: {e}")
            raise RemoteAccessError(endpoint, e) from e

        if not 200 <= resp.status_code < 300:
            logger.error(f"PRIDE Archive request failed: {endpoint} (HTTP {resp.status_code})")
            raise RemoteAccessError(
                endpoint, "unexpected non-success response", resp.status_code
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"PRIDE Archive returned a non-JSON body: {endpoint}")
            raise RemoteAccessError(
                endpoint, f"response body is not valid JSON: {e}", resp.status_code
            ) from e

    def get_project(self, accession: str) -> ProjectSummary:
        """
        Fetch a single project.

        Args:
            accession: Project accession (e.g., PXD000001)

        Returns:
            The project as a ProjectSummary

        Raises:
            ValueError: If the accession is not a non-empty string
            RemoteAccessError: If the request fails
            MappingError: If the response is not a valid project
        """
        if not isinstance(accession, str) or not accession.strip():
            raise ValueError("A project accession is required")
        accession = accession.strip()

        payload = self._get_json(f"/project/{quote(accession, safe='')}")
        project = from_json(payload)
        logger.info(f"Retrieved project {project.accession}")
        return project

    def get_project_list(self, count: int = DEFAULT_LIST_COUNT) -> List[ProjectSummary]:
        """
        Fetch the first ``count`` public projects.

        Args:
            count: Maximum number of projects to return

        Returns:
            Projects in the order returned by the service

        Raises:
            ValueError: If count is not a positive integer
            RemoteAccessError: If the request fails
            MappingError: If any project in the response is malformed
        """
        _require_int("count", count, minimum=1)

        payload = self._get_json("/project/list", params={"show": count})
        projects = from_json_page(payload)
        logger.info(f"Retrieved {len(projects)} projects")
        return projects

    def search_projects(
        self,
        query: str,
        page_number: int = 0,
        page_size: int = DEFAULT_SEARCH_PAGE_SIZE,
    ) -> ProjectSummaryList:
        """
        Search public projects.

        The search is the project listing filtered by ``query`` on the
        service side, one page at a time.

        Args:
            query: Search terms (empty string lists all projects)
            page_number: Zero-based page to fetch
            page_size: Maximum number of projects per page

        Returns:
            ProjectSummaryList holding the page and its query metadata

        Raises:
            ValueError: If query is not a string, page_number is negative or
                page_size is not positive
            RemoteAccessError: If the request fails
            MappingError: If any project in the response is malformed
        """
        if not isinstance(query, str):
            raise ValueError(f"query must be a string, got {type(query).__name__}")
        _require_int("page_number", page_number, minimum=0)
        _require_int("page_size", page_size, minimum=1)

        payload = self._get_json(
            "/project/list",
            params={"show": page_size, "page": page_number, "q": query},
        )
        projects = from_json_page(payload)
        logger.info(
            f"Search '{query}' page {page_number} returned {len(projects)} projects"
        )
        return ProjectSummaryList(
            query=query,
            projects=tuple(projects),
            page_number=page_number,
            page_size=page_size,
        )

    def count_projects(self) -> int:
        """
        Return the number of public projects in PRIDE Archive.

        Raises:
            RemoteAccessError: If the request fails or the body is not an integer
        """
        path = "/project/count"
        payload = self._get_json(path)
        if isinstance(payload, bool) or not isinstance(payload, int):
            endpoint = self._endpoint(path)
            logger.error(f"Unexpected project count from {endpoint}: {payload!r}")
            raise RemoteAccessError(
                endpoint, f"expected an integer project count, got {payload!r}"
            )
        return payload

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit, closing the session."""
        self.close()
        return False


def create_client(environment: str = "production", **kwargs: Any) -> PrideArchiveClient:
    """
    Create a client for one of the known PRIDE Archive deployments.

    Args:
        environment: 'production' or 'development'
        **kwargs: Passed on to PrideArchiveClient (timeout, session)

    Returns:
        A PrideArchiveClient pointed at the deployment

    Raises:
        ValueError: If the environment is not recognized
    """
    key = environment.strip().lower()
    if key not in ARCHIVE_URLS:
        raise ValueError(
            f"Unrecognized environment: '{environment}'. "
            f"Expected one of: {', '.join(ARCHIVE_URLS)}."
        )
    return PrideArchiveClient(base_url=ARCHIVE_URLS[key], **kwargs)
