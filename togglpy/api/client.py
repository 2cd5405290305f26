"""
TogglClient: A client for the two Toggl Track endpoints the weekly report needs.
"""
import base64
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any, List

import requests

from ..errors import AuthError, NetworkError, UnexpectedResponseShape
from ..utils.date_utils import DateRange

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
USER_AGENT = "weekly_report_script"


@dataclass(frozen=True)
class Workspace:
    """A Toggl workspace as listed by the API."""

    id: int
    name: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.id})"


def auth_header(api_token: str) -> Dict[str, str]:
    """Build the basic-auth header Toggl expects for API tokens.

    Args:
        api_token: Toggl API token

    Returns:
        Header dict with the Authorization entry
    """
    credential = base64.b64encode(f"{api_token}:api_token".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {credential}"}


class TogglClient:
    """A client for interacting with the Toggl Track API."""

    base_url = "https://api.track.toggl.com/api/v8"
    reports_url = "https://api.track.toggl.com/reports/api/v2"

    def __init__(self, api_token: str, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the TogglClient.

        Args:
            api_token: Toggl API token
            timeout: Seconds to wait for each request before giving up
        """
        self.api_token = api_token
        self.timeout = timeout

    def api_get(self, url: str, params: Optional[dict] = None) -> Any:
        """Make an authenticated GET request and decode the JSON body.

        Args:
            url: API endpoint URL
            params: Query parameters (optional)

        Returns:
            API response as JSON

        Raises:
            AuthError: If the token is rejected
            NetworkError: If the request fails or returns an error status
            UnexpectedResponseShape: If the body is not JSON
        """
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = requests.get(url, headers=auth_header(self.api_token), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise NetworkError(f"API request failed: {e}") from e

        if resp.status_code in (401, 403):
            raise AuthError(f"Toggl rejected the API token (HTTP {resp.status_code})")
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            logger.debug("Request to %s returned HTTP %s", url, resp.status_code)
            raise NetworkError(f"API request failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise UnexpectedResponseShape(f"Response from {url} is not JSON") from e

    def get_workspaces(self) -> List[Workspace]:
        """Get all workspaces the token has access to.

        Returns:
            List of workspaces

        Raises:
            UnexpectedResponseShape: If the payload is not a list of workspace objects
        """
        data = self.api_get(f"{self.base_url}/workspaces")
        if not isinstance(data, list):
            raise UnexpectedResponseShape("Workspace list is not a JSON array")

        workspaces = []
        for ws in data:
            if not isinstance(ws, dict):
                raise UnexpectedResponseShape(f"Workspace entry is not an object: {ws!r}")
            ws_id, name = ws.get("id"), ws.get("name")
            if isinstance(ws_id, bool) or not isinstance(ws_id, int) or not isinstance(name, str):
                raise UnexpectedResponseShape(f"Workspace entry lacks an integer id and a name: {ws!r}")
            workspaces.append(Workspace(ws_id, name))
        logger.info("Retrieved %d workspaces", len(workspaces))
        return workspaces

    def get_summary(self, workspace_id: int, date_range: DateRange) -> Dict[str, Any]:
        """Get the per-project summary report for a date range.

        Args:
            workspace_id: Toggl workspace ID
            date_range: Inclusive reporting period

        Returns:
            Raw summary payload; an empty "data" list is a valid result
        """
        params = {
            "workspace_id": workspace_id,
            "since": date_range.since_str,
            "until": date_range.until_str,
            "user_agent": USER_AGENT,
        }
        data = self.api_get(f"{self.reports_url}/summary", params)
        if not isinstance(data, dict):
            raise UnexpectedResponseShape("Summary report is not a JSON object")
        return data
