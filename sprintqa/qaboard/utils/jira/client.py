"""
Jira REST client for sprint lookup, issue search and comment creation.

Every call sends the same precomputed basic-auth header and expects JSON
back. Failures surface as exceptions from qaboard.exceptions:

- TrackerHttpError: Jira answered with a non-2xx status
- TrackerParseError: the body was not valid JSON
- TrackerConnectionError: Jira could not be reached

`post_comment` is the exception: it converts every failure into a
{"success": False, "message": ...} value so callers never have to handle
an error from the comment path.
"""

import base64
import functools
import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests
from django.conf import settings

from ...exceptions import (
    ConfigMissing,
    TrackerConnectionError,
    TrackerError,
    TrackerHttpError,
    TrackerParseError,
)

logger = logging.getLogger(__name__)

# Response bodies are cut to this length in errors and logs
BODY_EXCERPT_LENGTH = 200

SPRINT_ISSUES_MAX_RESULTS = 200
SPRINT_ISSUE_FIELDS = [
    'summary', 'assignee', 'reporter', 'duedate', 'labels', 'status',
    'subtasks'
]
SUBTASK_SEARCH_FIELDS = ['summary', 'status', 'parent']

# Issue search endpoints across Jira API versions. The active one is chosen
# by JIRA_CONFIG['search_api'].
SEARCH_APIS = {
    # Current enhanced search, paginated with nextPageToken/isLast
    'v3': {
        'path': '/rest/api/3/search/jql',
        'max_results': 100,
        'paging': 'token',
    },
    # Legacy search, removed from Jira Cloud; paginated with startAt/total
    'v2': {
        'path': '/rest/api/2/search',
        'max_results': 1000,
        'paging': 'offset',
    },
}

# JIRA_CONFIG key -> environment variable that provides it
REQUIRED_SETTINGS = {
    'url': 'JIRA_URL',
    'email': 'JIRA_EMAIL',
    'api_token': 'JIRA_TOKEN',
    'board_id': 'BOARD_ID',
}


def missing_jira_settings(config: Optional[Dict[str, Any]] = None) -> List[str]:
    """
    List the environment variables missing from the Jira configuration.

    Args:
        config: Jira configuration dict, defaults to settings.JIRA_CONFIG

    Returns:
        List[str]: Variable names whose values are empty
    """
    if config is None:
        config = settings.JIRA_CONFIG
    return [
        env_name for key, env_name in REQUIRED_SETTINGS.items()
        if not config.get(key)
    ]


@dataclass(frozen=True)
class JiraCredentials:
    """
    Basic-auth credentials with the request headers derived from them.

    `headers` is computed once and is read-only; clients share it by
    reference instead of rebuilding it per call.
    """
    email: str
    api_token: str = field(repr=False)
    headers: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        raw = f"{self.email}:{self.api_token}".encode('utf-8')
        token = base64.b64encode(raw).decode('ascii')
        object.__setattr__(self, 'headers', MappingProxyType({
            'Authorization': f'Basic {token}',
            'Accept': 'application/json',
        }))


class JiraTrackerClient:
    """
    Client for the subset of the Jira Cloud REST API used by the QA board.

    Attributes:
        base_url (str): Jira site URL without trailing slash
        credentials (JiraCredentials): Auth credentials, None if unset
        search_api (dict): Endpoint settings of the chosen search variant
        timeout (float): Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        credentials: Optional[JiraCredentials],
        search_api: str = 'v3',
        timeout: float = 30
    ):
        if search_api not in SEARCH_APIS:
            raise ValueError(
                f"Unknown Jira search API '{search_api}', "
                f"expected one of: {', '.join(SEARCH_APIS)}"
            )
        self.base_url = (base_url or '').rstrip('/')
        self.credentials = credentials
        self.search_api = SEARCH_APIS[search_api]
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.credentials)

    def _require_configured(self):
        missing = []
        if not self.base_url:
            missing.append('JIRA_URL')
        if not self.credentials:
            missing.extend(['JIRA_EMAIL', 'JIRA_TOKEN'])
        if missing:
            raise ConfigMissing(missing)

    def _send(
        self,
        method: str,
        path: str,
        context: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        """
        Send one request and fail on transport errors or non-2xx status.

        Args:
            method: HTTP method
            path: Path relative to the Jira base URL
            context: Human-readable operation name used in errors
            params: Query string parameters
            payload: JSON body

        Returns:
            requests.Response: The successful response

        Raises:
            ConfigMissing: If URL or credentials are not configured
            TrackerConnectionError: If the request could not be sent
            TrackerHttpError: If Jira answered with a non-2xx status
        """
        self._require_configured()

        url = f"{self.base_url}{path}"
        headers = dict(self.credentials.headers)
        if payload is not None:
            headers['Content-Type'] = 'application/json'

        logger.debug(f"Jira {method} {path} ({context})")
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                params=params,
                json=payload,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"{context} failed: {e}")
            raise TrackerConnectionError(f"{context} failed: {e}") from e

        if not response.ok:
            excerpt = response.text[:BODY_EXCERPT_LENGTH]
            logger.error(
                f"{context} failed: {response.status_code} {excerpt}"
            )
            raise TrackerHttpError(
                f"{context} failed: {response.status_code} {excerpt}",
                status=response.status_code,
                body_excerpt=excerpt
            )
        return response

    def _request_json(self, method: str, path: str, context: str,
                      **kwargs) -> Any:
        response = self._send(method, path, context, **kwargs)
        text = response.text
        try:
            return json.loads(text)
        except ValueError as e:
            excerpt = text[:BODY_EXCERPT_LENGTH]
            logger.error(f"{context} JSON parse error: {e} {excerpt}")
            raise TrackerParseError(
                f"{context} JSON parse error: {e}",
                status=response.status_code,
                body_excerpt=excerpt
            ) from e

    def get_active_sprint(self, board_id) -> Optional[Dict[str, Any]]:
        """
        Get the first active sprint of a board.

        Args:
            board_id: Jira agile board ID

        Returns:
            dict: Sprint JSON, or None when the board has no active sprint
        """
        if not board_id:
            raise ConfigMissing(['BOARD_ID'])

        data = self._request_json(
            'GET',
            f"/rest/agile/1.0/board/{quote(str(board_id), safe='')}/sprint",
            'Active sprint lookup',
            params={'state': 'active'}
        )
        values = data.get('values') if isinstance(data, dict) else None
        if not values:
            return None
        return values[0]

    def get_sprint_detail(self, sprint_id) -> Dict[str, Any]:
        return self._request_json(
            'GET',
            f"/rest/agile/1.0/sprint/{quote(str(sprint_id), safe='')}",
            'Sprint detail lookup'
        )

    def get_sprint_issues(self, sprint_id) -> Dict[str, Any]:
        return self._request_json(
            'GET',
            f"/rest/agile/1.0/sprint/{quote(str(sprint_id), safe='')}/issue",
            'Sprint issue lookup',
            params={
                'maxResults': SPRINT_ISSUES_MAX_RESULTS,
                'fields': ','.join(SPRINT_ISSUE_FIELDS),
            }
        )

    def search_by_parent(self, issue_keys: List[str]) -> List[Dict[str, Any]]:
        """
        Find all issues whose parent is one of the given keys.

        One logical query for the whole sprint; result pages are followed
        until Jira reports the last one (nextPageToken/isLast on v3,
        startAt/total on v2).

        Args:
            issue_keys: Parent issue keys

        Returns:
            List[dict]: Raw issue JSON with summary, status and parent fields
        """
        keys = [key for key in issue_keys if key]
        if not keys:
            return []

        quoted = ','.join(
            '"' + key.replace('"', '\\"') + '"' for key in keys
        )
        payload = {
            'jql': f"parent in ({quoted})",
            'fields': SUBTASK_SEARCH_FIELDS,
            'maxResults': self.search_api['max_results'],
        }

        issues = []
        while True:
            data = self._request_json(
                'POST',
                self.search_api['path'],
                'Sub-task search',
                payload=payload
            )
            if not isinstance(data, dict):
                break
            page = data.get('issues')
            if not isinstance(page, list):
                page = []
            issues.extend(page)

            if self.search_api['paging'] == 'offset':
                start_at = payload.get('startAt', 0) + len(page)
                total = data.get('total')
                if not page or not isinstance(total, int) or start_at >= total:
                    break
                payload = {**payload, 'startAt': start_at}
            else:
                next_token = data.get('nextPageToken')
                if not next_token or data.get('isLast') is True:
                    break
                payload = {**payload, 'nextPageToken': next_token}

        logger.debug(f"Sub-task search returned {len(issues)} issues "
                     f"for {len(keys)} parents")
        return issues

    def post_comment(self, issue_key: str,
                     document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Post an ADF document as a new comment on an issue.

        Never raises: every failure is logged and returned as a value.

        Args:
            issue_key: Jira issue key
            document: ADF document used as the comment body

        Returns:
            dict: {"success": True} or {"success": False, "message": str}
        """
        if not self.is_configured:
            logger.warning(
                f"Jira credentials are not configured, "
                f"skipping comment on {issue_key}"
            )
            return {
                'success': False,
                'message': 'Jira credentials are not configured',
            }

        try:
            self._send(
                'POST',
                f"/rest/api/3/issue/{quote(issue_key, safe='')}/comment",
                'Comment post',
                payload={'body': document}
            )
        except TrackerError as e:
            return {'success': False, 'message': str(e)}
        except Exception as e:
            logger.error(f"Unexpected error posting comment on "
                         f"{issue_key}: {e}", exc_info=True)
            return {'success': False, 'message': str(e)}

        logger.info(f"Jira comment posted: {issue_key}")
        return {'success': True}


@functools.lru_cache(maxsize=1)
def get_tracker_client() -> JiraTrackerClient:
    """
    Build the process-wide Jira client from settings.JIRA_CONFIG.

    The client and its credential headers are created once and reused by
    every request and task in the process.
    """
    config = settings.JIRA_CONFIG
    credentials = None
    if config.get('email') and config.get('api_token'):
        credentials = JiraCredentials(
            email=config['email'],
            api_token=config['api_token']
        )
    return JiraTrackerClient(
        base_url=config.get('url', ''),
        credentials=credentials,
        search_api=config.get('search_api', 'v3'),
        timeout=config.get('timeout', 30)
    )
