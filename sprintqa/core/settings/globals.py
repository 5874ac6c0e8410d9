"""
This file is used for defining custom global configuration settings.
It primarily handles configurations through environment variables.
For constants used by the Jira integration, see qaboard.utils.jira.
"""

import os

# Jira connection configuration
JIRA_CONFIG = {
    # The Jira site base URL, e.g. https://example.atlassian.net
    'url': os.getenv('JIRA_URL', '').rstrip('/'),
    # The account email used for basic auth
    'email': os.getenv('JIRA_EMAIL', ''),
    # The API token paired with the email
    'api_token': os.getenv('JIRA_TOKEN', ''),
    # The agile board whose active sprint is shown by default
    'board_id': os.getenv('BOARD_ID', ''),
    # Issue search API surface: 'v3' (search/jql) or 'v2' (legacy search)
    'search_api': os.getenv('JIRA_SEARCH_API', 'v3'),
    # Timeout in seconds for every outbound Jira request
    'timeout': float(os.getenv('JIRA_TIMEOUT', '30')),
}

# Default port for `manage.py runserver`
PORT = os.getenv('PORT', '3000')
