import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class QaBoardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'qaboard'

    def ready(self):
        """Report missing or invalid Jira settings once at startup."""
        from qaboard.utils.jira.client import (
            SEARCH_APIS,
            missing_jira_settings,
        )

        missing = missing_jira_settings()
        if missing:
            # Startup continues; comment posting degrades to a no-op
            logger.error(
                f"Missing Jira environment variables: {', '.join(missing)}"
            )

        search_api = settings.JIRA_CONFIG.get('search_api')
        if search_api not in SEARCH_APIS:
            logger.error(
                f"Unknown JIRA_SEARCH_API '{search_api}', "
                f"expected one of: {', '.join(SEARCH_APIS)}"
            )
