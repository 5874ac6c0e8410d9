"""
Sprint Issues API View

Proxies the sprint issue list from Jira in the normalized issue shape.
"""

import logging

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.swagger import error_response
from ..serializers import SprintIssuesSerializer
from ..utils.jira import fetch_sprint_issues, get_tracker_client

logger = logging.getLogger(__name__)


class SprintIssuesAPIView(APIView):
    """
    APIView listing the issues of a Jira sprint
    """

    @extend_schema(
        operation_id='jira_sprint_issues',
        summary='List sprint issues',
        description=(
            'Issues of the given sprint, or of the board\'s active sprint '
            'when sprintId is omitted. Returns only an empty issue list '
            'when the board has no active sprint.'
        ),
        parameters=[
            OpenApiParameter(
                name='sprintId',
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description='Jira sprint ID'
            ),
        ],
        responses={
            200: SprintIssuesSerializer,
            500: error_response()
        }
    )
    def get(self, request) -> Response:
        """
        Fetch and normalize sprint issues from Jira

        Args:
            request: HTTP request object

        Returns:
            Response: {"sprint", "issues"} or an error response
        """
        sprint_id = request.query_params.get('sprintId') or None

        try:
            result = fetch_sprint_issues(
                get_tracker_client(),
                settings.JIRA_CONFIG.get('board_id'),
                sprint_id=sprint_id
            )
            return Response(result, status=status.HTTP_200_OK)

        except Exception as e:
            logger.error(f"Error fetching sprint issues: {e}", exc_info=True)
            return Response({
                'error': 'Failed to fetch Jira issues',
                'details': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
