"""
QA State API Views

This module contains the checklist state endpoints: loading and saving
AC/DoD checklists, and importing them into Jira as a comment.
"""

import logging
from typing import Any, List

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.swagger import error_response
from ..exceptions import StoreError
from ..serializers import (
    JiraImportSerializer,
    QaStateSaveSerializer,
    QaStateSavedSerializer,
    QaStateSerializer,
)
from ..services import ChecklistStore
from ..services.checklist_store import as_checklist_items
from ..tasks import post_and_record_comment, post_checklist_comment

logger = logging.getLogger(__name__)


def enqueue_checklist_comment(issue_key: str, ac: List[Any],
                              dod: List[Any]) -> bool:
    """
    Hand the checklist comment to a Celery worker without waiting for it.

    A broker outage must not fail the save: enqueue errors are logged,
    recorded as the issue's last comment outcome and reported as False.
    """
    try:
        post_checklist_comment.delay(issue_key, ac, dod)
        return True
    except Exception as e:
        logger.error(f"Failed to enqueue checklist comment for "
                     f"{issue_key}: {e}")
        try:
            ChecklistStore.record_comment_outcome(issue_key, {
                'success': False,
                'message': f"Failed to enqueue comment: {e}",
            })
        except StoreError as store_error:
            logger.error(f"Could not record enqueue failure for "
                         f"{issue_key}: {store_error}")
        return False


class QaStateAPIView(APIView):
    """
    APIView for loading and saving the checklist state of one issue
    """

    @extend_schema(
        operation_id='qa_state_load',
        summary='Load checklist state',
        description=(
            'Stored AC/DoD checklists of an issue. Unknown issues return '
            'empty checklists and lastSavedAt null.'
        ),
        responses={
            200: QaStateSerializer,
            500: error_response()
        }
    )
    def get(self, request, issue_key: str) -> Response:
        try:
            state = ChecklistStore.load(issue_key)
            return Response(
                QaStateSerializer(state).data,
                status=status.HTTP_200_OK
            )

        except Exception as e:
            logger.error(f"Error loading qa state {issue_key}: {e}")
            return Response({
                'error': 'Failed to load qa state',
                'details': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @extend_schema(
        operation_id='qa_state_save',
        summary='Save checklist state',
        description=(
            'Insert or overwrite the AC/DoD checklists of an issue, then '
            'post a summary comment to Jira in the background. The '
            'response does not wait for or report the comment outcome.'
        ),
        request=QaStateSaveSerializer,
        responses={
            200: QaStateSavedSerializer,
            500: error_response()
        }
    )
    def post(self, request, issue_key: str) -> Response:
        data = request.data if isinstance(request.data, dict) else {}
        ac = as_checklist_items(data.get('ac'))
        dod = as_checklist_items(data.get('dod'))

        try:
            last_saved_at = ChecklistStore.save(issue_key, ac, dod)

        except Exception as e:
            logger.error(f"Error saving qa state {issue_key}: {e}")
            return Response({
                'error': 'Failed to save qa state',
                'details': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        enqueue_checklist_comment(issue_key, ac, dod)

        return Response({
            'ok': True,
            'lastSavedAt': last_saved_at
        }, status=status.HTTP_200_OK)


class JiraImportAPIView(APIView):
    """
    APIView posting the stored checklists of an issue to Jira
    """

    @extend_schema(
        operation_id='jira_import',
        summary='Post checklists to Jira',
        description=(
            'Post the stored AC/DoD checklists as a Jira comment and wait '
            'for the outcome. A failed post is reported inside the 200 '
            'body as comment.success=false.'
        ),
        request=None,
        responses={
            200: JiraImportSerializer,
            500: error_response()
        }
    )
    def post(self, request, issue_key: str) -> Response:
        try:
            state = ChecklistStore.load(issue_key)

        except Exception as e:
            logger.error(f"Error loading qa state {issue_key} "
                         f"for import: {e}")
            return Response({
                'error': 'Failed to import qa state',
                'details': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        result = post_and_record_comment(
            issue_key, state['ac'], state['dod']
        )

        return Response({
            'ok': True,
            'comment': result
        }, status=status.HTTP_200_OK)
