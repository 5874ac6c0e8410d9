import logging
from datetime import datetime
from typing import Any, Dict, List

from django.db import DatabaseError
from django.utils import timezone

from qaboard.exceptions import StoreError
from qaboard.models import QaState

logger = logging.getLogger(__name__)


def as_checklist_items(value: Any) -> List[Any]:
    # Missing or malformed checklists are stored as empty lists
    return value if isinstance(value, list) else []


class ChecklistStore:
    """
    Persistence of per-issue AC/DoD checklist state
    """

    @staticmethod
    def load(issue_key: str) -> Dict[str, Any]:
        """
        Load checklist state for an issue

        Unknown keys are not an error: they return empty checklists and
        lastSavedAt None.
        """
        try:
            state = QaState.objects.filter(issue_key=issue_key).first()
        except DatabaseError as e:
            logger.error(f"Failed to load qa state for {issue_key}: {e}")
            raise StoreError(str(e)) from e

        if state is None:
            return {
                'ac': [],
                'dod': [],
                'lastSavedAt': None,
                'lastComment': None,
            }

        return {
            'ac': as_checklist_items(state.ac),
            'dod': as_checklist_items(state.dod),
            'lastSavedAt': state.updated_at,
            'lastComment': state.last_comment,
        }

    @staticmethod
    def save(issue_key: str, ac: Any, dod: Any) -> datetime:
        """
        Insert or overwrite checklist state for an issue

        Runs as a single INSERT ... ON CONFLICT (issue_key) DO UPDATE, so
        concurrent saves for one key never duplicate rows or interleave a
        read with a write.

        Returns:
            datetime: The new updated_at timestamp
        """
        updated_at = timezone.now()
        state = QaState(
            issue_key=issue_key,
            ac=as_checklist_items(ac),
            dod=as_checklist_items(dod),
            updated_at=updated_at
        )

        try:
            QaState.objects.bulk_create(
                [state],
                update_conflicts=True,
                unique_fields=['issue_key'],
                update_fields=['ac', 'dod', 'updated_at']
            )
        except DatabaseError as e:
            logger.error(f"Failed to save qa state for {issue_key}: {e}")
            raise StoreError(str(e)) from e

        logger.info(
            f"Saved qa state for {issue_key}: "
            f"{len(state.ac)} AC, {len(state.dod)} DoD items"
        )
        return updated_at

    @staticmethod
    def record_comment_outcome(issue_key: str,
                               result: Dict[str, Any]) -> int:
        """
        Store the outcome of the latest checklist comment post

        Does nothing when the issue has no stored state.

        Returns:
            int: Number of rows updated (0 or 1)
        """
        try:
            return QaState.objects.filter(issue_key=issue_key).update(
                last_comment_success=bool(result.get('success')),
                last_comment_message=result.get('message') or '',
                last_comment_at=timezone.now()
            )
        except DatabaseError as e:
            logger.error(
                f"Failed to record comment outcome for {issue_key}: {e}"
            )
            raise StoreError(str(e)) from e
