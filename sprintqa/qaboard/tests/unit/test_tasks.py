"""
Unit tests for the checklist comment task
"""

from unittest.mock import Mock, patch

import pytest

from qaboard.exceptions import StoreError
from qaboard.services import ChecklistStore
from qaboard.tasks import post_and_record_comment, post_checklist_comment

AC = [{'text': 'Login works', 'checked': True}]
DOD = []


@pytest.fixture
def mock_tracker():
    tracker = Mock()
    tracker.post_comment.return_value = {'success': True}
    with patch('qaboard.tasks.get_tracker_client', return_value=tracker):
        yield tracker


@pytest.mark.django_db
class TestPostAndRecordComment:
    """
    Test building, posting and recording a checklist comment
    """

    def test_posts_checklist_document(self, mock_tracker):
        result = post_and_record_comment('QA-1', AC, DOD)

        assert result == {'success': True}
        issue_key, document = mock_tracker.post_comment.call_args.args
        assert issue_key == 'QA-1'
        assert document['type'] == 'doc'
        headings = [
            node['content'][0]['text'] for node in document['content']
            if node['type'] == 'heading'
        ]
        assert headings == ['AC', 'DoD']

    def test_outcome_recorded_on_state(self, mock_tracker):
        ChecklistStore.save('QA-1', AC, DOD)
        mock_tracker.post_comment.return_value = {
            'success': False,
            'message': 'Comment post failed: 403 Forbidden',
        }

        result = post_and_record_comment('QA-1', AC, DOD)

        assert result['success'] is False
        last_comment = ChecklistStore.load('QA-1')['lastComment']
        assert last_comment['success'] is False
        assert '403' in last_comment['message']

    def test_record_failure_does_not_change_result(self, mock_tracker):
        with patch.object(ChecklistStore, 'record_comment_outcome',
                          side_effect=StoreError('db down')):
            result = post_and_record_comment('QA-1', AC, DOD)

        assert result == {'success': True}


@pytest.mark.django_db
class TestPostChecklistCommentTask:
    """
    Test the Celery task wrapper
    """

    def test_runs_synchronously(self, mock_tracker):
        result = post_checklist_comment.run('QA-1', AC, DOD)

        assert result == {'success': True}
        mock_tracker.post_comment.assert_called_once()

    def test_unexpected_error_returned_as_failure(self, mock_tracker):
        mock_tracker.post_comment.side_effect = RuntimeError('boom')

        result = post_checklist_comment.run('QA-1', AC, DOD)

        assert result == {'success': False, 'message': 'boom'}

    def test_task_never_retries(self):
        assert post_checklist_comment.max_retries == 0
