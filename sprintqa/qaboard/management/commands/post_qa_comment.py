"""
Management command for posting stored checklists to Jira.
"""

from django.core.management.base import BaseCommand, CommandError
import logging

from qaboard.services import ChecklistStore
from qaboard.tasks import post_checklist_comment

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Command to post the AC/DoD checklist comment for one issue.
    """
    help = (
        'Post the stored AC/DoD checklists of an issue to Jira as a '
        'comment. Runs synchronously unless --async is given.'
    )

    def add_arguments(self, parser):
        """
        Add command line arguments for the management command.
        """
        parser.add_argument(
            'issue_key',
            help='Jira issue key, e.g. PROJ-123'
        )
        parser.add_argument(
            '--async',
            action='store_true',
            dest='run_async',
            help='Enqueue the Celery task instead of posting inline'
        )

    def handle(self, *args, **options):
        issue_key = options['issue_key']
        state = ChecklistStore.load(issue_key)
        if state['lastSavedAt'] is None:
            raise CommandError(f'No checklist state stored for {issue_key}')

        if options.get('run_async'):
            post_checklist_comment.delay(issue_key, state['ac'], state['dod'])
            self.stdout.write(f'Enqueued checklist comment for {issue_key}')
            return

        result = post_checklist_comment.run(
            issue_key, state['ac'], state['dod']
        )
        if not result.get('success'):
            raise CommandError(
                f"Comment post failed for {issue_key}: "
                f"{result.get('message')}"
            )
        self.stdout.write(
            self.style.SUCCESS(f'Checklist comment posted to {issue_key}')
        )
