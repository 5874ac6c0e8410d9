from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class QaState(models.Model):
    """
    Acceptance Criteria and Definition of Done checklists for one issue

    One row per Jira issue key. Rows are created on first save and
    overwritten in place afterwards; there is no deletion path.
    """
    issue_key = models.CharField(
        max_length=255,
        primary_key=True,
        verbose_name=_('Issue Key'),
        help_text=_('Jira issue key, e.g. PROJ-123')
    )
    ac = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_('Acceptance Criteria'),
        help_text=_('Ordered list of {"text", "checked"} items')
    )
    dod = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_('Definition of Done'),
        help_text=_('Ordered list of {"text", "checked"} items')
    )
    # Set explicitly on every upsert so the conflict branch refreshes it
    updated_at = models.DateTimeField(default=timezone.now)

    # Outcome of the most recent checklist comment posted to Jira
    last_comment_success = models.BooleanField(
        null=True,
        blank=True,
        verbose_name=_('Last Comment Succeeded')
    )
    last_comment_message = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Last Comment Message')
    )
    last_comment_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name=_('Last Comment At')
    )

    class Meta:
        db_table = 'qa_states'
        verbose_name = _('QA State')
        verbose_name_plural = _('QA States')

    def __str__(self):
        return f"{self.issue_key} (AC {len(self.ac)}, DoD {len(self.dod)})"

    @property
    def last_comment(self):
        """
        Last comment outcome as exposed by the API, or None if never posted
        """
        if self.last_comment_at is None:
            return None
        return {
            'success': bool(self.last_comment_success),
            'message': self.last_comment_message,
            'postedAt': self.last_comment_at,
        }
