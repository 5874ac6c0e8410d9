import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='QaState',
            fields=[
                ('issue_key', models.CharField(help_text='Jira issue key, e.g. PROJ-123', max_length=255, primary_key=True, serialize=False, verbose_name='Issue Key')),
                ('ac', models.JSONField(blank=True, default=list, help_text='Ordered list of {"text", "checked"} items', verbose_name='Acceptance Criteria')),
                ('dod', models.JSONField(blank=True, default=list, help_text='Ordered list of {"text", "checked"} items', verbose_name='Definition of Done')),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_comment_success', models.BooleanField(blank=True, null=True, verbose_name='Last Comment Succeeded')),
                ('last_comment_message', models.TextField(blank=True, default='', verbose_name='Last Comment Message')),
                ('last_comment_at', models.DateTimeField(blank=True, null=True, verbose_name='Last Comment At')),
            ],
            options={
                'verbose_name': 'QA State',
                'verbose_name_plural': 'QA States',
                'db_table': 'qa_states',
            },
        ),
    ]
