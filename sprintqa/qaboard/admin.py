from django.contrib import admin

from .models import QaState


@admin.register(QaState)
class QaStateAdmin(admin.ModelAdmin):
    list_display = (
        'issue_key', 'updated_at', 'last_comment_success', 'last_comment_at'
    )
    search_fields = ('issue_key',)
    ordering = ('-updated_at',)
    readonly_fields = (
        'issue_key', 'ac', 'dod', 'updated_at',
        'last_comment_success', 'last_comment_message', 'last_comment_at'
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
