"""
QA Board Serializers

Serializers describing the request and response bodies of the QA board
API. Checklist payloads are accepted leniently: a missing or malformed
`ac`/`dod` is stored as an empty list instead of being rejected.
"""

from rest_framework import serializers


class ChecklistItemSerializer(serializers.Serializer):
    text = serializers.CharField(allow_blank=True, required=False)
    checked = serializers.BooleanField(default=False)


class PersonSerializer(serializers.Serializer):
    displayName = serializers.CharField(allow_null=True)


class SubtaskSerializer(serializers.Serializer):
    key = serializers.CharField()
    summary = serializers.CharField(allow_null=True)
    status = serializers.CharField(allow_null=True)


class IssueFieldsSerializer(serializers.Serializer):
    summary = serializers.CharField(allow_null=True)
    assignee = PersonSerializer(allow_null=True)
    reporter = PersonSerializer(allow_null=True)
    dueDate = serializers.DateField(allow_null=True)
    labels = serializers.ListField(child=serializers.CharField())
    subtasks = SubtaskSerializer(many=True)


class IssueSerializer(serializers.Serializer):
    key = serializers.CharField()
    fields = IssueFieldsSerializer()
    status = serializers.CharField(allow_blank=True)


class SprintSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField(allow_null=True)


class SprintIssuesSerializer(serializers.Serializer):
    """
    Response of the sprint issues endpoint; `sprint` is omitted when the
    board has no active sprint
    """
    sprint = SprintSerializer(required=False)
    issues = IssueSerializer(many=True)


class LastCommentSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField(allow_blank=True)
    postedAt = serializers.DateTimeField()


class QaStateSerializer(serializers.Serializer):
    """
    Stored checklist state of one issue
    """
    ac = serializers.ListField(child=serializers.JSONField())
    dod = serializers.ListField(child=serializers.JSONField())
    lastSavedAt = serializers.DateTimeField(allow_null=True)
    lastComment = LastCommentSerializer(allow_null=True)


class QaStateSaveSerializer(serializers.Serializer):
    """
    Request body of the save endpoint
    """
    ac = ChecklistItemSerializer(many=True, required=False)
    dod = ChecklistItemSerializer(many=True, required=False)


class QaStateSavedSerializer(serializers.Serializer):
    ok = serializers.BooleanField()
    lastSavedAt = serializers.DateTimeField()


class CommentResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField(required=False)


class JiraImportSerializer(serializers.Serializer):
    ok = serializers.BooleanField()
    comment = CommentResultSerializer()
