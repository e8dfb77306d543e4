# ============================================
# issues/serializers/issue.py
# ============================================
from rest_framework import serializers

from issues.models import Issue


class IssueCreateSerializer(serializers.Serializer):
    title = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Title is required',
            'blank': 'Title is required',
            'null': 'Title is required',
        }
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    priority = serializers.ChoiceField(
        choices=Issue.Priority.choices,
        required=False,
        allow_blank=True,
        allow_null=True
    )
    dueDate = serializers.DateTimeField(source='due_date', required=False, allow_null=True)
    projectId = serializers.IntegerField(source='project_id', required=False, allow_null=True)


class IssueIdSerializer(serializers.Serializer):
    id = serializers.IntegerField(
        error_messages={
            'required': 'Issue ID is required',
            'null': 'Issue ID is required',
            'invalid': 'Issue ID must be an integer',
        }
    )


class IssueUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(
        max_length=255,
        required=False,
        error_messages={'blank': 'Title cannot be empty', 'null': 'Title cannot be empty'}
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.CharField(
        max_length=50,
        required=False,
        error_messages={'blank': 'Status cannot be empty', 'null': 'Status cannot be empty'}
    )
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)
    dueDate = serializers.DateTimeField(source='due_date', required=False, allow_null=True)


class IssueListQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)
    assigneeId = serializers.IntegerField(source='assignee_id', required=False)
    priority = serializers.CharField(required=False, allow_blank=True)
    hasDueDate = serializers.BooleanField(source='has_due_date', required=False, default=False)
    dueDateFrom = serializers.DateTimeField(source='due_date_from', required=False)
    dueDateTo = serializers.DateTimeField(source='due_date_to', required=False)
    sortBy = serializers.CharField(source='sort_by', required=False, default='createdAt')
    sortOrder = serializers.CharField(source='sort_order', required=False, default='desc')

    def to_internal_value(self, data):
        # Empty query values mean "no filter"
        data = {key: value for key, value in data.items() if value != ''}
        return super().to_internal_value(data)


class UserBriefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()


class IssueOutputSerializer(serializers.ModelSerializer):
    projectId = serializers.IntegerField(source='project_id', read_only=True)
    creatorId = serializers.IntegerField(source='creator_id', read_only=True)
    assigneeId = serializers.IntegerField(source='assignee_id', read_only=True)
    assignee = UserBriefSerializer(read_only=True, allow_null=True)
    dueDate = serializers.DateTimeField(source='due_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    deletedAt = serializers.DateTimeField(source='deleted_at', read_only=True)

    class Meta:
        model = Issue
        fields = [
            'id', 'title', 'description', 'status', 'priority',
            'projectId', 'creatorId', 'assigneeId', 'assignee',
            'dueDate', 'createdAt', 'updatedAt', 'deletedAt'
        ]


class IssueDeletedSerializer(serializers.Serializer):
    message = serializers.CharField()
    id = serializers.IntegerField()
