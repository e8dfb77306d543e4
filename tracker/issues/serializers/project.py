# ============================================
# issues/serializers/project.py
# ============================================
from rest_framework import serializers

from issues.models import Project


class ProjectCreateSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255,
        error_messages={'required': 'Project name is required', 'blank': 'Project name is required'}
    )
    description = serializers.CharField(required=False, allow_blank=True, default='')
    teamId = serializers.IntegerField(
        source='team_id',
        error_messages={'required': 'Team ID is required', 'null': 'Team ID is required'}
    )


class ProjectOutputSerializer(serializers.ModelSerializer):
    teamId = serializers.IntegerField(source='team_id', read_only=True)
    teamName = serializers.CharField(source='team.name', read_only=True)
    ownerId = serializers.IntegerField(source='owner_id', read_only=True)
    isDefault = serializers.BooleanField(source='is_default', read_only=True)
    issueCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'teamId', 'teamName', 'ownerId',
            'isDefault', 'issueCount', 'createdAt', 'updatedAt'
        ]

    def get_issueCount(self, obj) -> int:
        return getattr(obj, 'issue_count', 0)
