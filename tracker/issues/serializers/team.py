# ============================================
# issues/serializers/team.py
# ============================================
from rest_framework import serializers

from issues.models import Team


class TeamCreateSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Team name is required',
            'blank': 'Team name is required',
            'null': 'Team name is required',
        }
    )


class TeamOutputSerializer(serializers.ModelSerializer):
    ownerId = serializers.IntegerField(source='owner_id', read_only=True)
    isDefault = serializers.BooleanField(source='is_default', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Team
        fields = ['id', 'name', 'ownerId', 'isDefault', 'createdAt', 'updatedAt']


class TeamListOutputSerializer(TeamOutputSerializer):
    """Team row with aggregate counts from TeamSelector.get_teams_for_member"""
    memberCount = serializers.IntegerField(source='member_count', read_only=True)
    projectCount = serializers.IntegerField(source='project_count', read_only=True)

    class Meta(TeamOutputSerializer.Meta):
        fields = TeamOutputSerializer.Meta.fields + ['memberCount', 'projectCount']
