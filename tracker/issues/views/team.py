# ============================================
# issues/views/team.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from issues.selectors.team import TeamSelector
from issues.serializers.team import (
    TeamCreateSerializer,
    TeamListOutputSerializer,
    TeamOutputSerializer,
)
from issues.services.team import TeamService
from issues.views.utils import std_errors


class TeamListCreateAPIView(APIView):
    """
    GET: Teams the current user is a member of, with member/project counts
    POST: Create a team; the creator becomes its OWNER

    Request body (POST):
    - name: string (required)
    """

    @extend_schema(tags=["Teams"], responses={200: TeamListOutputSerializer(many=True), **std_errors(401)})
    def get(self, request):
        teams = TeamSelector.get_teams_for_member(request.user.id)
        serializer = TeamListOutputSerializer(teams, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Teams"],
        request=TeamCreateSerializer,
        responses={201: TeamOutputSerializer, **std_errors(400, 401)},
    )
    def post(self, request):
        serializer = TeamCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        team = TeamService.create_team(
            owner=request.user,
            **serializer.validated_data
        )

        return Response(TeamOutputSerializer(team).data, status=status.HTTP_201_CREATED)
