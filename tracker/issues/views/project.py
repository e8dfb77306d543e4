# ============================================
# issues/views/project.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from issues.selectors.project import ProjectSelector
from issues.serializers.project import ProjectCreateSerializer, ProjectOutputSerializer
from issues.services.project import ProjectService
from issues.views.utils import std_errors


class ProjectListCreateAPIView(APIView):
    """
    GET: Projects owned by the current user
    POST: Create a project in one of the user's teams

    Request body (POST):
    - name: string (required)
    - description: string (optional)
    - teamId: int (required)
    """

    @extend_schema(tags=["Projects"], responses={200: ProjectOutputSerializer(many=True), **std_errors(401)})
    def get(self, request):
        projects = ProjectSelector.get_projects_by_owner(request.user.id)
        serializer = ProjectOutputSerializer(projects, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Projects"],
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create_project(
            owner=request.user,
            **serializer.validated_data
        )

        return Response(ProjectOutputSerializer(project).data, status=status.HTTP_201_CREATED)
