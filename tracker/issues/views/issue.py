# ============================================
# issues/views/issue.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from issues.selectors.issue import IssueSelector
from issues.serializers.issue import (
    IssueCreateSerializer,
    IssueDeletedSerializer,
    IssueIdSerializer,
    IssueListQuerySerializer,
    IssueOutputSerializer,
    IssueUpdateSerializer,
)
from issues.services.issue import IssueService
from issues.views.utils import path_int, q_bool, q_datetime, q_int, q_str, std_errors


def _load_owned_issue(issue_id, user):
    """Active issue by id; 404 when absent or soft-deleted, 403 when not the owner"""
    issue = IssueSelector.get_active_issue_by_id(issue_id)
    if issue is None:
        raise NotFound("Issue not found")

    IssueService.check_issue_owner(issue, user.id)
    return issue


class IssueAPIView(APIView):
    """
    GET: List issues in projects owned by the current user
    POST: Create a new issue
    PUT: Update an issue
    DELETE: Soft-delete an issue

    Query params (GET):
    - search: string, case-insensitive title match
    - status, priority: exact match
    - assigneeId: int
    - hasDueDate: "true" to keep only issues with a due date
    - dueDateFrom, dueDateTo: inclusive ISO date/datetime bounds
    - sortBy: createdAt | updatedAt | dueDate | priority
    - sortOrder: asc | desc (default desc)

    Request body (POST):
    - title: string (required)
    - description, status, priority, dueDate, projectId (optional)

    Request body (PUT):
    - id: int (required)
    - title, description, status, priority, dueDate (optional; absent keys are left unchanged)

    Request body (DELETE):
    - id: int (required)
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[
            q_str("search", "Case-insensitive title substring"),
            q_str("status", "Exact status"),
            q_int("assigneeId", "Assignee user id"),
            q_str("priority", "LOW / MEDIUM / HIGH"),
            q_bool("hasDueDate", "Only issues with a due date"),
            q_datetime("dueDateFrom", "Due date lower bound (inclusive)"),
            q_datetime("dueDateTo", "Due date upper bound (inclusive)"),
            q_str("sortBy", "Sort key", enum=["createdAt", "updatedAt", "dueDate", "priority"]),
            q_str("sortOrder", "Sort direction", enum=["asc", "desc"]),
        ],
        responses={200: IssueOutputSerializer(many=True), **std_errors(400, 401)},
    )
    def get(self, request):
        query = IssueListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        issues = IssueSelector.get_issues_list(
            owner_id=request.user.id,
            **query.validated_data
        )

        serializer = IssueOutputSerializer(issues, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Issues"],
        request=IssueCreateSerializer,
        responses={201: IssueOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = IssueCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        issue = IssueService.create_issue(
            user=request.user,
            **serializer.validated_data
        )

        return Response(IssueOutputSerializer(issue).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Issues"],
        request=IssueUpdateSerializer,
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def put(self, request):
        id_serializer = IssueIdSerializer(data=request.data)
        id_serializer.is_valid(raise_exception=True)

        # Ownership is settled before the rest of the body is looked at
        issue = _load_owned_issue(id_serializer.validated_data['id'], request.user)

        serializer = IssueUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated_issue = IssueService.update_issue(
            issue=issue,
            user_id=request.user.id,
            **serializer.validated_data
        )

        return Response(IssueOutputSerializer(updated_issue).data)

    @extend_schema(
        tags=["Issues"],
        request=IssueIdSerializer,
        responses={200: IssueDeletedSerializer, **std_errors()},
    )
    def delete(self, request):
        id_serializer = IssueIdSerializer(data=request.data)
        id_serializer.is_valid(raise_exception=True)

        issue = _load_owned_issue(id_serializer.validated_data['id'], request.user)

        deleted_issue = IssueService.soft_delete_issue(
            issue=issue,
            user_id=request.user.id
        )

        return Response({'message': 'Issue deleted successfully', 'id': deleted_issue.id})


class IssueDetailAPIView(APIView):
    """
    GET: Retrieve one active issue from a project the user owns

    Path params:
    - issue_id: int
    """

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue id")],
        responses={200: IssueOutputSerializer, **std_errors(401, 403, 404)},
    )
    def get(self, request, issue_id):
        issue = _load_owned_issue(issue_id, request.user)
        return Response(IssueOutputSerializer(issue).data)
