# ============================================
# issues/views/summary.py
# ============================================
from django.apps import apps
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from issues.serializers.summary import SummaryOutputSerializer
from issues.services.summary import SummaryService
from issues.views.utils import UpstreamErrorSerializer, std_errors


class SummaryAPIView(APIView):
    """
    POST: AI summary of the current user's 20 most recent issues

    The completion client is injected: pass ``completion_client=`` to
    ``as_view()``, otherwise the one built by IssuesConfig.ready() is used.
    """
    completion_client = None

    def get_completion_client(self):
        return self.completion_client or apps.get_app_config('issues').completion_client

    @extend_schema(
        tags=["AI"],
        request=None,
        responses={
            200: SummaryOutputSerializer,
            **std_errors(401, 404),
            500: OpenApiResponse(UpstreamErrorSerializer, description="Completion service failed or is not configured"),
        },
    )
    def post(self, request):
        summary = SummaryService.summarize_issues(
            user_id=request.user.id,
            client=self.get_completion_client()
        )
        return Response({'summary': summary})
