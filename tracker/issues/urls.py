# ============================================
# issues/urls.py
# ============================================
from django.urls import path

from issues.views.issue import IssueAPIView, IssueDetailAPIView
from issues.views.project import ProjectListCreateAPIView
from issues.views.summary import SummaryAPIView
from issues.views.team import TeamListCreateAPIView

app_name = 'issues'

urlpatterns = [
    # Issues
    path('issues', IssueAPIView.as_view(), name='issues'),
    path('issues/<int:issue_id>', IssueDetailAPIView.as_view(), name='issue-detail'),

    # Teams & projects
    path('teams', TeamListCreateAPIView.as_view(), name='teams'),
    path('projects', ProjectListCreateAPIView.as_view(), name='projects'),

    # AI
    path('ai/summary', SummaryAPIView.as_view(), name='ai-summary'),
]
