# ============================================
# issues/services/summary.py
# ============================================
import logging
from typing import Iterable

from issues.clients.completion_client import CompletionClient
from issues.models import Issue
from issues.selectors.issue import IssueSelector

logger = logging.getLogger(__name__)

NO_ISSUES_MESSAGE = "You don't have any issues yet. Create some issues to get an AI summary!"
FALLBACK_SUMMARY = "Unable to generate summary."

SYSTEM_PROMPT = (
    "You are a helpful project management assistant that provides concise, "
    "actionable summaries."
)

SUMMARY_PROMPT = """You are a project management assistant. Analyze the following list of issues and provide a concise summary (2-3 sentences) highlighting:
1. Overall project status
2. Key priorities or blockers
3. Progress trends

Issues:
{issues}

Provide a friendly, actionable summary:"""


def format_issue_lines(issues: Iterable[Issue]) -> str:
    lines = []
    for idx, issue in enumerate(issues, start=1):
        line = f"{idx}. [{issue.status}] {issue.title} (Priority: {issue.priority})"
        if issue.description:
            line += f" - {issue.description}"
        lines.append(line)
    return "\n".join(lines)


def build_summary_prompt(issues: Iterable[Issue]) -> str:
    return SUMMARY_PROMPT.format(issues=format_issue_lines(issues))


class SummaryService:

    @staticmethod
    def summarize_issues(*, user_id: int, client: CompletionClient) -> str:
        """Ask the completion service to summarize the user's recent issues"""
        issues = list(IssueSelector.get_recent_issues(user_id))

        if not issues:
            return NO_ISSUES_MESSAGE

        logger.info("[summary] requesting summary user_id=%s issues=%s", user_id, len(issues))

        content = client.complete([
            {'role': 'system', 'content': SYSTEM_PROMPT},
            {'role': 'user', 'content': build_summary_prompt(issues)},
        ])

        return content or FALLBACK_SUMMARY
