import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class IssuesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'issues'
    verbose_name = 'Issues (Teams • Projects • Issues)'

    completion_client = None

    def ready(self):
        from issues.clients.completion_client import CompletionClient

        # Built once per process and handed to the summary view
        self.completion_client = CompletionClient.from_settings()
        if not self.completion_client.is_configured:
            logger.warning("[summary] OPENAI_API_KEY is not set; AI summaries will fail with 500")
