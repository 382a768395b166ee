"""
Action downloading the template when the storage does not cache it
"""
import dataclasses
import logging
from .base import Action

logger = logging.getLogger(__name__)


class DownloadTemplateAction(Action):
    """Fetch the template onto the template storage"""
    description = "download OS template"
    mutates_host = True

    def execute(self, plan):
        if plan.template_cached:
            logger.info("Template %s already available.", plan.template)
            return plan
        self.ctx.template_service.download(plan.template_storage, plan.template)
        return dataclasses.replace(plan, template_cached=True)
