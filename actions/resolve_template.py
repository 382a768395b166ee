"""
Action picking the OS template and checking the template storage cache
"""
import dataclasses
import logging
from .base import Action

logger = logging.getLogger(__name__)


class ResolveTemplateAction(Action):
    """Read-only template lookup"""
    description = "resolve OS template"

    def execute(self, plan):
        template_service = self.ctx.template_service
        template = template_service.resolve(self.cfg.template.pattern)
        cached = template_service.is_cached(plan.template_storage, template)
        logger.info("Template: %s (%s)", template, "cached" if cached else "not cached")
        return dataclasses.replace(plan, template=template, template_cached=cached)
