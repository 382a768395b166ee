"""
Action showing the summary and asking for confirmation
"""
import logging
from libs.errors import AbortedByUser
from libs.prompts import confirm
from .base import Action

logger = logging.getLogger(__name__)


class ConfirmAction(Action):
    """Last stop before the host is modified"""
    description = "confirm settings"

    def execute(self, plan):
        plan.validate()
        logger.info("Container settings:")
        for line in plan.summary_lines():
            logger.info(line)
        if not confirm(self.ctx.prompter, "Proceed?"):
            raise AbortedByUser()
        return plan
