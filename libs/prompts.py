"""
Interactive prompting: input providers and the numbered selection menu
"""
import logging
import re
from typing import Callable, List, Optional
from .errors import InputClosedError

logger = logging.getLogger(__name__)

HOSTNAME_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
VLAN_MIN = 1
VLAN_MAX = 4094
# ASCII digits only
NUMBER_RE = re.compile(r"[0-9]+")


class ConsolePrompter:
    """Input provider reading answers from stdin"""

    def __init__(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str = ""):
        """Show a line to the operator"""
        self._output(text)

    def ask(self, prompt: str) -> str:
        """Read one answer, stripped"""
        try:
            return self._input(prompt).strip()
        except EOFError as err:
            raise InputClosedError("Input stream closed while waiting for an answer") from err


def select_option(label: str, options: List[str], prompter, preferred: Optional[str] = None) -> str:
    """
    Pick one of the options through a 1-based numbered menu

    Args:
        label: What is being chosen, e.g. "storage"
        options: Candidates, in display order; must not be empty
        prompter: Input provider with say()/ask()
        preferred: Pre-seeded choice, used without prompting when present in options

    Returns:
        The selected option
    """
    if not options:
        raise ValueError(f"No {label} candidates to choose from")
    if preferred:
        if preferred in options:
            logger.info("Using configured %s: %s", label, preferred)
            return preferred
        logger.warning("Configured %s %r not found, choose one of the discovered values", label, preferred)
    if len(options) == 1:
        logger.info("Using %s: %s (only option)", label, options[0])
        return options[0]
    prompter.say(f"Available {label} options:")
    for index, option in enumerate(options, start=1):
        prompter.say(f"  {index}) {option}")
    while True:
        answer = prompter.ask(f"Select {label} [1]: ")
        if answer == "":
            return options[0]
        if NUMBER_RE.fullmatch(answer) and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        logger.warning("Invalid selection %r, enter a number between 1 and %d", answer, len(options))


def ask_hostname(prompter, default: str) -> str:
    """Prompt for the container hostname; empty keeps the default"""
    while True:
        answer = prompter.ask(f"Hostname [{default}]: ") or default
        if HOSTNAME_RE.match(answer):
            return answer
        logger.warning("Invalid hostname %r", answer)


def ask_vlan(prompter) -> Optional[int]:
    """Prompt for an optional VLAN tag; empty means untagged"""
    while True:
        answer = prompter.ask("VLAN tag (leave empty for none): ")
        if answer == "":
            return None
        if NUMBER_RE.fullmatch(answer) and VLAN_MIN <= int(answer) <= VLAN_MAX:
            return int(answer)
        logger.warning("Invalid VLAN tag %r, expected %d-%d", answer, VLAN_MIN, VLAN_MAX)


def confirm(prompter, question: str = "Proceed?") -> bool:
    """Yes/no question defaulting to no"""
    answer = prompter.ask(f"{question} [y/N]: ")
    return answer.lower() in ("y", "yes")
