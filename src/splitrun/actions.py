"""Actions: the only way to mutate an attempt session."""

from pydantic import BaseModel, ConfigDict

from .errors import ActionParseError
from .models.run import Locator
from .models.time import Time


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class Push(_Action):
    """Log ``time`` on the split at ``locator``."""

    locator: Locator
    time: Time


class Pop(_Action):
    """Remove the most recently logged time on the split at ``locator``."""

    locator: Locator


class Clear(_Action):
    """Remove every time logged on the split at ``locator``."""

    locator: Locator


class NewRun(_Action):
    """Archive the current run and start the next attempt."""


Action = Push | Pop | Clear | NewRun


def _parse_locator(text: str) -> Locator:
    return int(text) if text.isdigit() else text


def parse_action(text: str) -> Action:
    """
    Parse a one-line textual action.

    Accepted forms::

        push LOCATOR TIME
        pop LOCATOR
        clear LOCATOR
        reset

    A locator made only of digits is an index; anything else is a short id.

    Raises:
        ActionParseError: If the text is not a recognised action
        TimeParseError: If a pushed time is malformed
    """
    words = text.split()
    if not words:
        raise ActionParseError("Empty action")

    verb, args = words[0].lower(), words[1:]

    if verb == "push" and len(args) == 2:
        return Push(locator=_parse_locator(args[0]), time=Time.parse(args[1]))
    if verb == "pop" and len(args) == 1:
        return Pop(locator=_parse_locator(args[0]))
    if verb == "clear" and len(args) == 1:
        return Clear(locator=_parse_locator(args[0]))
    if verb in ("reset", "new") and not args:
        return NewRun()

    raise ActionParseError(f"Unrecognised action: {text!r}")
