"""Actions accepted by the table."""

from enum import Enum

from core.errors import InvalidAction


class Action(str, Enum):
    """Tagged requests a player can send."""

    START = "start"
    HIT = "hit"
    STAND = "stand"


def parse_action(tag: object) -> Action:
    """
    Convert a raw action tag into an Action.

    Raises:
        InvalidAction: If the tag is not a recognized action
    """
    if isinstance(tag, Action):
        return tag
    if not isinstance(tag, str):
        raise InvalidAction(tag)
    try:
        return Action(tag.strip().lower())
    except ValueError:
        raise InvalidAction(tag) from None
