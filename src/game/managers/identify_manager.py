"""
Object identification and player notification.

Tracks what the player knows about each item as a whole (whether its ego
has been noticed, whether it is fully identified) and turns knowledge
changes into player-facing messages on the event bus.
"""
from typing import Optional, TYPE_CHECKING

from ...core.events import ItemIdentified, LogMessage
from ...core.knowledge import IdentifyService
from .log_manager import LogLevel

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..entities.item import Item


class IdentifyManager(IdentifyService):
    """Identification and message service for items."""

    def __init__(self, event_manager: Optional["EventManager"] = None):
        self.event_manager = event_manager
        self.turn = 0

    def _publish_log(self, message: str, category: str, level: LogLevel = LogLevel.INFO) -> None:
        if self.event_manager is None:
            return
        self.event_manager.publish(
            LogMessage(turn=self.turn, message=message, category=category,
                       level=level, source="IdentifyManager"),
            source="IdentifyManager"
        )

    def notice_ego(self, item: "Item") -> None:
        """Mark the item's ego (if it has one) as noticed."""
        if item.ego_noticed or item.ego_name is None:
            return
        item.ego_noticed = True
        self._publish_log(f"Noticed ego '{item.ego_name}' on {item.name}", "DEBUG",
                          LogLevel.DEBUG)

    def describe(self, item: "Item") -> str:
        """Short singular name of the item, without ego or inscription."""
        return item.name

    def emit_message(self, text: str) -> None:
        """Show a message to the player."""
        self._publish_log(text, "BATTLE")

    def check_for_ident(self, item: "Item") -> bool:
        """Identify the item once every brand and slay on it is known.

        Returns:
            True if the item is (now) identified
        """
        if item.identified:
            return True
        if not item.all_properties_known():
            return False

        item.identified = True
        if self.event_manager is not None:
            self.event_manager.publish(
                ItemIdentified(turn=self.turn, item=item),
                source="IdentifyManager"
            )
        self._publish_log(f"You have learned all there is to know about your {item.name}.",
                          "BATTLE")
        return True
