"""
Unit tests for the IdentifyManager.
"""
from src.core.events import EventType
from src.game.entities import Item
from src.game.managers import IdentifyManager, LogCategory


class TestIdentifyManager:
    """Test ego noticing, messages and identification."""

    def test_notice_ego(self, identify_manager, fire_sword):
        identify_manager.notice_ego(fire_sword)
        assert fire_sword.ego_noticed

    def test_notice_ego_without_ego(self, identify_manager):
        item = Item(name="Dagger")
        identify_manager.notice_ego(item)
        assert not item.ego_noticed

    def test_describe(self, identify_manager, fire_sword):
        assert identify_manager.describe(fire_sword) == "Long Sword"

    def test_emit_message(self, event_manager, log_manager, identify_manager):
        identify_manager.emit_message("Your Dagger glows!")
        event_manager.process_events()

        assert log_manager.get_texts(LogCategory.BATTLE) == ["Your Dagger glows!"]

    def test_unknown_properties_block_identification(self, identify_manager, fire_sword):
        assert identify_manager.check_for_ident(fire_sword) is False
        assert not fire_sword.identified

    def test_identify_once(self, event_manager, log_manager, identify_manager, fire_sword):
        fire_sword.brands[0].known = True

        assert identify_manager.check_for_ident(fire_sword) is True
        assert identify_manager.check_for_ident(fire_sword) is True
        event_manager.process_events()

        assert fire_sword.identified
        assert len(event_manager.get_history(EventType.ITEM_IDENTIFIED)) == 1
        assert log_manager.get_texts(LogCategory.BATTLE) == [
            "You have learned all there is to know about your Long Sword."
        ]

    def test_works_without_event_manager(self, fire_sword):
        manager = IdentifyManager()
        fire_sword.brands[0].known = True

        manager.emit_message("quiet")
        assert manager.check_for_ident(fire_sword)
