"""
Unit tests for the LogManager.

Tests categorized storage, filtering and event-driven logging.
"""
import os

from src.core.events import DebugMessage, LogMessage, LogSaveRequested
from src.game.managers import LogCategory, LogLevel, LogManager


class TestLogManager:
    """Test direct logging and filtering."""

    def test_category_default_levels(self, log_manager):
        log_manager.battle("Your sword flares!")
        log_manager.debug("cache miss")
        log_manager.warning("no slay")

        levels = {entry.category: entry.level for entry in log_manager.messages}
        assert levels[LogCategory.BATTLE] == LogLevel.INFO
        assert levels[LogCategory.DEBUG] == LogLevel.DEBUG
        assert levels[LogCategory.WARNING] == LogLevel.WARNING

    def test_level_filter_hides_debug(self, log_manager):
        log_manager.debug("hidden")
        log_manager.system("shown")

        assert [entry.text for entry in log_manager.get_messages()] == ["shown"]

    def test_explicit_category_filter_ignores_level(self, log_manager):
        log_manager.debug("detail")
        messages = log_manager.get_messages(categories={LogCategory.DEBUG})
        assert [entry.text for entry in messages] == ["detail"]

    def test_count_returns_newest(self, log_manager):
        for index in range(5):
            log_manager.battle(f"hit {index}")

        assert [entry.text for entry in log_manager.get_messages(count=2)] == ["hit 3", "hit 4"]

    def test_disabled_category(self, log_manager):
        log_manager.lore("Snaga - learned IM_FIRE")
        log_manager.disable_category(LogCategory.LORE)
        assert log_manager.get_messages() == []

        log_manager.enable_category(LogCategory.LORE)
        assert len(log_manager.get_messages()) == 1

    def test_bounded_buffer(self, event_manager):
        manager = LogManager(event_manager, max_messages=3)
        for index in range(5):
            manager.system(f"line {index}")

        assert manager.get_texts(LogCategory.SYSTEM) == ["line 2", "line 3", "line 4"]

    def test_toggle_debug(self, log_manager):
        assert not log_manager.is_debug_enabled()
        log_manager.toggle_debug()
        assert log_manager.is_debug_enabled()
        log_manager.toggle_debug()
        assert not log_manager.is_debug_enabled()

    def test_format(self, log_manager):
        log_manager.battle("Your Dagger glows!")
        assert log_manager.messages[0].format() == "[BTL] Your Dagger glows!"
        assert log_manager.messages[0].format(include_category=False) == "Your Dagger glows!"

    def test_clear(self, log_manager):
        log_manager.system("one")
        log_manager.clear()
        assert len(log_manager.messages) == 0


class TestLogEvents:
    """Test logging through the event manager."""

    def test_log_message_event(self, event_manager, log_manager):
        event_manager.publish(LogMessage(turn=1, message="Lore: Snaga - learned ORC",
                                         category="LORE", level=LogLevel.INFO, source="test"))
        event_manager.process_events()

        assert log_manager.get_texts(LogCategory.LORE) == ["Lore: Snaga - learned ORC"]

    def test_unknown_category_goes_to_system(self, event_manager, log_manager):
        event_manager.publish(LogMessage(turn=1, message="odd", category="WEIRD",
                                         level=LogLevel.INFO, source="test"))
        event_manager.process_events()

        assert log_manager.get_texts(LogCategory.SYSTEM) == ["odd"]

    def test_debug_message_event(self, event_manager, log_manager):
        event_manager.publish(DebugMessage(turn=1, message="built", source="SlayCache"))
        event_manager.process_events()

        assert log_manager.get_texts(LogCategory.DEBUG) == ["[SlayCache] built"]

    def test_save_request(self, event_manager, log_manager, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        log_manager.battle("Your Long Sword flares!")

        event_manager.publish(LogSaveRequested(turn=2))
        event_manager.process_events()

        saved = os.listdir(tmp_path / "logs")
        assert len(saved) == 1
        content = (tmp_path / "logs" / saved[0]).read_text(encoding="utf-8")
        assert "[BATTLE] Your Long Sword flares!" in content
        assert "Log file saved successfully" in log_manager.get_texts(LogCategory.SYSTEM)

    def test_save_failure_is_logged(self, log_manager, tmp_path):
        blocker = tmp_path / "logs"
        blocker.write_text("not a directory", encoding="utf-8")

        assert log_manager.save_log_to_file(str(blocker)) is False
        assert len(log_manager.get_texts(LogCategory.ERROR)) == 1
