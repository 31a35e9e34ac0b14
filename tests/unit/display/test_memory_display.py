"""Unit tests for InMemoryDisplay."""

from __future__ import annotations

from countdown_hud.core.models.state import CountdownFrame, TimerPhase
from countdown_hud.mock.memory_display import InMemoryDisplay


def _frame(text: str = "00:10", critical: bool = False) -> CountdownFrame:
    return CountdownFrame(text=text, color="red" if critical else "white", critical=critical, phase=TimerPhase.LIVE)


class TestInMemoryDisplay:
    def test_show_frame_stores_content(self) -> None:
        display = InMemoryDisplay()
        display.show_frame(_frame("01:00"))
        assert display.text == "01:00"
        assert display.color == "white"
        assert display.critical_class is False

    def test_critical_frame_sets_class(self) -> None:
        display = InMemoryDisplay()
        display.show_frame(_frame(critical=True))
        assert display.critical_class is True

    def test_reset_animation_drops_class(self) -> None:
        display = InMemoryDisplay()
        display.show_frame(_frame(critical=True))
        display.reset_animation()
        assert display.critical_class is False
        assert display.animation_resets == 1

    def test_clear_resets_all(self) -> None:
        display = InMemoryDisplay()
        display.show_frame(_frame(critical=True))
        display.clear()
        assert display.last_frame is None
        assert display.text is None
        assert display.critical_class is False

    def test_call_log_records_all_calls(self) -> None:
        display = InMemoryDisplay()
        display.reset_animation()
        display.show_frame(_frame())
        display.clear()
        assert [name for name, _ in display.call_log] == ["reset_animation", "show_frame", "clear"]
