"""Tests for board rendering."""

from app.rendering import format_average, render_board
from core.state_machine import SessionStateMachine


class TestFormatAverage:
    """Tests for average formatting."""

    def test_formats(self):
        assert format_average(9.0) == "9.0"
        assert format_average(53 / 7) == "7.6"
        assert format_average(2.5) == "2.5"
        assert format_average(0) == "0.0"


class TestRenderBoard:
    """Tests for render_board."""

    def _machine(self):
        sm = SessionStateMachine()
        sm.create_session()
        sm.join("A", "Alice")
        sm.join("B", "Bob")
        return sm

    def test_no_session(self):
        assert "/start" in render_board(SessionStateMachine())

    def test_empty_board(self):
        text = render_board(self._machine())
        assert "Ведущего пока нет" in text
        assert "Задача не выбрана" in text
        assert "⏳ Alice" in text

    def test_votes_hidden_until_reveal(self):
        sm = self._machine()
        sm.become_facilitator("A")
        sm.create_task("Story 1")
        sm.vote("A", 13)

        text = render_board(sm)

        assert "👑 Ведущий: Alice" in text
        assert "📝 Задача: Story 1" in text
        assert "✅ Alice" in text
        assert "⏳ Bob" in text
        assert "13" not in text
        assert "Проголосовало: 1" in text

    def test_revealed_results(self):
        sm = self._machine()
        sm.create_task("Story 1")
        sm.vote("A", 5)
        sm.vote("B", 13)
        sm.reveal_votes()

        text = render_board(sm)

        assert "• Alice: 5" in text
        assert "• Bob: 13" in text
        assert "Среднее: 9.0" in text
        assert "⚠️" not in text

    def test_outlier_marked(self):
        sm = self._machine()
        sm.join("C", "Carol")
        sm.create_task("Story 1")
        sm.vote("A", 1)
        sm.vote("B", 2)
        sm.vote("C", 21)
        sm.reveal_votes()

        text = render_board(sm)

        assert "• Carol: 21 ⚠️" in text
        assert "Среднее: 8.0" in text

    def test_vote_without_join_hidden_from_results(self):
        sm = self._machine()
        sm.create_task("Story 1")
        sm.vote("A", 5)
        sm.vote("ghost", 13)
        sm.reveal_votes()

        text = render_board(sm)

        assert "• Alice: 5" in text
        assert "ghost" not in text
        assert "Среднее: 9.0" in text

    def test_duplicate_participants_listed_once(self):
        sm = self._machine()
        sm.join("A", "Alice")
        text = render_board(sm)
        assert text.count("⏳ Alice") == 1
        assert "Участники (2)" in text
