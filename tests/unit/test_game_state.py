"""
Unit tests for GameState and phase handling.
"""
from minefield import GamePhase, GameState, begin, create_initial_state


class TestGamePhase:
    """Test phase classification."""

    def test_terminal_phases(self) -> None:
        """Only dead and clear are terminal."""
        assert GamePhase.DEAD.is_terminal is True
        assert GamePhase.CLEAR.is_terminal is True
        assert GamePhase.READY.is_terminal is False
        assert GamePhase.PLAYING.is_terminal is False

    def test_phase_values(self) -> None:
        """Phase values are their lowercase names."""
        assert [phase.value for phase in GamePhase] == [
            "ready",
            "playing",
            "dead",
            "clear",
        ]


class TestInitialState:
    """Test state creation."""

    def test_initial_state_defaults(self, ready_state: GameState) -> None:
        """New state is ready on the start cell with no steps."""
        assert ready_state.phase == GamePhase.READY
        assert ready_state.current_index == 0
        assert ready_state.steps == 0
        assert ready_state.visited_safe == {0}

    def test_initial_phase_can_be_playing(self) -> None:
        """Rounds can start directly in play."""
        state = create_initial_state(5, GamePhase.PLAYING)
        assert state.phase == GamePhase.PLAYING
        assert state.visited_safe == {5}

    def test_direct_construction_visits_current_cell(self) -> None:
        """A state built without a visited set starts with its own cell."""
        state = GameState(GamePhase.PLAYING, 4)
        assert state.visited_safe == {4}

    def test_direct_construction_keeps_given_visited_set(self) -> None:
        """An explicit visited set is left as given."""
        state = GameState(GamePhase.PLAYING, 4, visited_safe={0, 4})
        assert state.visited_safe == {0, 4}

    def test_states_do_not_share_visited_sets(self) -> None:
        """Each state gets its own visited set."""
        first = create_initial_state(0)
        second = create_initial_state(0)
        first.visited_safe.add(1)
        assert second.visited_safe == {0}


class TestBegin:
    """Test the ready to playing transition."""

    def test_begin_from_ready(self, ready_state: GameState) -> None:
        """Ready state moves into play."""
        assert begin(ready_state) is True
        assert ready_state.phase == GamePhase.PLAYING

    def test_begin_when_playing_is_noop(self, playing_state: GameState) -> None:
        """Beginning twice changes nothing."""
        assert begin(playing_state) is False
        assert playing_state.phase == GamePhase.PLAYING

    def test_begin_cannot_leave_terminal_phase(self) -> None:
        """Dead sessions stay dead."""
        state = create_initial_state(0, GamePhase.DEAD)
        assert begin(state) is False
        assert state.is_dead is True
