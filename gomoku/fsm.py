from __future__ import annotations

from enum import StrEnum

from statemachine import State, StateMachine


class GamePhase(StrEnum):
    in_progress = "in_progress"
    finished = "finished"


class GameFSM(StateMachine):
    """Game phase guard: in progress -> finished.

    `finished` is final, so once a game ends no event can bring it back.
    Whose turn it is and the outcome live on the engine; the FSM only
    tracks the phase.
    """

    in_progress = State(GamePhase.in_progress.value, value=GamePhase.in_progress.value, initial=True)
    finished = State(GamePhase.finished.value, value=GamePhase.finished.value, final=True)

    finish = in_progress.to(finished)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))

    @property
    def is_over(self) -> bool:
        return self.current_state == self.finished
