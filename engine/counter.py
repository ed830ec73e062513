"""
Score Counter - Core counting logic for HoopCount.

The ScoreCounter runs independently of the GUI and holds the only
state in the application: two bounded team scores and the crown
rotation accumulator.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from config import COUNTER_SETTINGS

logger = logging.getLogger(__name__)

# Relative slack when comparing accumulated rotation with a full turn
ROTATION_REL_TOLERANCE = 1e-9


class Team(Enum):
    """The two sides on the scoreboard."""
    A = "team_a"
    B = "team_b"


class FeedbackPulse(Enum):
    """Feedback played after a score change request."""
    CLICK = "click"                  # score went up
    DIRECTION_DOWN = "direction_down"  # score went down


@dataclass(frozen=True)
class ScoreState:
    """
    Immutable snapshot of the current score state.
    Emitted after every change for GUI updates.
    """
    team_a_score: int = 0
    team_b_score: int = 0

    @property
    def is_tied(self) -> bool:
        return self.team_a_score == self.team_b_score

    @property
    def leader(self) -> Optional[Team]:
        """The team currently ahead, or None when tied."""
        if self.team_a_score > self.team_b_score:
            return Team.A
        if self.team_b_score > self.team_a_score:
            return Team.B
        return None

    def score(self, team: Team) -> int:
        return self.team_a_score if team == Team.A else self.team_b_score

    def is_winning(self, team: Team) -> bool:
        return self.leader == team


class ScoreCounter(QObject):
    """
    Two-team score counter driven by crown rotation and swipes.
    Emits Qt Signals so GUI and feedback layers can react without polling.

    Scores saturate at the configured bounds instead of failing, so every
    operation is valid in every state.

    Usage:
        counter = ScoreCounter()
        counter.score_changed.connect(on_score_changed)
        counter.feedback_pulse.connect(feedback_player.play)

        counter.apply_rotation(velocity)   # crown turned
        counter.decrement_team_a()         # left swipe on team A
    """

    # Signals
    score_changed = Signal(object)     # ScoreState
    feedback_pulse = Signal(object)    # FeedbackPulse
    scores_reset = Signal()

    def __init__(self, min_score: Optional[int] = None, max_score: Optional[int] = None,
                 full_rotation: Optional[float] = None):
        """
        Initialize the counter with both scores at zero.

        Args:
            min_score: Lower score bound (default: 0)
            max_score: Upper score bound (default: 999)
            full_rotation: Accumulated rotation per increment (default: 2π)
        """
        super().__init__()

        self._min_score = COUNTER_SETTINGS.min_score if min_score is None else min_score
        self._max_score = COUNTER_SETTINGS.max_score if max_score is None else max_score
        self._full_rotation = COUNTER_SETTINGS.full_rotation if full_rotation is None else full_rotation

        if self._full_rotation <= 0:
            raise ValueError(f"full_rotation must be positive, got {self._full_rotation}")

        if self._max_score < self._min_score:
            raise ValueError(
                f"max_score ({self._max_score}) is below min_score ({self._min_score})"
            )

        self._scores: dict[Team, int] = {Team.A: self._min_score, Team.B: self._min_score}
        self._rotation_accumulator: float = 0.0

    @property
    def team_a_score(self) -> int:
        return self._scores[Team.A]

    @property
    def team_b_score(self) -> int:
        return self._scores[Team.B]

    @property
    def rotation_accumulator(self) -> float:
        """Rotation collected since the last threshold crossing."""
        return self._rotation_accumulator

    @property
    def full_rotation(self) -> float:
        return self._full_rotation

    @property
    def max_score(self) -> int:
        return self._max_score

    @property
    def leader(self) -> Optional[Team]:
        return self.get_score_state().leader

    @property
    def is_tied(self) -> bool:
        return self.team_a_score == self.team_b_score

    def score(self, team: Team) -> int:
        return self._scores[team]

    def get_score_state(self) -> ScoreState:
        """Get the current score state snapshot."""
        return ScoreState(
            team_a_score=self._scores[Team.A],
            team_b_score=self._scores[Team.B],
        )

    # ============ Score Changes ============

    def increment(self, team: Team) -> None:
        """Add one point to a team, saturating at the upper bound."""
        self._scores[team] = min(self._scores[team] + 1, self._max_score)
        logger.debug(f"{team.value} incremented to {self._scores[team]}")
        self.feedback_pulse.emit(FeedbackPulse.CLICK)
        self._emit_score_update()

    def decrement(self, team: Team) -> None:
        """Take one point from a team, saturating at the lower bound."""
        self._scores[team] = max(self._scores[team] - 1, self._min_score)
        logger.debug(f"{team.value} decremented to {self._scores[team]}")
        self.feedback_pulse.emit(FeedbackPulse.DIRECTION_DOWN)
        self._emit_score_update()

    def increment_team_a(self) -> None:
        self.increment(Team.A)

    def increment_team_b(self) -> None:
        self.increment(Team.B)

    def decrement_team_a(self) -> None:
        self.decrement(Team.A)

    def decrement_team_b(self) -> None:
        self.decrement(Team.B)

    def reset(self) -> None:
        """Set both scores back to the lower bound."""
        self._scores[Team.A] = self._min_score
        self._scores[Team.B] = self._min_score
        logger.info("Scores reset")
        self.scores_reset.emit()
        self._emit_score_update()

    # ============ Crown Rotation ============

    def apply_rotation(self, velocity: float) -> None:
        """
        Feed one crown rotation event into the counter.

        The magnitude is accumulated until a full rotation has been
        collected. The sign of the event that crosses the threshold picks
        the team: positive for A, negative for B. A zero velocity on the
        crossing event scores nothing. The accumulator is cleared on every
        crossing.

        Args:
            velocity: Signed rotation amount for this event
        """
        self._rotation_accumulator += abs(velocity)

        if self._threshold_reached():
            if velocity > 0:
                self.increment_team_a()
            elif velocity < 0:
                self.increment_team_b()
            self._rotation_accumulator = 0.0

    def _threshold_reached(self) -> bool:
        # Equal fractions of a turn may sum to a hair under the threshold
        return (self._rotation_accumulator >= self._full_rotation
                or math.isclose(self._rotation_accumulator, self._full_rotation,
                                rel_tol=ROTATION_REL_TOLERANCE))

    def _emit_score_update(self) -> None:
        self.score_changed.emit(self.get_score_state())
