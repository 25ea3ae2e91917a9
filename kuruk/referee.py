"""Referee packets built from the internal game state."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Optional

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class State(Enum):
    """Internal game state."""

    HALT = auto()
    STOP = auto()
    GAME = auto()
    GAME_FORCE = auto()
    KICKOFF_YELLOW_PREPARE = auto()
    KICKOFF_YELLOW = auto()
    PENALTY_YELLOW_PREPARE = auto()
    PENALTY_YELLOW = auto()
    PENALTY_YELLOW_RUNNING = auto()
    DIRECT_YELLOW = auto()
    INDIRECT_YELLOW = auto()
    BALL_PLACEMENT_YELLOW = auto()
    KICKOFF_BLUE_PREPARE = auto()
    KICKOFF_BLUE = auto()
    PENALTY_BLUE_PREPARE = auto()
    PENALTY_BLUE = auto()
    PENALTY_BLUE_RUNNING = auto()
    DIRECT_BLUE = auto()
    INDIRECT_BLUE = auto()
    BALL_PLACEMENT_BLUE = auto()
    TIMEOUT_YELLOW = auto()
    TIMEOUT_BLUE = auto()


class RefereeCommand(IntEnum):
    """Commands of the referee protocol."""

    HALT = 0
    STOP = 1
    NORMAL_START = 2
    FORCE_START = 3
    PREPARE_KICKOFF_YELLOW = 4
    PREPARE_KICKOFF_BLUE = 5
    PREPARE_PENALTY_YELLOW = 6
    PREPARE_PENALTY_BLUE = 7
    DIRECT_FREE_YELLOW = 8
    DIRECT_FREE_BLUE = 9
    INDIRECT_FREE_YELLOW = 10
    INDIRECT_FREE_BLUE = 11
    TIMEOUT_YELLOW = 12
    TIMEOUT_BLUE = 13
    GOAL_YELLOW = 14
    GOAL_BLUE = 15
    BALL_PLACEMENT_YELLOW = 16
    BALL_PLACEMENT_BLUE = 17


_COMMANDS = {
    State.HALT: RefereeCommand.HALT,
    State.STOP: RefereeCommand.STOP,
    State.GAME: RefereeCommand.FORCE_START,
    State.GAME_FORCE: RefereeCommand.FORCE_START,
    State.KICKOFF_YELLOW_PREPARE: RefereeCommand.PREPARE_KICKOFF_YELLOW,
    State.KICKOFF_YELLOW: RefereeCommand.NORMAL_START,
    State.PENALTY_YELLOW_PREPARE: RefereeCommand.PREPARE_PENALTY_YELLOW,
    State.PENALTY_YELLOW: RefereeCommand.NORMAL_START,
    State.PENALTY_YELLOW_RUNNING: RefereeCommand.NORMAL_START,
    State.DIRECT_YELLOW: RefereeCommand.DIRECT_FREE_YELLOW,
    State.INDIRECT_YELLOW: RefereeCommand.INDIRECT_FREE_YELLOW,
    State.BALL_PLACEMENT_YELLOW: RefereeCommand.BALL_PLACEMENT_YELLOW,
    State.KICKOFF_BLUE_PREPARE: RefereeCommand.PREPARE_KICKOFF_BLUE,
    State.KICKOFF_BLUE: RefereeCommand.NORMAL_START,
    State.PENALTY_BLUE_PREPARE: RefereeCommand.PREPARE_PENALTY_BLUE,
    State.PENALTY_BLUE: RefereeCommand.NORMAL_START,
    State.PENALTY_BLUE_RUNNING: RefereeCommand.NORMAL_START,
    State.DIRECT_BLUE: RefereeCommand.DIRECT_FREE_BLUE,
    State.INDIRECT_BLUE: RefereeCommand.INDIRECT_FREE_BLUE,
    State.BALL_PLACEMENT_BLUE: RefereeCommand.BALL_PLACEMENT_BLUE,
    State.TIMEOUT_YELLOW: RefereeCommand.TIMEOUT_YELLOW,
    State.TIMEOUT_BLUE: RefereeCommand.TIMEOUT_BLUE,
}


@dataclass
class TeamInfo:
    """Per-team referee information; timeout_time is in microseconds."""

    name: str = ""
    score: int = 0
    red_cards: int = 0
    yellow_cards: int = 0
    timeouts: int = 0
    timeout_time: int = 0
    goalie: int = 0


@dataclass
class GameState:
    """Internal game state as tracked by the referee logic."""

    state: State = State.HALT
    stage: int = 0
    yellow: TeamInfo = field(default_factory=TeamInfo)
    blue: TeamInfo = field(default_factory=TeamInfo)
    stage_time_left: Optional[int] = None
    designated_position: Optional[Any] = None
    goals_flipped: Optional[bool] = None
    game_event: Optional[Any] = None
    current_action_time_remaining: Optional[int] = None


@dataclass
class RefereePacket:
    """A referee message in the league protocol."""

    packet_timestamp: int
    stage: int
    command: RefereeCommand
    command_counter: int
    command_timestamp: int
    yellow: TeamInfo
    blue: TeamInfo
    current_action_time_remaining: int = 0
    stage_time_left: Optional[int] = None
    designated_position: Optional[Any] = None
    blue_team_on_positive_half: Optional[bool] = None
    game_event: Optional[Any] = None


def default_team_info() -> TeamInfo:
    """Team info at the start of a game: four timeouts of five minutes total."""
    return TeamInfo(
        name="",
        score=0,
        red_cards=0,
        yellow_cards=0,
        timeouts=4,
        timeout_time=5 * 60 * 1000 * 1000,
        goalie=0,
    )


def command_from_game_state(state: State) -> RefereeCommand:
    """Referee command that corresponds to an internal game state."""
    return _COMMANDS.get(state, RefereeCommand.HALT)


class SslRefereeExtractor:
    """Turns a stream of game states into referee packets.

    The command counter and command timestamp change whenever the state does.
    """

    def __init__(self, start_time: int) -> None:
        self._last_state = State.HALT
        self._state_change_time = int(start_time)
        self._counter = 0
        self._last_command = RefereeCommand.HALT
        self._remaining_action_time = 0

    def convert_game_state(self, game_state: GameState, current_time: int) -> RefereePacket:
        """Referee packet for ``game_state`` observed at ``current_time``."""
        if game_state.state != self._last_state:
            if game_state.state != State.GAME:
                self._last_command = command_from_game_state(game_state.state)
            elif self._last_state == State.HALT:
                self._last_command = RefereeCommand.FORCE_START
            self._last_state = game_state.state
            self._state_change_time = int(current_time)
            self._counter = (self._counter + 1) & _U32

        if game_state.current_action_time_remaining is not None:
            self._remaining_action_time = game_state.current_action_time_remaining

        return RefereePacket(
            packet_timestamp=int(current_time) & _U64,
            stage=game_state.stage,
            command=self._last_command,
            command_counter=self._counter,
            command_timestamp=self._state_change_time & _U64,
            yellow=copy.deepcopy(game_state.yellow),
            blue=copy.deepcopy(game_state.blue),
            current_action_time_remaining=self._remaining_action_time,
            stage_time_left=game_state.stage_time_left,
            designated_position=copy.deepcopy(game_state.designated_position),
            blue_team_on_positive_half=(
                None if game_state.goals_flipped is None else not game_state.goals_flipped
            ),
            game_event=copy.deepcopy(game_state.game_event),
        )