import logging
import random
import threading
from enum import Enum
from typing import Dict, Optional

from connect5.models import DiscColor, Player
from . import messages as msg
from .board import Board
from .messages import Outcome, OutcomeCode, StatusKind


class SessionState(Enum):
    WAITING = 'waiting'        # 0 or 1 players seated
    ACTIVE = 'active'          # 2 players, no result yet
    FINISHED = 'finished'      # won or drawn, loser/opponent not yet told
    ABANDONED = 'abandoned'    # a player left mid-game, remaining one not yet told


class GameSession:
    """Two-seat Connect5 session shared by every request handler.

    All public methods take the session lock for their whole read/mutate
    sequence, so concurrent joins, moves and polls are serialised.

    The player recorded in ``last_to_move`` when a game starts is the one who
    waits: the other player is prompted first.
    """

    MAX_PLAYERS = 2

    def __init__(self, board: Optional[Board] = None, rng: Optional[random.Random] = None, logger=None):
        self.board = board or Board()
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)
        self.players: Dict[str, Player] = {}
        self.state = SessionState.WAITING
        self.last_to_move: Optional[str] = None
        self.winner: Optional[str] = None
        self._lock = threading.RLock()

    # ---- queries ----

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self.players

    @property
    def active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def snapshot(self) -> dict:
        with self._lock:
            return {
                'state': self.state.value,
                'players': [p.to_dict() for p in self.players.values()],
                'last_to_move': self.last_to_move,
                'winner': self.winner,
                'board': self.board.to_rows(),
                'rendered_board': self.board.render(),
            }

    # ---- operations ----

    def join(self, name: str, color: DiscColor) -> Outcome:
        with self._lock:
            if self.state is not SessionState.WAITING:
                return Outcome(StatusKind.CONFLICT, OutcomeCode.GAME_IN_PROGRESS, msg.GAME_IN_PROGRESS_MESSAGE)
            if name in self.players:
                return Outcome(StatusKind.CONFLICT, OutcomeCode.NAME_TAKEN, msg.USER_EXISTS_MESSAGE)

            if not self.players:
                self.players[name] = Player(name, color)
                self.logger.info(f"[join] player={name} color={color.value} seated first")
                return Outcome(StatusKind.OK, OutcomeCode.WAITING_FOR_SECOND_PLAYER,
                               msg.WAITING_FOR_SECOND_PLAYER_MESSAGE)

            prefix = ''
            if any(p.color is color for p in self.players.values()):
                color = color.other()
                prefix = msg.COLOR_TAKEN_MESSAGE.format(color=color.value)
            self.players[name] = Player(name, color)
            self._begin_game()
            self.logger.info(f"[join] player={name} color={color.value} game started, waiting={self.last_to_move}")
            return Outcome(StatusKind.OK, OutcomeCode.GAME_STARTED, prefix + msg.GAME_STARTED_MESSAGE)

    def make_move(self, name: str, column: int) -> Outcome:
        """Drop the player's disc in ``column`` (0-based)."""
        with self._lock:
            player = self.players.get(name)
            if player is None:
                return Outcome(StatusKind.UNAUTHORIZED, OutcomeCode.NOT_AUTHORIZED, msg.NOT_AUTHORIZED_MESSAGE)
            if self.state is SessionState.WAITING:
                return Outcome(StatusKind.CONFLICT, OutcomeCode.OPPONENT_NOT_JOINED, msg.OPPONENT_NOT_JOINED_MESSAGE)
            if self.state is not SessionState.ACTIVE or self.last_to_move == name:
                return Outcome(StatusKind.BAD_REQUEST, OutcomeCode.NOT_YOUR_TURN,
                               msg.NOT_YOUR_TURN_MESSAGE.format(name=name))

            if not self.board.drop(column, player.color):
                self.logger.info(f"[move] player={name} column={column + 1} full")
                return Outcome.with_board(StatusKind.BAD_REQUEST, OutcomeCode.COLUMN_FULL, self.board.render(),
                                          msg.COLUMN_FULL_MESSAGE.format(column=column + 1))

            self.last_to_move = name
            self.logger.info(f"[move] player={name} color={player.color.value} column={column + 1}")
            board = self.board.render()

            if self.board.check_win(player.color):
                self.winner = name
                self.state = SessionState.FINISHED
                self.players.pop(name)
                self.logger.info(f"[win] player={name}")
                return Outcome.with_board(StatusKind.OK, OutcomeCode.WON, board, msg.WON_MESSAGE)

            if self.board.is_full():
                self.winner = None
                self.state = SessionState.FINISHED
                self.players.pop(name)
                self.logger.info(f"[draw] board full after move by player={name}")
                return Outcome.with_board(StatusKind.OK, OutcomeCode.DRAW, board, msg.DRAW_MESSAGE)

            return Outcome.with_board(StatusKind.ACCEPTED, OutcomeCode.MOVE_ACCEPTED, board,
                                      msg.MOVE_ACCEPTED_MESSAGE.format(name=name), separator='')

    def move_status(self, name: str) -> Outcome:
        with self._lock:
            if name not in self.players:
                return Outcome(StatusKind.UNAUTHORIZED, OutcomeCode.NOT_AUTHORIZED, msg.NOT_AUTHORIZED_MESSAGE)

            if self.state is SessionState.FINISHED:
                board = self.board.render()
                drawn = self.winner is None
                self.players.pop(name)
                self.logger.info(f"[status] player={name} told {'draw' if drawn else 'lost'}, winner={self.winner}")
                self._end_game()
                if drawn:
                    return Outcome.with_board(StatusKind.SERVER_ERROR, OutcomeCode.DRAW, board, msg.DRAW_MESSAGE)
                return Outcome.with_board(StatusKind.SERVER_ERROR, OutcomeCode.YOU_LOST, board, msg.YOU_LOST_MESSAGE)

            if self.state is SessionState.ABANDONED:
                self.players.pop(name)
                self.logger.info(f"[forfeit] player={name} wins, opponent disconnected")
                self._end_game()
                return Outcome(StatusKind.SERVER_ERROR, OutcomeCode.OPPONENT_DISCONNECTED,
                               msg.OPPONENT_DISCONNECTED_MESSAGE)

            if self.state is SessionState.WAITING:
                return Outcome(StatusKind.CONFLICT, OutcomeCode.OPPONENT_NOT_JOINED, msg.OPPONENT_NOT_JOINED_MESSAGE)

            if self.last_to_move == name:
                return Outcome(StatusKind.CONFLICT, OutcomeCode.NOT_YOUR_MOVE, msg.NOT_YOUR_MOVE_MESSAGE)
            return Outcome.with_board(StatusKind.OK, OutcomeCode.YOUR_TURN, self.board.render(),
                                      msg.YOUR_TURN_MESSAGE.format(name=name))

    def disconnect(self, name: str) -> Outcome:
        with self._lock:
            if self.players.pop(name, None) is None:
                return Outcome(StatusKind.UNAUTHORIZED, OutcomeCode.NOT_AUTHORIZED, msg.NOT_AUTHORIZED_MESSAGE)
            self.logger.info(f"[disconnect] player={name} state={self.state.value}")
            if not self.players:
                self._end_game()
            elif self.state is SessionState.ACTIVE:
                self.state = SessionState.ABANDONED
            return Outcome(StatusKind.OK, OutcomeCode.DISCONNECTED, msg.DISCONNECTED_MESSAGE)

    def reset(self) -> None:
        """Drop every seated player and start over with an empty board."""
        with self._lock:
            self.players.clear()
            self._end_game()

    # ---- transitions ----

    def _begin_game(self) -> None:
        self.state = SessionState.ACTIVE
        self.winner = None
        self.last_to_move = self.rng.choice(sorted(self.players))

    def _end_game(self) -> None:
        self.board.clear()
        self.state = SessionState.WAITING
        self.winner = None
        self.last_to_move = None
        self.logger.info(f"[reset] board cleared, seated={list(self.players)}")
