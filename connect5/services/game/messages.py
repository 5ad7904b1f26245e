"""Response contract shared by the session and the HTTP layer.

Clients decide what to do next from the (status, message) pair alone, so the
texts below are part of the wire contract and should change only together with
the clients.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StatusKind(Enum):
    OK = 'ok'
    ACCEPTED = 'accepted'
    BAD_REQUEST = 'bad_request'
    UNAUTHORIZED = 'unauthorized'
    CONFLICT = 'conflict'
    SERVER_ERROR = 'server_error'


class OutcomeCode(Enum):
    WAITING_FOR_SECOND_PLAYER = 'waiting_for_second_player'
    GAME_STARTED = 'game_started'
    GAME_IN_PROGRESS = 'game_in_progress'
    NAME_TAKEN = 'name_taken'
    NOT_AUTHORIZED = 'not_authorized'
    MOVE_ACCEPTED = 'move_accepted'
    WON = 'won'
    DRAW = 'draw'
    COLUMN_FULL = 'column_full'
    NOT_YOUR_TURN = 'not_your_turn'
    YOUR_TURN = 'your_turn'
    NOT_YOUR_MOVE = 'not_your_move'
    OPPONENT_NOT_JOINED = 'opponent_not_joined'
    YOU_LOST = 'you_lost'
    OPPONENT_DISCONNECTED = 'opponent_disconnected'
    DISCONNECTED = 'disconnected'


NOT_AUTHORIZED_MESSAGE = "User with that name is not in the game"
USER_EXISTS_MESSAGE = "User with that name already exists. Try a different name"
GAME_IN_PROGRESS_MESSAGE = "A game is in progress. Try again later."
WAITING_FOR_SECOND_PLAYER_MESSAGE = "Joined game, waiting for second player to join..."
GAME_STARTED_MESSAGE = "Game has started\nYou'll be notified when it's your move"
COLOR_TAKEN_MESSAGE = "The color you chose was taken. New color is {color}\n"
MOVE_ACCEPTED_MESSAGE = "You made your move {name}, please wait for the other player to make theirs"
WON_MESSAGE = "Game is over. You have won the game"
DRAW_MESSAGE = "Game is over. The board is full, it's a draw"
COLUMN_FULL_MESSAGE = "Column {column} is full\n"
NOT_YOUR_TURN_MESSAGE = "It's not your turn {name}"
YOUR_TURN_MESSAGE = "It's your turn {name}, please enter column  (1-9 or 0 to disconnect)"
NOT_YOUR_MOVE_MESSAGE = "Not your move"
OPPONENT_NOT_JOINED_MESSAGE = "The game has not started, waiting on another player"
YOU_LOST_MESSAGE = "Game is over. You have lost."
OPPONENT_DISCONNECTED_MESSAGE = "The other player has disconnected.\nYou have won!"
DISCONNECTED_MESSAGE = "You have successfully disconnected from the game"


@dataclass(frozen=True)
class Outcome:
    """Result of one session operation.

    ``board`` holds the snapshot when the response carries one; ``message``
    already embeds it, so clients that only print the message see the board.
    """
    status: StatusKind
    code: OutcomeCode
    message: str
    board: Optional[str] = None

    @classmethod
    def with_board(cls, status: StatusKind, code: OutcomeCode, board: str, text: str, separator: str = '\n') -> 'Outcome':
        return cls(status, code, board + separator + text, board)

    def to_dict(self):
        return {
            'status': self.status.value,
            'code': self.code.value,
            'message': self.message,
            'board': self.board,
        }
