"""Game domain services: board, session state machine and response contract.

This package contains the pure game logic imported by HTTP routes, socket
handlers and CLI commands, keeping transport concerns separated from core
game mechanics.
"""

from .board import Board, ROWS, COLUMNS, WINNING_LENGTH
from .messages import Outcome, OutcomeCode, StatusKind
from .session import GameSession, SessionState
