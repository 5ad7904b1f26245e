from flask import Blueprint, jsonify, request
from connect5 import get_game_session
from connect5.models import DiscColor
from connect5.services.game import COLUMNS, StatusKind
from connect5.services.game.messages import NOT_AUTHORIZED_MESSAGE
from connect5.socketio_events import notify_state_change


game = Blueprint('game', __name__)

HTTP_STATUS = {
    StatusKind.OK: 200,
    StatusKind.ACCEPTED: 202,
    StatusKind.BAD_REQUEST: 400,
    StatusKind.UNAUTHORIZED: 401,
    StatusKind.CONFLICT: 409,
    StatusKind.SERVER_ERROR: 500,
}


def _params() -> dict:
    """Merge query string, form and JSON body parameters."""
    data = dict(request.values.items())
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        data.update(body)
    return data


def _player_name(data: dict) -> str:
    name = data.get('playerName') or data.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValueError('Player name is required')
    return name.strip()


def _column(data: dict) -> int:
    """Parse the 1-based column and return it 0-based."""
    raw = data.get('column')
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(f'Column must be a number between 1 and {COLUMNS}')
    try:
        column = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f'Column must be a number between 1 and {COLUMNS}')
    if not 1 <= column <= COLUMNS:
        raise ValueError(f'Column must be a number between 1 and {COLUMNS}')
    return column - 1


def _respond(outcome, changed: bool = True):
    if changed:
        notify_state_change(get_game_session())
    return jsonify(outcome.to_dict()), HTTP_STATUS[outcome.status]


@game.errorhandler(ValueError)
def handle_bad_parameters(exc):
    return jsonify({'error': str(exc)}), 400


@game.route('/join', methods=['PUT', 'POST'])
def join_game():
    data = _params()
    name = _player_name(data)
    color = DiscColor.parse(data.get('discColor') or data.get('color'))
    outcome = get_game_session().join(name, color)
    return _respond(outcome, changed=outcome.status is StatusKind.OK)


@game.route('/make-move', methods=['POST'])
def make_move():
    data = _params()
    name = _player_name(data)
    column = _column(data)
    outcome = get_game_session().make_move(name, column)
    return _respond(outcome, changed=outcome.status in (StatusKind.OK, StatusKind.ACCEPTED))


@game.route('/move-status', methods=['GET'])
def move_status():
    name = _player_name(_params())
    outcome = get_game_session().move_status(name)
    return _respond(outcome, changed=outcome.status is StatusKind.SERVER_ERROR)


@game.route('/disconnect', methods=['POST'])
def disconnect():
    name = _player_name(_params())
    outcome = get_game_session().disconnect(name)
    return _respond(outcome, changed=outcome.status is StatusKind.OK)


@game.route('/state', methods=['GET'])
def get_game_state():
    name = _player_name(_params())
    session = get_game_session()
    if not session.is_registered(name):
        return jsonify({'error': NOT_AUTHORIZED_MESSAGE}), 401
    snapshot = session.snapshot()
    snapshot.pop('rendered_board', None)
    return jsonify(snapshot)
