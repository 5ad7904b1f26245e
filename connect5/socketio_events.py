from flask import current_app
from flask_socketio import join_room, leave_room, emit
from connect5 import socketio
from connect5.services.game.messages import NOT_AUTHORIZED_MESSAGE

# Seated players share one room: there is a single session per process
GAME_ROOM = 'game:connect5'


def notify_state_change(session) -> None:
    """Hint to watching players that the session changed.

    Carries no board or turn data; clients poll move-status for that.
    """
    if not current_app.config.get('SOCKETIO_NOTIFY', True):
        return
    socketio.emit('state_update', {'state': session.state.value}, to=GAME_ROOM, namespace='/ws')


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_watch(data=None):
    name = (data or {}).get('playerName') or (data or {}).get('name')
    session = current_app.extensions['game_session']
    if not isinstance(name, str) or not session.is_registered(name):
        emit('error', {'message': NOT_AUTHORIZED_MESSAGE})
        return
    join_room(GAME_ROOM)
    emit('joined', {'room': GAME_ROOM})


def handle_unwatch(data=None):
    leave_room(GAME_ROOM)
    emit('left', {'room': GAME_ROOM})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('watch', handle_watch, namespace='/ws')
    socketio.on_event('unwatch', handle_unwatch, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        # Test-only mirror on default namespace
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('watch', handle_watch, namespace='/')
        socketio.on_event('unwatch', handle_unwatch, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
