from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import random
import click
from config import Config

socketio = SocketIO(async_mode=None)


def get_game_session():
    """The GameSession owned by the current app."""
    return current_app.extensions['game_session']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One shared session per process, created with an empty board
    from connect5.services.game import GameSession
    seed = flask_app.config.get('FIRST_MOVER_SEED')
    flask_app.extensions['game_session'] = GameSession(
        rng=random.Random(seed),
        logger=flask_app.logger,
    )

    # Import and register blueprints here
    from connect5.main import main
    flask_app.register_blueprint(main)

    from connect5.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    # Register Socket.IO event handlers
    from connect5.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('game-reset')
    def game_reset_command():
        """Removes every seated player and clears the board."""
        from connect5.socketio_events import notify_state_change
        session = flask_app.extensions['game_session']
        with flask_app.app_context():
            session.reset()
            notify_state_change(session)
        click.echo('Game session has been reset!')

    @click.command('game-state')
    def game_state_command():
        """Prints the board and the seated players."""
        snapshot = flask_app.extensions['game_session'].snapshot()
        click.echo(snapshot['rendered_board'], nl=False)
        click.echo(f"state: {snapshot['state']}")
        for player in snapshot['players']:
            click.echo(f"{player['name']} ({player['color']})")

    flask_app.cli.add_command(game_reset_command)
    flask_app.cli.add_command(game_state_command)

    return flask_app
