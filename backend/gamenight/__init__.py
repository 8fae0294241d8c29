from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def _parse_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _parse_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Rooms live only as long as the process
    from gamenight.services.games.registry import RoomRegistry
    flask_app.extensions['gamenight_rooms'] = RoomRegistry()

    from gamenight.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from gamenight.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('questions')
    def questions_command():
        """Prints the trivia catalog."""
        from gamenight.services.games.questions import TRIVIA_QUESTIONS
        for number, item in enumerate(TRIVIA_QUESTIONS, start=1):
            click.echo(f"{number:2}. {item['q']}")
            click.echo(f"    answer: {item['a']}  choices: {', '.join(item['choices'])}")

    flask_app.cli.add_command(questions_command)

    return flask_app
