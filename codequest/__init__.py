from flask import Flask
from flask_socketio import SocketIO
from codequest.config import Config


socketio = SocketIO()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    socketio.init_app(app, async_mode=app.config.get('SOCKETIO_ASYNC_MODE'))

    from codequest.games import games
    from codequest.games.data import GAMES

    app.register_blueprint(games)

    app.logger.info("Registered %d games", len(GAMES))
    return app
