from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from countdown.main import main
    flask_app.register_blueprint(main)

    from countdown.api.timers import timers
    flask_app.register_blueprint(timers, url_prefix='/api/timers')

    # Bind the /ws handlers to the initialized socketio instance
    from countdown.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the timers schema."""
        import countdown.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
