import logging

from flask import Flask, jsonify

from classroom_backend import database
from classroom_backend.authorization import allow_all
from classroom_backend.config import Config
from classroom_backend.errors import register_error_handlers
from classroom_backend.extensions import cors
from classroom_backend.logging_config import configure_logging
from classroom_backend.repositories import AnnouncementRepository, QuizRepository
from classroom_backend.routes.quizassign import quizzes, submit
from classroom_backend.routes.social import announcements

logger = logging.getLogger(__name__)


def create_app(overrides=None, db=None) -> Flask:
    """
    Application factory.
    Builds config from the environment (plus ``overrides``), wires the
    repositories to ``db`` or to a fresh MongoDB connection, and registers
    blueprints and error handlers.
    """
    config = Config.from_env(overrides)
    configure_logging(config.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_mapping(config.as_flask_config())
    app.config.setdefault("AUTHORIZER", allow_all)

    cors.init_app(app, origins=config.CORS_ORIGINS, supports_credentials=True)

    if db is None:
        db = database.connect(config)
        database.ping(db)
    app.extensions["quiz_repository"] = QuizRepository(db[database.QUIZZES_COLLECTION])
    app.extensions["announcement_repository"] = AnnouncementRepository(
        db[database.ANNOUNCEMENTS_COLLECTION]
    )

    # Register blueprints
    app.register_blueprint(quizzes.router, url_prefix=config.API_PREFIX)
    app.register_blueprint(submit.router, url_prefix=config.API_PREFIX)
    app.register_blueprint(announcements.router, url_prefix=config.API_PREFIX)

    register_error_handlers(app)

    @app.route("/", methods=["GET"])
    def root():
        return jsonify({"msg": "Backend is running"})

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"])
