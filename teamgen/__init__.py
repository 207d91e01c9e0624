"""
teamgen/__init__.py - Flask Application Factory
"""
import os
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .config import config_map
from .extensions import db, migrate, cors


def create_app(env: str = None) -> Flask:
    """
    Tạo và cấu hình Flask app theo pattern App Factory.
    Gọi: create_app('development') hoặc create_app('testing')
    """
    env = env or os.getenv("FLASK_ENV", "development")
    config = config_map.get(env, config_map["default"])

    app = Flask(__name__)
    app.config.from_object(config)
    app.config["ENV_NAME"] = env

    # ── Khởi tạo Extensions ──
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    # ── Đăng ký Models (để Migrate nhận diện) ──
    with app.app_context():
        from .models import Group, Match  # noqa: F401

    _register_blueprints(app)
    _register_error_handlers(app)

    return app


def _register_blueprints(app: Flask):
    from .routes.groups import groups_bp
    from .routes.matches import matches_bp
    from .routes.stats import stats_bp
    from .routes.pages import pages_bp

    app.register_blueprint(groups_bp, url_prefix="/api/groups")
    app.register_blueprint(matches_bp, url_prefix="/api/matches")
    app.register_blueprint(stats_bp, url_prefix="/api/stats")
    app.register_blueprint(pages_bp)  # "/" và "/health"


def _register_error_handlers(app: Flask):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code
