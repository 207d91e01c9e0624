"""
teamgen/routes/pages.py - Trang gốc & health check
"""
from datetime import datetime, timezone
from flask import Blueprint, jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from teamgen.extensions import db

pages_bp = Blueprint("pages", __name__)

@pages_bp.route("/")
def index():
    return jsonify({
        "message": "Gerador de Times backend is running",
        "version": current_app.config["APP_VERSION"],
        "endpoints": {
            "health": "/health",
            "groups": "/api/groups",
            "matches": "/api/matches",
            "stats": "/api/stats",
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })

@pages_bp.route("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        db.session.rollback()
        database = "disconnected"
    return jsonify({
        "status": "OK",
        "database": database,
        "environment": current_app.config["ENV_NAME"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })
