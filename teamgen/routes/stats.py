"""teamgen/routes/stats.py"""
import logging
from flask import Blueprint, jsonify, g
from sqlalchemy.exc import SQLAlchemyError
from teamgen.extensions import db
from teamgen.models import Match
from teamgen.services.identity import identity_required
from teamgen.services.standings import InvalidMatchError, compute_standings

logger = logging.getLogger(__name__)

stats_bp = Blueprint("stats", __name__)

@stats_bp.route("", methods=["GET"])
@identity_required
def get_stats():
    try:
        matches = (Match.query.filter_by(owner_id=g.owner_id)
                   .order_by(Match.id.asc()).all())
        table = compute_standings(matches)
    except (SQLAlchemyError, InvalidMatchError) as e:
        db.session.rollback()
        logger.error(f"StatsError for {g.owner_id}: {e}")
        return jsonify({"error": str(e)}), 500
    return jsonify([s.to_dict() for s in table])
