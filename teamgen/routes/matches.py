"""
teamgen/routes/matches.py - API trận đấu
"""
import logging
from datetime import datetime, timezone
from flask import Blueprint, request, jsonify, g
from sqlalchemy.exc import SQLAlchemyError
from teamgen.extensions import db
from teamgen.models import Match
from teamgen.services.identity import identity_required
from teamgen.services.standings import InvalidMatchError, check_score, check_team

logger = logging.getLogger(__name__)

matches_bp = Blueprint("matches", __name__)

def _err(msg, code=400): return jsonify({"error": msg}), code

def _parse_date(value):
    if not isinstance(value, str):
        raise InvalidMatchError("date must be an ISO-8601 string")
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidMatchError(f"invalid date: {value!r}") from e
    # Cột date lưu giờ UTC không kèm offset; giờ không có offset coi là UTC
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt

@matches_bp.route("", methods=["GET"])
@identity_required
def list_matches():
    try:
        items = (Match.query.filter_by(owner_id=g.owner_id)
                 .order_by(Match.date.desc(), Match.id.desc()).all())
    except SQLAlchemyError as e:
        logger.error(f"list_matches error: {e}")
        return _err(str(e), 500)
    return jsonify([m.to_dict() for m in items])

@matches_bp.route("", methods=["POST"])
@identity_required
def create_match():
    d = request.get_json(silent=True) or {}
    if not isinstance(d, dict):
        return _err("JSON object body required")
    try:
        match = Match(
            team_a=check_team(d.get("teamA"), "teamA"),
            team_b=check_team(d.get("teamB"), "teamB"),
            score_a=check_score(d.get("scoreA"), "scoreA"),
            score_b=check_score(d.get("scoreB"), "scoreB"),
            owner_id=g.owner_id,
        )
        if d.get("date") is not None:
            match.date = _parse_date(d["date"])
    except InvalidMatchError as e:
        return _err(str(e))
    try:
        db.session.add(match)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"create_match error: {e}")
        return _err(str(e))
    logger.info(f"Match {match.id} created for {g.owner_id}")
    return jsonify(match.to_dict()), 201

@matches_bp.route("/<int:match_id>", methods=["GET"])
@identity_required
def get_match(match_id):
    m = Match.query.filter_by(id=match_id, owner_id=g.owner_id).first()
    if not m:
        return _err("Match not found", 404)
    return jsonify(m.to_dict())

@matches_bp.route("/<int:match_id>", methods=["DELETE"])
@identity_required
def delete_match(match_id):
    try:
        m = Match.query.filter_by(id=match_id, owner_id=g.owner_id).first()
        if not m:
            return _err("Match not found", 404)
        db.session.delete(m)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"delete_match error: {e}")
        return _err(str(e), 500)
    logger.info(f"Match {match_id} deleted for {g.owner_id}")
    return jsonify({"message": "Match deleted"})
