"""
teamgen/routes/groups.py - API nhóm (roster) của người dùng
"""
import logging
from flask import Blueprint, request, jsonify, g
from sqlalchemy.exc import SQLAlchemyError
from teamgen.extensions import db
from teamgen.models import Group
from teamgen.models.group import normalize_members
from teamgen.services.identity import identity_required

logger = logging.getLogger(__name__)

groups_bp = Blueprint("groups", __name__)

def _err(msg, code=400): return jsonify({"error": msg}), code

def _owned(group_id):
    return Group.query.filter_by(id=group_id, owner_id=g.owner_id).first()

@groups_bp.route("", methods=["GET"])
@identity_required
def list_groups():
    try:
        items = (Group.query.filter_by(owner_id=g.owner_id)
                 .order_by(Group.created_at.asc(), Group.id.asc()).all())
    except SQLAlchemyError as e:
        logger.error(f"list_groups error: {e}")
        return _err(str(e), 500)
    return jsonify([x.to_dict() for x in items])

@groups_bp.route("", methods=["POST"])
@identity_required
def create_group():
    d = request.get_json(silent=True) or {}
    if not isinstance(d, dict):
        return _err("JSON object body required")
    name = d.get("name")
    if not isinstance(name, str) or not name.strip():
        return _err("name is required")
    try:
        members = normalize_members(d.get("members"))
    except ValueError as e:
        return _err(str(e))
    group = Group(name=name.strip(), members=members, owner_id=g.owner_id)
    try:
        db.session.add(group)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"create_group error: {e}")
        return _err(str(e))
    logger.info(f"Group {group.id} created for {g.owner_id}")
    return jsonify(group.to_dict()), 201

@groups_bp.route("/<int:group_id>", methods=["PUT"])
@identity_required
def update_group(group_id):
    d = request.get_json(silent=True) or {}
    if not isinstance(d, dict):
        return _err("JSON object body required")
    try:
        group = _owned(group_id)
        if not group:
            return _err("Group not found", 404)
        if "name" in d:
            if not isinstance(d["name"], str) or not d["name"].strip():
                return _err("name must be a non-empty string")
            group.name = d["name"].strip()
        if "members" in d:
            group.members = normalize_members(d["members"])
        db.session.commit()
    except ValueError as e:
        db.session.rollback()
        return _err(str(e))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"update_group error: {e}")
        return _err(str(e))
    return jsonify(group.to_dict())

@groups_bp.route("/<int:group_id>", methods=["DELETE"])
@identity_required
def delete_group(group_id):
    try:
        group = _owned(group_id)
        if not group:
            return _err("Group not found", 404)
        db.session.delete(group)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"delete_group error: {e}")
        return _err(str(e), 500)
    logger.info(f"Group {group_id} deleted for {g.owner_id}")
    return jsonify({"message": "Group deleted"})
