"""
teamgen/services/identity.py
Xác định người gọi từ bearer token.

CHÚ Ý: token chỉ được decode, KHÔNG verify chữ ký. Đây là "identity"
chưa xác thực, không phải authentication thật.
"""
import logging
from functools import wraps
import jwt
from flask import current_app, g, jsonify, request

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Không lấy được danh tính người gọi từ request."""


def decode_identity(auth_header: str, claims=("sub", "user_id")) -> str:
    """Trả về chuỗi danh tính từ header 'Authorization: Bearer <jwt>'."""
    if not auth_header:
        raise IdentityError("Missing Authorization header")
    scheme, _, token = auth_header.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise IdentityError("Authorization header must be 'Bearer <token>'")
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        raise IdentityError(f"Invalid token: {e}") from e
    for claim in claims:
        value = payload.get(claim)
        if value not in (None, ""):
            return str(value)
    raise IdentityError("Token has no identity claim")


def identity_required(view):
    """Giống login_required: gán g.owner_id hoặc trả 401."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            g.owner_id = decode_identity(
                request.headers.get("Authorization", ""),
                current_app.config["AUTH_IDENTITY_CLAIMS"],
            )
        except IdentityError as e:
            logger.warning(f"Rejected request to {request.path}: {e}")
            return jsonify({"error": str(e)}), 401
        return view(*args, **kwargs)
    return wrapper
