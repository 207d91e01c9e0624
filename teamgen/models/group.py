"""
teamgen/models/group.py - Model nhóm (danh sách thành viên)
"""
from datetime import datetime, timezone
from teamgen.extensions import db
from teamgen.utils import utc_isoformat


def normalize_members(members) -> list:
    """
    Chuẩn hoá danh sách thành viên về dạng [{"name": str, "active": bool}].
    Chấp nhận chuỗi tên đơn giản. Raise ValueError nếu sai định dạng.
    """
    if members is None:
        return []
    if not isinstance(members, list):
        raise ValueError("members must be a list")
    out = []
    for m in members:
        if isinstance(m, str):
            m = {"name": m}
        if not isinstance(m, dict) or not isinstance(m.get("name"), str):
            raise ValueError("each member needs a string 'name'")
        active = m.get("active", True)
        if not isinstance(active, bool):
            raise ValueError("member 'active' must be a boolean")
        out.append({"name": m["name"], "active": active})
    return out


class Group(db.Model):
    """
    Nhóm (roster) thuộc về đúng 1 người dùng (owner_id).
    Thành viên lưu dạng JSON, thay thế toàn bộ khi cập nhật.
    """
    __tablename__ = "groups"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    members = db.Column(db.JSON, nullable=False, default=list)
    owner_id = db.Column(db.String(255), nullable=False, index=True)

    # Timestamps
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(
        db.DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "members": list(self.members or []),
            "ownerId": self.owner_id,
            "createdAt": utc_isoformat(self.created_at),
            "updatedAt": utc_isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Group {self.name} [{len(self.members or [])} members]>"
