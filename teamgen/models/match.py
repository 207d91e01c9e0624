"""
teamgen/models/match.py - Model trận đấu & kết quả
"""
from datetime import datetime, timezone
from teamgen.extensions import db
from teamgen.utils import utc_isoformat


class Match(db.Model):
    """
    Kết quả 1 trận giữa 2 đội (danh sách tên cầu thủ).
    Không sửa sau khi tạo, chỉ có thể xoá.
    """
    __tablename__ = "matches"

    id = db.Column(db.Integer, primary_key=True)

    # Đội = danh sách tên, thứ tự giữ nguyên như lúc tạo
    team_a = db.Column(db.JSON, nullable=False)
    team_b = db.Column(db.JSON, nullable=False)

    # Kết quả
    score_a = db.Column(db.Integer, nullable=False, default=0)
    score_b = db.Column(db.Integer, nullable=False, default=0)

    date = db.Column(db.DateTime, nullable=False, index=True,
                     default=lambda: datetime.now(timezone.utc))
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
            "teamA": list(self.team_a or []),
            "teamB": list(self.team_b or []),
            "scoreA": self.score_a,
            "scoreB": self.score_b,
            "date": utc_isoformat(self.date),
            "ownerId": self.owner_id,
            "createdAt": utc_isoformat(self.created_at),
            "updatedAt": utc_isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Match {self.team_a} {self.score_a}-{self.score_b} {self.team_b}>"
