"""
teamgen/services/standings.py
Tính bảng xếp hạng từ lịch sử trận đấu của 1 người dùng.

Đội được nhận diện bằng tập tên cầu thủ: sort rồi nối bằng dấu phẩy.
Lưu ý: khoá này không escape dấu phẩy, tên chứa "," có thể trùng khoá
với 1 đội khác (giữ nguyên hành vi, không tự sửa).
"""
from dataclasses import dataclass, field
from typing import Iterable, List

TEAM_KEY_SEPARATOR = ","

POINTS_WIN = 3
POINTS_DRAW = 1

MAX_SCORE = 1000


class InvalidMatchError(ValueError):
    """Dữ liệu trận đấu không hợp lệ (thiếu tỉ số, tỉ số âm, đội sai định dạng)."""


def check_score(value, field_name: str) -> int:
    # bool là subclass của int nên phải loại riêng
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidMatchError(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidMatchError(f"{field_name} must be >= 0, got {value}")
    if value > MAX_SCORE:
        raise InvalidMatchError(f"{field_name} must be <= {MAX_SCORE}, got {value}")
    return value


def check_team(value, field_name: str) -> list:
    if not isinstance(value, (list, tuple)) or not all(isinstance(n, str) for n in value):
        raise InvalidMatchError(f"{field_name} must be a list of player names")
    return list(value)


def team_key(names: Iterable[str]) -> str:
    """Khoá định danh đội: không phụ thuộc thứ tự, phân biệt hoa thường."""
    return TEAM_KEY_SEPARATOR.join(sorted(names))


@dataclass
class TeamStat:
    team: List[str]
    matches: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    goal_difference: int = 0

    def record(self, scored: int, conceded: int):
        self.matches += 1
        self.goals_for += scored
        self.goals_against += conceded
        if scored > conceded:
            self.wins += 1
        elif scored < conceded:
            self.losses += 1
        else:
            self.draws += 1

    def finalize(self):
        self.points = self.wins * POINTS_WIN + self.draws * POINTS_DRAW
        self.goal_difference = self.goals_for - self.goals_against

    def to_dict(self):
        return {
            "team": list(self.team),
            "matches": self.matches,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "goalsFor": self.goals_for,
            "goalsAgainst": self.goals_against,
            "points": self.points,
            "goalDifference": self.goal_difference,
        }


def compute_standings(matches) -> List[TeamStat]:
    """
    Gom nhóm các trận theo đội và xếp hạng.

    `matches` là iterable các object có team_a, team_b, score_a, score_b
    (ví dụ Match model). Không sửa input, không I/O.
    Sắp xếp: points giảm dần, rồi goal_difference giảm dần; còn hoà thì
    giữ thứ tự xuất hiện đầu tiên.
    Raise InvalidMatchError nếu gặp tỉ số hoặc đội không hợp lệ.
    """
    table = {}

    def entry(names):
        key = team_key(names)
        if key not in table:
            table[key] = TeamStat(team=list(names))
        return table[key]

    for m in matches:
        team_a = check_team(m.team_a, "teamA")
        team_b = check_team(m.team_b, "teamB")
        score_a = check_score(m.score_a, "scoreA")
        score_b = check_score(m.score_b, "scoreB")

        # teamA và teamB có thể cùng khoá: cả 2 lượt đều ghi vào cùng 1 entry
        entry(team_a).record(score_a, score_b)
        entry(team_b).record(score_b, score_a)

    stats = list(table.values())
    for s in stats:
        s.finalize()
    stats.sort(key=lambda s: (-s.points, -s.goal_difference))
    return stats
