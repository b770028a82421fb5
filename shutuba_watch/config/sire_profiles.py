"""注目種牡馬マスタ

チェック対象の種牡馬と、その産駒が得意とする条件（馬場・距離）を定義する。
"""

from dataclasses import dataclass, field

from shutuba_watch.constants import SURFACE_BOTH, SURFACE_DIRT
from shutuba_watch.models.race import SireProfile

# チェック対象の種牡馬（宣言順に照合する）
WATCH_SIRES: tuple[str, ...] = (
    "パイロ",
    "ホッコータルマエ",
    "マクフィ",
    "グレーターロンドン",
)

# 種牡馬ごとの適条件
SIRE_PROFILES: dict[str, SireProfile] = {
    "パイロ": SireProfile(SURFACE_DIRT, 1400, 3200),
    "ホッコータルマエ": SireProfile(SURFACE_DIRT, 1600, 3200),
    "マクフィ": SireProfile(SURFACE_BOTH, 1000, 1400),
    "グレーターロンドン": SireProfile(SURFACE_BOTH, 1000, 3200),
}


@dataclass(frozen=True)
class ExtractionConfig:
    """1レースの抽出に使う設定（イミュータブル）

    Attributes:
        watch_sires: 照合する種牡馬名（先頭から順に照合）
        profiles: 種牡馬名→適条件
        evaluate_optimal: 適条件判定を行うかどうか
    """

    watch_sires: tuple[str, ...] = WATCH_SIRES
    # dict はハッシュできないため hash の計算から外す
    profiles: dict[str, SireProfile] = field(
        default_factory=lambda: dict(SIRE_PROFILES), hash=False
    )
    evaluate_optimal: bool = True

    def match_sire(self, sire_name: str) -> str | None:
        """種牡馬名が注目リストにあれば、その名前を返す"""
        for sire in self.watch_sires:
            if sire_name == sire:
                return sire
        return None


def default_config(evaluate_optimal: bool = True) -> ExtractionConfig:
    """既定の注目種牡馬マスタから設定を作成する

    Args:
        evaluate_optimal: 適条件判定を行うかどうか

    Returns:
        ExtractionConfig
    """
    return ExtractionConfig(
        watch_sires=WATCH_SIRES,
        profiles=dict(SIRE_PROFILES),
        evaluate_optimal=evaluate_optimal,
    )
