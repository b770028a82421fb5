"""データモデルパッケージ"""

from shutuba_watch.models.race import (
    Horse,
    HorseRow,
    JockeyCell,
    Race,
    RaceBatch,
    RaceFacts,
    SireProfile,
)

__all__ = [
    "Horse",
    "HorseRow",
    "JockeyCell",
    "Race",
    "RaceBatch",
    "RaceFacts",
    "SireProfile",
]
