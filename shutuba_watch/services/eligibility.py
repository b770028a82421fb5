"""種牡馬の適条件判定"""

from shutuba_watch.constants import SURFACE_BOTH
from shutuba_watch.models.race import SireProfile


def is_optimal(
    sire_name: str, surface: str, distance: int, profiles: dict[str, SireProfile]
) -> bool:
    """レース条件が種牡馬の適条件に合うか判定する

    Args:
        sire_name: 種牡馬名
        surface: レースの馬場（"Turf" / "Dirt"）
        distance: レース距離
        profiles: 種牡馬名→適条件

    Returns:
        馬場・距離ともに適条件内ならTrue。マスタにない種牡馬はFalse
    """
    profile = profiles.get(sire_name)
    if profile is None:
        return False

    if profile.surface != SURFACE_BOTH and profile.surface != surface:
        return False

    return profile.min_distance <= distance <= profile.max_distance
