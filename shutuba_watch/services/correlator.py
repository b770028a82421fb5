"""騎手と出走馬の対応付け

馬柱の行と騎手セルは別々のセレクタで取得されるため、出現順で対応付ける。
両方が同じ HorseList 行に属していることが分かる場合は行で対応付ける。
"""

import logging
from dataclasses import replace

from shutuba_watch.models.race import Horse, JockeyCell

logger = logging.getLogger(__name__)


def correlate_jockeys(
    horses: list[Horse],
    jockeys: list[JockeyCell],
    row_count: int,
    jockey_count: int,
    horse_row_keys: list[int | None] | None = None,
) -> tuple[list[Horse], list[str]]:
    """出走馬に騎手名を割り当てる

    Args:
        horses: 注目種牡馬の産駒（number は馬名のある行の出現順）
        jockeys: 騎手名が空でない騎手セル
        row_count: 馬名のある行の数
        jockey_count: 騎手セルの総数（騎手名が空のものを含む）
        horse_row_keys: horses と同順の行キー（不明な場合はNone）

    Returns:
        (騎手名を割り当てた出走馬, 警告メッセージ) のタプル。
        件数不一致の警告は出現順で対応付けた場合のみ返す。
    """
    warnings: list[str] = []

    keys = horse_row_keys if horse_row_keys is not None else [None] * len(horses)
    use_row_key = (
        bool(jockeys)
        and all(key is not None for key in keys)
        and all(jockey.row_key is not None for jockey in jockeys)
    )

    # 行で対応付ける場合、件数の差は対応に影響しない
    if not use_row_key and row_count != jockey_count:
        message = f"jockey count mismatch: {row_count} horse rows, {jockey_count} jockey cells"
        warnings.append(message)
        logger.warning(message)

    assigned = list(horses)
    for jockey in jockeys:
        for j, horse in enumerate(assigned):
            if use_row_key:
                matched = keys[j] == jockey.row_key
            else:
                matched = horse.number == jockey.index
            if matched:
                assigned[j] = replace(horse, jockey_name=jockey.jockey_name)
                break

    return assigned, warnings
