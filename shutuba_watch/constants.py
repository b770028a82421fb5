"""Constants for shutuba watch."""

# 出馬表（馬柱）ページ: race_id=<開催日ID><レース番号2桁>
SHUTUBA_PAST_URL = "https://race.netkeiba.com/race/shutuba_past.html"

# 1開催日あたりのレース数
RACES_PER_DAY = 12

# 馬場種別
SURFACE_TURF = "Turf"
SURFACE_DIRT = "Dirt"
SURFACE_BOTH = "Both"

# レース条件テキストの判定キーワード
TURF_KEYWORD = "芝"
JUMP_KEYWORD = "障"

# netkeiba.com の文字コード
PAGE_ENCODING = "euc-jp"
