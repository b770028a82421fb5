"""EntryChecker - 開催日の全レースから注目種牡馬の産駒を集めるサービス"""

import logging

import requests

from shutuba_watch.config.sire_profiles import ExtractionConfig, default_config
from shutuba_watch.constants import RACES_PER_DAY, SHUTUBA_PAST_URL
from shutuba_watch.models.race import Race, RaceBatch
from shutuba_watch.scrapers.shutuba_past import ShutubaPastScraper

logger = logging.getLogger(__name__)


def build_race_urls(race_day: str) -> list[str]:
    """開催日IDから1R〜12Rの出馬表URLを作成する

    Args:
        race_day: 開催日ID（例: "2024080504"）

    Returns:
        出馬表URLのリスト（レース番号順）
    """
    return [
        f"{SHUTUBA_PAST_URL}?race_id={race_day}{race_number:02d}"
        for race_number in range(1, RACES_PER_DAY + 1)
    ]


class EntryChecker:
    """開催日の出馬表を順に取得し、該当馬のいるレースを集める"""

    def __init__(
        self,
        scraper: ShutubaPastScraper | None = None,
        config: ExtractionConfig | None = None,
    ):
        """初期化

        Args:
            scraper: 出馬表スクレイパー（Noneの場合は既定設定で作成）
            config: 抽出設定（Noneの場合は既定の注目種牡馬マスタ）
        """
        self._scraper = scraper if scraper is not None else ShutubaPastScraper()
        self._config = config if config is not None else default_config()

    def check(self, race_day: str) -> RaceBatch:
        """開催日の全レースをチェックする

        1レースの取得・解析に失敗しても残りのレースは続行する。

        Args:
            race_day: 開催日ID（例: "2024080504"）

        Returns:
            該当馬が1頭以上いるレースのみを、レース番号順に並べたRaceBatch
        """
        races: list[Race] = []
        for url in build_race_urls(race_day):
            logger.info(url)
            race = self._check_one(url)
            # 該当馬がいなければスキップ
            if not race.horses:
                continue
            races.append(race)

        logger.info("race day %s: %d races with watched horses", race_day, len(races))
        return RaceBatch(races=tuple(races))

    def _check_one(self, url: str) -> Race:
        """1レース分を取得する。失敗時は空のRaceを返す"""
        try:
            return self._scraper.fetch_race(url, self._config)
        except (requests.RequestException, ValueError, AttributeError) as e:
            logger.warning("race check failed for %s: %s", url, e)
            return Race()
