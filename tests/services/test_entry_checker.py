"""Tests for shutuba_watch.services.entry_checker module."""

import logging
from unittest.mock import Mock

import pytest
import requests

from shutuba_watch.config.sire_profiles import default_config
from shutuba_watch.models.race import Horse, Race, RaceBatch
from shutuba_watch.services.entry_checker import EntryChecker, build_race_urls


def _race(race_id: int, with_horse: bool = True) -> Race:
    horses = ()
    if with_horse:
        horses = (Horse(number=1, horse_name="ホースエー", sire_name="パイロ", dam_sire_name=""),)
    return Race(race_id=race_id, race_text=f"{race_id}R", horses=horses)


def _slot(url: str) -> int:
    return int(url[-2:])


class TestBuildRaceUrls:
    """build_race_urls() のテスト"""

    def test_builds_twelve_urls(self):
        """1R〜12RのURLを作成する"""
        urls = build_race_urls("2024080504")
        assert len(urls) == 12

    def test_zero_padded_race_number(self):
        """レース番号は2桁ゼロ埋め"""
        urls = build_race_urls("2024080504")
        assert urls[0] == "https://race.netkeiba.com/race/shutuba_past.html?race_id=202408050401"
        assert urls[8].endswith("race_id=202408050409")
        assert urls[11].endswith("race_id=202408050412")


class TestEntryCheckerCheck:
    """EntryChecker.check() のテスト"""

    @pytest.fixture
    def scraper(self):
        return Mock()

    def test_passes_config_to_scraper(self, scraper):
        """抽出設定をスクレイパーに渡す"""
        config = default_config(evaluate_optimal=False)
        scraper.fetch_race.return_value = _race(1)

        EntryChecker(scraper=scraper, config=config).check("2024080504")

        assert scraper.fetch_race.call_count == 12
        for call in scraper.fetch_race.call_args_list:
            assert call.args[1] is config

    def test_fetches_slots_in_order(self, scraper):
        """1Rから順に取得する"""
        scraper.fetch_race.side_effect = lambda url, config: _race(_slot(url))

        EntryChecker(scraper=scraper).check("2024080504")

        slots = [_slot(call.args[0]) for call in scraper.fetch_race.call_args_list]
        assert slots == list(range(1, 13))

    def test_drops_races_without_horses(self, scraper):
        """該当馬のいないレースは含めない"""
        scraper.fetch_race.side_effect = lambda url, config: _race(
            _slot(url), with_horse=_slot(url) in (3, 5)
        )

        batch = EntryChecker(scraper=scraper).check("2024080504")

        assert isinstance(batch, RaceBatch)
        assert [race.race_id for race in batch.races] == [3, 5]

    def test_failed_slots_are_skipped(self, scraper, caplog):
        """取得に失敗したレースを除き、他のレースは順序を保って返す"""

        def fetch_race(url, config):
            if _slot(url) in (2, 7):
                raise requests.ConnectionError("connection refused")
            return _race(_slot(url))

        scraper.fetch_race.side_effect = fetch_race

        with caplog.at_level(logging.WARNING, logger="shutuba_watch.services.entry_checker"):
            batch = EntryChecker(scraper=scraper).check("2024080504")

        assert [race.race_id for race in batch.races] == [1, 3, 4, 5, 6, 8, 9, 10, 11, 12]
        assert scraper.fetch_race.call_count == 12
        assert "race check failed" in caplog.text

    def test_http_error_is_not_retried(self, scraper):
        """HTTPエラーのレースは再取得しない"""
        scraper.fetch_race.side_effect = requests.HTTPError("404 Not Found")

        batch = EntryChecker(scraper=scraper).check("2024080504")

        assert batch.races == ()
        assert scraper.fetch_race.call_count == 12

    def test_parse_error_is_skipped(self, scraper):
        """解析エラーも当該レースのみスキップする"""

        def fetch_race(url, config):
            if _slot(url) == 1:
                raise ValueError("broken page")
            return _race(_slot(url), with_horse=_slot(url) == 12)

        scraper.fetch_race.side_effect = fetch_race

        batch = EntryChecker(scraper=scraper).check("2024080504")

        assert [race.race_id for race in batch.races] == [12]
