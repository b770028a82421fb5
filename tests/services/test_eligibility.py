"""Tests for shutuba_watch.services.eligibility module."""

import pytest

from shutuba_watch.config.sire_profiles import SIRE_PROFILES
from shutuba_watch.models.race import SireProfile
from shutuba_watch.services.eligibility import is_optimal


class TestIsOptimal:
    """is_optimal() のテスト"""

    def test_both_surface_within_range(self):
        """マクフィ（両・1000-1400）は芝1200mで適条件"""
        assert is_optimal("マクフィ", "Turf", 1200, SIRE_PROFILES) is True

    def test_dirt_only_sire_on_turf(self):
        """パイロ（ダートのみ）は芝1600mで適条件外"""
        assert is_optimal("パイロ", "Turf", 1600, SIRE_PROFILES) is False

    def test_dirt_only_sire_on_dirt(self):
        """パイロはダート1600mで適条件"""
        assert is_optimal("パイロ", "Dirt", 1600, SIRE_PROFILES) is True

    @pytest.mark.parametrize(
        "distance,expected",
        [(999, False), (1000, True), (1400, True), (1401, False)],
    )
    def test_distance_bounds_are_inclusive(self, distance, expected):
        """距離の上下限は境界を含む"""
        assert is_optimal("マクフィ", "Dirt", distance, SIRE_PROFILES) is expected

    def test_unknown_sire(self):
        """マスタにない種牡馬はFalse"""
        assert is_optimal("ディープインパクト", "Turf", 2000, SIRE_PROFILES) is False

    def test_zero_distance(self):
        """距離0（取得失敗）は適条件外"""
        assert is_optimal("グレーターロンドン", "Turf", 0, SIRE_PROFILES) is False

    def test_custom_profiles(self):
        """任意の適条件テーブルで判定できる"""
        profiles = {"キズナ": SireProfile("Turf", 1800, 2400)}
        assert is_optimal("キズナ", "Turf", 2000, profiles) is True
        assert is_optimal("キズナ", "Dirt", 2000, profiles) is False
