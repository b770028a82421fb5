"""sire_profiles.py の設定値テスト"""

from shutuba_watch.config.sire_profiles import (
    SIRE_PROFILES,
    WATCH_SIRES,
    ExtractionConfig,
    default_config,
)
from shutuba_watch.models.race import SireProfile


class TestWatchSires:
    """WATCH_SIRES の定数テスト"""

    def test_watch_sires_is_tuple(self):
        """WATCH_SIRES がタプルである（イミュータブル）"""
        assert isinstance(WATCH_SIRES, tuple)

    def test_every_watched_sire_has_profile(self):
        """注目種牡馬はすべて適条件を持つ"""
        assert set(WATCH_SIRES) == set(SIRE_PROFILES.keys())

    def test_profiles_have_valid_ranges(self):
        """距離下限は上限以下"""
        for profile in SIRE_PROFILES.values():
            assert profile.min_distance <= profile.max_distance
            assert profile.surface in ("Turf", "Dirt", "Both")


class TestExtractionConfig:
    """ExtractionConfig のテスト"""

    def test_default_config_uses_master(self):
        """既定設定はマスタの内容を使う"""
        config = default_config()
        assert config.watch_sires == WATCH_SIRES
        assert config.profiles == SIRE_PROFILES
        assert config.evaluate_optimal is True

    def test_default_config_can_disable_optimal(self):
        """適条件判定を無効にできる"""
        assert default_config(evaluate_optimal=False).evaluate_optimal is False

    def test_default_config_copies_profiles(self):
        """設定のprofilesを変更してもマスタに影響しない"""
        config = default_config()
        config.profiles["テスト"] = SireProfile("Turf", 1000, 2000)
        assert "テスト" not in SIRE_PROFILES

    def test_match_sire_exact(self):
        """完全一致で照合する"""
        config = default_config()
        assert config.match_sire("マクフィ") == "マクフィ"
        assert config.match_sire("マクフィ ") is None
        assert config.match_sire("ディープインパクト") is None

    def test_custom_watch_list(self):
        """注目リストを差し替えられる"""
        config = ExtractionConfig(watch_sires=("キズナ",), profiles={})
        assert config.match_sire("キズナ") == "キズナ"
        assert config.match_sire("パイロ") is None

    def test_config_is_hashable(self):
        """frozen な設定はハッシュでき、等しい設定は同じハッシュ値になる"""
        assert hash(default_config()) == hash(default_config())
        assert len({default_config(), default_config(evaluate_optimal=False)}) == 2
