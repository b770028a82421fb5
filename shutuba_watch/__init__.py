"""netkeiba出馬表から注目種牡馬の産駒を抽出するパッケージ"""

__version__ = "0.1.0"
