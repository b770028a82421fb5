"""ユーティリティパッケージ"""
