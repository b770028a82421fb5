"""設定パッケージ"""
