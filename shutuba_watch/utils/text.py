"""テキスト正規化ユーティリティ

netkeiba のページは EUC-JP で配信される。ページ全体は latin-1 で
1バイト=1文字に写像したまま解析し、各フィールドを個別に UTF-8 化する。
1フィールドの変換失敗がレース全体を失敗させないようにするため。
"""

import logging
import re

from shutuba_watch.constants import PAGE_ENCODING

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_LATIN1_RUN = re.compile(r"[\x00-\xff]+")


def decode_page(content: bytes) -> str:
    """ページのバイト列を1バイト=1文字の文字列に写像する

    Args:
        content: HTTPレスポンスの生バイト列

    Returns:
        latin-1 で写像した文字列（可逆）
    """
    return content.decode("latin-1")


def to_utf8(raw: str, encoding: str = PAGE_ENCODING) -> str:
    """フィールド文字列を EUC-JP からデコードする

    Args:
        raw: decode_page() で写像したページから取り出した文字列
        encoding: 元の文字コード

    Returns:
        デコード後の文字列。変換できない場合は空文字列

    Note:
        文字参照（&nbsp; や &#NNNN;）はパーサが展開済みのため、
        U+00FF を超える文字はそのまま残し、\\xa0 は空白として扱う。
    """
    # EUC-JP では 0xA0 が単独で現れることはない
    text = raw.replace("\xa0", " ")
    try:
        return _LATIN1_RUN.sub(
            lambda m: m.group(0).encode("latin-1").decode(encoding), text
        )
    except UnicodeDecodeError as e:
        logger.debug("encoding conversion failed: %s", e)
        return ""


def squash(text: str) -> str:
    """空白と改行をすべて取り除く"""
    return text.replace(" ", "").replace("\n", "")


def extract_int(text: str) -> int:
    """文字列中の最初の数字列を整数として取り出す

    Args:
        text: 対象文字列（例: "ダ1200m(右)"）

    Returns:
        最初に現れる半角数字列の値。見つからない場合は0
    """
    match = _DIGITS.search(text)
    if not match:
        return 0
    return int(match.group(0))
