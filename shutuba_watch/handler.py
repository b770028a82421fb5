"""サーバーレス関数のエントリポイント

API Gateway 経由で POST された JSON（{"action": ..., "raceid": ...}）を受け取り、
開催日の全レースのチェック結果を JSON で返す。
"""

import json
import logging
from dataclasses import dataclass

from shutuba_watch.config.sire_profiles import default_config
from shutuba_watch.services.entry_checker import EntryChecker

logger = logging.getLogger(__name__)

ERROR_RESPONSE = {"statusCode": 500, "body": "NG"}


@dataclass(frozen=True)
class CheckRequest:
    """POSTされるリクエスト

    Attributes:
        action: アクション名
        race_day: 開催日ID（例: "2024080504"）
        optimal: 適条件判定を行うかどうか
    """

    action: str
    race_day: str
    optimal: bool = True


def parse_request(body: str | None) -> CheckRequest:
    """リクエストボディを CheckRequest に変換する

    Args:
        body: JSON文字列

    Returns:
        CheckRequest

    Raises:
        ValueError: JSONとして不正、またはraceidがない場合
    """
    if not body:
        raise ValueError("Empty request body")

    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError(f"Request body must be a JSON object: {body}")

    race_day = data.get("raceid")
    if not isinstance(race_day, str) or not race_day:
        raise ValueError(f"Invalid raceid: {race_day!r}")

    optimal = data.get("optimal", True)
    if not isinstance(optimal, bool):
        raise ValueError(f"Invalid optimal: {optimal!r}")

    return CheckRequest(
        action=str(data.get("action", "")),
        race_day=race_day,
        optimal=optimal,
    )


def lambda_handler(event: dict, context=None, checker: EntryChecker | None = None) -> dict:
    """出馬表チェックのハンドラ

    Args:
        event: API Gateway プロキシイベント
        context: 実行コンテキスト（未使用）
        checker: EntryChecker（テスト用。Noneの場合はリクエストに応じて作成）

    Returns:
        API Gateway プロキシレスポンス
    """
    logger.info("check entries")

    try:
        request = parse_request(event.get("body"))
    except ValueError as e:
        # json.JSONDecodeError は ValueError のサブクラス
        logger.error("Convert Post Failed: %s", e)
        return dict(ERROR_RESPONSE)

    if checker is None:
        checker = EntryChecker(config=default_config(evaluate_optimal=request.optimal))

    batch = checker.check(request.race_day)

    try:
        body = json.dumps(batch.to_dict(), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Marshal Failed: %s", e)
        return dict(ERROR_RESPONSE)

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": body,
    }
