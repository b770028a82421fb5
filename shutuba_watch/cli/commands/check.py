"""出馬表チェックコマンド

開催日の全レースから注目種牡馬の産駒を抽出するCLIコマンドを提供する。
"""

import json
import re

import click

from shutuba_watch.config.sire_profiles import SIRE_PROFILES, WATCH_SIRES, default_config
from shutuba_watch.scrapers.shutuba_past import ShutubaPastScraper
from shutuba_watch.services.entry_checker import EntryChecker


def _validate_race_day(ctx, param, value: str) -> str:
    """開催日IDが数字のみで構成されているか検証する"""
    if not re.fullmatch(r"\d+", value):
        raise click.BadParameter(f"開催日IDは数字で指定してください: {value}")
    return value


@click.command("check-entries")
@click.option(
    "--race-day",
    required=True,
    type=str,
    callback=_validate_race_day,
    help="開催日ID（例: 2024080504）",
)
@click.option(
    "--optimal/--no-optimal", default=True, help="適条件判定を行う（デフォルト: 行う）"
)
@click.option("--delay", default=0.0, type=float, help="リクエスト間隔（秒）")
@click.option("--indent", default=None, type=int, help="JSONのインデント幅")
def check_entries(race_day: str, optimal: bool, delay: float, indent: int | None):
    """開催日の出馬表から注目種牡馬の産駒を抽出"""
    checker = EntryChecker(
        scraper=ShutubaPastScraper(delay=delay),
        config=default_config(evaluate_optimal=optimal),
    )
    batch = checker.check(race_day)
    click.echo(json.dumps(batch.to_dict(), ensure_ascii=False, indent=indent))


@click.command()
def sires():
    """注目種牡馬と適条件を表示"""
    for sire in WATCH_SIRES:
        profile = SIRE_PROFILES.get(sire)
        if profile is None:
            click.echo(f"{sire}: 適条件なし")
            continue
        click.echo(
            f"{sire}: {profile.surface} {profile.min_distance}-{profile.max_distance}m"
        )
