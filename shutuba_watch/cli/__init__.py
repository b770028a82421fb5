"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="詳細ログを出力")
def main(verbose: bool):
    """出馬表 注目種牡馬チェックCLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from shutuba_watch.cli.commands.check import check_entries, sires

main.add_command(check_entries)
main.add_command(sires)
