"""
ロギング設定モジュール

関連: config.Config.log_level / config.Config.log_file
"""

import logging
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def resolve_log_path(log_file: str) -> Path:
    """相対パスは起動ディレクトリではなくプロジェクトルート基準で解決する"""
    path = Path(log_file)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def setup_logger(log_level: str = "INFO", log_file: str = "logs/todo_app.log") -> Path:
    """
    ロガーのセットアップ

    Args:
        log_level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: ログファイルのパス（相対パスはプロジェクトルート基準）

    Returns:
        Path: 実際に書き込むログファイルのパス
    """
    log_path = resolve_log_path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # 不明なレベル名はINFO扱い
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    return log_path
