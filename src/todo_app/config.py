"""
設定管理モジュール

関連クラス:
  - server.dependencies: この設定でロガーとリポジトリを初期化
  - server.run: ServerConfig を uvicorn に渡す
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """HTTPサーバー設定"""

    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False


@dataclass
class Config:
    """アプリケーション設定クラス"""

    # サーバー設定
    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/todo_app.log"

    # DB設定（None の場合はリポジトリ側の既定値を使用）
    database_path: Optional[str] = None

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.server is None:
            self.server = ServerConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス（ファイルが無い場合はデフォルト値）
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server") or {}
        log_data = yaml_data.get("log") or {}
        database_data = yaml_data.get("database") or {}

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=int(server_data.get("port", 8000)),
                reload=bool(server_data.get("reload", False)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todo_app.log"),
            database_path=database_data.get("path") or None,
        )

    @classmethod
    def from_env(cls) -> "Config":
        """環境変数から設定を読み込む"""
        return cls(
            server=ServerConfig(
                host=os.getenv("TODO_APP_HOST", "127.0.0.1"),
                port=int(os.getenv("TODO_APP_PORT", "8000")),
                reload=os.getenv("TODO_APP_RELOAD", "").lower() in ("1", "true", "yes"),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/todo_app.log"),
            database_path=os.getenv("TODO_APP_DB_PATH") or None,
        )
