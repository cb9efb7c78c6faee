"""
config.py
=========

アプリ全体で利用する設定値を一元管理する。
クイズ API のベース URL・タイムアウト・画面タイトル・ログ設定は
すべてこのクラスを通じて取得する。

読み込み順（後のものが優先）:
1. AppConfig のデフォルト値
2. ルートの config.toml
3. 環境変数 QUIZ_API_BASE_URL / QUIZ_REQUEST_TIMEOUT / QUIZ_LOG_LEVEL

起動時に 1 回だけ読み込み、QuizController に明示的に渡す。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import toml

from .logging import get_logger

logger = get_logger(__name__)


# ------------------------------------------------------------
# 基本パス定義
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = ROOT_DIR / "config.toml"

DEFAULT_TITLE = "スペイン語クイズ"
DEFAULT_TIMEOUT = 10.0


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    アプリ設定クラス。

    - クイズ生成 API のベース URL
    - リクエストのタイムアウト（秒）
    - 画面タイトル
    - ログレベル / JSON 出力
    """

    # ---------- API ----------
    api_base_url: str = ""
    request_timeout: float = DEFAULT_TIMEOUT

    # ---------- 画面 ----------
    app_title: str = DEFAULT_TITLE

    # ---------- ログ ----------
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def quiz_endpoint(self) -> str:
        """GET 先の URL。ベース URL 末尾の / は取り除く。"""
        return f"{self.api_base_url.rstrip('/')}/generate-quiz"

    # ============================================================
    # 読み込み
    # ============================================================

    @classmethod
    def load(
        cls,
        path: Union[str, Path, None] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AppConfig":
        """
        config.toml と環境変数から AppConfig を組み立てる。
        config.toml が無い・壊れている場合はデフォルト値のまま進める。
        """
        config = cls()
        config.apply_toml(cls.read_toml(Path(path) if path is not None else CONFIG_PATH))
        config.apply_env(os.environ if environ is None else environ)
        return config

    @staticmethod
    def read_toml(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            return toml.load(str(path))
        except (OSError, toml.TomlDecodeError) as exc:
            logger.warning("config_toml_unreadable", path=str(path), error=str(exc))
            return {}

    def apply_toml(self, cfg: Dict[str, Any]) -> None:
        app_cfg = cfg.get("app")
        if isinstance(app_cfg, dict) and isinstance(app_cfg.get("title"), str):
            self.app_title = app_cfg["title"]

        api_cfg = cfg.get("api")
        if isinstance(api_cfg, dict):
            if isinstance(api_cfg.get("base_url"), str):
                self.api_base_url = api_cfg["base_url"]
            self.request_timeout = _as_timeout(api_cfg.get("timeout_seconds"), self.request_timeout)

        log_cfg = cfg.get("logging")
        if isinstance(log_cfg, dict):
            if isinstance(log_cfg.get("level"), str):
                self.log_level = log_cfg["level"]
            if isinstance(log_cfg.get("json"), bool):
                self.log_json = log_cfg["json"]

    def apply_env(self, environ: Mapping[str, str]) -> None:
        base_url = environ.get("QUIZ_API_BASE_URL")
        if base_url:
            self.api_base_url = base_url

        self.request_timeout = _as_timeout(environ.get("QUIZ_REQUEST_TIMEOUT"), self.request_timeout)

        level = environ.get("QUIZ_LOG_LEVEL")
        if level:
            self.log_level = level


def _as_timeout(value: Any, fallback: float) -> float:
    """正の数に変換できなければ fallback を返す。"""
    if value is None or isinstance(value, bool):
        return fallback
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return fallback
    return timeout if timeout > 0 else fallback
