"""
config.py - パス解決・アプリ定数
Quotebox v0.1
"""

import os
import sys

# ---------------------------------------------------------------------------
# パス解決（exe 化対応）
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    実行環境に応じてアプリのベースディレクトリを返す。
    - exe 化後  : exe ファイルの存在するディレクトリ
    - スクリプト: プロジェクトのルートディレクトリ
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # config.py is in quotebox/, so project root is one level up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


BASE_PATH = get_base_path()

DB_PATH = os.environ.get("QUOTEBOX_DB_PATH") or os.path.join(BASE_PATH, "quotes.db")

# ---------------------------------------------------------------------------
# Storage keys
# ---------------------------------------------------------------------------

QUOTES_KEY = "quotes"
SELECTED_CATEGORY_KEY = "selectedCategory"
LAST_QUOTE_KEY = "lastQuote"  # session scope only

ALL_CATEGORIES = "all"

# ---------------------------------------------------------------------------
# Sync
# ---------------------------------------------------------------------------

REMOTE_ENDPOINT = os.environ.get(
    "QUOTEBOX_ENDPOINT", "https://jsonplaceholder.typicode.com/posts"
)
SYNC_INTERVAL_SECONDS = 300
HTTP_TIMEOUT_SECONDS = 10
HTTP_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "quotebox/0.1",
}
# 追加・インポート直後に同期を走らせるか
SYNC_ON_CHANGE = _env_flag("QUOTEBOX_SYNC_ON_CHANGE", True)

# ---------------------------------------------------------------------------
# Export / import
# ---------------------------------------------------------------------------

EXPORT_FILENAME = "quotes.json"
EXPORT_INDENT = 2

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "Quotebox"
APP_VERSION = "0.1.0"
NO_QUOTE_MESSAGE = "No quotes available for this category."

# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_DANGER = "#CF222E"
COLOR_SUCCESS = "#2da44e"

COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
