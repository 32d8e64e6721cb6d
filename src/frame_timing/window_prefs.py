"""窗口偏好持久化（位置 + 渲染后端），启动时显式传给宿主。"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import yaml

SUPPORTED_RENDERERS = {"auto", "opencv", "console"}


@dataclass
class WindowPreferences:
    """可持久化的窗口偏好；x/y 为 None 表示交给系统摆放。"""

    x: Optional[int] = None
    y: Optional[int] = None
    renderer: str = "auto"

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None

    def to_geometry(self, width: int, height: int) -> str:
        """构造 Tk geometry 字符串，例如 "240x240+100+50"。"""
        size = f"{int(width)}x{int(height)}"
        if not self.has_position:
            return size
        # Tk 用 "+-10" 表示相对左/上边缘的负偏移
        return f"{size}+{self.x}+{self.y}"


class WindowPreferencesStore:
    """读取/写入 window_prefs.yaml。"""

    def __init__(self, prefs_path: str | Path = "config/window_prefs.yaml") -> None:
        self.prefs_path = Path(prefs_path)
        self.prefs_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> WindowPreferences:
        if not self.prefs_path.exists():
            return WindowPreferences()

        with self.prefs_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return WindowPreferences()

        x = _normalize_coordinate(data.get("x"))
        y = _normalize_coordinate(data.get("y"))
        if x is None or y is None:
            x = y = None
        return WindowPreferences(x=x, y=y, renderer=_normalize_renderer(data.get("renderer")))

    def save(self, prefs: WindowPreferences) -> Path:
        x = _normalize_coordinate(prefs.x)
        y = _normalize_coordinate(prefs.y)
        if x is None or y is None:
            x = y = None
        payload = asdict(WindowPreferences(x=x, y=y, renderer=_normalize_renderer(prefs.renderer)))
        with self.prefs_path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(payload, f, allow_unicode=True, sort_keys=False)
        return self.prefs_path


def _normalize_coordinate(value: object) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _normalize_renderer(value: object) -> str:
    normalized = str(value or "").strip().lower()
    if normalized in SUPPORTED_RENDERERS:
        return normalized
    return WindowPreferences.renderer
