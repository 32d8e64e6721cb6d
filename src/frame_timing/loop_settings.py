"""循环频率相关环境变量解析。"""

from __future__ import annotations

import os
from typing import Mapping


DEFAULT_UPDATES_PER_SECOND = 120
MIN_UPDATES_PER_SECOND = 1
MAX_UPDATES_PER_SECOND = 1_000

DEFAULT_RENDER_FPS = 60
MIN_RENDER_FPS = 1
MAX_RENDER_FPS = 240


def read_updates_per_second(env: Mapping[str, str] | None = None) -> int:
    """读取固定更新频率（次/秒），非法值回退默认值。"""

    return _read_bounded_int(
        env,
        "FRAME_TIMING_UPS",
        DEFAULT_UPDATES_PER_SECOND,
        MIN_UPDATES_PER_SECOND,
        MAX_UPDATES_PER_SECOND,
    )


def read_render_fps(env: Mapping[str, str] | None = None) -> int:
    """读取渲染帧率上限，非法值回退默认值。"""

    return _read_bounded_int(env, "FRAME_TIMING_FPS", DEFAULT_RENDER_FPS, MIN_RENDER_FPS, MAX_RENDER_FPS)


def _read_bounded_int(
    env: Mapping[str, str] | None,
    name: str,
    default: int,
    minimum: int,
    maximum: int,
) -> int:
    source = env if env is not None else os.environ
    raw = source.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value < minimum or value > maximum:
        return default
    return value
