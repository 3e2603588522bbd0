# File: doodle/core/settings.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Configuracion de render/animacion: doodle_settings.json (repo-local) + env vars.
# Notes: No depende de Qt. Valores invalidos vuelven al default con un warning; nunca lanza.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from doodle.core.color import parse_color
from doodle.core.version import DEFAULT_BACKGROUND, DEFAULT_CANVAS_PX, DEFAULT_FRAME_INTERVAL_MS
from doodle.utils.errors import DoodleValidationError

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: doodle_settings.json en el CWD o en algun padre.
PROJECT_SETTINGS_FILENAME = "doodle_settings.json"

ENV_CANVAS_W = "DOODLE_CANVAS_W"
ENV_CANVAS_H = "DOODLE_CANVAS_H"
ENV_FRAME_MS = "DOODLE_FRAME_MS"
ENV_BACKGROUND = "DOODLE_BACKGROUND"

CANVAS_PX_RANGE = (1, 8192)
FRAME_MS_RANGE = (1, 10_000)


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Search doodle_settings.json from `start` (or the CWD) upwards."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Load the project settings JSON. Returns {} if missing or invalid."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("Could not read %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Ignoring %s: root is not a JSON object", p)
        return {}
    return data


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_int(v: Any, min_v: int, max_v: int, default: int, *, key: str) -> int:
    if isinstance(v, bool):
        log.warning("Setting %s: expected int, got bool; using %s", key, default)
        return int(default)
    try:
        n = int(str(v).strip()) if isinstance(v, str) else int(v)
    except (TypeError, ValueError):
        log.warning("Setting %s: invalid int %r; using %s", key, v, default)
        return int(default)
    if n < min_v or n > max_v:
        log.warning("Setting %s=%s out of range [%s, %s]; using %s", key, n, min_v, max_v, default)
        return int(default)
    return n


def _coerce_color(v: Any, default: str, *, key: str) -> str:
    if not isinstance(v, str) or not v.strip():
        return default
    try:
        parse_color(v)
    except DoodleValidationError as e:
        log.warning("Setting %s: %s; using %r", key, e, default)
        return default
    return v.strip()


@dataclass(frozen=True)
class RenderSettings:
    """Render/animation preferences."""

    canvas_width: int = DEFAULT_CANVAS_PX[0]
    canvas_height: int = DEFAULT_CANVAS_PX[1]
    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    background: str = DEFAULT_BACKGROUND
    antialias: bool = True

    @property
    def canvas_size(self) -> tuple[int, int]:
        return (self.canvas_width, self.canvas_height)


def load_render_settings(start: Path | None = None, *, env: Dict[str, str] | None = None) -> RenderSettings:
    """JSON settings first, then env var overrides (env wins)."""
    env = os.environ if env is None else env
    data = load_project_settings(start)
    defaults = RenderSettings()

    w, h = defaults.canvas_width, defaults.canvas_height
    size = _deep_get(data, "canvas.size_px")
    if isinstance(size, (list, tuple)) and len(size) == 2:
        w = _coerce_int(size[0], *CANVAS_PX_RANGE, w, key="canvas.size_px[0]")
        h = _coerce_int(size[1], *CANVAS_PX_RANGE, h, key="canvas.size_px[1]")
    elif size is not None:
        log.warning("Setting canvas.size_px: expected [w, h], got %r", size)

    frame_ms = defaults.frame_interval_ms
    raw_ms = _deep_get(data, "animation.frame_interval_ms")
    if raw_ms is not None:
        frame_ms = _coerce_int(raw_ms, *FRAME_MS_RANGE, frame_ms, key="animation.frame_interval_ms")

    background = _coerce_color(_deep_get(data, "canvas.background"), defaults.background, key="canvas.background")

    antialias = defaults.antialias
    raw_aa = _deep_get(data, "canvas.antialias")
    if isinstance(raw_aa, bool):
        antialias = raw_aa

    # Env overrides
    if env.get(ENV_CANVAS_W):
        w = _coerce_int(env[ENV_CANVAS_W], *CANVAS_PX_RANGE, w, key=ENV_CANVAS_W)
    if env.get(ENV_CANVAS_H):
        h = _coerce_int(env[ENV_CANVAS_H], *CANVAS_PX_RANGE, h, key=ENV_CANVAS_H)
    if env.get(ENV_FRAME_MS):
        frame_ms = _coerce_int(env[ENV_FRAME_MS], *FRAME_MS_RANGE, frame_ms, key=ENV_FRAME_MS)
    if env.get(ENV_BACKGROUND):
        background = _coerce_color(env[ENV_BACKGROUND], background, key=ENV_BACKGROUND)

    out = RenderSettings(
        canvas_width=w,
        canvas_height=h,
        frame_interval_ms=frame_ms,
        background=background,
        antialias=antialias,
    )
    log.debug("Render settings: %s", out)
    return out
