#!/usr/bin/env python3
# ascii_cube/config.py
"""
Config loader/saver and defaults for ASCII Cube.

Goals:
- Optional single JSON file per user. Defaults alone reproduce the stock animation.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- No external deps.

Usage:
    from ascii_cube.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # $ASCII_CUBE_CONFIG or OS-specific path
    width = cfg["screen"]["width_chars"]
    cfg["render"]["show_vertices"] = True
    cfg.save()
"""

from __future__ import annotations

import copy
import json
import logging
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger("ascii_cube.config")

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "screen": {
        "width_chars": 80,
        "height_chars": 40,
    },
    "animation": {
        "time_step": 0.01,                # radians per frame
        "frame_delay_ms": 30,             # 0 disables pacing
        "camera_z": -2.5,                 # depth offset applied after rotation
        "start_frame": 0,
    },
    "render": {
        "blank_char": " ",
        "horizontal_char": "-",
        "vertical_char": "|",
        "vertex_char": ".",
        "show_vertices": False,
        "bounds_policy": "drop",          # drop | clamp | raise
        "hide_cursor": True,
    },
    "logging": {
        "level": "WARNING",               # stdout belongs to the animation
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiCube")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiCube")
    return os.path.join(os.path.expanduser("~/.config"), "ascii_cube")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_CUBE_CONFIG env override."""
    env = os.environ.get("ASCII_CUBE_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_cube.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp, path)
    except Exception:
        # Clean temp on error
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_num(v: Any, default: float, minmax: Optional[Tuple[float, float]] = None) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        return float(default)
    if x != x:  # NaN
        return float(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError, OverflowError):
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

def _coerce_glyph(v: Any, default: str) -> str:
    """Single printable ASCII character or the default."""
    if isinstance(v, str) and len(v) == 1 and 0x20 <= ord(v) < 0x7F:
        return v
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = copy.deepcopy(_deep_merge(DEFAULT_CONFIG, cfg or {}))
    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(c.get(section), dict):
            c[section] = dict(defaults)

    # screen
    scr = c["screen"]
    scr["width_chars"]  = _coerce_int(scr.get("width_chars"), 80, (8, 1000))
    scr["height_chars"] = _coerce_int(scr.get("height_chars"), 40, (4, 500))

    # animation
    a = c["animation"]
    a["time_step"] = _coerce_num(a.get("time_step"), DEFAULT_CONFIG["animation"]["time_step"], (-1.0, 1.0))
    a["frame_delay_ms"] = _coerce_int(a.get("frame_delay_ms"), DEFAULT_CONFIG["animation"]["frame_delay_ms"], (0, 1000))
    # |camera_z| must exceed the cube's XZ radius (sqrt 2) so depth never reaches zero.
    a["camera_z"] = _coerce_num(a.get("camera_z"), DEFAULT_CONFIG["animation"]["camera_z"], (-100.0, -1.5))
    a["start_frame"] = _coerce_int(a.get("start_frame"), 0, (0, 10 ** 9))

    # render
    r = c["render"]
    for key in ("blank_char", "horizontal_char", "vertical_char", "vertex_char"):
        r[key] = _coerce_glyph(r.get(key), DEFAULT_CONFIG["render"][key])
    r["show_vertices"] = _coerce_bool(r.get("show_vertices"), DEFAULT_CONFIG["render"]["show_vertices"])
    if r.get("bounds_policy") not in ("drop", "clamp", "raise"):
        r["bounds_policy"] = DEFAULT_CONFIG["render"]["bounds_policy"]
    r["hide_cursor"] = _coerce_bool(r.get("hide_cursor"), DEFAULT_CONFIG["render"]["hide_cursor"])

    # logging
    lg = c["logging"]
    level = lg.get("level")
    level = level.upper() if isinstance(level, str) else level
    if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
        level = DEFAULT_CONFIG["logging"]["level"]
    lg["level"] = level
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate({}))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = False) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("top-level JSON value is not an object")
        except (OSError, ValueError) as e:
            # Corrupt file. Backup and fall back to defaults.
            backup = cfg_path + ".corrupt.bak"
            logger.warning("Config %s unreadable (%s); backed up to %s", cfg_path, e, backup)
            try:
                shutil.copyfile(cfg_path, backup)
            except OSError:
                pass
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def save(self) -> None:
        """Persist to JSON atomically."""
        full = _validate(self.data)
        _atomic_write_json(self.path, full)
        self.data = full  # sync in-memory with normalized values

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    @property
    def frame_delay_s(self) -> float:
        return self.data["animation"]["frame_delay_ms"] / 1000.0


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "_default_config_path",
]
