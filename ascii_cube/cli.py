#!/usr/bin/env python3
# ascii_cube/cli.py
"""
Entry point for ASCII Cube.
Loads configuration, sets up logging and runs AsciiCubeApp until interrupted.

The stock animation takes no input. A JSON config is an opt-in override:
it is read only when ASCII_CUBE_CONFIG names a file, never from the
per-user config directory on its own.
"""

import sys, os
import logging

from ascii_cube.config import Config
from ascii_cube.logging_conf import setup_logging
from ascii_cube.ui.app import AsciiCubeApp
from ascii_cube.version import version_info

def load_config() -> Config:
    """Defaults unless ASCII_CUBE_CONFIG is set."""
    if os.environ.get("ASCII_CUBE_CONFIG"):
        return Config.load()
    return Config()

def main():
    if os.name == "nt" and not sys.stdout.isatty():
        print("No Windows console detected. Run from cmd, PowerShell, or Windows Terminal.")
        raise SystemExit(1)
    cfg = load_config()
    setup_logging(cfg)
    logging.getLogger("ascii_cube").info("%s, config %s", version_info(), cfg.path)
    app = AsciiCubeApp(cfg)
    try:
        app.run()
    except KeyboardInterrupt:
        return 0
    return 0

if __name__ == "__main__":
    sys.exit(main())
