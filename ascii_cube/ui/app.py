#!/usr/bin/env python3
# ascii_cube/ui/app.py
"""Drive the cube renderer and paint frames through a prompt_toolkit Output."""

from __future__ import annotations

import itertools
import logging
import time
from typing import Callable, Optional

import numpy as np
from prompt_toolkit.output import Output, create_output

from ascii_cube.config import Config
from ascii_cube.rendering.renderer import CubeRenderer

logger = logging.getLogger("ascii_cube.app")


class AsciiCubeApp:
    """
    Presentation loop: render -> print rows -> cursor up -> sleep, forever
    unless ``max_frames`` is given.
    """

    def __init__(
        self,
        cfg: Optional[Config] = None,
        output: Optional[Output] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.cfg = cfg if cfg is not None else Config.load()
        self.renderer = CubeRenderer.from_config(self.cfg)
        self.output = output if output is not None else create_output()
        self._sleep = sleep
        self.frames_drawn = 0

    def present(self, frame: np.ndarray) -> None:
        """Write one frame and park the cursor on its first row."""
        out = self.output
        for line in self.renderer.frame_to_lines(frame):
            out.write(line)
            out.write("\n")
        out.cursor_up(self.renderer.height)
        out.flush()

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run the loop; returns the number of frames drawn."""
        delay = self.cfg.frame_delay_s
        hide_cursor = self.cfg["render"]["hide_cursor"]
        frames = itertools.count() if max_frames is None else range(max_frames)
        self.frames_drawn = 0

        logger.info(
            "Starting animation %dx%d at frame %d, delay %.3fs",
            self.renderer.width, self.renderer.height, self.renderer.frame_number, delay,
        )
        drawn = 0
        if hide_cursor:
            self.output.hide_cursor()
        try:
            for _ in frames:
                t0 = time.perf_counter()
                self.present(self.renderer.next_frame())
                drawn += 1
                self.frames_drawn = drawn
                logger.debug(
                    "frame %d rendered in %.2f ms",
                    self.renderer.frame_number - 1, (time.perf_counter() - t0) * 1000.0,
                )
                if delay > 0:
                    self._sleep(delay)
        finally:
            # Leave the last frame on screen below the cursor.
            if drawn:
                self.output.cursor_down(self.renderer.height)
            if hide_cursor:
                self.output.show_cursor()
            self.output.flush()
            logger.info("Stopped after %d frames", drawn)
        return drawn
