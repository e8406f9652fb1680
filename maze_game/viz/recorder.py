import logging
import os
from datetime import datetime
from typing import Optional
import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)

class VideoRecorder:
    """
    Writes play-window frames to an mp4. Inactive recorders accept every
    call and do nothing, so the renderer never has to branch on --record.
    """

    RECORDINGS_DIR = "recordings"

    def __init__(self, active=False, output_file: Optional[str] = None, fps=30, label="play"):
        self.active = active
        self.fps = fps
        self.output_file = output_file
        self.writer = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = self.default_path(label)

    @classmethod
    def default_path(cls, label: str) -> str:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        os.makedirs(cls.RECORDINGS_DIR, exist_ok=True)
        return os.path.join(cls.RECORDINGS_DIR, f"maze_{label}_{ts}.mp4")

    @staticmethod
    def surface_to_bgr(surface: pygame.Surface) -> np.ndarray:
        # surfarray is column-major RGB (width, height, 3)
        rgb = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)

    def _open(self, frame: np.ndarray):
        height, width = frame.shape[:2]
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, (width, height))
        logger.info(f"Recording {width}x{height} play to {self.output_file}")

    def capture_frame(self, surface: pygame.Surface, repeat: int = 1):
        if not self.active:
            return
        frame = self.surface_to_bgr(surface)
        if self.writer is None:
            self._open(frame)
        for _ in range(repeat):
            self.writer.write(frame)
        self.frame_count += repeat

    def hold(self, surface: pygame.Surface, seconds: float):
        """Repeats the current frame, e.g. to keep the final time on screen."""
        self.capture_frame(surface, repeat=max(1, int(round(seconds * self.fps))))

    def stop(self) -> Optional[str]:
        if self.writer is None:
            return None
        self.writer.release()
        self.writer = None
        logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
        return self.output_file
