import os
import logging
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)

def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    """
    Window pixels as an OpenCV frame.
    pygame indexes pixels [x][y] in RGB; VideoWriter expects rows of BGR.
    """
    rgb = pygame.surfarray.array3d(surface)
    return np.ascontiguousarray(rgb.swapaxes(0, 1)[:, :, ::-1])


def default_output_file(prefix: str, directory: str = "recordings") -> str:
    """Timestamped .mp4 name inside 'directory' (created if missing)."""
    os.makedirs(directory, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(directory, f"{prefix}_{ts}.mp4")


class VideoRecorder:
    """Streams window frames into an mp4. Inactive recorders ignore every call."""

    CODEC = 'mp4v'

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = default_output_file("walk")

    def open_writer(self, frame_size):
        self.frame_size = frame_size
        self.writer = cv2.VideoWriter(self.output_file, cv2.VideoWriter_fourcc(*self.CODEC),
                                      self.fps, frame_size)
        if not self.writer.isOpened():
            raise OSError(f"Could not open video writer for {self.output_file}")
        logger.info(f"Recording {frame_size[0]}x{frame_size[1]} at {self.fps} fps to {self.output_file}")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        size = surface.get_size()
        if self.writer is None:
            self.open_writer(size)
        elif size != self.frame_size:
            # VideoWriter is fixed to its first frame size
            surface = pygame.transform.smoothscale(surface, self.frame_size)

        self.writer.write(surface_to_frame(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer is None:
            return
        self.writer.release()
        self.writer = None
        logger.info(f"Closed {self.output_file} after {self.frame_count} frames")
