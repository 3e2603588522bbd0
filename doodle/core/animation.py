# File: doodle/core/animation.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Capacidad Animation: una imagen por frame y el siguiente estado.
# Notes: Cada frame es un render completo e independiente; el loop vive en el binding.
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from doodle.core.image import Image


class Animation(ABC):
    @abstractmethod
    def draw(self) -> Image:
        """Image for the current frame."""

    @abstractmethod
    def animate(self) -> "Animation":
        """Next frame's animation state."""


@dataclass(frozen=True)
class FrameAnimation(Animation):
    """Animation driven by a frame counter: ``render(frame) -> Image``."""

    render: Callable[[int], Image]
    frame: int = 0

    def draw(self) -> Image:
        return self.render(self.frame)

    def animate(self) -> "FrameAnimation":
        return FrameAnimation(self.render, self.frame + 1)
