"""
visualization — ASCII layout rendering and step-by-step logging.
"""

from .ascii_render import Rendering, render_layout
from .step_logger import StepLogger

__all__ = ["Rendering", "StepLogger", "render_layout"]
