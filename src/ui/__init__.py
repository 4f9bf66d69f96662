"""UI module for the Streamlit web interface."""

from src.ui.clipboard import Clipboard, InMemoryClipboard, StreamlitClipboard
from src.ui.controller import UIController
from src.ui.state import Failed, Idle, Loading, RequestState, SpecField, Succeeded, TimedFlag
from src.ui.utils import bullet_lines, copy_label, count_bullets, generate_label

__all__ = [
    "Clipboard",
    "Failed",
    "Idle",
    "InMemoryClipboard",
    "Loading",
    "RequestState",
    "SpecField",
    "StreamlitClipboard",
    "Succeeded",
    "TimedFlag",
    "UIController",
    "bullet_lines",
    "copy_label",
    "count_bullets",
    "generate_label",
]
