"""Desktop automation: pointer injection and the controller that drives it."""

from .controller import ActionResult, ControllerState, SmartMouse
from .pointer import MouseButton, PyAutoGUIPointer

__all__ = [
    "ActionResult",
    "ControllerState",
    "MouseButton",
    "PyAutoGUIPointer",
    "SmartMouse",
]
