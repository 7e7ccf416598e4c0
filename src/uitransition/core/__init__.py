from .class_names import ClassNameResolver
from .config import PHASE_CALLBACKS, TransitionConfig
from .errors import (
    InvalidStateEdge,
    InvalidTimeoutConfig,
    InvalidTransitionRequest,
    TransitionDisposedError,
    TransitionError,
)
from .listener import PropertyChangeListener
from .machine import TransitionStateMachine
from .mount_policy import initial_state, should_mount
from .states import TransitionRequest, TransitionState
from .timeout import SplitTimeout, UniformTimeout
from .timer import TimerScheduler

__all__ = [
    "ClassNameResolver",
    "PHASE_CALLBACKS",
    "TransitionConfig",
    "TransitionError",
    "InvalidStateEdge",
    "InvalidTimeoutConfig",
    "InvalidTransitionRequest",
    "TransitionDisposedError",
    "PropertyChangeListener",
    "TransitionStateMachine",
    "initial_state",
    "should_mount",
    "TransitionRequest",
    "TransitionState",
    "SplitTimeout",
    "UniformTimeout",
    "TimerScheduler",
]
