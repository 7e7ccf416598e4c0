from .memory import InMemoryHost, Node
from .renderer import HostRenderer
from .styles import StyleSheet

__all__ = [
    "HostRenderer",
    "InMemoryHost",
    "Node",
    "StyleSheet",
]
