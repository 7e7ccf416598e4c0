"""
Host Renderer Contract

The transition core never creates, paints or destroys nodes itself. It asks
a HostRenderer to do so at well-defined points of each phase sequence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class HostRenderer(ABC):
    """Collaborator that owns the controlled node."""

    @abstractmethod
    def commit(self) -> None:
        """Flush pending non-transition props to the node.

        Called before ``on_enter``/``on_exit`` of every new sequence so the
        callback observes an up-to-date node.
        """

    @abstractmethod
    def mount(self) -> None:
        """Create the node (no-op when it already exists)."""

    @abstractmethod
    def unmount(self) -> None:
        """Destroy the node (no-op when it is already gone)."""

    @abstractmethod
    def current_node(self) -> Optional[Any]:
        """Return the live node, or None when it does not exist."""

    @abstractmethod
    def apply_hint(self, hint: str) -> None:
        """Hand the current presentation hint to the node; a no-op without a node."""

    def stage(self, **props: Any) -> None:
        """Queue non-transition props for the next ``commit``."""
        raise NotImplementedError(f"{type(self).__name__} does not accept staged props")

    @property
    def has_node(self) -> bool:
        return self.current_node() is not None


__all__ = ["HostRenderer"]
