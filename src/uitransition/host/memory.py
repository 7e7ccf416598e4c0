"""
In-Memory Host

A minimal HostRenderer that keeps a single Node in memory. It is the host
used by the scenario runner and is handy wherever the transition core has to
be driven without a real renderer.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from uitransition.host.renderer import HostRenderer

logger = logging.getLogger(__name__)


class Node(BaseModel):
    """
    Rendered node state.

    Attributes:
        tag: Element tag, informational only
        base_class: Class name coming from regular (non-transition) props
        hint: Presentation hint applied by the transition core
        props: Other committed props
    """

    tag: str = "div"
    base_class: str = ""
    hint: str = ""
    props: Dict[str, Any] = Field(default_factory=dict)

    @property
    def class_list(self) -> List[str]:
        return [c for c in f"{self.base_class} {self.hint}".split() if c]

    @property
    def class_name(self) -> str:
        return " ".join(self.class_list)

    def has_class(self, name: str) -> bool:
        return name in self.class_list


class InMemoryHost(HostRenderer):
    """HostRenderer keeping one Node and a queue of staged props."""

    def __init__(self, tag: str = "div", **props: Any):
        self.tag = tag
        self._committed: Dict[str, Any] = _normalize(props)
        self._staged: Dict[str, Any] = {}
        self._node: Optional[Node] = None
        self.mount_count = 0
        self.unmount_count = 0
        self.commit_count = 0

    def stage(self, **props: Any) -> None:
        self._staged.update(_normalize(props))

    @property
    def staged(self) -> Dict[str, Any]:
        return dict(self._staged)

    def commit(self) -> None:
        self.commit_count += 1
        if self._staged:
            logger.debug("Committing props %s", sorted(self._staged))
            self._committed.update(self._staged)
            self._staged.clear()
        if self._node is not None:
            self._sync(self._node)

    def mount(self) -> None:
        if self._node is not None:
            return
        self._node = Node(tag=self.tag)
        self._sync(self._node)
        self.mount_count += 1
        logger.debug("Mounted <%s>", self.tag)

    def unmount(self) -> None:
        if self._node is None:
            return
        self._node = None
        self.unmount_count += 1
        logger.debug("Unmounted <%s>", self.tag)

    def current_node(self) -> Optional[Node]:
        return self._node

    def apply_hint(self, hint: str) -> None:
        if self._node is None:
            return
        self._node.hint = hint

    def _sync(self, node: Node) -> None:
        props = dict(self._committed)
        node.base_class = str(props.pop("class_name", "") or "")
        node.props = props


def _normalize(props: Dict[str, Any]) -> Dict[str, Any]:
    """Fold the camelCase ``className`` alias into ``class_name``."""
    normalized = dict(props)
    if "className" in normalized:
        normalized["class_name"] = normalized.pop("className")
    return normalized


__all__ = ["Node", "InMemoryHost"]
