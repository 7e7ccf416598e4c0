from __future__ import annotations

"""Collects CSS rule blocks for hints, once per distinct block."""

from typing import List


class StyleSheet:
    """Per-instance rule collector with an explicit ``reset``."""

    def __init__(self) -> None:
        self._rules: List[str] = []

    def inject(self, rules: str) -> bool:
        """Append ``rules`` unless already present. Returns True when added."""
        if rules in self._rules:
            return False
        self._rules.append(rules)
        return True

    @property
    def rules(self) -> List[str]:
        return list(self._rules)

    @property
    def text(self) -> str:
        return "".join(f"\n{rules}" for rules in self._rules)

    def reset(self) -> None:
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)


__all__ = ["StyleSheet"]
