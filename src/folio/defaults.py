"""Cascading front matter defaults."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any

from folio.config.settings import DefaultsRule


def _normalize_scope_path(path: str) -> str:
    return PurePosixPath(path.strip("/")).as_posix() if path.strip("/") else ""


class FrontmatterDefaults:
    """Resolves default metadata values from ``defaults`` rules in the site config.

    A rule applies to a resource when the resource's relative path starts with
    the rule's scope path and the rule's collection, if set, matches. Among the
    applicable rules defining ``key``, the most specific one wins: a longer scope
    path beats a shorter one, a rule naming a collection beats one that does not,
    and later rules beat earlier ones.

    ``find`` only reads the rules, so it can be called from several threads.
    """

    def __init__(self, rules: list[DefaultsRule] | None = None) -> None:
        self.rules = list(rules or [])

    def _applies(self, rule: DefaultsRule, path: str, collection_label: str | None) -> bool:
        scope_collection = rule.scope.collection
        if scope_collection and scope_collection != collection_label:
            return False
        scope_path = _normalize_scope_path(rule.scope.path)
        if not scope_path:
            return True
        return path == scope_path or path.startswith(f"{scope_path}/")

    def _specificity(self, index: int, rule: DefaultsRule) -> tuple[int, int, int]:
        return (len(_normalize_scope_path(rule.scope.path)), 1 if rule.scope.collection else 0, index)

    def find(self, path: str, collection_label: str | None, key: str) -> Any:
        normalized_path = PurePosixPath(str(path).replace("\\", "/")).as_posix()
        candidates = [
            (self._specificity(index, rule), rule)
            for index, rule in enumerate(self.rules)
            if key in rule.values and self._applies(rule, normalized_path, collection_label)
        ]
        if not candidates:
            return None
        _, rule = max(candidates, key=lambda item: item[0])
        return rule.values[key]

    def all(self, path: str, collection_label: str | None) -> dict[str, Any]:
        """Return every default applying to ``path``, most specific values last."""
        normalized_path = PurePosixPath(str(path).replace("\\", "/")).as_posix()
        applicable = sorted(
            (
                (self._specificity(index, rule), rule)
                for index, rule in enumerate(self.rules)
                if self._applies(rule, normalized_path, collection_label)
            ),
            key=lambda item: item[0],
        )
        merged: dict[str, Any] = {}
        for _, rule in applicable:
            merged.update(rule.values)
        return merged
