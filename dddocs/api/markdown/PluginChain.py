"""Named markdown-it plugin registrations with before/after ordering."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from markdown_it import MarkdownIt


class ChainedPlugin:
    """A named plugin slot: what to ``use`` and where it sits relative to others."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.plugin: Callable[..., None] | None = None
        self.args: tuple[Any, ...] = ()
        self.before_name: str | None = None
        self.after_name: str | None = None

    def use(self, plugin: Callable[..., None], *args: Any) -> ChainedPlugin:
        self.plugin = plugin
        self.args = args
        return self

    def before(self, name: str) -> ChainedPlugin:
        if self.after_name is not None:
            raise ValueError(f"Unable to set .before({name!r}) on {self.name!r}: .after() is already set")
        self.before_name = name
        return self

    def after(self, name: str) -> ChainedPlugin:
        if self.before_name is not None:
            raise ValueError(f"Unable to set .after({name!r}) on {self.name!r}: .before() is already set")
        self.after_name = name
        return self


class PluginChain:
    """Ordered collection of ChainedPlugin slots, applied to a MarkdownIt instance.

    Plugins keep registration order except those moved by ``before``/``after``.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, ChainedPlugin] = {}

    def plugin(self, name: str) -> ChainedPlugin:
        """Get the slot called name, creating it if needed."""
        if name not in self._plugins:
            self._plugins[name] = ChainedPlugin(name)
        return self._plugins[name]

    def has(self, name: str) -> bool:
        return name in self._plugins

    def delete(self, name: str) -> None:
        self._plugins.pop(name, None)

    def names(self) -> list[str]:
        """Plugin names in the order they will be applied.

        Raises:
            ValueError: If a plugin is ordered against a name that is not registered
        """
        order = list(self._plugins)
        for name, entry in self._plugins.items():
            anchor = entry.before_name or entry.after_name
            if anchor is None:
                continue
            if anchor not in self._plugins:
                raise ValueError(f"Plugin {name!r} is ordered against unknown plugin {anchor!r}")
            order.remove(name)
            position = order.index(anchor)
            order.insert(position if entry.before_name else position + 1, name)
        return order

    def apply(self, md: MarkdownIt) -> MarkdownIt:
        """Call ``md.use`` for every plugin in order and return md."""
        for name in self.names():
            entry = self._plugins[name]
            if entry.plugin is None:
                raise ValueError(f"Plugin {name!r} has nothing to use")
            md.use(entry.plugin, *entry.args)
        return md
