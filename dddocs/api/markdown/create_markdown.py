"""Build the site's configured markdown-it renderer."""

from collections.abc import Sequence

from markdown_it import MarkdownIt

from ..config.MarkdownConfig import MarkdownConfig
from ..document.DocumentRecord import DocumentRecord
from .component_plugin import component_plugin
from .decoration_plugins import add_footer_plugin, add_metadata_plugin
from .internal_link_plugin import internal_link_plugin
from .PluginChain import PluginChain
from .youtube_plugins import youtube_link_plugin, youtube_playlist_link_plugin


def default_chain() -> PluginChain:
    """Return the plugin chain every page is rendered with.

    Metadata markers carry bindings, so add-metadata runs before the component
    stage; the footer has none and goes after it.
    """
    chain = PluginChain()
    chain.plugin("component").use(component_plugin)
    chain.plugin("add-footer").use(add_footer_plugin).after("component")
    chain.plugin("add-metadata").use(add_metadata_plugin).before("component")
    return chain


def extend_markdown(md: MarkdownIt, documents: Sequence[DocumentRecord], config: MarkdownConfig) -> MarkdownIt:
    """Register the inline rewriting plugins."""
    if config.internal_links:
        md.use(internal_link_plugin, documents)
    if config.youtube_embeds:
        md.use(youtube_link_plugin)
        md.use(youtube_playlist_link_plugin)
    return md


def create_markdown(
    documents: Sequence[DocumentRecord],
    config: MarkdownConfig | None = None,
    chain: PluginChain | None = None,
) -> MarkdownIt:
    """Create a MarkdownIt instance with the chained plugins, then the extensions."""
    config = config or MarkdownConfig()
    md = MarkdownIt("commonmark", {"html": config.html, "typographer": config.typographer})
    md.enable("table")
    if config.typographer:
        md.enable(["replacements", "smartquotes"])
    (chain or default_chain()).apply(md)
    return extend_markdown(md, documents, config)
