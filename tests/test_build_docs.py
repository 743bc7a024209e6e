"""Tests for the end-to-end documentation pipeline."""

from luadocs.build_docs import build_docs, generate_markdown
from luadocs.load_config import load_config

INIT_LUA = """---@docs base
---@class _99.Config
---Plugin configuration.
---@field provider _99.Provider The provider to use
---@field timeout? integer Request timeout default = 30
local M = {}
"""

PROVIDER_LUA = """---@docs included
---@class _99.Provider
---@field name string Provider name
---@field opts _99.Opts

---@class _99.Opts
---@field raw table
"""

STALE_COPY_LUA = """---@class _99.Provider
---@field name string
---@field extra string
---@field more string
"""

EXPECTED = "\n".join(
    [
        "# 99",
        "The AI Neovim experience",
        "",
        "## _99.Config",
        "Plugin configuration.",
        "",
        "### Description",
        "| Name | Type | Default Value |",
        "| --- | --- | --- |",
        "| `provider` | `_99.Provider` | - |",
        "| `timeout` | `integer \\| nil` | 30 |",
        "",
        "### API",
        "",
        "#### provider",
        "The provider to use",
        "",
        "#### timeout",
        "Request timeout ",
        "",
        "**default**: 30",
        "",
        "## _99.Provider",
        "No description.",
        "",
        "### Description",
        "| Name | Type | Default Value |",
        "| --- | --- | --- |",
        "| `name` | `string` | - |",
        "| `opts` | `_99.Opts` | - |",
        "",
        "### API",
        "",
        "#### name",
        "Provider name",
        "",
        "#### opts",
        "No description.",
    ]
)

SOURCES = [
    (INIT_LUA, "lua/99/init.lua"),
    (PROVIDER_LUA, "lua/99/provider.lua"),
    (STALE_COPY_LUA, "lua/99/test/provider_spec.lua"),
]


def test_generate_markdown_document() -> None:
    """Verify the complete document for a small annotated tree."""
    assert generate_markdown(SOURCES) == EXPECTED + "\n"


def test_generate_markdown_is_stable() -> None:
    """Verify identical input gives byte-identical output."""
    assert generate_markdown(SOURCES) == generate_markdown(list(SOURCES))


def test_build_docs_model() -> None:
    """Verify the model behind the document."""
    build = build_docs(SOURCES)
    assert build.documented == ["_99.Config", "_99.Provider"]
    assert sorted(build.classes_by_name) == ["_99.Config", "_99.Opts", "_99.Provider"]
    assert build.classes_by_name["_99.Config"].references == ["_99.Provider"]
    assert build.classes_by_name["_99.Provider"].file_path == "lua/99/provider.lua"
    assert [c.file_path for c in build.dropped] == ["lua/99/test/provider_spec.lua"]


def test_build_docs_uses_config() -> None:
    """Verify title and tagline come from the configuration."""
    config = load_config()
    config["document"]["title"] = "My Plugin"
    config["document"]["tagline"] = "Docs."
    out = generate_markdown([], config)
    assert out == "# My Plugin\nDocs.\n\nNo documented types found.\n"


def test_build_docs_without_primary_classes() -> None:
    """Verify included classes alone are not documented."""
    out = generate_markdown([(PROVIDER_LUA, "lua/99/provider.lua")])
    assert out.endswith("No documented types found.\n")
