import pytest
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from pastebin.mcpserver import create_server
from pastebin.mcpserver.server import get_snippet_tool, list_snippets_tool, paste_snippet_tool


def test_paste_and_list_tools(store):
    pasted = paste_snippet_tool(store, "ivy", "echo hi", language="bash")

    assert pasted["language"] == "bash"
    listed = list_snippets_tool(store, "ivy")
    assert [s["id"] for s in listed["snippets"]] == [pasted["snippetId"]]

    fetched = get_snippet_tool(store, "ivy", pasted["snippetId"])
    assert fetched["code"] == "echo hi"
    assert fetched["createdAt"] < fetched["expiresAt"]


def test_tools_translate_store_errors(store, clock):
    with pytest.raises(ToolError, match="Name and code are required"):
        paste_snippet_tool(store, "ivy", "")
    with pytest.raises(ToolError, match="No code found for this name"):
        list_snippets_tool(store, "nobody")

    pasted = paste_snippet_tool(store, "ivy", "x", expires_in=1)
    clock.advance(5)
    with pytest.raises(ToolError, match="Snippet not found or expired"):
        get_snippet_tool(store, "ivy", pasted["snippetId"])


def test_create_server_returns_named_server(store):
    server = create_server(store)

    assert isinstance(server, FastMCP)
    assert server.name == "Pastebin MCP Server"
