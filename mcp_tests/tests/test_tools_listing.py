from tools import listing as listing_tool


def test_listing_tools(dummy_mcp, facade):
    listing_tool.register(dummy_mcp, facade=facade)
    tools = dummy_mcp.tools

    assert tools["length"](json='{"a":1,"b":2}') == 2
    assert tools["length"](json='"héllo"') == 5
    assert tools["keys"](json='{"a":1,"b":2}') == '["a","b"]'
    assert tools["values"](json='{"a":1,"b":2}') == "[1,2]"


def test_listing_tools_non_containers(dummy_mcp, facade):
    listing_tool.register(dummy_mcp, facade=facade)
    tools = dummy_mcp.tools

    assert tools["length"](json="true") == ""
    assert tools["keys"](json="3") == "[]"
    assert tools["values"](json="[1]") == "[]"
    assert tools["length"](json="{invalid") == ""
