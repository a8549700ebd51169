from tools import members as members_tool
from tools import parse_json as parse_json_tool


def test_member_tools_round_trip(dummy_mcp, facade):
    members_tool.register(dummy_mcp, facade=facade)
    tools = dummy_mcp.tools

    obj = tools["set_member"](json="{}", member="a", value="[1,2,3]")
    assert obj == '{"a":[1,2,3]}'
    assert tools["exists"](json=obj, member="a") is True

    arr = tools["get_member"](json=obj, member="a")
    assert arr == "[1,2,3]"
    assert tools["remove_member"](json=arr, member="1") == "[1,null,3]"

    assert tools["remove_member"](json=obj, member="a") == "{}"
    assert tools["exists"](json="{}", member="a") is False


def test_member_tools_share_injected_facade(dummy_mcp, facade):
    parse_json_tool.register(dummy_mcp, facade=facade)
    members_tool.register(dummy_mcp, facade=facade)
    tools = dummy_mcp.tools

    key = tools["parse_json"](json='{"x": true}')
    out = tools["set_member"](json=key, member="y", value="null")

    assert out == '{"x":true,"y":null}'
    assert key not in facade.store
    assert out in facade.store


def test_member_tools_invalid_inputs(dummy_mcp, facade):
    members_tool.register(dummy_mcp, facade=facade)
    tools = dummy_mcp.tools

    assert tools["get_member"](json="{invalid", member="a") == ""
    assert tools["set_member"](json="{}", member="a", value="{invalid") == ""
    assert tools["remove_member"](json="{invalid", member="a") == ""
    assert tools["exists"](json="{invalid", member="a") is False
