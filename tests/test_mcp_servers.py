"""Tool registration and dispatch through FastMCP for both servers."""
import asyncio
from datetime import datetime

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from mcp_servers import hello_world_server, weather_server
from weather_api.settings import WeatherSettings


def _text(result):
    # call_tool returns content blocks, or (content, structured) on newer SDKs
    if isinstance(result, tuple):
        result = result[0]
    return result[0].text


def _tools(mcp):
    return {tool.name: tool for tool in asyncio.run(mcp.list_tools())}


@pytest.fixture
def weather_mcp(stub_fetcher):
    settings = WeatherSettings(openweather_api_key="test-key")
    return weather_server.create_server(settings, fetcher=stub_fetcher)


def test_weather_server_registers_tools(weather_mcp):
    tools = _tools(weather_mcp)
    assert set(tools) == {
        "get_alerts",
        "get_forecast",
        "get_current_weather",
        "get_weather_forecast",
    }
    assert tools["get_alerts"].description == "Get weather alerts for a state"


def test_weather_tool_schemas(weather_mcp):
    tools = _tools(weather_mcp)

    state = tools["get_alerts"].inputSchema["properties"]["state"]
    assert state["minLength"] == 2 and state["maxLength"] == 2

    lat = tools["get_forecast"].inputSchema["properties"]["latitude"]
    assert lat["minimum"] == -90 and lat["maximum"] == 90

    forecast_schema = tools["get_weather_forecast"].inputSchema
    assert forecast_schema["properties"]["days"]["default"] == 3
    assert forecast_schema["properties"]["days"]["maximum"] == 5
    assert forecast_schema["required"] == ["city"]


@pytest.mark.parametrize(
    "tool, arguments",
    [
        ("get_alerts", {"state": "CAL"}),
        ("get_alerts", {"state": "C"}),
        ("get_forecast", {"latitude": 91, "longitude": 0}),
        ("get_forecast", {"latitude": 0, "longitude": -181}),
        ("get_weather_forecast", {"city": "Tokyo", "days": 6}),
        ("get_weather_forecast", {"city": "Tokyo", "days": 0}),
        ("get_current_weather", {}),
    ],
)
def test_invalid_arguments_rejected_before_handler(weather_mcp, stub_fetcher, tool, arguments):
    with pytest.raises(ToolError):
        asyncio.run(weather_mcp.call_tool(tool, arguments))
    assert stub_fetcher.calls == []


def test_dispatch_returns_text_envelope(weather_mcp, stub_fetcher):
    stub_fetcher.responses["https://api.weather.gov/alerts?area=CA"] = {"features": []}
    result = asyncio.run(weather_mcp.call_tool("get_alerts", {"state": "ca"}))
    assert _text(result) == "No active alerts for CA"


def test_missing_key_through_server(stub_fetcher):
    mcp = weather_server.create_server(WeatherSettings(), fetcher=stub_fetcher)
    result = asyncio.run(mcp.call_tool("get_current_weather", {"city": "Paris"}))
    assert _text(result).startswith("OpenWeatherMap API key not found.")
    assert stub_fetcher.calls == []


def test_weather_main_exits_on_startup_failure(monkeypatch, capsys):
    def boom(settings):
        raise RuntimeError("transport unavailable")

    monkeypatch.setattr(weather_server, "create_server", boom)
    with pytest.raises(SystemExit) as exc:
        weather_server.main([])

    assert exc.value.code == 1
    assert "Fatal error in main(): transport unavailable" in capsys.readouterr().err


# hello-world


def test_say_hello():
    assert hello_world_server.say_hello("Ada") == "Hello, Ada!"
    assert hello_world_server.say_hello() == "Hello, World!"
    assert hello_world_server.say_hello("") == "Hello, World!"


def test_get_time_uses_locale_format():
    now = datetime(2026, 10, 19, 15, 4, 5)
    assert hello_world_server.get_time(now) == f"Current time: {now.strftime('%c')}"


def test_hello_server_tools():
    mcp = hello_world_server.create_server()
    assert set(_tools(mcp)) == {"say_hello", "get_time"}

    assert _text(asyncio.run(mcp.call_tool("say_hello", {"name": "Ada"}))) == "Hello, Ada!"
    assert _text(asyncio.run(mcp.call_tool("say_hello", {}))) == "Hello, World!"
    assert _text(asyncio.run(mcp.call_tool("get_time", {}))).startswith("Current time: ")
