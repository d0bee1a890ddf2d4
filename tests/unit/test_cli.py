"""Unit tests for city resolution and the single-run flow."""

import io

import httpx
import pytest

from weather_cli.cli import resolve_city, run
from weather_cli.exceptions import ConfigWriteException, DeserializationException, TransportException


class TestResolveCity:
    """Tests for command-line city override."""

    def test_no_arguments_uses_default(self):
        """Test the default city is used unchanged."""
        assert resolve_city([], "London") == "London"

    def test_empty_default_kept(self):
        """Test an empty default city is not replaced."""
        assert resolve_city([], "") == ""

    def test_multi_word_arguments_joined(self):
        """Test arguments override the default and are joined by single spaces."""
        assert resolve_city(["New", "York"], "London") == "New York"

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["Paris"], "Paris"),
            (["Rio", "de", "Janeiro"], "Rio de Janeiro"),
            (["  Oslo "], "  Oslo "),
            (["São", "Paulo,BR"], "São Paulo,BR"),
            ([""], ""),
        ],
    )
    def test_arguments_joined_without_trimming(self, args, expected):
        """Test the join applies no trimming or validation."""
        assert resolve_city(args, "London") == expected

    def test_tuple_arguments(self):
        """Test any sequence of arguments is accepted."""
        assert resolve_city(("Los", "Angeles"), "") == "Los Angeles"


@pytest.mark.asyncio
async def test_run_renders_weather(mock_http_client, mock_settings, mock_weather_response, console, console_output):
    """Test a successful lookup prints the table and exits 0."""
    mock_settings.config_path.write_text("abc123\nParis", encoding="utf-8")
    mock_http_client.get.return_value = httpx.Response(200, json=mock_weather_response)

    exit_code = await run([], mock_settings, console, client=mock_http_client)

    assert exit_code == 0
    assert "Paris" in console_output()
    params = mock_http_client.get.call_args.kwargs["params"]
    assert params == {"q": "Paris", "appid": "abc123", "units": "metric"}


@pytest.mark.asyncio
async def test_run_uses_argument_city(mock_http_client, mock_settings, mock_weather_response, console):
    """Test command-line words override the stored city."""
    mock_settings.config_path.write_text("abc123\nLondon", encoding="utf-8")
    mock_http_client.get.return_value = httpx.Response(200, json=mock_weather_response)

    await run(["New", "York"], mock_settings, console, client=mock_http_client)

    assert mock_http_client.get.call_args.kwargs["params"]["q"] == "New York"


@pytest.mark.asyncio
async def test_run_prints_provider_error(mock_http_client, mock_settings, city_not_found_response, console, console_output):
    """Test a provider error is printed and the run still exits 0."""
    mock_settings.config_path.write_text("abc123\nAtlantis", encoding="utf-8")
    mock_http_client.get.return_value = httpx.Response(404, json=city_not_found_response)

    exit_code = await run([], mock_settings, console, client=mock_http_client)

    assert exit_code == 0
    assert console_output() == 'error: {"cod":"404","message":"city not found"}\n'


@pytest.mark.asyncio
async def test_run_transport_error_propagates(mock_http_client, mock_settings, console):
    """Test transport failures are not handled by run."""
    mock_settings.config_path.write_text("abc123\nParis", encoding="utf-8")
    mock_http_client.get.side_effect = httpx.ConnectError("Name or service not known")

    with pytest.raises(TransportException):
        await run([], mock_settings, console, client=mock_http_client)


@pytest.mark.asyncio
async def test_run_bad_payload_propagates(mock_http_client, mock_settings, console):
    """Test a malformed success body aborts the run."""
    mock_settings.config_path.write_text("abc123\nParis", encoding="utf-8")
    mock_http_client.get.return_value = httpx.Response(200, json={"name": "Paris"})

    with pytest.raises(DeserializationException):
        await run([], mock_settings, console, client=mock_http_client)


@pytest.mark.asyncio
async def test_run_config_write_failure_skips_request(mock_http_client, tmp_path, console):
    """Test no request is made when prompted credentials cannot be saved."""
    from weather_cli.config import Settings

    settings = Settings(config_path=tmp_path / "absent" / "config.txt")

    with pytest.raises(ConfigWriteException):
        await run([], settings, console, client=mock_http_client, stdin=io.StringIO("key1\nTokyo\n"))

    mock_http_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_run_does_not_close_injected_client(mock_http_client, mock_settings, mock_weather_response, console):
    """Test a caller-provided client stays open."""
    mock_settings.config_path.write_text("abc123\nParis", encoding="utf-8")
    mock_http_client.get.return_value = httpx.Response(200, json=mock_weather_response)

    await run([], mock_settings, console, client=mock_http_client)

    mock_http_client.aclose.assert_not_called()
