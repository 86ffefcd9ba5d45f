"""HTTP client behavior against mocked transports."""

import httpx
import pytest

from wolfram_answers.client import AsyncWolframClient, WolframClient
from wolfram_answers.config import FrozenConfig
from wolfram_answers.constants import FULL_RESULTS_URL, SPOKEN_RESULTS_URL
from wolfram_answers.exceptions import (
    InvalidFormatError,
    MissingKeyError,
    NetworkError,
)

CFG = FrozenConfig(app_id="TEST-APPID", timeout=5.0)


class RecordingHandler:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def ok_handler(speed_of_light_json):
    return RecordingHandler(httpx.Response(200, content=speed_of_light_json))


@pytest.mark.unit
class TestWolframClient:
    def test_query_sends_full_results_params(self, ok_handler):
        with WolframClient(CFG, transport=httpx.MockTransport(ok_handler)) as client:
            client.query("speed of light")

        request = ok_handler.last
        assert str(request.url).startswith(FULL_RESULTS_URL)
        assert request.url.params["input"] == "speed of light"
        assert request.url.params["format"] == "plaintext"
        assert request.url.params["output"] == "JSON"
        assert request.url.params["appid"] == "TEST-APPID"

    def test_query_decodes_document(self, ok_handler):
        with WolframClient(CFG, transport=httpx.MockTransport(ok_handler)) as client:
            document = client.query("speed of light")

        assert document.query_result is not None
        assert document.query_result.num_sections == 3

    def test_query_json_returns_raw_body(self, ok_handler, speed_of_light_json):
        with WolframClient(CFG, transport=httpx.MockTransport(ok_handler)) as client:
            assert client.query_json("speed of light") == speed_of_light_json

    def test_spoken_query(self):
        handler = RecordingHandler(
            httpx.Response(200, text="The speed of light is 299792458 meters per second")
        )
        with WolframClient(CFG, transport=httpx.MockTransport(handler)) as client:
            spoken = client.query_spoken("speed of light")

        assert spoken == "The speed of light is 299792458 meters per second"
        assert str(handler.last.url).startswith(SPOKEN_RESULTS_URL)
        assert handler.last.url.params["i"] == "speed of light"
        assert handler.last.url.params["appid"] == "TEST-APPID"

    def test_missing_app_id_fails_before_any_request(self, ok_handler):
        client = WolframClient(FrozenConfig(), transport=httpx.MockTransport(ok_handler))
        with client, pytest.raises(MissingKeyError):
            client.query("speed of light")
        assert ok_handler.requests == []

    def test_http_status_error(self):
        handler = RecordingHandler(httpx.Response(500, text="boom"))
        with WolframClient(CFG, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError, match="500"):
                client.query("speed of light")

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with WolframClient(CFG, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError, match="Failed to fetch"):
                client.query_spoken("speed of light")

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with WolframClient(CFG, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError, match="timeout"):
                client.query("speed of light")

    def test_invalid_json_body(self):
        handler = RecordingHandler(httpx.Response(200, text="<html>not json</html>"))
        with WolframClient(CFG, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(InvalidFormatError):
                client.query_json("speed of light")

    def test_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("WOLFRAM_APP_ID", "ENV-APPID")
        monkeypatch.setenv("WOLFRAM_TIMEOUT", "12")
        with WolframClient() as client:
            assert client.config.app_id == "ENV-APPID"
            assert client.config.timeout == 12.0


@pytest.mark.unit
class TestAsyncWolframClient:
    @pytest.mark.asyncio
    async def test_query(self, ok_handler):
        transport = httpx.MockTransport(ok_handler)
        async with AsyncWolframClient(CFG, transport=transport) as client:
            document = await client.query("speed of light")

        assert document.remove_input_interpretation().get_answer() == "299792458 m/s"
        assert ok_handler.last.url.params["input"] == "speed of light"

    @pytest.mark.asyncio
    async def test_spoken_query(self):
        handler = RecordingHandler(httpx.Response(200, text="About 384400 kilometers"))
        transport = httpx.MockTransport(handler)
        async with AsyncWolframClient(CFG, transport=transport) as client:
            assert await client.query_spoken("distance to the moon") == (
                "About 384400 kilometers"
            )

    @pytest.mark.asyncio
    async def test_failures_propagate(self):
        """Errors are raised, never replaced with an empty result"""
        handler = RecordingHandler(httpx.Response(503))
        transport = httpx.MockTransport(handler)
        async with AsyncWolframClient(CFG, transport=transport) as client:
            with pytest.raises(NetworkError, match="503"):
                await client.query("speed of light")

    @pytest.mark.asyncio
    async def test_missing_app_id(self):
        async with AsyncWolframClient(FrozenConfig()) as client:
            with pytest.raises(MissingKeyError):
                await client.query_json("speed of light")
