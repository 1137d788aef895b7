from brokenlinks.services.http_service import HttpService
from brokenlinks.exceptions import HttpFetchError
from unittest.mock import Mock
import pytest
import requests


def _session(status_code=200, text="", headers=None):
    session = Mock()
    session.request.return_value = Mock(status_code=status_code, text=text, headers=headers or {})
    return session


def test_fetch_success():
    session = _session(200, "hello world")
    http = HttpService(user_agent="TestAgent", session=session)
    response = http.fetch("http://example.com")
    assert response.status_code == 200
    assert response.text == "hello world"
    method, url = session.request.call_args.args
    assert (method, url) == ("GET", "http://example.com")
    assert session.request.call_args.kwargs["headers"] == {"User-Agent": "TestAgent"}
    assert session.request.call_args.kwargs["allow_redirects"] is True


def test_fetch_uses_default_and_override_timeout():
    session = _session()
    http = HttpService(user_agent="TestAgent", session=session, timeout=10)
    http.fetch("http://example.com")
    assert session.request.call_args.kwargs["timeout"] == 10
    http.fetch("http://example.com", timeout=2)
    assert session.request.call_args.kwargs["timeout"] == 2


def test_redirect_limit_applied_to_session():
    session = _session()
    HttpService(user_agent="TestAgent", session=session, max_redirects=3)
    assert session.max_redirects == 3


def test_fetch_wraps_requests_exception():
    session = Mock()
    session.request.side_effect = requests.exceptions.Timeout("timed out")
    http = HttpService(user_agent="TestAgent", session=session)

    with pytest.raises(HttpFetchError) as exc:
        http.fetch("http://example.com")
    assert "http://example.com" in str(exc.value)
    assert isinstance(exc.value.original, requests.exceptions.Timeout)


def test_too_many_redirects_is_a_fetch_error():
    session = Mock()
    session.request.side_effect = requests.exceptions.TooManyRedirects("Exceeded 5 redirects.")
    http = HttpService(user_agent="TestAgent", session=session)
    with pytest.raises(HttpFetchError):
        http.probe("http://example.com/loop")


def test_fetch_content_type_from_headers():
    session = _session(200, "<html>test</html>", {"Content-Type": "text/html; charset=utf-8"})
    http = HttpService(user_agent="TestAgent", session=session)
    response = http.fetch("http://example.com")
    assert response.content_type == "text/html; charset=utf-8"


def test_fetch_missing_content_type():
    session = _session(200, "data", {})
    http = HttpService(user_agent="TestAgent", session=session)
    assert http.fetch("http://example.com").content_type is None


def test_probe_streams_and_closes_without_reading_body():
    response = Mock(status_code=204, headers={})
    session = Mock()
    session.request.return_value = response
    http = HttpService(user_agent="TestAgent", session=session)

    result = http.probe("http://example.com/a", "HEAD", timeout=5)

    assert result.status_code == 204
    assert result.text == ""
    assert session.request.call_args.args == ("HEAD", "http://example.com/a")
    assert session.request.call_args.kwargs["stream"] is True
    assert session.request.call_args.kwargs["timeout"] == 5
    response.close.assert_called_once()


def test_fetch_bubbles_unexpected_exceptions():
    """Verify that non-requests exceptions from headers.get() are NOT swallowed."""
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.text = "test"
    mock_response.headers.get.side_effect = RuntimeError("Real bug in headers.get()")
    session = Mock()
    session.request.return_value = mock_response
    http = HttpService(user_agent="TestAgent", session=session)

    with pytest.raises(RuntimeError) as exc:
        http.fetch("http://example.com")
    assert "Real bug" in str(exc.value)
