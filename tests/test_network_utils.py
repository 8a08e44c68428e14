import pytest
import requests

from core.exceptions import DownloadError
from utils.network_utils import build_translation_url, fetch_translation


class DummyResp:
    def __init__(self, status_code=200, content=b"", reason="OK", headers=None):
        self.status_code = status_code
        self.reason = reason
        self.headers = headers or {"Content-Type": "text/plain"}
        self.content = content
        self.encoding = None

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    @property
    def text(self):
        return self.content.decode(self.encoding or "iso-8859-1")


class DummySession:
    def __init__(self, resp=None, exc=None):
        self.resp = resp
        self.exc = exc
        self.urls = []

    def get(self, url, headers=None, timeout=None):
        self.urls.append(url)
        if self.exc:
            raise self.exc
        return self.resp


def test_translation_url_layout():
    assert (
        build_translation_url("https://example.org/", "LIVE", "translation.ini")
        == "https://example.org/translations/LIVE/translation.ini"
    )


def test_fetch_returns_body_decoded_as_utf8():
    body = "[global]\nui_Yes=Да\n"
    session = DummySession(DummyResp(content=body.encode("utf-8")))

    text = fetch_translation("https://example.org", "4.0", "translation.ini", session=session)

    assert text == body
    assert session.urls == ["https://example.org/translations/4.0/translation.ini"]


def test_http_error_status_raises_download_error():
    session = DummySession(DummyResp(status_code=404, reason="Not Found"))

    with pytest.raises(DownloadError) as exc_info:
        fetch_translation("https://example.org", "4.0", "translation.ini", session=session)

    assert exc_info.value.status_code == 404
    assert "Not Found" in str(exc_info.value)


def test_network_failure_raises_download_error():
    session = DummySession(exc=requests.ConnectionError("connection refused"))

    with pytest.raises(DownloadError):
        fetch_translation("https://example.org", "4.0", "translation.ini", session=session)


def test_missing_server_url_raises_download_error():
    session = DummySession(DummyResp(content=b"x"))

    with pytest.raises(DownloadError):
        fetch_translation("", "4.0", "translation.ini", session=session)
    assert session.urls == []
