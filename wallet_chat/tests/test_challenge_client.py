import httpx
import pytest

from fakes import CHALLENGE_PATH, Resp
from wallet_chat.domain.exceptions import ChallengeFetchError
from wallet_chat.providers.challenge_client import ChallengeClient, extract_challenge


@pytest.mark.parametrize(
    "body,expected",
    [
        ({"data": "from-data", "message": "from-message"}, "from-data"),
        ({"data": "", "message": "from-message"}, "from-message"),
        ({"message": "from-message"}, "from-message"),
        ("plain challenge", "plain challenge"),
        ({"status": "ok"}, None),
        (42, None),
        ([1, 2], None),
    ],
)
def test_extract_challenge_priority(body, expected):
    assert extract_challenge(body) == expected


def test_fetch_challenge_sends_unauthenticated_get(cfg, fake_http):
    fake_http.on(CHALLENGE_PATH, Resp(200, {"data": "nonce-1"}))
    assert ChallengeClient(cfg).fetch_challenge() == "nonce-1"
    call = fake_http.calls_to(CHALLENGE_PATH)[0]
    assert call["method"] == "GET"
    assert "Authorization" not in call["headers"]
    assert call["headers"]["origin"] == "https://build.assisterr.ai"


def test_fetch_challenge_http_500(cfg, fake_http):
    fake_http.on(CHALLENGE_PATH, Resp(500, text="boom"))
    with pytest.raises(ChallengeFetchError) as exc:
        ChallengeClient(cfg).fetch_challenge()
    assert exc.value.http_status == 500
    assert exc.value.body == "boom"


def test_fetch_challenge_invalid_json(cfg, fake_http):
    fake_http.on(CHALLENGE_PATH, Resp(200, text="<html>"))
    with pytest.raises(ChallengeFetchError) as exc:
        ChallengeClient(cfg).fetch_challenge()
    assert exc.value.code == "CHALLENGE_INVALID_JSON"


def test_fetch_challenge_unusable_shape(cfg, fake_http):
    fake_http.on(CHALLENGE_PATH, Resp(200, {"status": "ok"}))
    with pytest.raises(ChallengeFetchError) as exc:
        ChallengeClient(cfg).fetch_challenge()
    assert exc.value.code == "CHALLENGE_UNPARSEABLE"


def test_fetch_challenge_timeout(cfg, fake_http):
    fake_http.on(CHALLENGE_PATH, httpx.ReadTimeout("slow"))
    with pytest.raises(ChallengeFetchError) as exc:
        ChallengeClient(cfg).fetch_challenge()
    assert exc.value.code == "CHALLENGE_TIMEOUT"
    assert exc.value.http_status is None
