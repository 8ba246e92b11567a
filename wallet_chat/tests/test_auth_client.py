import httpx
import pytest

from fakes import CHALLENGE_PATH, LOGIN_PATH, Resp, login_ok, make_secret_key
from wallet_chat.crypto import key_material
from wallet_chat.crypto.key_material import derive_address, verify
from wallet_chat.domain.exceptions import ChallengeFetchError, InvalidKeyFormat, LoginError
from wallet_chat.domain.models import Identity
from wallet_chat.providers.auth_client import AuthClient


def test_login_flow(cfg, fake_http, secret_key):
    fake_http.on(CHALLENGE_PATH, Resp(200, {"message": "Sign this: abc"})).on(LOGIN_PATH, login_ok)
    cred = AuthClient(cfg).login(secret_key)

    assert cred.access_token == "tok-123"
    assert cred.username == "alice"
    assert cred.address == derive_address(secret_key)
    assert "tok-123" not in repr(cred)

    payload = fake_http.calls_to(LOGIN_PATH)[0]["json"]
    assert set(payload) == {"message", "signature", "key"}
    assert payload["message"] == "Sign this: abc"
    assert payload["key"] == cred.address
    assert verify(payload["message"], payload["signature"], payload["key"])


def test_login_challenge_500_skips_signing(cfg, fake_http, secret_key, monkeypatch):
    fake_http.on(CHALLENGE_PATH, Resp(500, text="server down"))

    def fail_sign(*a, **kw):
        raise AssertionError("sign should not be called")

    monkeypatch.setattr(key_material, "sign", fail_sign)
    with pytest.raises(ChallengeFetchError) as exc:
        AuthClient(cfg).login(secret_key)
    assert exc.value.http_status == 500
    assert not fake_http.calls_to(LOGIN_PATH)


def test_login_bad_key_makes_no_request(cfg, fake_http):
    with pytest.raises(InvalidKeyFormat):
        AuthClient(cfg).login("definitely-not-a-key")
    assert fake_http.calls == []


@pytest.mark.parametrize(
    "resp,code",
    [
        (Resp(401, {"detail": "bad signature"}), "LOGIN_HTTP_ERROR"),
        (Resp(200, text="not json"), "LOGIN_INVALID_JSON"),
        (Resp(200, {"user": {"username": "alice"}}), "LOGIN_NO_TOKEN"),
        (Resp(200, {"access_token": "", "user": {"username": "alice"}}), "LOGIN_NO_TOKEN"),
        (Resp(200, {"access_token": "t"}), "LOGIN_BAD_SCHEMA"),
        (Resp(200, ["t"]), "LOGIN_BAD_SCHEMA"),
    ],
)
def test_login_failures(cfg, fake_http, secret_key, resp, code):
    fake_http.on(CHALLENGE_PATH, Resp(200, {"data": "nonce"})).on(LOGIN_PATH, resp)
    with pytest.raises(LoginError) as exc:
        AuthClient(cfg).login(secret_key)
    assert exc.value.code == code


def test_login_network_error(cfg, fake_http, secret_key):
    fake_http.on(CHALLENGE_PATH, Resp(200, {"data": "nonce"})).on(LOGIN_PATH, httpx.ConnectError("refused"))
    with pytest.raises(LoginError) as exc:
        AuthClient(cfg).login(secret_key)
    assert exc.value.code == "LOGIN_NETWORK_ERROR"


def test_login_derives_address_per_key(cfg, fake_http):
    fake_http.on(CHALLENGE_PATH, Resp(200, {"data": "nonce"})).on(LOGIN_PATH, login_ok)
    client = AuthClient(cfg)
    first, second = make_secret_key(b"\x03" * 32), make_secret_key(b"\x04" * 32)

    addresses = [client.login(k).address for k in (first, second, first)]

    assert addresses == [derive_address(first), derive_address(second), derive_address(first)]
    assert [c["json"]["key"] for c in fake_http.calls_to(LOGIN_PATH)] == addresses


def test_identity_repr_hides_secret(secret_key):
    identity = Identity(secret_key=secret_key, address=derive_address(secret_key))
    assert secret_key not in repr(identity)
    assert identity.address in repr(identity)
