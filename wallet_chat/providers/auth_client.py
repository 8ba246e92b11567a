"""签名登录流程。

步骤：
1. 由私钥派生钱包地址。
2. 获取一次性 challenge。
3. 用私钥对 challenge 签名。
4. POST {message, signature, key} 换取 access token 与用户名。

任一步失败都直接抛出对应的业务异常，不做重试。
"""

from typing import Any, Optional

from wallet_chat.crypto import key_material
from wallet_chat.domain.exceptions import LoginError
from wallet_chat.domain.models import Credential, Identity
from wallet_chat.providers.base import ServiceClient
from wallet_chat.providers.challenge_client import ChallengeClient


class AuthClient(ServiceClient):
    """AuthSession：把私钥换成 bearer token。"""

    error_cls = LoginError
    error_prefix = "LOGIN"

    def __init__(self, cfg, challenge_client: Optional[ChallengeClient] = None):
        super().__init__(cfg)
        self._challenge = challenge_client or ChallengeClient(cfg)

    def login(self, secret_key: str) -> Credential:
        # 地址派生在任何网络请求之前，坏私钥不会触发请求
        identity = Identity(secret_key=secret_key, address=key_material.derive_address(secret_key))
        message = self._challenge.fetch_challenge()
        signature = key_material.sign(message, identity.secret_key)

        payload = {
            "message": message,
            "signature": signature,
            "key": identity.address,
        }
        resp = self._send("POST", self._cfg.endpoints.login_url(), json=payload)
        data = self._json(resp)
        return self._parse_credential(data, identity.address, resp.text)

    @staticmethod
    def _parse_credential(data: Any, address: str, raw: str) -> Credential:
        """校验登录响应，字段缺失时直接失败而不是带着空值继续。"""

        if not isinstance(data, dict):
            raise LoginError(code="LOGIN_BAD_SCHEMA", message="login response is not a JSON object", body=raw)
        token = data.get("access_token")
        if not isinstance(token, str) or not token:
            raise LoginError(code="LOGIN_NO_TOKEN", message="login response lacks access_token", body=raw)
        user = data.get("user")
        username = user.get("username") if isinstance(user, dict) else None
        if not isinstance(username, str) or not username:
            raise LoginError(code="LOGIN_BAD_SCHEMA", message="login response lacks user.username", body=raw)
        return Credential(access_token=token, username=username, address=address)
