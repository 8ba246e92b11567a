"""登录 challenge 获取。

get_message 接口的响应格式并不固定：有时消息放在 data 字段，
有时放在 message 字段，有时整个 JSON 就是消息字符串。这里把这些
可能性建模为按顺序尝试的提取策略，取第一个命中的结果。

整个响应体只有在本身是非空 JSON 字符串时才作为消息；对象、数组、数字
等非字符串响应体一律拒绝（CHALLENGE_UNPARSEABLE），不做序列化兜底。
"""

from typing import Any, Callable, List, Optional, Tuple

from wallet_chat.domain.exceptions import ChallengeFetchError
from wallet_chat.providers.base import ServiceClient


def _field(name: str) -> Callable[[Any], Optional[str]]:
    def extract(body: Any) -> Optional[str]:
        if isinstance(body, dict):
            value = body.get(name)
            if isinstance(value, str) and value:
                return value
        return None

    return extract


def _whole_body(body: Any) -> Optional[str]:
    if isinstance(body, str) and body:
        return body
    return None


# 优先级顺序：data 字段 > message 字段 > 整个响应体
EXTRACTION_STRATEGIES: List[Tuple[str, Callable[[Any], Optional[str]]]] = [
    ("data", _field("data")),
    ("message", _field("message")),
    ("body", _whole_body),
]


def extract_challenge(body: Any) -> Optional[str]:
    for _name, strategy in EXTRACTION_STRATEGIES:
        message = strategy(body)
        if message is not None:
            return message
    return None


class ChallengeClient(ServiceClient):
    """无需认证，获取一次性的登录 challenge。"""

    error_cls = ChallengeFetchError
    error_prefix = "CHALLENGE"

    def fetch_challenge(self) -> str:
        resp = self._send("GET", self._cfg.endpoints.challenge_url())
        body = self._json(resp)
        message = extract_challenge(body)
        if message is None:
            raise ChallengeFetchError(
                code="CHALLENGE_UNPARSEABLE",
                message="challenge response carries no message string",
                http_status=resp.status_code,
                body=resp.text,
            )
        return message
