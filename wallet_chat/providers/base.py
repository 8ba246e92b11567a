"""HTTP 客户端公共部分。

三个客户端（challenge / auth / chat）共享同一套请求方式：
- 每次调用打开一个独立的 httpx.Client，超时取自 BatchConfig。
- 网络层异常（DNS、连接失败、超时）统一转换成调用方指定的业务异常。
- 非 2xx 响应同样转换成该业务异常，并携带状态码和响应体。
"""

from typing import Any, Dict, Optional

import httpx

from wallet_chat.domain.exceptions import BusinessError


class ServiceClient:
    """认证/聊天客户端基类。

    子类通过 error_cls 指定本阶段失败时抛出的异常类型。
    """

    error_cls: type[BusinessError] = BusinessError
    error_prefix: str = "HTTP"

    def __init__(self, cfg):
        # cfg 一般是 BatchConfig，包含 base_url、超时、请求头等
        self._cfg = cfg

    def _headers(self, token: Optional[str] = None, *, json_body: bool = False) -> Dict[str, str]:
        headers = self._cfg.browser_headers()
        if json_body:
            headers["content-type"] = "application/json"
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
        error_cls: Optional[type[BusinessError]] = None,
        error_prefix: Optional[str] = None,
    ) -> httpx.Response:
        """发送请求并检查状态码，失败时抛出 error_cls（默认取类属性）。"""

        error_cls = error_cls or self.error_cls
        prefix = error_prefix or self.error_prefix
        try:
            with httpx.Client(timeout=self._cfg.http_timeout, trust_env=False) as client:
                if method == "GET":
                    resp = client.get(url, headers=self._headers(token))
                else:
                    resp = client.post(url, json=json, headers=self._headers(token, json_body=True))
        except httpx.TimeoutException as e:
            raise error_cls(code=f"{prefix}_TIMEOUT", message=f"request to {url} timed out: {e}")
        except httpx.RequestError as e:
            raise error_cls(code=f"{prefix}_NETWORK_ERROR", message=str(e))
        if resp.status_code < 200 or resp.status_code >= 300:
            raise error_cls(
                code=f"{prefix}_HTTP_ERROR",
                message=f"HTTP error! status: {resp.status_code} - {resp.text[:200]}",
                http_status=resp.status_code,
                body=resp.text,
            )
        return resp

    def _json(self, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise self.error_cls(
                code=f"{self.error_prefix}_INVALID_JSON",
                message=f"response is not valid JSON: {e}",
                http_status=resp.status_code,
                body=resp.text,
            )
