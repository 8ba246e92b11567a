"""聊天会话客户端。

- create_session: 用 bearer token 创建会话，返回会话 ID。
- run_queries: 在同一会话内顺序发送 count 条随机查询，
  单条失败只记录日志，不影响后续查询。
"""

from typing import Any, Callable, List, Optional

import httpx

from wallet_chat.domain.exceptions import QueryError, SessionCreateError
from wallet_chat.domain.models import QueryResult
from wallet_chat.infrastructure.logging.logger import logger
from wallet_chat.providers.base import ServiceClient
from wallet_chat.providers.query_text import generate_random_query

# 会话接口返回对象时依次尝试的字段
SESSION_ID_FIELDS = ("session_id", "id", "data")


def _reply_payload(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class ChatClient(ServiceClient):
    """ChatSession：创建会话并驱动查询循环。"""

    error_cls = SessionCreateError
    error_prefix = "SESSION"

    def __init__(self, cfg, query_factory: Optional[Callable[[], str]] = None):
        super().__init__(cfg)
        self._query_factory = query_factory or generate_random_query

    def create_session(self, token: str) -> str:
        url = self._cfg.endpoints.create_session_url(self._cfg.model_id)
        resp = self._send("POST", url, json={"query": self._cfg.opening_query}, token=token)
        handle = self._parse_session_id(resp)
        if not handle:
            raise SessionCreateError(
                code="SESSION_BAD_SCHEMA",
                message="create_session response carries no session id",
                http_status=resp.status_code,
                body=resp.text,
            )
        return handle

    @staticmethod
    def _parse_session_id(resp: httpx.Response) -> Optional[str]:
        try:
            body = resp.json()
        except ValueError:
            return resp.text.strip() or None
        if isinstance(body, (str, int)) and not isinstance(body, bool):
            return str(body) or None
        if isinstance(body, dict):
            for name in SESSION_ID_FIELDS:
                value = body.get(name)
                if isinstance(value, (str, int)) and not isinstance(value, bool) and str(value):
                    return str(value)
        return None

    def query(self, handle: str, token: str, text: str) -> Any:
        """发送单条查询，失败抛出 QueryError。"""

        url = self._cfg.endpoints.query_url(self._cfg.model_id, handle)
        resp = self._send(
            "POST",
            url,
            json={"query": text},
            token=token,
            error_cls=QueryError,
            error_prefix="QUERY",
        )
        return _reply_payload(resp)

    def run_queries(self, handle: str, token: str, username: str, count: int = 10) -> List[QueryResult]:
        results: List[QueryResult] = []
        for i in range(count):
            text = self._query_factory()
            try:
                reply = self.query(handle, token, text)
            except QueryError as e:
                results.append(QueryResult(index=i, query=text, error=e.message))
                logger.error(
                    f'Error with query "{text}"',
                    extra={"extra": {"username": username, "index": i, "query": text, **e.to_log()}},
                )
                continue
            results.append(QueryResult(index=i, query=text, response=reply))
            logger.info(
                f'Response for query {i} "{text}"',
                extra={"extra": {"username": username, "index": i, "query": text, "response": reply}},
            )
        return results
