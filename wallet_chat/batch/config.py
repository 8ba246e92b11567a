"""Run-scoped configuration models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from wallet_chat.providers.registry import ServiceConfig, get_service_config

MAX_QUERY_COUNT = 100


@dataclass
class BatchConfig:
    """Explicit settings for one batch run, passed into the runner and clients.

    Attributes:
        base_url: 认证与聊天 API 的根地址。
        model_id: 聊天所用的 SLM 模型 ID。
        query_count: 每个钱包发送的随机查询次数（1..100）。
        http_timeout: 单次请求的超时时间（秒）。
        opening_query: 创建会话时发送的开场内容。
        web_origin: 请求头 origin/referer。
        user_agent: 请求头 user-agent；为空时不发送。
        service: 服务名，用于从 registry 取路径模板。
    """

    base_url: str = "https://api.assisterr.ai"
    model_id: str = "emu_otori"
    query_count: int = 10
    http_timeout: float = 30.0
    opening_query: str = "halo"
    web_origin: str = "https://build.assisterr.ai"
    user_agent: Optional[str] = None
    service: str = "assisterr"

    def __post_init__(self) -> None:
        if self.query_count < 1:
            self.query_count = 1
        self.base_url = self.base_url.rstrip("/")
        self.web_origin = self.web_origin.rstrip("/")

    @property
    def query_count_clamped(self) -> int:
        return min(self.query_count, MAX_QUERY_COUNT)

    @property
    def endpoints(self) -> ServiceConfig:
        return get_service_config(self.service, base_url=self.base_url)

    def browser_headers(self) -> Dict[str, str]:
        """伪装成前端站点发出的请求头。"""

        headers = {
            "accept": "application/json, text/plain, */*",
            "origin": self.web_origin,
            "referer": f"{self.web_origin}/",
        }
        if self.user_agent:
            headers["user-agent"] = self.user_agent
        return headers

    @classmethod
    def from_settings(cls, cfg=None, **overrides) -> "BatchConfig":
        """从全局 Settings 构造；overrides 中非 None 的值优先。"""

        if cfg is None:
            from wallet_chat.config.settings import settings as cfg

        values = {
            "base_url": cfg.api_base_url,
            "model_id": cfg.slm_model_id,
            "query_count": cfg.query_count,
            "http_timeout": cfg.http_timeout,
            "opening_query": cfg.opening_query,
            "web_origin": cfg.web_origin,
            "user_agent": cfg.user_agent,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
