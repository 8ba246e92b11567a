"""远端服务端点配置。

把“服务地址”与“具体路径”解耦：base_url 来自配置，路径模板集中在这里，
上层客户端只通过 ServiceConfig 拼接 URL，便于测试时指向 mock 服务。"""

from dataclasses import dataclass
from typing import Mapping
from urllib.parse import quote


@dataclass(frozen=True)
class EndpointPaths:
    """认证与聊天接口的路径模板。"""

    get_message: str = "/incentive/auth/login/get_message/"
    login: str = "/incentive/auth/login/"
    create_session: str = "/incentive/slm/{model_id}/chat/create_session/"
    query: str = "/incentive/slm/{model_id}/chat/{session_id}/"


@dataclass(frozen=True)
class ServiceConfig:
    """某个远端服务的整体配置。"""

    name: str
    base_url: str
    paths: EndpointPaths = EndpointPaths()

    def challenge_url(self) -> str:
        return f"{self.base_url}{self.paths.get_message}"

    def login_url(self) -> str:
        return f"{self.base_url}{self.paths.login}"

    def create_session_url(self, model_id: str) -> str:
        return self.base_url + self.paths.create_session.format(model_id=model_id)

    def query_url(self, model_id: str, session_id: str) -> str:
        # 会话 ID 来自服务端响应，作为单个路径段编码，含 / 或 ? 时不会改变目标接口
        return self.base_url + self.paths.query.format(model_id=model_id, session_id=quote(session_id, safe=""))


ASSISTERR_CONFIG = ServiceConfig(name="assisterr", base_url="https://api.assisterr.ai")


SERVICE_REGISTRY: Mapping[str, ServiceConfig] = {
    "assisterr": ASSISTERR_CONFIG,
}


def get_service_config(name: str, base_url: str | None = None) -> ServiceConfig:
    """根据名称获取 ServiceConfig，名称不区分大小写；base_url 可覆盖默认地址。"""

    key = name.lower()
    for k, cfg in SERVICE_REGISTRY.items():
        if k.lower() == key:
            if base_url:
                return ServiceConfig(name=cfg.name, base_url=base_url.rstrip("/"), paths=cfg.paths)
            return cfg
    raise KeyError(f"Unknown service: {name!r}")
