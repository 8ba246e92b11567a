"""远端服务集成层。

该包下的模块负责：
- 维护服务端点配置 (registry)。
- 公共 HTTP 请求与错误映射 (base)。
- challenge 获取、签名登录、聊天会话的具体客户端。
"""

from typing import Tuple

from wallet_chat.providers.auth_client import AuthClient
from wallet_chat.providers.challenge_client import ChallengeClient
from wallet_chat.providers.chat_client import ChatClient


def create_clients(cfg) -> Tuple[AuthClient, ChatClient]:
    """根据 BatchConfig 创建登录与聊天客户端。"""

    return AuthClient(cfg, ChallengeClient(cfg)), ChatClient(cfg)


__all__ = ["AuthClient", "ChallengeClient", "ChatClient", "create_clients"]
