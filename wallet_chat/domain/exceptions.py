"""统一业务异常模型。

登录/会话流程中每个阶段抛出的错误都继承自 BusinessError，
BatchRunner 在单个钱包的边界统一捕获，保证一个钱包失败不影响整批任务。
"""

from typing import Optional


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "CHALLENGE_HTTP_ERROR"）。
        message: 用户可读错误信息。
        http_status: 远端服务返回的 HTTP 状态码；网络层失败时为 None。
        extra: 其他补充字段（例如 body、stage 等）。
    """

    def __init__(self, code: str, message: str, http_status: Optional[int] = None, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)

    @property
    def body(self) -> Optional[str]:
        return self.extra.get("body")

    def to_log(self) -> dict:
        """日志用的扁平字典，body 截断以免刷屏。"""

        payload = {"code": self.code, "error": self.message}
        if self.http_status is not None:
            payload["http_status"] = self.http_status
        if self.body:
            payload["body"] = self.body[:300]
        return payload


class InvalidKeyFormat(BusinessError):
    """私钥无法 base58 解码或长度/内容不合法。"""


class SigningError(BusinessError):
    """签名失败（密钥材料损坏）。"""


class ChallengeFetchError(BusinessError):
    """获取登录 challenge 失败：网络错误、非 2xx 或响应体无法解析。"""


class LoginError(BusinessError):
    """签名换取 access token 失败。"""


class SessionCreateError(BusinessError):
    """创建聊天会话失败。"""


class QueryError(BusinessError):
    """单次聊天查询失败，只影响当前这一轮查询。"""


class KeyListLoadError(BusinessError):
    """私钥列表文件无法读取，整个批次直接失败。"""
