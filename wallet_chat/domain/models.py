"""批处理流程中流转的数据模型。

- Identity: 一个钱包私钥及其派生地址。
- Credential: 登录成功后得到的 bearer token 与账户名。
- QueryResult: 单次聊天查询的结果（响应或错误）。
- IdentityOutcome / BatchReport: 仅用于汇报的内存结构，不落盘。
"""

from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional


# 单个钱包处理流程的阶段名，用于日志与汇报
Stage = Literal["login", "create_session", "queries", "done"]


@dataclass
class Identity:
    """一个待处理的钱包身份。

    secret_key 为 base58 编码的 64 字节 Ed25519 私钥，不出现在 repr 中。
    """

    secret_key: str = field(repr=False)
    address: str


@dataclass
class Credential:
    """登录成功后的凭证，只在当前钱包的处理周期内有效。"""

    access_token: str = field(repr=False)
    username: str
    address: str


@dataclass
class QueryResult:
    """一次查询的结果：response 与 error 二选一。"""

    index: int
    query: str
    response: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class IdentityOutcome:
    """单个钱包的处理结果。

    - key_index: 私钥在输入列表中的位置（从 0 开始）。
    - stage: 失败时停留的阶段；成功时为 "done"。
    """

    key_index: int
    stage: Stage
    username: Optional[str] = None
    error: Optional[str] = None
    results: List[QueryResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    outcomes: List[IdentityOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)
