"""wallet_chat 顶层包。

对一批 Ed25519 钱包私钥逐个执行：签名登录 -> 创建聊天会话 -> 随机查询，
单个钱包失败只记录日志并跳过，不影响整批任务。
"""

from wallet_chat.batch import BatchConfig, BatchRunner, run_batch

__all__ = ["BatchConfig", "BatchRunner", "run_batch"]
