import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from wallet_chat.config.settings import settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if settings.log_redact_content:
            msg = (msg or "")[:64]
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "name": record.name,
            "msg": msg,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """控制台输出：时间 + 级别 + 消息 + key=value 形式的结构化字段。"""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = f"[{ts}] {record.levelname:<7} {record.getMessage()}"
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict) and extra:
            fields = " ".join(f"{k}={_short(v)}" for k, v in extra.items())
            line = f"{line} | {fields}"
        return line


def _short(value, limit: int = 200) -> str:
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False, default=str)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def setup_logger() -> logging.Logger:
    logger = logging.getLogger("wallet_chat")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        # 重复导入时不再追加 handler
        return logger
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_dir / "wallet_chat.log", encoding="utf-8")
    fh.setLevel(logging.INFO)
    fh.setFormatter(JsonFormatter())
    logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(ConsoleFormatter())
    logger.addHandler(ch)
    return logger


def mask_key(secret_key: str) -> str:
    """日志中展示私钥：开启脱敏时只保留首尾各 4 位。"""

    if not settings.log_redact_content:
        return secret_key
    if len(secret_key) <= 8:
        return "*" * len(secret_key)
    return f"{secret_key[:4]}...{secret_key[-4:]}"


logger = setup_logger()
