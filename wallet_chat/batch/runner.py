"""Batch entry point: login, open a session and drive queries for every key."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from wallet_chat.domain.exceptions import BusinessError
from wallet_chat.domain.models import BatchReport, IdentityOutcome, Stage
from wallet_chat.infrastructure.logging.logger import logger, mask_key
from wallet_chat.providers import AuthClient, ChatClient, create_clients

from .config import BatchConfig
from .key_loader import load_private_keys


class BatchRunner:
    """按输入顺序逐个处理私钥。

    单个私钥在任意阶段失败都会被记录并跳过，整批任务不会因此中断；
    只有私钥列表本身无法加载时才会整体失败（见 run_from_file）。
    """

    def __init__(
        self,
        config: BatchConfig,
        *,
        auth_client: Optional[AuthClient] = None,
        chat_client: Optional[ChatClient] = None,
    ):
        self.config = config
        default_auth, default_chat = create_clients(config)
        self._auth = auth_client or default_auth
        self._chat = chat_client or default_chat

    def run_from_file(self, path: str | Path) -> BatchReport:
        """加载私钥文件后执行；KeyListLoadError 向上抛出。"""

        keys = load_private_keys(path)
        self._log(logging.INFO, "Loaded private keys", path=str(path), count=len(keys))
        return self.run(keys)

    def run(self, secret_keys: Iterable[str]) -> BatchReport:
        report = BatchReport()
        for index, secret_key in enumerate(secret_keys):
            report.outcomes.append(self._process(index, secret_key))
        self._log(
            logging.INFO,
            "Batch finished",
            total=len(report.outcomes),
            succeeded=report.succeeded,
            failed=report.failed,
        )
        return report

    def _process(self, index: int, secret_key: str) -> IdentityOutcome:
        shown_key = mask_key(secret_key)
        self._log(logging.INFO, f"Processing private key: {shown_key}", key_index=index)
        stage: Stage = "login"
        username: Optional[str] = None
        try:
            credential = self._auth.login(secret_key)
            username = credential.username
            self._log(logging.INFO, "Logged in", key_index=index, username=username, address=credential.address)

            stage = "create_session"
            handle = self._chat.create_session(credential.access_token)
            self._log(logging.INFO, "Session created", key_index=index, username=username, session_id=handle)

            stage = "queries"
            results = self._chat.run_queries(
                handle,
                credential.access_token,
                username,
                count=self.config.query_count_clamped,
            )
        except BusinessError as exc:
            self._log(
                logging.ERROR,
                f"Error processing private key {shown_key}: {exc.message}",
                key_index=index,
                stage=stage,
                **exc.to_log(),
            )
            return IdentityOutcome(key_index=index, stage=stage, username=username, error=exc.message)
        except Exception as exc:  # noqa: BLE001 - 未预期的错误同样只影响当前私钥
            logger.exception(
                f"Unexpected error processing private key {shown_key}",
                extra={"extra": {"key_index": index, "stage": stage}},
            )
            return IdentityOutcome(key_index=index, stage=stage, username=username, error=str(exc))

        failed = sum(1 for r in results if not r.ok)
        self._log(
            logging.INFO,
            "Queries finished",
            key_index=index,
            username=username,
            total=len(results),
            failed=failed,
        )
        return IdentityOutcome(key_index=index, stage="done", username=username, results=results)

    @staticmethod
    def _log(level: int, message: str, **fields: Any) -> None:
        payload: Dict[str, Any] = dict(fields)
        logger.log(level, message, extra={"extra": payload})


def run_batch(
    keys_file: Optional[str | Path] = None,
    config: Optional[BatchConfig] = None,
) -> BatchReport:
    """便捷入口：按全局配置构造 BatchRunner 并处理私钥文件。"""

    from wallet_chat.config.settings import settings

    runner = BatchRunner(config or BatchConfig.from_settings(settings))
    return runner.run_from_file(keys_file or settings.keys_file)
