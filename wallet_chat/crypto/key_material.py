"""钱包密钥工具：地址派生与消息签名。

私钥格式为 base58 编码的 64 字节 Ed25519 keypair（前 32 字节是 seed，
后 32 字节是公钥），与 Solana 钱包导出的格式一致。地址就是公钥的 base58 编码。
本模块全部是纯函数，不做任何 I/O。
"""

import base58
from nacl.exceptions import BadSignatureError, CryptoError
from nacl.signing import SigningKey, VerifyKey

from wallet_chat.domain.exceptions import BusinessError, InvalidKeyFormat, SigningError

SECRET_KEY_LENGTH = 64
SEED_LENGTH = 32


def _decode_secret(secret_key: str, error_cls: type[BusinessError]) -> SigningKey:
    try:
        raw = base58.b58decode(secret_key.strip())
    except ValueError as e:
        raise error_cls(code="KEY_DECODE_ERROR", message=f"secret key is not valid base58: {e}")
    if len(raw) != SECRET_KEY_LENGTH:
        raise error_cls(
            code="KEY_LENGTH_ERROR",
            message=f"secret key must be {SECRET_KEY_LENGTH} bytes, got {len(raw)}",
        )
    try:
        signing_key = SigningKey(raw[:SEED_LENGTH])
    except CryptoError as e:
        raise error_cls(code="KEY_DECODE_ERROR", message=str(e))
    # 后半段必须与 seed 推出的公钥一致，否则签名无法通过远端校验
    if bytes(signing_key.verify_key) != raw[SEED_LENGTH:]:
        raise error_cls(code="KEY_MISMATCH", message="public half of secret key does not match its seed")
    return signing_key


def derive_address(secret_key: str) -> str:
    """由私钥派生钱包地址（base58 公钥）。"""

    signing_key = _decode_secret(secret_key, InvalidKeyFormat)
    return base58.b58encode(bytes(signing_key.verify_key)).decode()


def sign(message: str, secret_key: str) -> str:
    """对消息做 Ed25519 detached 签名，返回 base58 编码的 64 字节签名。"""

    signing_key = _decode_secret(secret_key, SigningError)
    signed = signing_key.sign(message.encode("utf-8"))
    return base58.b58encode(signed.signature).decode()


def verify(message: str, signature: str, address: str) -> bool:
    """用地址对应的公钥校验签名。"""

    try:
        verify_key = VerifyKey(base58.b58decode(address))
        verify_key.verify(message.encode("utf-8"), base58.b58decode(signature))
    except (BadSignatureError, CryptoError, ValueError):
        return False
    return True
