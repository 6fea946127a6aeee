"""密码哈希工具，用户写入存储前只做一次bcrypt哈希"""

import bcrypt

# bcrypt 只使用前 72 字节
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    """对明文密码加盐哈希，返回可直接入库的字符串"""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """登录等凭据校验场景使用，与 get_credential_by_email 取回的哈希比对，哈希格式非法时视为不匹配"""
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False
