"""随机查询文本生成。"""

import random
import string
from typing import Optional

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
MIN_LENGTH = 5
MAX_LENGTH = 14


def generate_random_query(rng: Optional[random.Random] = None) -> str:
    """长度在 [5, 14] 内均匀取值，每个字符独立均匀地取自 62 个字母数字。"""

    rng = rng or random
    length = rng.randint(MIN_LENGTH, MAX_LENGTH)
    return "".join(rng.choice(ALPHABET) for _ in range(length))
