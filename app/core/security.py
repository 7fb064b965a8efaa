import hashlib
from typing import Optional, Sequence


def compute_checksum(ordered_fields: Sequence[str], secret: str) -> str:
    """MD5 over the fields joined with no separator, secret appended last."""
    source = "".join(ordered_fields) + secret
    return hashlib.md5(source.encode("utf-8")).hexdigest()


def verify_checksum(ordered_fields: Sequence[str], secret: str, candidate: Optional[str]) -> bool:
    if not candidate:
        return False
    return compute_checksum(ordered_fields, secret) == candidate
