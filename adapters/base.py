from abc import ABC, abstractmethod
from typing import List, Union

from bsense_core.models import RawRecord

RawInput = Union[str, bytes, bytearray]


class BaseAdapter(ABC):
    """Turn one tabular export format into raw key -> value records."""

    #: format tag used in logs
    name: str = "base"
    #: take an explicit category column at face value instead of running rules
    trusts_category_column: bool = False

    @abstractmethod
    def read_records(self, raw: RawInput) -> List[RawRecord]: ...


def decode_text(raw: RawInput) -> str:
    """Bytes as UTF-8 (BOM stripped, bad bytes replaced); str passes through."""
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8-sig", errors="replace")
    return raw.lstrip("\ufeff")
