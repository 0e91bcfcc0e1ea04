import logging
from typing import List

from adapters.base import BaseAdapter, RawInput
from bsense_core.models import RawRecord

log = logging.getLogger(__name__)


class UnsupportedAdapter(BaseAdapter):
    """Placeholder for formats with no real parser yet (PDF): always empty."""

    trusts_category_column = False

    def __init__(self, name: str = "pdf"):
        self.name = name

    def read_records(self, raw: RawInput) -> List[RawRecord]:
        log.info("%s parsing not implemented; returning no transactions", self.name)
        return []
