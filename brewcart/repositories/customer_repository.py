"""Last-used customer details for pre-filling checkout."""
from __future__ import annotations

import logging

from brewcart.core.constants import CUSTOMER_ENTRY
from brewcart.domain.order import CustomerDetails
from brewcart.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CustomerProfileStore(BaseRepository):
    entry = CUSTOMER_ENTRY
    versioned = False

    def load(self) -> CustomerDetails | None:
        raw = self._read(default=None)
        if raw is None:
            return None
        if not isinstance(raw, dict):
            logger.warning("Stored customer profile is not a mapping; ignoring")
            return None
        return CustomerDetails.from_dict(raw)

    def save(self, customer: CustomerDetails) -> bool:
        return self._write(customer.to_dict())
