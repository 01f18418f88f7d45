"""
Persistence for orders.

Orders are append‑only documents.  The client's fields are stored
verbatim as JSON; ``createdAt`` and ``status`` are assigned here and
take precedence over client keys of the same name.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

from ..core.db import Database

logger = logging.getLogger(__name__)

CONFIRMED = "confirmed"


class OrderStore:
    def __init__(self, database: Database):
        self.database = database

    def insert(self, payload: Mapping[str, Any]) -> str:
        """Store an order document and return its new id."""
        order_id = uuid.uuid4().hex
        created_at = datetime.now(timezone.utc).isoformat()
        document = dict(payload)
        document["createdAt"] = created_at
        document["status"] = CONFIRMED
        with self.database.cursor() as cursor:
            cursor.execute(
                "INSERT INTO orders (id, payload, status, created_at) VALUES (?, ?, ?, ?)",
                (order_id, json.dumps(document, default=str), CONFIRMED, created_at),
            )
        logger.info("Order saved: %s", order_id)
        return order_id
