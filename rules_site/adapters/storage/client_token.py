"""Per-browser client token, generated once and persisted."""

from __future__ import annotations

import logging

from rules_site.application.ports.key_value_storage import KeyValueStorage
from rules_site.domain.policies.client_identity import generate_client_token

logger = logging.getLogger(__name__)

CLIENT_ID_KEY = "clientId"


class ClientTokenProvider:
    def __init__(self, storage: KeyValueStorage, key: str = CLIENT_ID_KEY):
        self._storage = storage
        self._key = key

    def get_client_id(self) -> str:
        client_id = self._storage.get_item(self._key)
        if not client_id:
            client_id = generate_client_token()
            self._storage.set_item(self._key, client_id)
            logger.info("Generated new client token %s", client_id)
        return client_id
