"""Order record persistence client.

Ships finished order records to the records endpoint over HTTP. Storage
is best-effort record keeping: failures are logged and swallowed, never
reported back to the submission.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..domain.exceptions import PersistenceError
from ..domain.orders.models import OrderRecord
from ..infrastructure.config.models import PersistenceConfig
from .interfaces import OrderRecordStoreInterface

logger = logging.getLogger(__name__)


class OrderRecordClient(OrderRecordStoreInterface):
    """HTTP client for the "create order record" endpoint.

    Parameters
    ----------
    config : PersistenceConfig
        Endpoint URL and request timeout
    client : Optional[httpx.AsyncClient]
        Shared client to send requests with. When omitted a short-lived
        client is opened for every save.

    Attributes
    ----------
    saved_count : int
        Records acknowledged by the endpoint
    failed_count : int
        Records whose storage failed

    Notes
    -----
    The request body is the flat record JSON::

        {"id": str, "order": SignedOrder,
         "offers": [Item, ...], "considerations": [Item, ...]}

    Any 2xx response with a JSON body counts as acknowledged unless the
    body explicitly reports ``"success": false``.

    Examples
    --------
    >>> client = OrderRecordClient(PersistenceConfig())
    >>> await client.save(record)  # never raises
    >>> client.saved_count
    1
    """

    def __init__(
        self,
        config: PersistenceConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._client = client
        self.saved_count = 0
        self.failed_count = 0

    async def save(self, record: OrderRecord) -> None:
        """Send a record to the endpoint, logging any failure.

        Parameters
        ----------
        record : OrderRecord
            The record to store
        """
        try:
            await self._post(record.to_dict())
        except PersistenceError as e:
            self.failed_count += 1
            logger.error(f"Failed to store order record {record.id}: {e}")
            return

        self.saved_count += 1
        logger.info(f"Stored order record {record.id}")

    async def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST the body and return the parsed acknowledgment.

        Raises
        ------
        PersistenceError
            On an unencodable record, transport failure, non-2xx status,
            a non-JSON body or a body reporting failure
        """
        try:
            if self._client is not None:
                response = await self._send(self._client, body)
            else:
                async with httpx.AsyncClient(
                    timeout=self.config.timeout_seconds
                ) as client:
                    response = await self._send(client, body)
            response.raise_for_status()
            ack = response.json()
        except httpx.HTTPStatusError as e:
            raise PersistenceError(
                f"Endpoint returned status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise PersistenceError(f"Request failed: {e}") from e
        except TypeError as e:
            raise PersistenceError(f"Record is not JSON encodable: {e}") from e
        except ValueError as e:
            raise PersistenceError(f"Malformed acknowledgment: {e}") from e

        if isinstance(ack, dict) and ack.get("success") is False:
            error = ack.get("error")
            if isinstance(error, dict):
                error = error.get("message")
            raise PersistenceError(
                f"Endpoint rejected record: {error or 'unknown'}"
            )
        return ack

    async def _send(
        self, client: httpx.AsyncClient, body: Dict[str, Any]
    ) -> httpx.Response:
        return await client.post(
            self.config.endpoint_url,
            json=body,
            headers={"content-type": "application/json"},
            timeout=self.config.timeout_seconds,
        )
