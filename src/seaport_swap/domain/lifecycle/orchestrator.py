"""Create-then-fulfill submission orchestration.

This module sequences the two dependent exchange protocol operations for
one order: creation (approvals and signature) followed immediately by
fulfillment, and hands the resulting record to storage.
"""

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence

from ...services.interfaces import (
    ActionSequence,
    ExchangeProtocolInterface,
    OrderRecordStoreInterface,
)
from ..exceptions import (
    NetworkOrProtocolError,
    NoAccountError,
    SwapError,
    UserRejectedActionError,
)
from ..items.models import Item
from ..orders.models import OrderParameters, OrderRecord, SignedOrder
from .actions import STATUS_REJECTED, execute_action, is_user_rejection
from .record_id import derive_record_id
from .states import SubmissionPhase

logger = logging.getLogger(__name__)


class OrderLifecycleOrchestrator:
    """Drives one order through creation, fulfillment and storage.

    The orchestrator executes the protocol's pending actions one at a
    time. Fulfillment never starts before creation has produced a
    signed order, and nothing is stored unless both phases succeed.

    Parameters
    ----------
    protocol : ExchangeProtocolInterface
        Exchange protocol SDK used for creation and fulfillment
    record_store : OrderRecordStoreInterface
        Destination for the finished record

    Attributes
    ----------
    phase : SubmissionPhase
        Phase of the current or most recent submission
    signed_order : Optional[SignedOrder]
        Signed order of the most recent submission that got past creation
    transaction : Any
        Dispatched fulfillment transaction of the most recent successful
        submission

    Notes
    -----
    The orchestrator holds no queue and does not serialize concurrent
    calls. Callers gate the submit trigger while a submission is pending
    (see ``ListingSession``).

    Fulfillment is dispatched, not confirmed: once the exchange
    transaction has been sent the submission counts as successful, and
    the transaction's on-chain receipt is never awaited here.

    Failure handling follows a fail-fast policy:
    - No account: ``NoAccountError`` before any protocol call
    - Wallet prompt declined: ``UserRejectedActionError``
    - Protocol or transport failure: ``NetworkOrProtocolError``
    - Storage failure: logged, submission still succeeds

    No step is retried; a new submission starts over from the builder.

    Examples
    --------
    >>> orchestrator = OrderLifecycleOrchestrator(protocol, record_client)
    >>> params = build_order_parameters(offer, consideration, 86400, now)
    >>> record = await orchestrator.submit(
    ...     params, "0xAccount", offers=offer, considerations=consideration
    ... )
    >>> orchestrator.phase
    <SubmissionPhase.DONE: 'done'>
    """

    def __init__(
        self,
        protocol: ExchangeProtocolInterface,
        record_store: OrderRecordStoreInterface,
    ):
        self.protocol = protocol
        self.record_store = record_store
        self.phase = SubmissionPhase.IDLE
        self.signed_order: Optional[SignedOrder] = None
        self.transaction: Any = None

    async def submit(
        self,
        order_parameters: OrderParameters,
        account_address: Optional[str],
        offers: Sequence[Item] = (),
        considerations: Sequence[Item] = (),
    ) -> OrderRecord:
        """Create, sign and fulfill an order, then store its record.

        Parameters
        ----------
        order_parameters : OrderParameters
            Builder output for this submission
        account_address : Optional[str]
            Connected account; None or empty fails the submission
        offers : Sequence[Item]
            Offer items as selected, kept in the record for display
        considerations : Sequence[Item]
            Consideration items as selected, kept in the record for display

        Returns
        -------
        OrderRecord
            Record with the signature-derived id, already handed to the
            record store

        Raises
        ------
        NoAccountError
            If no account address is given
        UserRejectedActionError
            If the user declines any creation or fulfillment step
        NetworkOrProtocolError
            If the protocol fails during creation or fulfillment
        """
        self.phase = SubmissionPhase.IDLE
        self.signed_order = None
        self.transaction = None

        try:
            if not account_address:
                raise NoAccountError()

            self._enter(SubmissionPhase.CREATING)
            creation = await self._prepare(
                "create",
                self.protocol.create_order,
                order_parameters.to_create_order_input(),
                account_address,
            )
            signed_order = self._as_signed_order(
                await self._run_actions(creation)
            )
            self.signed_order = signed_order
            self._enter(SubmissionPhase.CREATED)

            record_id = derive_record_id(signed_order.signature)
            logger.info(f"Order {record_id} created by {account_address}")

            self._enter(SubmissionPhase.FULFILLING)
            fulfillment = await self._prepare(
                "exchange",
                self.protocol.fulfill_order,
                signed_order,
                account_address,
            )
            self.transaction = await self._run_actions(fulfillment)
            logger.info(f"Fulfillment of order {record_id} dispatched")
        except SwapError:
            self._enter(SubmissionPhase.FAILED)
            raise

        record = OrderRecord(
            id=record_id,
            order=signed_order,
            offers=list(offers),
            considerations=list(considerations),
        )

        try:
            await self.record_store.save(record)
        except Exception as e:
            logger.error(f"Order record {record.id} not stored: {e}")

        self._enter(SubmissionPhase.DONE)
        return record

    def _enter(self, phase: SubmissionPhase) -> None:
        logger.debug(f"Submission phase {self.phase.value} -> {phase.value}")
        self.phase = phase

    async def _prepare(
        self,
        action_type: str,
        operation: Callable[..., Awaitable[ActionSequence]],
        *args,
    ) -> ActionSequence:
        """Call a protocol operation, translating its failures."""
        try:
            return await operation(*args)
        except SwapError:
            raise
        except Exception as e:
            if is_user_rejection(e):
                raise UserRejectedActionError(action_type) from e
            raise NetworkOrProtocolError(
                f"Preparing {action_type} actions failed: {e}",
                action_type=action_type,
            ) from e

    async def _run_actions(self, sequence: ActionSequence) -> Any:
        """Execute pending actions in order and return the last value.

        Stops at the first step that does not complete.
        """
        value = None
        for action in sequence.actions:
            result = await execute_action(action)
            if result.is_completed:
                value = result.value
                continue

            if result.status == STATUS_REJECTED:
                raise UserRejectedActionError(
                    result.action_type
                ) from result.error
            raise NetworkOrProtocolError(
                f"{result.action_type} action failed: {result.error}",
                action_type=result.action_type,
            ) from result.error

        return value

    @staticmethod
    def _as_signed_order(value: Any) -> SignedOrder:
        if isinstance(value, SignedOrder):
            return value
        if (
            isinstance(value, Mapping)
            and value.get("signature")
            and "parameters" in value
        ):
            return SignedOrder(
                parameters=dict(value["parameters"]),
                signature=value["signature"],
            )
        raise NetworkOrProtocolError(
            "Creation actions did not produce a signed order",
            action_type="create",
        )
