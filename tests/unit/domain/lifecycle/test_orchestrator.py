"""Unit tests for OrderLifecycleOrchestrator."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from seaport_swap.domain.exceptions import (
    NetworkOrProtocolError,
    NoAccountError,
    PersistenceError,
    UserRejectedActionError,
)
from seaport_swap.domain.lifecycle import (
    OrderLifecycleOrchestrator,
    SubmissionPhase,
    derive_record_id,
)
from seaport_swap.domain.orders import build_order_parameters
from seaport_swap.services.interfaces import (
    ActionSequence,
    ExchangeProtocolInterface,
    OrderRecordStoreInterface,
)
from tests.fixtures import (
    TEST_ACCOUNT,
    TEST_NOW,
    TEST_SIGNATURE,
    FakeAction,
    FakeExchangeProtocol,
    RecordingStore,
    WalletRejection,
    create_native_item,
    create_nft_item,
    create_signed_order,
)


@pytest.fixture
def offer():
    return [create_native_item()]


@pytest.fixture
def consideration():
    return [create_nft_item()]


@pytest.fixture
def params(offer, consideration):
    return build_order_parameters(offer, consideration, 86400, TEST_NOW)


@pytest.fixture
def store():
    return RecordingStore()


class TestSubmitSuccess:
    """Test the happy path of create, fulfill and store."""

    @pytest.mark.asyncio
    async def test_create_then_fulfill_then_store(
        self, params, offer, consideration, store
    ):
        """Test the full sequence runs in dependency order.

        Given - A protocol needing an approval and a signature
        When - Submitting with a connected account
        Then - Creation actions run before fulfillment is even prepared,
               and the record is stored exactly once
        """
        # Given - Fake protocol recording call order
        protocol = FakeExchangeProtocol()
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        # When - Submit
        record = await orchestrator.submit(
            params, TEST_ACCOUNT, offers=offer, considerations=consideration
        )

        # Then - Strict ordering and a single stored record
        assert protocol.calls == [
            "create_order",
            "perform:approval",
            "perform:create",
            "fulfill_order",
            "perform:exchange",
        ]
        assert protocol.fulfilled_orders == [protocol.signed_order]
        assert store.saved == [record]
        assert orchestrator.phase == SubmissionPhase.DONE

    @pytest.mark.asyncio
    async def test_record_contents(self, params, offer, consideration, store):
        """Test the record carries the derived id and original items."""
        protocol = FakeExchangeProtocol()
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        record = await orchestrator.submit(
            params, TEST_ACCOUNT, offers=offer, considerations=consideration
        )

        assert record.id == derive_record_id(TEST_SIGNATURE)
        assert record.order is protocol.signed_order
        assert record.offers == offer
        assert record.considerations == consideration

    @pytest.mark.asyncio
    async def test_create_input_passed_to_protocol(self, params, store):
        """Test the protocol receives the rendered create-order input."""
        protocol = FakeExchangeProtocol()
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        await orchestrator.submit(params, TEST_ACCOUNT)

        assert protocol.create_inputs == [params.to_create_order_input()]

    @pytest.mark.asyncio
    async def test_fulfillment_confirmation_not_awaited(self, params, store):
        """Test success is reported on dispatch, not on confirmation.

        Given - A fulfillment action returning a transaction handle
        When - The submission completes
        Then - The handle is kept but its wait() was never called
        """
        protocol = FakeExchangeProtocol()
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        await orchestrator.submit(params, TEST_ACCOUNT)

        assert orchestrator.transaction is protocol.transaction
        assert protocol.transaction.waited is False

    @pytest.mark.asyncio
    async def test_signed_order_as_mapping(self, params, store):
        """Test a protocol returning a plain mapping is accepted."""
        signed = create_signed_order()
        protocol = create_autospec(ExchangeProtocolInterface, instance=True)
        protocol.create_order.return_value = ActionSequence(
            actions=[FakeAction("create", result=signed.to_dict())]
        )
        protocol.fulfill_order.return_value = ActionSequence(
            actions=[FakeAction("exchange", result="0xtx")]
        )
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        record = await orchestrator.submit(params, TEST_ACCOUNT)

        assert record.order == signed
        protocol.fulfill_order.assert_awaited_once_with(signed, TEST_ACCOUNT)


class TestSubmitFailures:
    """Test fail-fast behaviour when a step does not complete."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("account", [None, ""])
    async def test_no_account(self, params, store, account):
        """Test a missing account fails before any protocol call."""
        protocol = create_autospec(ExchangeProtocolInterface, instance=True)
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        with pytest.raises(NoAccountError):
            await orchestrator.submit(params, account)

        protocol.create_order.assert_not_called()
        protocol.fulfill_order.assert_not_called()
        assert store.saved == []
        assert orchestrator.phase == SubmissionPhase.FAILED

    @pytest.mark.asyncio
    async def test_creation_rejected_mid_sequence(self, params, store):
        """Test a rejected signature aborts before fulfillment.

        Given - The user approves the token but rejects the signature
        When - Submitting
        Then - UserRejectedActionError, fulfill never invoked, no record
        """
        # Given - Signature prompt rejected
        protocol = FakeExchangeProtocol(create_error=WalletRejection())
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        # When/Then - Rejection surfaces
        with pytest.raises(UserRejectedActionError) as exc_info:
            await orchestrator.submit(params, TEST_ACCOUNT)

        assert exc_info.value.action_type == "create"
        assert "fulfill_order" not in protocol.calls
        assert store.saved == []
        assert orchestrator.phase == SubmissionPhase.FAILED

    @pytest.mark.asyncio
    async def test_creation_protocol_error(self, params, store):
        """Test a protocol failure is distinguished from a rejection."""
        protocol = FakeExchangeProtocol(
            create_error=RuntimeError("nonce too low")
        )
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        with pytest.raises(NetworkOrProtocolError) as exc_info:
            await orchestrator.submit(params, TEST_ACCOUNT)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "fulfill_order" not in protocol.calls
        assert store.saved == []

    @pytest.mark.asyncio
    async def test_fulfillment_rejected(self, params, store):
        """Test rejecting the exchange transaction stores nothing."""
        protocol = FakeExchangeProtocol(fulfill_error=WalletRejection())
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        with pytest.raises(UserRejectedActionError) as exc_info:
            await orchestrator.submit(params, TEST_ACCOUNT)

        assert exc_info.value.action_type == "exchange"
        assert orchestrator.signed_order is protocol.signed_order
        assert store.saved == []
        assert orchestrator.phase == SubmissionPhase.FAILED

    @pytest.mark.asyncio
    async def test_create_order_call_itself_fails(self, params, store):
        """Test a failing create_order call is a protocol error."""
        protocol = create_autospec(ExchangeProtocolInterface, instance=True)
        protocol.create_order.side_effect = ConnectionError("rpc down")
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        with pytest.raises(NetworkOrProtocolError):
            await orchestrator.submit(params, TEST_ACCOUNT)

        protocol.fulfill_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_signed_order_produced(self, params, store):
        """Test creation without a signed order is a protocol error."""
        protocol = create_autospec(ExchangeProtocolInterface, instance=True)
        protocol.create_order.return_value = ActionSequence(actions=[])
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        with pytest.raises(NetworkOrProtocolError):
            await orchestrator.submit(params, TEST_ACCOUNT)

        protocol.fulfill_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_persistence_failure_still_succeeds(self, params):
        """Test a failing record store does not fail the submission."""
        store = create_autospec(OrderRecordStoreInterface, instance=True)
        store.save = AsyncMock(side_effect=PersistenceError("503"))
        protocol = FakeExchangeProtocol()
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        record = await orchestrator.submit(params, TEST_ACCOUNT)

        assert record.id == derive_record_id(TEST_SIGNATURE)
        assert orchestrator.phase == SubmissionPhase.DONE
        store.save.assert_awaited_once_with(record)

    @pytest.mark.asyncio
    async def test_unexpected_store_error_still_succeeds(self, params):
        """Test any error escaping the record store is only logged.

        Given - A record store whose save raises a non-persistence error
        When - Submitting after fulfillment has been dispatched
        Then - The submission completes with the record
        """
        # Given - Store failing with an unexpected error
        store = create_autospec(OrderRecordStoreInterface, instance=True)
        store.save = AsyncMock(side_effect=AttributeError("no get"))
        protocol = FakeExchangeProtocol()
        orchestrator = OrderLifecycleOrchestrator(protocol, store)

        # When - Submit
        record = await orchestrator.submit(params, TEST_ACCOUNT)

        # Then - Done, transaction kept
        assert orchestrator.phase == SubmissionPhase.DONE
        assert orchestrator.transaction is not None
        store.save.assert_awaited_once_with(record)

    @pytest.mark.asyncio
    async def test_resubmission_starts_over(self, params, store):
        """Test a new submission after a failure runs from scratch."""
        protocol = FakeExchangeProtocol(create_error=WalletRejection())
        orchestrator = OrderLifecycleOrchestrator(protocol, store)
        with pytest.raises(UserRejectedActionError):
            await orchestrator.submit(params, TEST_ACCOUNT)

        protocol.create_error = None
        protocol.calls.clear()
        await orchestrator.submit(params, TEST_ACCOUNT)

        assert protocol.calls[0] == "create_order"
        assert len(store.saved) == 1
