from __future__ import annotations

import logging
import threading

import pytest

from diameter_s6a.messages import (
    DiameterMessage,
    authentication_information_answer,
    authentication_information_request,
    update_location_answer,
    update_location_request,
)
from diameter_s6a.transactions import (
    OUTCOME_ALREADY_CLOSED,
    OUTCOME_ANSWER_KIND_MISMATCH,
    OUTCOME_CLOSED,
    OUTCOME_OPENED,
    DuplicateTransactionError,
    TransactionCorrelator,
    TransactionResult,
    TransactionState,
    UnexpectedAnswerError,
    reason_code,
)


def _air(session_id: str) -> DiameterMessage:
    return authentication_information_request(
        session_id=session_id,
        origin_host="mme1.example.com",
        origin_realm="example.com",
        user_name="001010123456789",
    )


def _ulr(session_id: str) -> DiameterMessage:
    return update_location_request(
        session_id=session_id,
        origin_host="mme1.example.com",
        origin_realm="example.com",
        user_name="001010123456789",
        visited_plmn_id="00101",
    )


def _aia(session_id: str) -> DiameterMessage:
    return authentication_information_answer(
        session_id=session_id,
        origin_host="hss1.example.com",
        origin_realm="example.com",
        result_code="2001",
    )


def _ula(session_id: str) -> DiameterMessage:
    return update_location_answer(
        session_id=session_id,
        origin_host="hss1.example.com",
        origin_realm="example.com",
        result_code="2001",
    )


def test_new_request_opens_transaction() -> None:
    correlator = TransactionCorrelator()
    assert correlator.process_message(_air("s1")) == OUTCOME_OPENED
    assert correlator.transaction_result() == TransactionResult(complete=0, incomplete=1)
    transaction = correlator.transaction("s1")
    assert transaction is not None
    assert transaction.state is TransactionState.OPEN
    assert transaction.answer is None


@pytest.mark.parametrize(("request_builder", "answer_builder"), [(_air, _aia), (_ulr, _ula)])
def test_expected_answer_closes_transaction(request_builder, answer_builder) -> None:
    correlator = TransactionCorrelator()
    correlator.process_message(request_builder("s1"))
    answer = answer_builder("s1")
    assert correlator.process_message(answer) == OUTCOME_CLOSED
    assert correlator.transaction_result() == TransactionResult(complete=1, incomplete=0)
    transaction = correlator.transaction("s1")
    assert transaction.state is TransactionState.CLOSED
    assert transaction.answer is answer


@pytest.mark.parametrize(("request_builder", "answer_builder"), [(_air, _ula), (_ulr, _aia)])
def test_mismatched_answer_leaves_counters_unchanged(request_builder, answer_builder, caplog) -> None:
    correlator = TransactionCorrelator()
    correlator.process_message(request_builder("s2"))
    with caplog.at_level(logging.WARNING, logger="diameter_s6a.transactions.correlator"):
        assert correlator.process_message(answer_builder("s2")) == OUTCOME_ANSWER_KIND_MISMATCH
    assert correlator.transaction_result() == TransactionResult(complete=0, incomplete=1)
    assert correlator.transaction("s2").state is TransactionState.OPEN
    assert correlator.transaction("s2").mismatched_answers == 1
    assert "mismatch" in caplog.text


def test_matching_answer_still_closes_after_mismatch() -> None:
    correlator = TransactionCorrelator()
    correlator.process_message(_ulr("s2"))
    correlator.process_message(_aia("s2"))
    correlator.process_message(_aia("s2"))
    assert correlator.process_message(_ula("s2")) == OUTCOME_CLOSED
    assert correlator.transaction_result() == TransactionResult(complete=1, incomplete=0)
    assert correlator.transaction("s2").mismatched_answers == 2


@pytest.mark.parametrize("close_first", [False, True])
def test_second_request_for_session_is_duplicate(close_first: bool) -> None:
    correlator = TransactionCorrelator()
    correlator.process_message(_air("s1"))
    if close_first:
        correlator.process_message(_aia("s1"))
    before = correlator.transaction_result()
    with pytest.raises(DuplicateTransactionError) as excinfo:
        correlator.process_message(_ulr("s1"))
    assert excinfo.value.session_id == "s1"
    assert reason_code(excinfo.value) == "DUPLICATE_TRANSACTION"
    assert correlator.transaction_result() == before
    assert correlator.transaction("s1").request.kind.value == "AIR"


def test_answer_without_transaction_is_unexpected() -> None:
    correlator = TransactionCorrelator()
    with pytest.raises(UnexpectedAnswerError) as excinfo:
        correlator.process_message(_aia("ghost"))
    assert "ghost" in str(excinfo.value)
    assert reason_code(excinfo.value) == "UNEXPECTED_ANSWER"
    assert correlator.transaction_result() == TransactionResult(complete=0, incomplete=0)
    assert len(correlator) == 0


def test_closed_transaction_is_terminal() -> None:
    correlator = TransactionCorrelator()
    correlator.process_message(_air("s1"))
    first = _aia("s1")
    correlator.process_message(first)
    assert correlator.process_message(_aia("s1")) == OUTCOME_ALREADY_CLOSED
    assert correlator.transaction_result() == TransactionResult(complete=1, incomplete=0)
    assert correlator.transaction("s1").answer is first


def test_process_message_requires_message_and_session_id() -> None:
    correlator = TransactionCorrelator()
    with pytest.raises(ValueError):
        correlator.process_message(None)
    with pytest.raises(ValueError):
        correlator.process_message(_air(None))


def test_transaction_result_is_a_pure_read() -> None:
    correlator = TransactionCorrelator()
    correlator.process_message(_air("s1"))
    assert correlator.transaction_result() == correlator.transaction_result()
    assert len(correlator) == 1


def test_concurrent_first_requests_open_exactly_one_transaction() -> None:
    correlator = TransactionCorrelator()
    barrier = threading.Barrier(8)
    outcomes: list[str] = []
    guard = threading.Lock()

    def _submit() -> None:
        barrier.wait()
        try:
            outcome = correlator.process_message(_air("shared"))
        except DuplicateTransactionError:
            outcome = "DUPLICATE"
        with guard:
            outcomes.append(outcome)

    threads = [threading.Thread(target=_submit) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count(OUTCOME_OPENED) == 1
    assert outcomes.count("DUPLICATE") == 7
    assert correlator.transaction_result() == TransactionResult(complete=0, incomplete=1)


def test_completed_plus_incomplete_equals_opened_sessions() -> None:
    correlator = TransactionCorrelator()
    for session_id in ("a", "b", "c", "d"):
        correlator.process_message(_air(session_id))
    correlator.process_message(_aia("b"))
    correlator.process_message(_ula("c"))
    correlator.process_message(_aia("d"))
    result = correlator.transaction_result()
    assert result.complete == 2
    assert result.incomplete == 2
    assert result.complete + result.incomplete == len(correlator)
