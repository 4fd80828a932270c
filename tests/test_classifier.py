"""Tests for transaction classification."""

import pytest
from decimal import Decimal

from ledgerbook.domain.classifier import (
    CLASSIFICATION,
    classify,
    parse_kind,
    requires_customer,
    signed_amount,
    transactions_affecting,
)
from ledgerbook.domain.entities import Ledger, TransactionKind
from ledgerbook.domain.errors import UnknownTransactionKindError, ValidationError


EXPECTED = {
    # kind: (bank, outstanding, aachi masala)
    TransactionKind.CUSTOMER_PURCHASE: (0, +1, 0),
    TransactionKind.PAYMENT_RECEIVED: (+1, -1, 0),
    TransactionKind.OWN_PURCHASE: (-1, 0, 0),
    TransactionKind.BANK_CREDIT: (+1, 0, 0),
    TransactionKind.BANK_DEBIT: (-1, 0, 0),
    TransactionKind.AACHI_MASALA_CREDIT: (0, 0, +1),
    TransactionKind.AACHI_MASALA_PURCHASE: (0, 0, -1),
}


@pytest.mark.parametrize("kind", list(TransactionKind))
def test_every_kind_affects_at_least_one_ledger(kind):
    effect = classify(kind)
    assert effect.affects_bank or effect.affects_outstanding or effect.affects_aachi_masala
    assert len(effect.ledgers) >= 1


@pytest.mark.parametrize("kind,signs", list(EXPECTED.items()))
def test_classification_table(kind, signs):
    effect = classify(kind)
    assert (
        effect.sign(Ledger.BANK),
        effect.sign(Ledger.OUTSTANDING),
        effect.sign(Ledger.AACHI_MASALA),
    ) == signs
    assert effect.affects_bank == (signs[0] != 0)
    assert effect.affects_outstanding == (signs[1] != 0)
    assert effect.affects_aachi_masala == (signs[2] != 0)


def test_table_covers_every_kind():
    assert set(CLASSIFICATION) == set(TransactionKind)


def test_classify_accepts_string_value():
    assert classify("PAYMENT_RECEIVED") == classify(TransactionKind.PAYMENT_RECEIVED)


def test_classify_unknown_kind_fails_fast():
    with pytest.raises(UnknownTransactionKindError, match="SALARY"):
        classify("SALARY")


def test_unknown_kind_error_is_validation_error():
    with pytest.raises(ValidationError):
        parse_kind("not-a-kind")


def test_requires_customer():
    assert requires_customer(TransactionKind.CUSTOMER_PURCHASE)
    assert requires_customer("PAYMENT_RECEIVED")
    assert not requires_customer(TransactionKind.OWN_PURCHASE)
    assert not requires_customer(TransactionKind.AACHI_MASALA_CREDIT)


def test_signed_amount(make_transaction):
    payment = make_transaction(TransactionKind.PAYMENT_RECEIVED, "300", customer_id=1)
    assert signed_amount(payment, Ledger.BANK) == Decimal("300")
    assert signed_amount(payment, Ledger.OUTSTANDING) == Decimal("-300")
    assert signed_amount(payment, Ledger.AACHI_MASALA) == Decimal("0")


def test_transactions_affecting_filters_by_ledger(make_transaction):
    txns = [
        make_transaction(TransactionKind.CUSTOMER_PURCHASE, 700, customer_id=1),
        make_transaction(TransactionKind.PAYMENT_RECEIVED, 300, customer_id=1),
        make_transaction(TransactionKind.BANK_DEBIT, 200),
        make_transaction(TransactionKind.AACHI_MASALA_CREDIT, 50),
    ]
    bank = list(transactions_affecting(txns, Ledger.BANK))
    assert [t.kind for t in bank] == [TransactionKind.PAYMENT_RECEIVED, TransactionKind.BANK_DEBIT]
    aachi = list(transactions_affecting(txns, Ledger.AACHI_MASALA))
    assert [t.kind for t in aachi] == [TransactionKind.AACHI_MASALA_CREDIT]


def test_ledger_effect_is_immutable():
    effect = classify(TransactionKind.BANK_CREDIT)
    with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
        effect.bank = -1
