"""Ledger statement domain service."""

from ledgerbook.database.base import Database
from ledgerbook.domain.balance import build_statement, final_balance, sort_chronologically
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.entities import CustomerStatement, Ledger, LedgerStatement
from ledgerbook.domain.outstanding import customer_running_balances
from ledgerbook.domain.settings import SettingsService
from ledgerbook.domain.transaction import kinds_affecting


class StatementService:
    """Builds running-balance statements for bank, Aachi Masala and customers."""

    def __init__(self, db: Database, owner_id: str):
        """Initialize statement service.

        Args:
            db: Database instance
            owner_id: Owner whose books are read
        """
        self.db = db
        self.owner_id = owner_id

    def _ledger_statement(self, ledger: Ledger, opening_balance) -> LedgerStatement:
        transactions = self.db.list_transactions(
            owner_id=self.owner_id, kinds=kinds_affecting(ledger)
        )
        return build_statement(ledger, opening_balance, transactions)

    def bank_statement(self) -> LedgerStatement:
        """Bank ledger from the opening bank balance."""
        settings = SettingsService(self.db, self.owner_id).get_settings()
        return self._ledger_statement(Ledger.BANK, settings.opening_bank_balance)

    def aachi_masala_statement(self) -> LedgerStatement:
        """Aachi Masala ledger from its opening balance."""
        settings = SettingsService(self.db, self.owner_id).get_settings()
        return self._ledger_statement(
            Ledger.AACHI_MASALA, settings.opening_aachi_masala_balance
        )

    def customer_statement(self, customer_id: int) -> CustomerStatement:
        """Outstanding ledger and full history of one customer.

        Raises:
            NotFoundError: If the owner has no such customer
        """
        customer = CustomerService(self.db, self.owner_id).require_customer(customer_id)
        transactions = self.db.list_transactions(
            owner_id=self.owner_id, customer_id=customer_id
        )
        entries = customer_running_balances(customer_id, transactions)
        return CustomerStatement(
            customer=customer,
            entries=tuple(entries),
            outstanding=final_balance(entries, 0),
            transactions=tuple(sort_chronologically(transactions, newest_first=True)),
        )
