"""Finance service - transaction processing against an account."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Protocol

from records.console import print_info, print_warning
from records.models.domain import Transaction
from records.repositories.keyed_repository import KeyedRepository


def format_currency(amount: Decimal) -> str:
    return f"${amount:,.2f}"


class TransactionProcessor(Protocol):
    """Payment channel that carries out a transaction."""

    def process(self, transaction: Transaction) -> None: ...


class BankTransferProcessor:
    def process(self, transaction: Transaction) -> None:
        print(f"[Bank Transfer] Processed {format_currency(transaction.amount)} for {transaction.category}")


class MobileMoneyProcessor:
    def process(self, transaction: Transaction) -> None:
        print(f"[Mobile Money] Processed {format_currency(transaction.amount)} for {transaction.category}")


class CryptoWalletProcessor:
    def process(self, transaction: Transaction) -> None:
        print(f"[Crypto Wallet] Processed {format_currency(transaction.amount)} for {transaction.category}")


class Account:
    """Account whose balance goes down by each applied transaction."""

    def __init__(self, account_number: str, initial_balance: Decimal):
        self.account_number = account_number
        self.balance = Decimal(initial_balance)

    def apply_transaction(self, transaction: Transaction) -> bool:
        self.balance -= transaction.amount
        return True


class SavingsAccount(Account):
    """Account that can't be overdrawn."""

    def apply_transaction(self, transaction: Transaction) -> bool:
        if transaction.amount > self.balance:
            print_warning("Insufficient funds")
            return False

        self.balance -= transaction.amount
        print_info(f"Transaction applied. New balance: {format_currency(self.balance)}")
        return True


class FinanceService:
    """
    Service for the finance program.

    Every processed transaction is recorded by id, whether or not the
    account accepted it; duplicate ids raise DuplicateKeyError before any
    processing happens.
    """

    def __init__(self, transactions: Optional[KeyedRepository[Transaction]] = None):
        self.transactions = transactions if transactions is not None else KeyedRepository()

    def process_transaction(
        self,
        transaction: Transaction,
        processor: TransactionProcessor,
        account: Account,
    ) -> bool:
        """Record, process and apply one transaction.

        Returns:
            Whether the account accepted the transaction.
        """
        self.transactions.add(transaction)
        processor.process(transaction)
        return account.apply_transaction(transaction)

    def get_transactions(self) -> List[Transaction]:
        return self.transactions.get_all()

    def run(self, now: Optional[datetime] = None) -> SavingsAccount:
        """Run the sample flow: three transactions over three channels."""
        now = now or datetime.now()
        account = SavingsAccount("ACC123", Decimal("1000"))

        self.process_transaction(
            Transaction(1, now, Decimal("100"), "Groceries"), MobileMoneyProcessor(), account
        )
        self.process_transaction(
            Transaction(2, now, Decimal("200"), "Utilities"), BankTransferProcessor(), account
        )
        self.process_transaction(
            Transaction(3, now, Decimal("50"), "Entertainment"), CryptoWalletProcessor(), account
        )
        return account
