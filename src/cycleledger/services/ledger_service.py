"""Ledger service for accounts, categories and entry management."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from cycleledger.core.dates import local_now
from cycleledger.core.exceptions import InvariantViolationError, ValidationError, NotFoundError
from cycleledger.core.money import quantize, sum_cents, to_cents
from cycleledger.domain.models import (
    Account,
    Category,
    CreditInstrument,
    FlowType,
    LedgerEntry,
    OPENING_BALANCE_MARKER,
)
from cycleledger.repositories.protocols import (
    AccountRepository,
    CategoryRepository,
    EntryRepository,
)
from cycleledger.services.installments import first_billing_date, split_installments

logger = logging.getLogger(__name__)


@dataclass
class EntryCreate:
    """Input data for recording a single ledger entry."""

    account_id: str
    category_id: str
    entry_date: date
    amount: Decimal
    description: str
    credit_instrument_id: Optional[str] = None
    billing_date: Optional[date] = None


@dataclass
class CardPurchaseCreate:
    """Input data for a purchase paid in installments on a credit instrument."""

    account_id: str
    category_id: str
    credit_instrument_id: str
    purchase_date: date
    total_amount: Decimal
    installment_count: int
    description: str


class LedgerService:
    """
    Service for managing accounts and the entry ledger.

    Amounts arrive as positive magnitudes; the category's flow type decides
    the stored sign (income positive, expense negative).
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        category_repo: CategoryRepository,
        entry_repo: EntryRepository,
        max_installments: int = 12,
    ):
        self._account_repo = account_repo
        self._category_repo = category_repo
        self._entry_repo = entry_repo
        self._max_installments = max_installments

    # ------------------------------------------------------------------
    # Accounts and instruments
    # ------------------------------------------------------------------

    def create_account(
        self,
        name: str,
        closing_day: int = 1,
        currency: str = "BRL",
    ) -> Account:
        """
        Create a new account.

        Args:
            name: Unique account name
            closing_day: Day of month the account's statement periods start on
            currency: ISO currency code used for display

        Returns:
            Created Account instance
        """
        if not name or not name.strip():
            raise ValidationError("Account name is required")
        existing = self._account_repo.get_by_name(name)
        if existing:
            raise ValidationError(f"Account with name '{name}' already exists")

        account = Account(
            account_id=str(uuid.uuid4()),
            name=name.strip(),
            closing_day=closing_day,
            currency=currency.upper(),
            created_at=local_now().replace(tzinfo=None),
        )
        return self._account_repo.create(account)

    def get_account(self, account_id: str) -> Account:
        """Get account by ID."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        return self._account_repo.list_all()

    def add_instrument(self, account_id: str, name: str, closing_day: int) -> CreditInstrument:
        """Attach a credit instrument with its own closing day to an account."""
        self.get_account(account_id)
        if not name or not name.strip():
            raise ValidationError("Credit instrument name is required")
        instrument = CreditInstrument(
            instrument_id=str(uuid.uuid4()),
            account_id=account_id,
            name=name.strip(),
            closing_day=closing_day,
            created_at=local_now().replace(tzinfo=None),
        )
        return self._account_repo.create_instrument(instrument)

    def get_instrument(self, instrument_id: str) -> CreditInstrument:
        instrument = self._account_repo.get_instrument(instrument_id)
        if not instrument:
            raise NotFoundError("Credit instrument", instrument_id)
        return instrument

    def list_instruments(self, account_id: str) -> list[CreditInstrument]:
        return self._account_repo.list_instruments(account_id)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def add_category(
        self,
        account_id: str,
        name: str,
        flow_type: FlowType,
        parent_id: Optional[str] = None,
    ) -> Category:
        """
        Create a category, optionally nested under a top-level parent.

        Only one level of nesting is allowed and a subcategory shares its
        parent's flow type.
        """
        self.get_account(account_id)
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        flow_type = FlowType(flow_type)

        if parent_id is not None:
            parent = self._category_repo.get_by_id(parent_id)
            if not parent or parent.account_id != account_id:
                raise NotFoundError("Category", parent_id)
            if parent.parent_id is not None:
                raise ValidationError("Categories can only be nested one level deep")
            if parent.flow_type != flow_type:
                raise ValidationError(
                    f"Subcategory must be {parent.flow_type.value} like its parent '{parent.name}'"
                )

        category = Category(
            category_id=str(uuid.uuid4()),
            account_id=account_id,
            name=name.strip(),
            flow_type=flow_type,
            parent_id=parent_id,
        )
        return self._category_repo.create(category)

    def list_categories(self, account_id: str) -> list[Category]:
        return self._category_repo.list_by_account(account_id)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def add_entry(self, data: EntryCreate) -> LedgerEntry:
        """
        Record a single entry.

        Charges on a credit instrument get their billing date from the
        instrument's closing day unless one is given.
        """
        self.get_account(data.account_id)
        category = self._get_account_category(data.account_id, data.category_id)
        self._validate_amount_and_description(data.amount, data.description)

        billing_date = data.billing_date
        if data.credit_instrument_id:
            instrument = self._get_account_instrument(data.account_id, data.credit_instrument_id)
            if billing_date is None:
                billing_date = first_billing_date(data.entry_date, instrument.closing_day)
        elif billing_date is not None:
            raise ValidationError("A billing date requires a credit instrument")

        entry = LedgerEntry(
            entry_id=str(uuid.uuid4()),
            account_id=data.account_id,
            category_id=category.category_id,
            date=data.entry_date,
            amount=self._signed(category, data.amount),
            description=data.description.strip(),
            credit_instrument_id=data.credit_instrument_id,
            billing_date=billing_date,
            created_at=local_now().replace(tzinfo=None),
        )
        return self._entry_repo.create(entry)

    def add_card_purchase(self, data: CardPurchaseCreate) -> list[LedgerEntry]:
        """
        Record a purchase split into installments on a credit instrument.

        One entry is written per installment, each billed one month after
        the previous one and labelled ``(i/N)``.
        """
        self.get_account(data.account_id)
        category = self._get_account_category(data.account_id, data.category_id)
        instrument = self._get_account_instrument(data.account_id, data.credit_instrument_id)
        self._validate_amount_and_description(data.total_amount, data.description)
        if not 1 <= data.installment_count <= self._max_installments:
            raise ValidationError(
                f"Installment count must be between 1 and {self._max_installments}"
            )

        installments = split_installments(
            data.total_amount,
            data.installment_count,
            data.purchase_date,
            instrument.closing_day,
        )
        if sum_cents(i.amount for i in installments) != to_cents(data.total_amount):
            raise InvariantViolationError(
                f"Installments of {data.description!r} do not add up to {quantize(data.total_amount)}"
            )

        created_at = local_now().replace(tzinfo=None)
        purchased = data.purchase_date.strftime("%d/%m/%Y")
        entries = []
        for installment in installments:
            description = f"{data.description.strip()} - {instrument.name} (purchased {purchased})"
            if installment.count > 1:
                description = f"{description} ({installment.label})"
            entries.append(
                LedgerEntry(
                    entry_id=str(uuid.uuid4()),
                    account_id=data.account_id,
                    category_id=category.category_id,
                    date=data.purchase_date,
                    amount=self._signed(category, installment.amount),
                    description=description,
                    credit_instrument_id=instrument.instrument_id,
                    billing_date=installment.billing_date,
                    created_at=created_at,
                )
            )

        logger.info(
            f"Recording {len(entries)} installment(s) of {quantize(data.total_amount)} "
            f"on instrument {instrument.instrument_id}"
        )
        return self._entry_repo.create_many(entries)

    def record_opening_balance(
        self,
        account_id: str,
        amount: Decimal,
        as_of: date,
        category_id: Optional[str] = None,
    ) -> LedgerEntry:
        """
        Write the sentinel entry holding an already rolled-up balance.

        ``amount`` is signed. The entry is kept in the ledger but never
        counted as period flow.
        """
        self.get_account(account_id)
        if category_id is not None:
            self._get_account_category(account_id, category_id)
        entry = LedgerEntry(
            entry_id=str(uuid.uuid4()),
            account_id=account_id,
            category_id=category_id,
            date=as_of,
            amount=quantize(amount),
            description=OPENING_BALANCE_MARKER,
            created_at=local_now().replace(tzinfo=None),
        )
        return self._entry_repo.create(entry)

    def get_entry(self, entry_id: str) -> LedgerEntry:
        entry = self._entry_repo.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Entry", entry_id)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        """Remove an entry; later periods change accordingly on next report."""
        self.get_entry(entry_id)
        self._entry_repo.delete(entry_id)

    def list_entries(
        self,
        account_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_ids: Optional[list[str]] = None,
        credit_instrument_id: Optional[str] = None,
    ) -> list[LedgerEntry]:
        """Query entries by their own date and filters."""
        self.get_account(account_id)
        return self._entry_repo.query(
            account_id=account_id,
            start_date=start_date,
            end_date=end_date,
            category_ids=category_ids,
            credit_instrument_id=credit_instrument_id,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_account_category(self, account_id: str, category_id: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if not category or category.account_id != account_id:
            raise NotFoundError("Category", category_id)
        return category

    def _get_account_instrument(self, account_id: str, instrument_id: str) -> CreditInstrument:
        instrument = self.get_instrument(instrument_id)
        if instrument.account_id != account_id:
            raise NotFoundError("Credit instrument", instrument_id)
        return instrument

    @staticmethod
    def _validate_amount_and_description(amount: Decimal, description: str) -> None:
        if amount is None or quantize(amount) <= 0:
            raise ValidationError("Amount must be greater than zero")
        if not description or not description.strip():
            raise ValidationError("Description is required")

    @staticmethod
    def _signed(category: Category, amount: Decimal) -> Decimal:
        magnitude = quantize(amount)
        return magnitude if category.is_income else -magnitude
