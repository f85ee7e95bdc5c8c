"""SQLAlchemy models for ledgerpost database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(14, 2)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BankAccount(Base):
    """Bank account model."""

    __tablename__ = "bank_accounts"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    account_name = Column(String, nullable=False)
    bank_name = Column(String, nullable=False)
    account_number = Column(String, nullable=True)
    opening_balance = Column(MONEY, default=0, nullable=False)
    current_balance = Column(MONEY, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("owner_id", "account_name", name="uq_bank_account_name"),)

    # Relationships
    transactions = relationship("BankTransaction", back_populates="bank_account")


class LedgerAccount(Base):
    """Chart of accounts model."""

    __tablename__ = "chart_of_accounts"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    account_name = Column(String, nullable=False)
    account_type = Column(String, nullable=False)
    account_subtype = Column(String, nullable=True)
    opening_balance = Column(MONEY, default=0, nullable=False)
    current_balance = Column(MONEY, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("owner_id", "account_name", name="uq_ledger_account_name"),)


class BankTransaction(Base):
    """Bank transaction model."""

    __tablename__ = "bank_transactions"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    bank_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=False)
    description = Column(String, nullable=False, default="")
    amount = Column(MONEY, nullable=False)
    transaction_type = Column(String, nullable=False)
    transaction_date = Column(Date, nullable=False)
    reference_number = Column(String, nullable=True)
    category = Column(String, nullable=True)
    status = Column(String, nullable=False, default="uncategorized")
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=True)
    is_reviewed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    bank_account = relationship("BankAccount", back_populates="transactions")


class JournalEntry(Base):
    """Journal entry header model."""

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    entry_number = Column(String, nullable=False)
    entry_date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    reference_type = Column(String, nullable=True)
    reference_id = Column(Integer, nullable=True)
    total_debit = Column(MONEY, nullable=False)
    total_credit = Column(MONEY, nullable=False)
    status = Column(String, nullable=False, default="draft")
    posted_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("owner_id", "entry_number", name="uq_entry_number"),)

    # Relationships
    lines = relationship(
        "JournalEntryLine",
        back_populates="journal_entry",
        cascade="all, delete-orphan",
        order_by="JournalEntryLine.line_order",
    )


class JournalEntryLine(Base):
    """Journal entry line model."""

    __tablename__ = "journal_entry_lines"

    id = Column(Integer, primary_key=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=False)
    account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    account_name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    debit_amount = Column(MONEY, default=0, nullable=False)
    credit_amount = Column(MONEY, default=0, nullable=False)
    line_order = Column(Integer, nullable=False)

    # Relationships
    journal_entry = relationship("JournalEntry", back_populates="lines")


class DayBookEntry(Base):
    """Day book audit row model."""

    __tablename__ = "day_book_entries"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=True)
    entry_date = Column(Date, nullable=False)
    account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    account_name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    debit_amount = Column(MONEY, default=0, nullable=False)
    credit_amount = Column(MONEY, default=0, nullable=False)
    reference_number = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
