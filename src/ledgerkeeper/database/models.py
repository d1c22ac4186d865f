"""SQLAlchemy models for ledgerkeeper database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, declared_attr, sessionmaker, Session

from ledgerkeeper.database.base import PRIMARY_TABLE, LEGACY_TABLE
from ledgerkeeper.domain.entities import AccountType

Base = declarative_base()


class Account(Base):
    """Finance account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    account_type = Column(String, default=AccountType.BANK.value, nullable=False)
    opening_balance = Column(Numeric(12, 2), default=0, nullable=False)
    balance = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(DateTime, nullable=True)


class TransactionColumns:
    """Columns shared by both ledger tables."""

    id = Column(Integer, primary_key=True)

    @declared_attr
    def account_id(cls):
        return Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    transaction_type = Column(String, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class AccountTransaction(TransactionColumns, Base):
    """Transaction posted to the primary ledger table."""

    __tablename__ = PRIMARY_TABLE


class LegacyAccountTransaction(TransactionColumns, Base):
    """Transaction in the legacy ledger table."""

    __tablename__ = LEGACY_TABLE


TRANSACTION_MODELS = {
    PRIMARY_TABLE: AccountTransaction,
    LEGACY_TABLE: LegacyAccountTransaction,
}


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Web requests may use the connection from a worker thread
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
