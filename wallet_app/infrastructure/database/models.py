"""SQLAlchemy ORM models."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wallet_app.infrastructure.database.base import Base
from wallet_app.modules.wallet_items.models import WalletItemType

MONEY = Numeric(12, 2)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    wallets = relationship("UserWallet", back_populates="user", passive_deletes=True)


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(60), nullable=False)
    value = Column(MONEY, nullable=False, default=0)

    owners = relationship("UserWallet", back_populates="wallet", passive_deletes=True)
    items = relationship("WalletItem", back_populates="wallet", passive_deletes=True)


class UserWallet(Base):
    __tablename__ = "user_wallets"
    __table_args__ = (UniqueConstraint("user_id", "wallet_id", name="uq_user_wallets_user_wallet"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=False, index=True)

    user = relationship("User", back_populates="wallets")
    wallet = relationship("Wallet", back_populates="owners")


class WalletItem(Base):
    __tablename__ = "wallet_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    type = Column(
        Enum(WalletItemType, name="wallet_item_type", native_enum=False, length=2),
        nullable=False,
    )
    description = Column(String(500))
    value = Column(MONEY, nullable=False)

    wallet = relationship("Wallet", back_populates="items")
