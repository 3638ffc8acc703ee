"""SQL implementation of ProductRepository, built on SQLAlchemy."""

from __future__ import annotations

from datetime import datetime, timezone

import structlog
from sqlalchemy import Column, DateTime, Integer, Numeric, String, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from catalog.domain.exceptions import AlreadyExistsError, ProductNotFoundError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.database import Base

logger = structlog.get_logger(__name__)


class ProductRecord(Base):
    """Row model for the ``products`` table."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=False, default="")
    sku = Column(String(50), nullable=False, unique=True, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=False)
    brand = Column(String(100), nullable=False, default="")
    stock = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default=ProductStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<ProductRecord(id={self.id}, sku='{self.sku}', name='{self.name}')>"


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; everything is stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        record = ProductRecord()
        self._copy_to_record(product, record)
        with self._session_factory() as session:
            session.add(record)
            self._commit(session, product.sku)
            session.refresh(record)
            return self._to_domain(record)

    def get_by_id(self, product_id: int) -> Product:
        with self._session_factory() as session:
            record = session.get(ProductRecord, product_id)
            if record is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")
            return self._to_domain(record)

    def get_by_sku(self, sku: str) -> Product:
        with self._session_factory() as session:
            record = session.scalars(
                select(ProductRecord).where(ProductRecord.sku == sku)
            ).first()
            if record is None:
                raise ProductNotFoundError(f"Product with SKU '{sku}' not found")
            return self._to_domain(record)

    def exists_by_sku(self, sku: str) -> bool:
        with self._session_factory() as session:
            count = session.scalar(
                select(func.count()).select_from(ProductRecord).where(ProductRecord.sku == sku)
            )
            return bool(count)

    def update(self, product: Product) -> Product:
        with self._session_factory() as session:
            record = session.get(ProductRecord, product.id)
            if record is None:
                raise ProductNotFoundError(f"Product #{product.id} not found")
            self._copy_to_record(product, record)
            self._commit(session, product.sku)
            session.refresh(record)
            return self._to_domain(record)

    def list(self, limit: int, offset: int) -> list[Product]:
        with self._session_factory() as session:
            records = session.scalars(
                select(ProductRecord).order_by(ProductRecord.id).offset(offset).limit(limit)
            ).all()
            return [self._to_domain(r) for r in records]

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(ProductRecord)) or 0

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _commit(session: Session, sku: str) -> None:
        """Commit, turning a unique-SKU violation into AlreadyExistsError."""
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            if "sku" in str(exc.orig).lower():
                raise AlreadyExistsError(sku) from exc
            logger.error("products.integrity_error", sku=sku, error=str(exc.orig))
            raise

    @staticmethod
    def _copy_to_record(product: Product, record: ProductRecord) -> None:
        if product.id is not None:
            record.id = product.id
        record.name = product.name
        record.description = product.description
        record.sku = product.sku
        record.price = product.price.amount
        record.category = product.category
        record.brand = product.brand
        record.stock = product.stock
        record.status = product.status.value
        record.created_at = product.created_at
        record.updated_at = product.updated_at

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            description=record.description or "",
            sku=record.sku,
            price=Money(record.price),
            category=record.category,
            brand=record.brand or "",
            stock=record.stock,
            status=ProductStatus(record.status),
            created_at=_as_utc(record.created_at),
            updated_at=_as_utc(record.updated_at),
        )
