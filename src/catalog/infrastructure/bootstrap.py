"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    init_schema,
)
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()

    if settings.storage == "memory":
        return InMemoryProductRepository()

    if settings.storage == "sql":
        if settings.database_url is None:
            settings.data_dir.mkdir(parents=True, exist_ok=True)
        engine = create_db_engine(
            settings.resolved_database_url, settings.db_timeout_seconds
        )
        init_schema(engine)
        return SqlAlchemyProductRepository(create_session_factory(engine))

    return JsonProductRepository(settings.products_file)
