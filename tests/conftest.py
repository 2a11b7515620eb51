import pytest
from datetime import datetime
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from database.database import Base
from database.models import Inventory
from messaging.producer import ProducerHandler


@pytest.fixture
def mock_producer():
    """confluent_kafka.Producer stand-in whose flush() always succeeds"""
    producer = MagicMock()
    producer.flush.return_value = 0
    producer.poll.return_value = 0
    return producer


@pytest.fixture
def handler(mock_producer):
    return ProducerHandler(mock_producer)


@pytest.fixture
def inventory():
    return Inventory(
        id=7,
        sku="SKU-007",
        name="Standing desk",
        quantity=12,
        warehouse="ICN-1",
        created_at=datetime(2024, 5, 1, 9, 30),
        updated_at=datetime(2024, 5, 2, 18, 0),
    )


@pytest.fixture
def engine(tmp_path):
    # file-backed so every session gets its own connection
    engine = create_engine(f"sqlite:///{tmp_path / 'inventory.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
