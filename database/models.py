from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from .database import Base

class Inventory(Base):
    __tablename__ = "inventories"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Inventory ID (PK, partition key)")
    sku = Column(String(64), nullable=False, unique=True, index=True, comment="SKU")
    name = Column(String(200), nullable=False, comment="Product name")
    quantity = Column(Integer, nullable=False, default=0, comment="Quantity on hand")
    warehouse = Column(String(100), nullable=True, index=True, comment="Warehouse")

    # Python-side defaults: the values are on the instance right after flush,
    # so mapper event listeners can serialize them without reloading.
    created_at = Column(DateTime, default=datetime.now, nullable=False, comment="Created at")
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False, comment="Updated at")

    def to_dict(self):
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

    def __repr__(self):
        return f"<Inventory(id={self.id}, sku={self.sku}, quantity={self.quantity})>"
