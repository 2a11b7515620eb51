from sqlalchemy.orm import Session
from . import models

# Kafka publishing happens in observers.inventory_observer through mapper
# events, so these helpers only deal with the database.

def create_inventory(db: Session, inventory_data: dict):
    db_inventory = models.Inventory(**inventory_data)
    db.add(db_inventory)
    db.commit()
    db.refresh(db_inventory)
    return db_inventory

def get_inventory(db: Session, inventory_id: int):
    return db.query(models.Inventory).filter(models.Inventory.id == inventory_id).first()

def get_inventory_by_sku(db: Session, sku: str):
    return db.query(models.Inventory).filter(models.Inventory.sku == sku).first()

def get_inventories(db: Session, skip: int = 0, limit: int = 100):
    return db.query(models.Inventory).order_by(models.Inventory.id).offset(skip).limit(limit).all()

def update_inventory(db: Session, inventory_id: int, update_data: dict):
    db_inventory = get_inventory(db, inventory_id)
    if db_inventory:
        for key, value in update_data.items():
            setattr(db_inventory, key, value)
        db.commit()
        db.refresh(db_inventory)
    return db_inventory

def delete_inventory(db: Session, inventory_id: int):
    db_inventory = get_inventory(db, inventory_id)
    if db_inventory:
        db.delete(db_inventory)
        db.commit()
        return True
    return False
