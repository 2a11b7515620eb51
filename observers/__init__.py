"""
Model observers publishing entity lifecycle events
"""

from .inventory_observer import InventoryObserver, register_inventory_observer

__all__ = ['InventoryObserver', 'register_inventory_observer']
