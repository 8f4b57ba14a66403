"""
King Tire Inventory: tire stock manager for the shop counter.
"""
