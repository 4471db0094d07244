#!/usr/bin/env python3
"""
Quick example demonstrating smart-house basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from smart_house import (
    SmartHouse,
    RoomNotFound,
    DeviceNotFound,
    OwningDeviceInfoProvider,
    BorrowingDeviceInfoProvider,
    SmartSocket,
    SmartThermometer,
)
from smart_house.demo import run_all

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

print("=" * 60)
print("smart-house Example")
print("=" * 60)

# 1. Build a house
print("\n1. Building house...")
house = SmartHouse("My house")
house.add_room("Room A")
house.add_room("Room B")
house.add_device("Room A", "Socket 1")
house.add_device("Room B", "Socket 2")
house.add_device("Room B", "Thermometer 1")
print(f"   ✓ Rooms: {house.get_rooms()}")
for room in house.get_rooms():
    print(f"   ✓ {room}: {house.get_devices(room)}")

# 2. Failed lookups are recoverable
print("\n2. Querying missing rooms and devices...")
try:
    house.get_devices("Room C")
except RoomNotFound as e:
    print(f"   ✓ {e}")
try:
    house.remove_device("Room A", "Socket 9")
except DeviceNotFound as e:
    print(f"   ✓ {e}")

# 3. Owning provider
print("\n3. Report with owning provider...")
owning = OwningDeviceInfoProvider.with_default_socket()
print(house.create_report(owning))

# 4. Borrowing provider
print("4. Report with borrowing provider...")
socket = SmartSocket(name="Socket 2", state="broken")
thermometer = SmartThermometer(name="Thermometer 1", temperature=25.4)
borrowing = BorrowingDeviceInfoProvider(socket, thermometer)
print(house.create_report(borrowing))

thermometer.temperature = 19.5
print("   Thermometer updated by its owner:")
print(house.create_report(borrowing))

# 5. Demo scenarios
print("5. Running demo scenarios...")
for kind, report in run_all().items():
    print(f"--- {kind} ---")
    print(report)

print("=" * 60)
print("Example complete!")
print("=" * 60)
