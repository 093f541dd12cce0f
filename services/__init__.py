"""Ledger services."""
from services.auth import PasswordGate, SessionManager
from services.expenses import ExpenseService
from services.mileage import MileageService
from services.refills import RefillService, calculate_efficiency
from services.trips import TripService

__all__ = [
    "PasswordGate",
    "SessionManager",
    "ExpenseService",
    "RefillService",
    "TripService",
    "MileageService",
    "calculate_efficiency",
]
