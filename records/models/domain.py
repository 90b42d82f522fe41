"""Domain entities - in-memory records for the demo programs."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class ElectronicItem:
    """Warehouse electronics stock entry."""
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass
class GroceryItem:
    """Warehouse grocery stock entry."""
    id: int
    name: str
    quantity: int
    expiry_date: datetime


@dataclass(frozen=True)
class Patient:
    """Patient domain entity."""
    id: int
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class Prescription:
    """Prescription issued to a patient."""
    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime


@dataclass(frozen=True)
class Transaction:
    """Outgoing money transaction."""
    id: int
    date: datetime
    amount: Decimal
    category: str


@dataclass(frozen=True)
class Student:
    """Student exam result."""
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        """Letter grade for the score."""
        if 80 <= self.score <= 100:
            return "A"
        if 70 <= self.score <= 79:
            return "B"
        if 60 <= self.score <= 69:
            return "C"
        if 50 <= self.score <= 59:
            return "D"
        return "F"
