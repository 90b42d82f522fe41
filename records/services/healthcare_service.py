"""Healthcare service - patients and their prescriptions."""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from records.console import print_info
from records.models.domain import Patient, Prescription
from records.repositories.keyed_repository import KeyedRepository


class HealthcareService:
    """
    Service for patient and prescription records.

    Prescriptions are grouped by patient in a lookup map that is rebuilt on
    demand with ``build_prescription_map``; it does not track later adds.
    """

    def __init__(
        self,
        patients: Optional[KeyedRepository[Patient]] = None,
        prescriptions: Optional[KeyedRepository[Prescription]] = None,
    ):
        self.patients = patients if patients is not None else KeyedRepository()
        self.prescriptions = prescriptions if prescriptions is not None else KeyedRepository()
        self._prescription_map: Dict[int, List[Prescription]] = {}

    def seed_data(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.now()
        self.patients.add(Patient(1, "Alice Owusu", 30, "Female"))
        self.patients.add(Patient(2, "Timothy Ninsin", 45, "Male"))
        self.patients.add(Patient(3, "Kukua Ama", 28, "Male"))

        self.prescriptions.add(Prescription(1, 1, "Amoxicillin", now - timedelta(days=10)))
        self.prescriptions.add(Prescription(2, 1, "Paracetamol", now - timedelta(days=5)))
        self.prescriptions.add(Prescription(3, 2, "Ibuprofen", now - timedelta(days=7)))
        self.prescriptions.add(Prescription(4, 3, "Aspirin", now - timedelta(days=3)))
        self.prescriptions.add(Prescription(5, 2, "Cough Syrup", now - timedelta(days=1)))

    def build_prescription_map(self) -> None:
        """Group current prescriptions by patient id."""
        self._prescription_map.clear()
        for prescription in self.prescriptions.get_all():
            self._prescription_map.setdefault(prescription.patient_id, []).append(prescription)

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        for patient in self.patients.get_all():
            print(f"ID: {patient.id}, Name: {patient.name}, Age: {patient.age}, Gender: {patient.gender}")

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            print_info("No prescriptions found for this patient.")
            return

        for p in prescriptions:
            print(f"Prescription ID: {p.id}, Medication: {p.medication_name}, Date Issued: {p.date_issued:%Y-%m-%d}")
