"""Health Service: Patients and their prescriptions.

Patients and prescriptions live in separate repositories; prescriptions
are grouped by patient id into a lookup map for display.
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Callable

from recordkeeper.domain.models import Patient, Prescription
from recordkeeper.infrastructure import TypedRepository


class HealthSystemApp:
    """Patient records with a prescription-by-patient index.

    Example:
        >>> app = HealthSystemApp()
        >>> app.seed_data()
        >>> app.build_prescription_map()
        >>> app.print_prescriptions_for_patient(1)
    """

    def __init__(
        self,
        echo: Callable[[str], None] = print,
        today: date | None = None,
    ):
        self._echo = echo
        self._today = today or date.today()
        self._patients: TypedRepository[Patient] = TypedRepository("patients")
        self._prescriptions: TypedRepository[Prescription] = TypedRepository("prescriptions")
        self._prescription_map: dict[int, list[Prescription]] = {}

    @property
    def patients(self) -> TypedRepository[Patient]:
        return self._patients

    @property
    def prescriptions(self) -> TypedRepository[Prescription]:
        return self._prescriptions

    def seed_data(self) -> None:
        """Insert sample patients and prescriptions.

        Raises:
            DuplicateKeyError: If called twice on the same app
        """
        for patient in (
            Patient(1, "John Doe", 35, "Male"),
            Patient(2, "Jane Smith", 28, "Female"),
            Patient(3, "Bob Johnson", 45, "Male"),
        ):
            self._patients.add(patient)

        def days_ago(n: int) -> date:
            return self._today - timedelta(days=n)

        for prescription in (
            Prescription(1, 1, "Amoxicillin", days_ago(5)),
            Prescription(2, 1, "Ibuprofen", days_ago(3)),
            Prescription(3, 2, "Paracetamol", days_ago(2)),
            Prescription(4, 2, "Aspirin", days_ago(1)),
            Prescription(5, 3, "Cetirizine", days_ago(0)),
        ):
            self._prescriptions.add(prescription)

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """Group all prescriptions by patient id."""
        grouped: dict[int, list[Prescription]] = defaultdict(list)
        for prescription in self._prescriptions.get_all():
            grouped[prescription.patient_id].append(prescription)
        self._prescription_map = dict(grouped)
        return self._prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        """Prescriptions for a patient, empty if none were mapped."""
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        self._echo("\nAll Patients:")
        for patient in self._patients.get_all():
            self._echo(str(patient))

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        patient = self._patients.find_by(lambda p: p.id == patient_id)
        if patient is None:
            self._echo(f"\nNo patient found with ID: {patient_id}")
            return

        self._echo(f"\nPrescriptions for {patient.name}:")
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            self._echo("No prescriptions found.")
            return

        for prescription in prescriptions:
            self._echo(str(prescription))

    def run(self, patient_id: int = 1) -> None:
        self._echo("Healthcare System\n")
        self.seed_data()
        self.build_prescription_map()
        self.print_all_patients()
        self.print_prescriptions_for_patient(patient_id)
