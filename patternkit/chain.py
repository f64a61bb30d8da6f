"""A patient passing through a chain of hospital desks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Patient:
    reception_checked: bool = False
    doctor_checked: bool = False
    medical_checked: bool = False
    cashier_checked: bool = False


class Handler:
    """One desk in the chain; marks its step and hands the patient on."""

    field: str = ""
    done_message: str = ""

    def __init__(self) -> None:
        self.next: Handler | None = None

    def set_next(self, handler: Handler) -> None:
        self.next = handler

    def check(self, patient: Patient) -> list[str]:
        """Process the patient and return the messages produced along the chain."""
        if getattr(patient, self.field):
            return [self.done_message, *self._forward(patient)]
        setattr(patient, self.field, True)
        return self._finish(patient)

    def _finish(self, patient: Patient) -> list[str]:
        return self._forward(patient)

    def _forward(self, patient: Patient) -> list[str]:
        if self.next is None:
            raise RuntimeError(f"{type(self).__name__} has no next handler")
        return self.next.check(patient)


class Reception(Handler):
    field = "reception_checked"
    done_message = "Resgiter done!"


class Doctor(Handler):
    field = "doctor_checked"
    done_message = "Doctor done!"


class Medical(Handler):
    field = "medical_checked"
    done_message = "Medical done!"


class Cashier(Handler):
    """The last desk; it ignores any next handler it is given."""

    field = "cashier_checked"
    done_message = "Pay done!"

    def set_next(self, handler: Handler) -> None:
        pass

    def _finish(self, patient: Patient) -> list[str]:
        return ["Done!"]


def main(argv: list[str] | None = None) -> int:
    """Send a new patient through reception, doctor, medical and cashier."""
    cashier = Cashier()
    medical = Medical()
    medical.set_next(cashier)
    doctor = Doctor()
    doctor.set_next(medical)
    reception = Reception()
    reception.set_next(doctor)
    print("".join(reception.check(Patient())))
    return 0