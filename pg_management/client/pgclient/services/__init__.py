from .outcomes import SubmitOutcome
from .rent_payment_dialog import RentPaymentDialog
from .one_off_payments import submit_advance, submit_refund

__all__ = [
    "RentPaymentDialog",
    "SubmitOutcome",
    "submit_advance",
    "submit_refund",
]
