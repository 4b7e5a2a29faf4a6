from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

SUCCESS = "success"
CARD_DECLINED = "card_declined"
PROCESSOR_ERROR = "processor_error"
TRANSIENT_ERROR = "transient_error"


class OutcomeKind:
    SUCCESS = SUCCESS
    CARD_DECLINED = CARD_DECLINED
    PROCESSOR_ERROR = PROCESSOR_ERROR
    TRANSIENT_ERROR = TRANSIENT_ERROR

    # Outcomes an operator should hear about.
    ALERTING = frozenset({PROCESSOR_ERROR, TRANSIENT_ERROR})


@dataclass(frozen=True)
class DonationRequest:
    """
    Raw donation fields as submitted. Nothing is validated here; amount and
    token go to the processor untouched.
    """

    amount: Optional[str]
    token: Optional[str]
    email: Optional[str]

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "DonationRequest":
        def _val(name: str) -> Optional[str]:
            v = fields.get(name)
            return None if v is None else str(v)

        return cls(amount=_val("amount"), token=_val("token"), email=_val("email"))


@dataclass(frozen=True)
class ChargeOutcome:
    kind: str
    detail: str = ""
    http_status: int = 200
    error_body: Dict[str, Any] = field(default_factory=dict)
    charge_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == SUCCESS

    @property
    def alerting(self) -> bool:
        return self.kind in OutcomeKind.ALERTING

    @classmethod
    def success(cls, charge_id: Optional[str] = None) -> "ChargeOutcome":
        return cls(kind=SUCCESS, charge_id=charge_id)
