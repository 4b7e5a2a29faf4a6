from dataclasses import dataclass

EMAIL = "email"
PUSH = "push"

SUCCESS = "success"
FAILURE = "failure"


@dataclass(frozen=True)
class NotificationEvent:
    channel: str  # "email" | "push"
    kind: str  # "success" | "failure"
    subject: str
    body: str
