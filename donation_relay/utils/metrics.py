from prometheus_client import Counter

CHARGES = Counter(
    "donation_relay_charges_total",
    "Charge attempts by classified outcome.",
    ["outcome"],
)

NOTIFICATIONS = Counter(
    "donation_relay_notifications_total",
    "Notification attempts by channel and result.",
    ["channel", "result"],
)
