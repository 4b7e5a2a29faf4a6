import logging
import os
import sys

from donation_relay import ConfigError, create_app

try:
    app = create_app()
except ConfigError as e:
    logging.basicConfig(level=logging.INFO)
    logging.getLogger("donation_relay").critical(str(e))
    sys.exit(1)

if __name__ == "__main__":
    port = int(os.getenv("PORT", 5050))
    app.run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=port,
        debug=False,
        use_reloader=False,
        threaded=True,
    )

# Local:
#   cp .env.example .env   # then fill in STRIPE_KEYS at least
#   PORT=5050 poetry run python run.py
#
# Flask CLI (config validated when the app is built):
#   poetry run flask --app donation_relay:create_app run --port 5050
#
# Background notifications (NOTIFY_USE_QUEUE=1):
#   poetry run rq worker -u $REDIS_URL --with-scheduler
