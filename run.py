# =============================================================================
# File: run.py
# Purpose: Entry point for development. Starts the schedule board API.
# =============================================================================
# run.py
import logging
import os

from schedule_board import create_app

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
