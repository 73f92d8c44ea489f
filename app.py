"""WSGI entry point: ``flask --app app run``."""

import os

from src.gate_attendance.gate_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8080")), debug=app.config["DEBUG"])
