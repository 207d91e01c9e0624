"""
run.py - Entry point để chạy backend Gerador de Times
"""
import logging
import os
from teamgen import create_app

env = os.getenv("FLASK_ENV", "development")
app = create_app(env)

logging.basicConfig(
    level=app.config["LOG_LEVEL"],
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Tu dong tao bang khi khoi dong
with app.app_context():
    from teamgen.extensions import db
    db.create_all()

if __name__ == "__main__":
    app.run(
        host="0.0.0.0",
        port=int(os.getenv("PORT", 3000)),
        debug=(env == "development"),
    )
