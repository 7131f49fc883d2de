"""Run the teacher panel API: `python app.py` (APP_ENV selects the settings)."""

import os

from src.aura_panel.aura_panel.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")))
