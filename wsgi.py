"""
NaijaFind - WSGI Entry Point for Gunicorn.

Used in production (Heroku, etc.)
"""

from dotenv import load_dotenv

# Load .env if present
load_dotenv()

from naijafind import create_app

app = create_app()
