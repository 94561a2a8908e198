"""
Flask extensions - created here, bound to the app in __init__.py.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

# SQLAlchemy - ORM used by every model (User, Supplier, Order, ...)
db = SQLAlchemy()

# Flask-Migrate - Alembic wrapper
# Commands: flask db migrate, flask db upgrade
migrate = Migrate()

# Flask-CORS - the SPA frontend is served from a different origin
cors = CORS()
