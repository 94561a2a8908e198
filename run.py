"""
NaijaFind - Development Server Entry Point.

Run with: python run.py
"""

import os
from dotenv import load_dotenv

# Load .env
load_dotenv()

from naijafind import create_app

app = create_app()

if __name__ == '__main__':
    debug = os.environ.get('FLASK_ENV') == 'development'
    # Heroku sets PORT, local development uses 8000
    port = 8000 if debug else int(os.environ.get('PORT', 5000))

    print(f"""
    =================================================
           NaijaFind Development Server
    =================================================
      URL: http://localhost:{port}
      API: http://localhost:{port}/api/v1
      Public API: http://localhost:{port}/api/public
      Admin API: http://localhost:{port}/api/admin
    =================================================
    """)

    app.run(
        host='0.0.0.0',
        port=port,
        debug=debug
    )
