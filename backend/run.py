"""
Run script for the Approved Words API.

Usage:
    python run.py

Creates the tables on first run when they do not exist yet. Use
`flask --app app db upgrade` instead once migrations are in place.
"""

import logging
from app import create_app
from extensions import db

logger = logging.getLogger(__name__)

if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
    logger.info("Starting Approved Words API...")
    logger.info("API available at: http://localhost:5000/api")
    logger.info("Words list: http://localhost:5000/api/words")
    app.run(debug=True, host='0.0.0.0', port=5000)
