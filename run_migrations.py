#!/usr/bin/env python
"""
Script to run database migrations before starting the server.
This ensures migrations run with proper Flask app context.
"""
import logging
import os
import sys

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger('run_migrations')


def main():
    db_url = os.getenv('DATABASE_URL')
    if not db_url:
        logger.error("DATABASE_URL environment variable is not set")
        return 1

    logger.info(f"Database: {db_url.split('/')[-1] if '/' in db_url else 'unknown'}")

    from agency import create_app
    from agency.extensions import db
    from flask_migrate import upgrade

    app = create_app()
    with app.app_context():
        try:
            with db.engine.connect():
                logger.info("Database connection successful")
        except Exception:
            logger.exception("Database connection failed")
            return 1

        try:
            upgrade()
        except Exception:
            logger.exception("Migration error")
            return 1

    logger.info("Migrations completed successfully")
    return 0


if __name__ == '__main__':
    sys.exit(main())
