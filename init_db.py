"""
Database initialization script.
This script creates all database tables.
Run this as: python init_db.py
"""

import logging
import sys

from talkus.core.config import settings
from talkus.db.init_db import create_all_tables

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

def main() -> int:
    logger.info(f"Creating tables for {settings.ENVIRONMENT} database")
    if not create_all_tables():
        logger.error("Database initialization failed")
        return 1
    logger.info("Database tables created")
    return 0

if __name__ == "__main__":
    sys.exit(main())
