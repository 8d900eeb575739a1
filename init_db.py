#!/usr/bin/env python3
"""
Скрипт для инициализации базы данных каталога.
"""

import logging
import sys
from pathlib import Path

# Добавляем путь к пакету catalog
sys.path.insert(0, str(Path(__file__).parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from catalog.db.database import engine
from catalog.db.models import Base

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("init_db")


def init_database() -> bool:
    """Создает все таблицы в базе данных."""
    logger.info(f"Initializing database {engine.url.render_as_string(hide_password=True)}")

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        return False

    tables = inspect(engine).get_table_names()
    logger.info(f"Tables: {', '.join(tables)}")
    return True


if __name__ == "__main__":
    success = init_database()
    if not success:
        sys.exit(1)
