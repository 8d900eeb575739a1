"""
Конфигурация базы данных.

Содержит движок SQLAlchemy, фабрику сессий и границу транзакции
для мутирующих операций.
"""

from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from catalog.core.config import settings

# Для SQLite нужен check_same_thread=False (сессия живет в потоке запроса)
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# Создание движка SQLAlchemy
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Проверка соединения перед использованием
    future=True,  # Использование новых API SQLAlchemy 2.0
    echo=bool(settings.DEBUG),  # Логирование SQL запросов в режиме отладки
    connect_args=connect_args,
)


# Фабрика сессий базы данных
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True
)


def get_db() -> Generator:
    """
    Dependency для получения сессии базы данных.

    Yields:
        Session: Сессия SQLAlchemy

    Note:
        Автоматически закрывает сессию после использования
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Атомарная единица работы.

    Проверка уникальности, запись и каскад выполняются внутри одного
    блока: при успехе изменения фиксируются, при любом исключении
    откатываются и исключение пробрасывается дальше.

    Args:
        db: Сессия SQLAlchemy

    Yields:
        Session: Та же сессия
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
