"""
Универсальный движок жизненного цикла записей с мягким удалением.

Движок не знает о конкретных сущностях: все различия между категориями,
товарами и пользователями описываются значением ResourceKind (фабрика,
маппер в схему ответа, проверки, хуки после удаления). Сессия базы данных
передается в каждую операцию явно.
"""

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Type,
    TypeVar,
)

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.core.errors import Conflict, NotFound
from catalog.db.database import transaction

logger = logging.getLogger(__name__)


class SoftDeletable(Protocol):
    """Любая запись с идентификатором и флагом мягкого удаления."""

    id: int
    deleted: bool


RecordT = TypeVar("RecordT", bound=SoftDeletable)
ViewT = TypeVar("ViewT")

Changes = Dict[str, Any]
DeleteHook = Callable[[Session, Any], None]


@dataclass
class ResourceKind(Generic[RecordT, ViewT]):
    """
    Описание вида ресурса, которым параметризуется движок.

    Attributes:
        label: Имя вида для сообщений и логов ("Category", "Product", ...)
        model: Класс модели SQLAlchemy
        build: Фабрика новой записи из входных данных
        to_view: Преобразование записи в схему ответа
        updatable_fields: Поля, к которым применяется частичное обновление
        conflict_message: Сообщение при нарушении ограничения уникальности в БД
        validate: Проверка входных данных при создании
        update_guard: Проверка перед частичным обновлением (может дополнить changes)
        check_unique: Проверка уникальности после применения изменений
        after_write: Проверка после записи в БД внутри той же транзакции
        post_delete: Хуки, выполняемые в той же транзакции после удаления
    """

    label: str
    model: Type[RecordT]
    build: Callable[[Session, Changes], RecordT]
    to_view: Callable[[RecordT], ViewT]
    updatable_fields: Sequence[str]
    conflict_message: str
    validate: Optional[Callable[[Changes], None]] = None
    update_guard: Optional[Callable[[Session, RecordT, Changes], None]] = None
    check_unique: Optional[Callable[[Session, RecordT], None]] = None
    after_write: Optional[Callable[[Session, RecordT], None]] = None
    post_delete: List[DeleteHook] = field(default_factory=list)

    def on_delete(self, hook: DeleteHook) -> DeleteHook:
        """Регистрирует хук после удаления (можно использовать как декоратор)."""
        self.post_delete.append(hook)
        return hook


def as_changes(data: Any) -> Changes:
    """Нормализует входные данные (pydantic схема или словарь) в словарь."""
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, Mapping):
        return dict(data)
    raise TypeError(f"Unsupported input type: {type(data).__name__}")


def is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def apply_partial_update(
    record: Any, changes: Mapping[str, Any], fields: Sequence[str]
) -> List[str]:
    """
    Применяет частичное обновление к записи.

    Поле перезаписывается только если значение передано, не пустое
    (для строк) и отличается от текущего. Остальные поля не трогаются.

    Args:
        record: Обновляемая запись
        changes: Новые значения полей
        fields: Разрешенные к обновлению поля

    Returns:
        List[str]: Имена реально измененных полей
    """
    changed = []
    for name in fields:
        value = changes.get(name)
        if value is None or is_blank(value):
            continue
        if value == getattr(record, name):
            continue
        setattr(record, name, value)
        changed.append(name)
    return changed


class LifecycleEngine(Generic[RecordT, ViewT]):
    """Операции create/get/list/update/delete/reactivate для одного вида ресурса."""

    def __init__(self, kind: ResourceKind[RecordT, ViewT]):
        self.kind = kind

    # ==================== ЧТЕНИЕ ====================

    def get_by_id(
        self, db: Session, record_id: int, for_update: bool = False
    ) -> RecordT:
        """
        Получить запись по ID (удаленные записи тоже находятся).

        Args:
            db: Сессия базы данных
            record_id: ID записи
            for_update: Заблокировать строку до конца транзакции и перечитать ее

        Raises:
            NotFound: Если записи нет
        """
        record = db.get(
            self.kind.model,
            record_id,
            with_for_update=for_update,
            populate_existing=for_update,
        )
        if record is None:
            raise NotFound(f"{self.kind.label} not found")
        return record

    def _list(self, db: Session, deleted: Optional[bool] = None) -> List[RecordT]:
        model = self.kind.model
        stmt = select(model)
        if deleted is not None:
            stmt = stmt.where(model.deleted == deleted)
        return list(db.scalars(stmt.order_by(model.id)).all())

    def list_all(self, db: Session) -> List[RecordT]:
        """Все записи по возрастанию id."""
        return self._list(db)

    def list_active(self, db: Session) -> List[RecordT]:
        """Активные записи по возрастанию id."""
        return self._list(db, deleted=False)

    def list_deleted(self, db: Session) -> List[RecordT]:
        """Удаленные записи по возрастанию id."""
        return self._list(db, deleted=True)

    def views(self, records: Sequence[RecordT]) -> List[ViewT]:
        return [self.kind.to_view(r) for r in records]

    # ==================== ИЗМЕНЕНИЕ ====================

    def _flush(self, db: Session) -> None:
        # Ограничения уникальности в БД закрывают гонку между проверкой и записью
        try:
            db.flush()
        except IntegrityError as exc:
            logger.warning(f"{self.kind.label} integrity error: {exc.orig}")
            raise Conflict(self.kind.conflict_message) from exc

    def create(
        self,
        db: Session,
        data: Any,
        *,
        exists: Callable[[Session], bool],
        conflict_message: str,
    ) -> ViewT:
        """
        Создать активную запись.

        Args:
            db: Сессия базы данных
            data: Входные данные
            exists: Предикат дубликата, вычисляется внутри транзакции
            conflict_message: Причина ошибки при найденном дубликате

        Returns:
            Схема ответа созданной записи

        Raises:
            ValidationFailed: Входные данные не прошли проверку
            Conflict: Предикат дубликата истинен
        """
        changes = as_changes(data)
        with transaction(db):
            if self.kind.validate is not None:
                self.kind.validate(changes)
            if exists(db):
                logger.warning(f"{self.kind.label} create rejected: {conflict_message}")
                raise Conflict(conflict_message)
            record = self.kind.build(db, changes)
            record.deleted = False
            db.add(record)
            self._flush(db)
            if self.kind.after_write is not None:
                self.kind.after_write(db, record)
        logger.info(f"{self.kind.label} {record.id} created")
        return self.kind.to_view(record)

    def update(self, db: Session, record_id: int, data: Any) -> ViewT:
        """
        Частично обновить запись.

        Raises:
            NotFound: Если записи нет
            Conflict: Нарушена уникальность или запрет вида ресурса
        """
        changes = as_changes(data)
        with transaction(db):
            record = self.get_by_id(db, record_id, for_update=True)
            if self.kind.update_guard is not None:
                self.kind.update_guard(db, record, changes)
            changed = apply_partial_update(record, changes, self.kind.updatable_fields)
            if changed:
                if self.kind.check_unique is not None:
                    self.kind.check_unique(db, record)
                self._flush(db)
                db.refresh(record)
                if self.kind.after_write is not None:
                    self.kind.after_write(db, record)
        if changed:
            logger.info(f"{self.kind.label} {record_id} updated: {', '.join(changed)}")
        return self.kind.to_view(record)

    def delete(self, db: Session, record_id: int) -> RecordT:
        """
        Мягко удалить запись и выполнить хуки после удаления.

        Повторное удаление уже удаленной записи не является ошибкой.
        """
        with transaction(db):
            record = self.get_by_id(db, record_id, for_update=True)
            record.deleted = True
            for hook in self.kind.post_delete:
                hook(db, record)
            self._flush(db)
        logger.info(f"{self.kind.label} {record_id} deleted")
        return record

    def reactivate(self, db: Session, record_id: int) -> ViewT:
        """
        Вернуть удаленную запись в активное состояние. Каскада нет.

        Raises:
            NotFound: Если записи нет
            Conflict: Запись уже активна
        """
        with transaction(db):
            record = self.get_by_id(db, record_id, for_update=True)
            if not record.deleted:
                raise Conflict(f"{self.kind.label} is already active")
            record.deleted = False
            self._flush(db)
        logger.info(f"{self.kind.label} {record_id} reactivated")
        return self.kind.to_view(record)
