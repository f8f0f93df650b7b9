"""
Запись заполненных анкет в файл
"""
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from core.exceptions import RecordSinkError
from models.session import SurveyRecord
from utils.formatters import format_record

logger = logging.getLogger(__name__)


class RecordSink(ABC):
    """Интерфейс хранилища анкет: только дописывание"""

    @abstractmethod
    def append(self, record: SurveyRecord) -> None:
        """Дописать заполненную анкету; RecordSinkError при сбое"""


class FileRecordSink(RecordSink):
    """Дописывает каждую анкету блоком из пяти строк `Метка:значение`"""

    def __init__(self, path: Union[str, Path] = "data.txt"):
        self.path = Path(path)
        self._lock = threading.Lock()
        self.records_written = 0

    def append(self, record: SurveyRecord) -> None:
        if not record.is_complete:
            raise ValueError("Only complete records can be persisted")

        block = format_record(record)
        with self._lock:
            try:
                if self.path.parent and not self.path.parent.exists():
                    self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(block)
            except OSError as e:
                logger.error(f"❌ Ошибка записи анкеты в {self.path}: {e}")
                raise RecordSinkError(f"Cannot append record to {self.path}") from e
            self.records_written += 1

        logger.info(f"💾 Анкета сохранена в {self.path}")
