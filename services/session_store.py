"""
Хранилище сессий анкеты в памяти процесса
"""
import asyncio
import logging
import threading
from typing import Dict, List, Optional

from models.session import SurveySession

logger = logging.getLogger(__name__)


class SessionStore:
    """Одна сессия на пользователя, живет до остановки процесса"""

    def __init__(self):
        self.user_sessions: Dict[int, SurveySession] = {}
        self._user_locks: Dict[int, asyncio.Lock] = {}

        # Семафор для thread-safe операций со словарями
        self._lock = threading.Lock()

        logger.info("✅ SessionStore инициализирован")

    def get_or_create(self, user_id: int) -> SurveySession:
        """Получить или создать сессию"""
        with self._lock:
            session = self.user_sessions.get(user_id)
            if session is None:
                session = SurveySession(user_id=user_id)
                self.user_sessions[user_id] = session
                logger.info(f"🆕 Новая сессия для пользователя {user_id}")
            return session

    def get_session(self, user_id: int) -> Optional[SurveySession]:
        """Получить сессию по ID пользователя"""
        with self._lock:
            return self.user_sessions.get(user_id)

    def lock_for(self, user_id: int) -> asyncio.Lock:
        """
        Блокировка пользователя: одно событие за раз на одну сессию

        Обработчик держит ее на время advance и отправки ответов, чтобы
        события одного пользователя применялись строго по порядку.
        """
        with self._lock:
            lock = self._user_locks.get(user_id)
            if lock is None:
                lock = asyncio.Lock()
                self._user_locks[user_id] = lock
            return lock

    def get_all_sessions(self) -> List[SurveySession]:
        with self._lock:
            return list(self.user_sessions.values())

    def get_session_count(self) -> int:
        """Получить количество сессий"""
        with self._lock:
            return len(self.user_sessions)

    def get_completed_count(self) -> int:
        with self._lock:
            return sum(1 for s in self.user_sessions.values() if s.is_complete)
