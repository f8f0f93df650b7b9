"""Сервисы бота"""
from .session_store import SessionStore
from .record_sink import RecordSink, FileRecordSink

__all__ = ['SessionStore', 'RecordSink', 'FileRecordSink']
