"""Конфигурация бота"""
