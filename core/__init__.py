"""Ядро анкеты: валидация, машина состояний, контроллер"""
