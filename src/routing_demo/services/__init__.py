"""Внешние сервисы, используемые маршрутами."""
