"""
Функциональные модули приложения.

- comment: CRUD комментариев
- system: проверка здоровья сервиса
"""
