"""
Общая конфигурация pytest.

Профиль hypothesis без deadline на отдельный пример.
"""

from hypothesis import settings

settings.register_profile("default", deadline=None)
settings.load_profile("default")
