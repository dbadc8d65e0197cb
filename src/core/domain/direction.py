"""
Direction — Направление ранжирования

Одно двузначное перечисление вместо пары взаимоисключающих флагов
most/least.
"""

from enum import Enum


class Direction(str, Enum):
    """Какие номера попадают в пул: самые частые или самые редкие"""

    MOST = "most"
    LEAST = "least"

    @property
    def label(self) -> str:
        """Человекочитаемая подпись для отчёта ('most frequent' / 'least frequent')"""
        return f"{self.value} frequent"
