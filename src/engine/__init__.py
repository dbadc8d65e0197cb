"""Engine — composition root ядра.

FrequencyTable → Ranker → ComboGenerator, без I/O и логирования.
Через этот шов ядро вызывают CLI, скрейпер и форматтер.
"""

from .engine import (
    DEFAULT_DIRECTION,
    DEFAULT_POOL_SIZE,
    DEFAULT_SELECT_SIZE,
    EngineResult,
    LottoEngine,
    generate,
)

__all__ = [
    "DEFAULT_DIRECTION",
    "DEFAULT_POOL_SIZE",
    "DEFAULT_SELECT_SIZE",
    "EngineResult",
    "LottoEngine",
    "generate",
]
