from __future__ import annotations


class DatasetUnavailableError(Exception):
    """A base de pessoas não pôde ser obtida (rede, arquivo ou JSON inválido)."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Base indisponível ({source}): {reason}")
