from __future__ import annotations

# Tabela fixa de acentos (somente minúsculas: o texto é rebaixado antes)
WITH_ACCENT_MARKS = "áãâäàéèêëíìîïóôõöòúùûüñ"
WITHOUT_ACCENT_MARKS = "aaaaaeeeeiiiiooooouuuun"

_ACCENT_TABLE = str.maketrans(WITH_ACCENT_MARKS, WITHOUT_ACCENT_MARKS)
_SPACE_TABLE = str.maketrans("", "", " ")


def remove_accent_marks(text: str) -> str:
    return (text or "").lower().translate(_ACCENT_TABLE)


def normalize(text: str) -> str:
    """Chave de comparação: minúsculas, sem acentos e sem espaços.

    Apenas o caractere de espaço comum é removido; tabs e quebras de linha
    permanecem. Caracteres fora da tabela passam sem alteração.
    """
    if not text:
        return ""
    return remove_accent_marks(text).translate(_SPACE_TABLE)
