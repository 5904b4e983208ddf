from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Tuple

from .models import RawRecord, Record
from .normalizer import normalize


def language_tags(languages: Iterable[str]) -> Tuple[str, ...]:
    # Somente o nome das linguagens, em minúsculas e ordenado
    return tuple(sorted((lang or "").lower() for lang in languages))


def index_record(raw: RawRecord) -> Record:
    return Record(
        name=raw.name,
        picture_url=raw.picture_url,
        languages=tuple(raw.languages),
        search_key=normalize(raw.name),
        language_tags=language_tags(raw.languages),
        # Cópia somente-leitura: o registro indexado não muda depois de criado
        extra=MappingProxyType(dict(raw.extra)),
    )


def index_dataset(raws: Iterable[RawRecord]) -> Tuple[Record, ...]:
    """Deriva chave de busca e linguagens de cada registro, uma única vez."""
    return tuple(index_record(r) for r in raws)
