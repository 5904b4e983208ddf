from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RawRecord:
    name: str
    picture_url: str = ""
    languages: Tuple[str, ...] = ()
    # Demais campos do JSON de origem, repassados sem inspeção
    extra: Dict[str, object] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Record:
    name: str
    picture_url: str
    languages: Tuple[str, ...]
    search_key: str
    language_tags: Tuple[str, ...]
    extra: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}), compare=False)


class MatchMode(Enum):
    ANY = "any"  # "OU": ao menos uma linguagem em comum
    ALL = "all"  # "E": conjunto exato de linguagens

    @classmethod
    def parse(cls, value: "MatchMode | str") -> "MatchMode":
        if isinstance(value, MatchMode):
            return value
        key = (value or "").strip().lower()
        if key in ("any", "or", "ou"):
            return cls.ANY
        if key in ("all", "and", "e"):
            return cls.ALL
        raise ValueError(f"Modo de combinação desconhecido: {value!r}")


@dataclass(frozen=True)
class FilterParameters:
    active_tags: FrozenSet[str] = frozenset()
    match_mode: MatchMode = MatchMode.ANY
    search_term: str = ""


@dataclass(frozen=True)
class TagInfo:
    tag_id: str
    label: str
    image: str = ""


DEFAULT_TAGS: Tuple[TagInfo, ...] = (
    TagInfo(
        "java",
        "Java",
        "https://i.pinimg.com/originals/e9/94/61/e99461fdd5b3db8bdb3081d8acf5e524.png",
    ),
    TagInfo(
        "javascript",
        "JavaScript",
        "https://upload.wikimedia.org/wikipedia/commons/9/99/Unofficial_JavaScript_logo_2.svg",
    ),
    TagInfo(
        "python",
        "Python",
        "https://upload.wikimedia.org/wikipedia/commons/c/c3/Python-logo-notext.svg",
    ),
)


class TagCatalog:
    """Catálogo somente-leitura: id da linguagem -> rótulo e imagem.

    Define o universo de linguagens selecionáveis. Usado apenas para
    apresentação; o filtro não o consulta.
    """

    def __init__(self, tags: Iterable[TagInfo] | None = None):
        self._tags: Dict[str, TagInfo] = {}
        for t in DEFAULT_TAGS if tags is None else tags:
            self._tags[t.tag_id.lower()] = t

    @classmethod
    def from_file(cls, path: Path) -> "TagCatalog":
        # Mesmo formato dos checkboxes originais: {filter, description, image}
        def _invalid(reason: str) -> ValueError:
            return ValueError(f"Catálogo de linguagens inválido (TAG_CATALOG_PATH={path}): {reason}")

        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise _invalid(str(e)) from e
        except ValueError as e:
            raise _invalid("arquivo não é JSON válido") from e
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise _invalid("o JSON deve ser uma lista de objetos")

        tags: List[TagInfo] = []
        for item in data:
            tag_id = str(item.get("filter") or "").strip()
            if not tag_id:
                continue
            tags.append(
                TagInfo(
                    tag_id=tag_id.lower(),
                    label=str(item.get("description") or tag_id),
                    image=str(item.get("image") or ""),
                )
            )
        return cls(tags)

    def get(self, tag_id: str) -> Optional[TagInfo]:
        return self._tags.get((tag_id or "").lower())

    def label_for(self, tag_id: str) -> str:
        info = self.get(tag_id)
        return info.label if info else tag_id

    def ids(self) -> List[str]:
        return list(self._tags)

    def __contains__(self, tag_id: object) -> bool:
        return isinstance(tag_id, str) and tag_id.lower() in self._tags

    def __iter__(self) -> Iterator[TagInfo]:
        return iter(self._tags.values())

    def __len__(self) -> int:
        return len(self._tags)
