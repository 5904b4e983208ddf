from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Tuple

from .exceptions import DatasetUnavailableError
from .filtering import filter_records
from .indexer import index_dataset
from .models import FilterParameters, MatchMode, RawRecord, Record, TagCatalog
from .normalizer import normalize

Renderer = Callable[[List[Record]], None]


class FilterController:
    """Dono único dos parâmetros de filtro e da base indexada.

    Cada setter atualiza os parâmetros e, com a base carregada, refaz a
    filtragem completa e entrega o resultado ao renderizador.
    """

    def __init__(
        self,
        catalog: TagCatalog | None = None,
        renderer: Optional[Renderer] = None,
        params: FilterParameters | None = None,
    ):
        self.catalog = catalog if catalog is not None else TagCatalog()
        self.renderer = renderer
        self._params = params or FilterParameters()
        self._records: Tuple[Record, ...] = ()
        self._results: List[Record] = []
        self._loaded = False
        self._unavailable: Optional[DatasetUnavailableError] = None

    @property
    def params(self) -> FilterParameters:
        return self._params

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def results(self) -> List[Record]:
        return list(self._results)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self, raw_records: Iterable[RawRecord]) -> List[Record]:
        if self._loaded:
            raise RuntimeError("A base já foi carregada e não pode ser substituída")
        self._records = index_dataset(raw_records)
        self._loaded = True
        self._unavailable = None
        return self.refresh()

    def mark_unavailable(self, error: DatasetUnavailableError) -> None:
        self._unavailable = error

    def set_search_term(self, raw: str) -> None:
        self._update(search_term=normalize(raw))

    def set_active_tag(self, tag_id: str, active: bool) -> None:
        tag = (tag_id or "").lower()
        tags = set(self._params.active_tags)
        if active:
            tags.add(tag)
        else:
            tags.discard(tag)
        self._update(active_tags=frozenset(tags))

    def set_match_mode(self, mode: "MatchMode | str") -> None:
        # Um único enum garante que exatamente um modo esteja ativo
        self._update(match_mode=MatchMode.parse(mode))

    def refresh(self) -> List[Record]:
        if not self._loaded:
            if self._unavailable is not None:
                raise self._unavailable
            raise DatasetUnavailableError("(não carregada)", "a base ainda não foi carregada")
        self._results = filter_records(self._records, self._params)
        if self.renderer is not None:
            self.renderer(list(self._results))
        return list(self._results)

    def _update(self, **changes) -> None:
        self._params = replace(self._params, **changes)
        if self._loaded:
            self.refresh()
