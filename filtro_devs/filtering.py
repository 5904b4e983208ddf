from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .models import FilterParameters, MatchMode, Record


def sorted_active_tags(active_tags: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(t.lower() for t in active_tags))


def matches_tags(record: Record, sorted_active: Sequence[str], mode: MatchMode) -> bool:
    if mode is MatchMode.ANY:
        # "OU": ao menos uma linguagem escolhida pertence à pessoa
        return any(tag in record.language_tags for tag in sorted_active)
    # "E": comparação exata da sequência ordenada (inclusive cardinalidade)
    return tuple(sorted_active) == record.language_tags


def matches_search(record: Record, search_term: str) -> bool:
    if not search_term:
        return True
    return search_term in record.search_key


def filter_records(records: Iterable[Record], params: FilterParameters) -> List[Record]:
    """Filtra as pessoas conforme linguagens, modo e texto de busca.

    A ordem original dos registros é preservada. Sem linguagens ativas, o
    modo ANY não retorna ninguém e o modo ALL retorna apenas quem não tem
    linguagens.
    """
    active = sorted_active_tags(params.active_tags)
    out = [r for r in records if matches_tags(r, active, params.match_mode)]

    # Após o primeiro filtro, filtramos mais uma vez conforme o texto
    if params.search_term:
        out = [r for r in out if matches_search(r, params.search_term)]
    return out
