"""Filtro de pessoas desenvolvedoras por nome e linguagens.

O núcleo (normalização, indexação e filtragem) não depende de rede nem de
pandas; o carregamento e a exportação ficam em submódulos próprios.
"""

from .filtering import filter_records
from .indexer import index_dataset, index_record
from .models import FilterParameters, MatchMode, RawRecord, Record, TagCatalog, TagInfo
from .normalizer import normalize

__all__ = [
    "FilterParameters",
    "MatchMode",
    "RawRecord",
    "Record",
    "TagCatalog",
    "TagInfo",
    "filter_records",
    "index_dataset",
    "index_record",
    "normalize",
    "main",
]


def main() -> None:
    """Entrypoint programático da linha de comando.

    Importação feita dentro da função para não carregar requests/pandas
    ao importar apenas o núcleo.
    """
    from .__main__ import main as _main  # lazy import

    _main()
