from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .models import FilterParameters, MatchMode, TagCatalog
from .normalizer import normalize


DEFAULT_DATASET_URL = "http://localhost:3000/devs"


def split_list(raw: str) -> List[str]:
    # Use vírgula, ponto-e-vírgula ou quebra de linha.
    return [p.strip() for p in re.split(r"[,;\n]+", raw or "") if p.strip()]


@dataclass
class Config:
    dataset_url: str
    dataset_path: Optional[Path]
    output_dir: Path
    http_timeout: int
    headers: Dict[str, str]
    catalog: TagCatalog
    initial_tags: List[str]
    initial_mode: MatchMode
    initial_search: str
    http_max_attempts: int = 4

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Config":
        load_dotenv(env_file)

        dataset_url = os.getenv("DATASET_URL", DEFAULT_DATASET_URL).strip()
        path_env = os.getenv("DATASET_PATH", "").strip()
        dataset_path = Path(path_env) if path_env else None
        output_dir = Path(os.getenv("OUTPUT_DIR", "data/processed"))

        def _to_int(v: str, default: int) -> int:
            try:
                return int(v)
            except (TypeError, ValueError):
                return default

        http_timeout = _to_int(os.getenv("HTTP_TIMEOUT", "20"), 20)
        if http_timeout < 1:
            http_timeout = 20
        http_max_attempts = _to_int(os.getenv("HTTP_MAX_ATTEMPTS", "4"), 4)
        if http_max_attempts < 1:
            http_max_attempts = 1

        catalog_env = os.getenv("TAG_CATALOG_PATH", "").strip()
        catalog = TagCatalog.from_file(Path(catalog_env)) if catalog_env else TagCatalog()

        # Por padrão todas as linguagens começam marcadas
        raw_tags = os.getenv("INITIAL_TAGS")
        if raw_tags is None:
            initial_tags = catalog.ids()
        else:
            initial_tags = [t.lower() for t in split_list(raw_tags)]

        initial_mode = MatchMode.parse(os.getenv("INITIAL_MODE", "any"))
        initial_search = os.getenv("INITIAL_SEARCH", "")

        headers = {
            "User-Agent": "filtro-devs/0.1 (+requests)",
            "Accept": "application/json",
            "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
        }

        return cls(
            dataset_url=dataset_url,
            dataset_path=dataset_path,
            output_dir=output_dir,
            http_timeout=http_timeout,
            headers=headers,
            catalog=catalog,
            initial_tags=initial_tags,
            initial_mode=initial_mode,
            initial_search=initial_search,
            http_max_attempts=http_max_attempts,
        )

    def initial_params(self) -> FilterParameters:
        return FilterParameters(
            active_tags=frozenset(self.initial_tags),
            match_mode=self.initial_mode,
            search_term=normalize(self.initial_search),
        )
