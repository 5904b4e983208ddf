from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

import requests

from .config import Config
from .exceptions import DatasetUnavailableError
from .http_client import HttpClient
from .models import RawRecord

# Campos interpretados; todo o resto vai para RawRecord.extra
_KNOWN_FIELDS = ("name", "picture", "programmingLanguages", "languages")


def _languages_from(value) -> tuple:
    if not isinstance(value, list):
        return ()
    out: List[str] = []
    for item in value:
        if isinstance(item, dict):
            lang = item.get("language")
        else:
            lang = item
        # Repassa o id como veio; apenas valores não textuais são ignorados
        if isinstance(lang, str):
            out.append(lang)
    return tuple(out)


def parse_record(item: Dict) -> RawRecord:
    langs = item.get("programmingLanguages")
    if langs is None:
        langs = item.get("languages")
    return RawRecord(
        name=str(item.get("name") or ""),
        picture_url=str(item.get("picture") or ""),
        languages=_languages_from(langs),
        extra={k: v for k, v in item.items() if k not in _KNOWN_FIELDS},
    )


def parse_records(payload, *, source: str = "(payload)") -> List[RawRecord]:
    if not isinstance(payload, list):
        raise DatasetUnavailableError(source, "o JSON deve ser uma lista de pessoas")
    return [parse_record(item) for item in payload if isinstance(item, dict)]


class DatasetLoader:
    def __init__(self, client: Optional[HttpClient] = None):
        self.client = client

    def load_url(self, url: str) -> List[RawRecord]:
        if self.client is None:
            raise DatasetUnavailableError(url, "nenhum cliente HTTP configurado")
        try:
            resp = self.client.fetch(url)
        except requests.RequestException as e:
            raise DatasetUnavailableError(url, str(e)) from e
        if resp.status_code != 200:
            raise DatasetUnavailableError(url, f"status {resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as e:
            raise DatasetUnavailableError(url, "resposta não é JSON válido") from e
        return parse_records(payload, source=url)

    def load_file(self, path: Path) -> List[RawRecord]:
        path = Path(path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise DatasetUnavailableError(str(path), str(e)) from e
        except ValueError as e:
            raise DatasetUnavailableError(str(path), "arquivo não é JSON válido") from e
        return parse_records(payload, source=str(path))


def load_dataset(cfg: Config, client: Optional[HttpClient] = None) -> List[RawRecord]:
    # Arquivo local tem prioridade sobre a URL
    if cfg.dataset_path:
        return DatasetLoader().load_file(cfg.dataset_path)
    client = client or HttpClient(cfg.headers, timeout=cfg.http_timeout, max_attempts=cfg.http_max_attempts)
    return DatasetLoader(client).load_url(cfg.dataset_url)
