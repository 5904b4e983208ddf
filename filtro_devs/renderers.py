from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Sequence, TextIO, Tuple

import pandas as pd

from .models import Record, TagCatalog

FRAME_COLUMNS = ["name", "picture", "languages", "language_images", "search_key"]


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def format_languages(record: Record, catalog: TagCatalog) -> str:
    return ", ".join(catalog.label_for(t) for t in record.language_tags)


def language_images(record: Record, catalog: TagCatalog) -> str:
    # Imagens do catálogo, na ordem das linguagens; ids sem imagem são omitidos
    images = []
    for t in record.language_tags:
        info = catalog.get(t)
        if info and info.image:
            images.append(info.image)
    return ", ".join(images)


def format_people(records: Sequence[Record], catalog: TagCatalog) -> str:
    lines: List[str] = [f"{len(records)} Pessoa(s) encontrada(s)"]
    for r in records:
        langs = format_languages(r, catalog) or "(sem linguagens)"
        lines.append(f"- {r.name}: {langs}")
    return "\n".join(lines)


class ConsoleRenderer:
    def __init__(self, catalog: TagCatalog, stream: TextIO | None = None):
        self.catalog = catalog
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, records: List[Record]) -> None:
        self.stream.write(format_people(records, self.catalog) + "\n")


def records_to_frame(records: Iterable[Record], catalog: TagCatalog) -> pd.DataFrame:
    rows = []
    for r in records:
        row = {
            "name": r.name,
            "picture": r.picture_url,
            "languages": format_languages(r, catalog),
            "language_images": language_images(r, catalog),
            "search_key": r.search_key,
        }
        for k, v in r.extra.items():
            row.setdefault(k, v)
        rows.append(row)
    return pd.DataFrame(rows, columns=None if rows else FRAME_COLUMNS)


def export_results(records: Iterable[Record], out_dir: Path, catalog: TagCatalog) -> Tuple[Path, Path]:
    ensure_dir(out_dir)
    df = records_to_frame(records, catalog)
    out_csv = out_dir / "devs.csv"
    out_json = out_dir / "devs.json"
    df.to_csv(out_csv, index=False)
    df.to_json(out_json, orient="records", force_ascii=False)
    return out_csv, out_json
