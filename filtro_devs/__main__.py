from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .config import Config
from .controller import FilterController
from .exceptions import DatasetUnavailableError
from .loader import load_dataset
from .renderers import ConsoleRenderer, export_results


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Filtra pessoas desenvolvedoras por nome e linguagens")
    p.add_argument("--url", type=str, default=None, help="URL da base JSON (padrão: DATASET_URL)")
    p.add_argument("--file", type=Path, default=None, help="Arquivo JSON local (prioridade sobre a URL)")
    p.add_argument("--search", type=str, default=None, help="Texto de busca pelo nome")
    p.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=None,
        help="Linguagem ativa (repita para várias; substitui INITIAL_TAGS)",
    )
    p.add_argument(
        "--mode",
        choices=["any", "all", "ou", "e", "or", "and"],
        default=None,
        help="any/ou: ao menos uma linguagem; all/e: exatamente as linguagens",
    )
    p.add_argument("--out", type=Path, default=None, help="Pasta para exportar CSV/JSON do resultado")
    p.add_argument("--export", action="store_true", help="Exporta o resultado para OUTPUT_DIR")
    return p


def run(cfg: Config, argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.url:
        cfg.dataset_url = args.url
        cfg.dataset_path = None
    if args.file:
        cfg.dataset_path = args.file

    print("Config:")
    print(f"  DATASET = {cfg.dataset_path or cfg.dataset_url}")
    print(f"  TAGS = {', '.join(args.tags or cfg.initial_tags) or '(nenhuma)'}")
    print(f"  MODE = {(args.mode or cfg.initial_mode.value)}")

    controller = FilterController(cfg.catalog, params=cfg.initial_params())
    try:
        raws = load_dataset(cfg)
    except DatasetUnavailableError as e:
        controller.mark_unavailable(e)
        print("Falha ao carregar a base:", e)
        return 1

    controller.load(raws)
    print(f"Pessoas carregadas: {len(controller.records)}")

    # Os setters refazem a filtragem a cada mudança, como os eventos da tela
    if args.tags is not None:
        for tag in list(controller.params.active_tags):
            controller.set_active_tag(tag, False)
        for tag in args.tags:
            controller.set_active_tag(tag, True)
    if args.mode:
        controller.set_match_mode(args.mode)
    if args.search is not None:
        controller.set_search_term(args.search)

    ConsoleRenderer(cfg.catalog)(controller.results)

    out_dir = args.out or (cfg.output_dir if args.export else None)
    if out_dir:
        out_csv, out_json = export_results(controller.results, out_dir, cfg.catalog)
        print("Salvo:")
        print("  ", out_csv)
        print("  ", out_json)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    try:
        cfg = Config.from_env()
    except ValueError as e:
        print("Configuração inválida:", e)
        raise SystemExit(1)
    raise SystemExit(run(cfg, argv))


if __name__ == "__main__":
    main()
