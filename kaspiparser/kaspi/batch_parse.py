#!/usr/bin/env python3
# kaspiparser/kaspi/batch_parse.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from kaspiparser.config import DEBUG_MODE, OUT_DIR, PDF_ENGINE
from kaspiparser.core.errors import StatementParseError
from kaspiparser.core.models import Statement
from kaspiparser.core.service import parse_statement_text
from kaspiparser.utils.path_security import sanitize_filename, validate_path_for_write
from kaspiparser.utils.pdf_text import ENGINES, load_statement_texts

log = logging.getLogger(__name__)

INPUT_SUFFIXES = (".pdf", ".txt")


def collect_inputs(inputs: List[str]) -> List[Path]:
    files: List[Path] = []
    for raw in inputs:
        p = Path(raw)
        if p.is_dir():
            files.extend(sorted(f for f in p.rglob("*") if f.suffix.lower() in INPUT_SUFFIXES))
        elif p.is_file():
            files.append(p)
        else:
            raise SystemExit(f"Not found: {p}")
    return files


def write_statement_csv(statement: Statement, stem: str, out_dir: Path) -> None:
    safe_stem = sanitize_filename(stem)
    out_account = validate_path_for_write(out_dir / f"{safe_stem}_account.csv", out_dir)
    out_tx = validate_path_for_write(out_dir / f"{safe_stem}_tx.csv", out_dir)
    statement.account_df.to_csv(out_account, index=False, encoding="utf-8-sig")
    statement.tx_df.to_csv(out_tx, index=False, encoding="utf-8-sig")
    log.info("%s -> %s, %s", stem, out_account.name, out_tx.name)


def process_file(path: Path, engine: str) -> Statement:
    text = load_statement_texts([path], engine=engine)[0]
    return parse_statement_text(text)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Batch-parse Kaspi PDF statements (or their text dumps).")
    ap.add_argument("inputs", nargs="+", help="PDF / TXT files or folders with them")
    ap.add_argument("--out-dir", default=None, help=f"Куда писать CSV (default: {OUT_DIR})")
    ap.add_argument("--json", action="store_true", help="Print statements as JSON to stdout instead of CSV")
    ap.add_argument("--engine", default=PDF_ENGINE, choices=sorted(ENGINES), help="PDF text engine")
    ap.add_argument("--keep-going", action="store_true", help="Do not stop on the first failed statement")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if DEBUG_MODE else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    files = collect_inputs(args.inputs)
    out_dir = Path(args.out_dir).resolve() if args.out_dir else OUT_DIR
    if not args.json:
        out_dir.mkdir(parents=True, exist_ok=True)
    log.info("Found %d statements", len(files))

    ok, failed = 0, 0
    dumped = []
    for path in files:
        try:
            statement = process_file(path, args.engine)
        except StatementParseError as e:
            failed += 1
            log.error("%s: %s", path.name, e)
            if not args.keep_going:
                break
            continue
        ok += 1
        if args.json:
            dumped.append({"file": path.name, **statement.to_dict()})
        else:
            write_statement_csv(statement, path.stem, out_dir)

    if args.json:
        json.dump(dumped, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    log.info("==== SUMMARY: OK: %d, Failed: %d ====", ok, failed)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())


# python -m kaspiparser.kaspi.batch_parse data/kaspi --out-dir data/kaspi_out --keep-going
