# doc_l10n/cli.py
from __future__ import annotations
import argparse, os, json
from typing import Any, Dict, List

from bs4 import BeautifulSoup

from .logger import setup_logger
from .config import SerializeConfig, TranslationLevel, DEFAULT_STOP_TYPES
from .schema_loader import SchemaRegistry
from .serializer import BaseDocumentSerializer
from .profiles import ALL_PROFILES, get_profile
from .utils import safe_filename

# --------- small helpers ---------

def save_text(path: str, text: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)

def load_documents(path: str) -> List[Dict[str, Any]]:
    """Load one document, a JSON array of documents, or NDJSON (one document per line)."""
    with open(path, "r", encoding="utf-8-sig") as f:
        # concatenated exports can carry a BOM per chunk
        text = f.read().replace("\ufeff", "")
    try:
        root = json.loads(text)
    except json.JSONDecodeError:
        root = []
        for i, line in enumerate(text.splitlines(), 1):
            line = line.strip()
            if not line:
                continue
            try:
                root.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise SystemExit(f"NDJSON parse error on line {i}: {e}") from e

    if isinstance(root, dict):
        root = [root]
    return [d for d in root if isinstance(d, dict)]

def unique_name(name: str, taken: set) -> str:
    base, n = name, 2
    while name in taken:
        name = f"{base}-{n}"; n += 1
    taken.add(name)
    return name

# --------- pipeline ---------

def serialize(cfg: SerializeConfig) -> Dict[str, Any]:
    logger = setup_logger(cfg.log_level)
    logger.info("Loading schema...")
    schemas = SchemaRegistry.from_file(cfg.schema_path)
    logger.info(f"Schema types: {len(schemas)}")

    profile = get_profile(cfg.profile)
    logger.info(f"Serializer profile: {profile.id}")

    if cfg.mode not in TranslationLevel.ALL:
        logger.warning(f"Unknown translation level {cfg.mode!r}; using {TranslationLevel.DOCUMENT!r}")

    logger.info("Reading documents...")
    docs = load_documents(cfg.input_path)
    logger.info(f"Documents: {len(docs)}")
    if cfg.output_name and len(docs) > 1:
        logger.warning("--name given for several documents; numbered suffixes will be added")

    serializer = BaseDocumentSerializer(schemas, logger=logger)
    os.makedirs(cfg.output_dir, exist_ok=True)

    manifest = []
    taken: set = set()
    for idx, doc in enumerate(docs):
        if not doc.get("_id") and not cfg.output_name:
            logger.warning(f"Document #{idx} has no _id; output name falls back to its position")
        out = serializer.serialize_document(
            doc,
            mode=cfg.mode,
            base_lang=cfg.base_lang,
            stop_types=cfg.stop_types,
            table=profile.table,
            output_name=cfg.output_name,
        )
        fname = unique_name(safe_filename(out.name, fallback=f"document-{idx}"), taken) + ".html"
        content = out.content
        if cfg.pretty:
            content = BeautifulSoup(content, "html.parser").prettify()
        save_text(os.path.join(cfg.output_dir, fname), content)
        manifest.append({
            "name": out.name,
            "_id": doc.get("_id"),
            "_type": doc.get("_type"),
            "_rev": doc.get("_rev"),
            "file": fname,
            "bytes": len(content.encode("utf-8")),
        })
        logger.info(f"Wrote {fname}")

    save_text(os.path.join(cfg.output_dir, "serialization_manifest.json"), json.dumps(manifest, ensure_ascii=False, indent=2))

    report = {
        "documents": len(manifest),
        "mode": cfg.mode,
        "base_lang": cfg.base_lang,
        "profile": profile.id,
        "stop_types": list(cfg.stop_types),
        "total_bytes": sum(m["bytes"] for m in manifest),
    }
    save_text(os.path.join(cfg.output_dir, "run_report.json"), json.dumps(report, ensure_ascii=False, indent=2))
    logger.info(f"Serialized {report['documents']} document(s), {report['total_bytes']} bytes")
    return report

def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(prog="doc-l10n", description="Serialize structured documents to HTML for translation")
    sub = ap.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("serialize", help="Serialize documents to HTML")
    s.add_argument("--schema", required=True, help="JSON file with the schema type definitions")
    s.add_argument("--input", required=True, help="JSON document, JSON array of documents, or NDJSON")
    s.add_argument("--output", required=True)
    s.add_argument("--mode", default=TranslationLevel.DOCUMENT, choices=TranslationLevel.ALL)
    s.add_argument("--base-lang", default="en")
    s.add_argument("--stop-types", nargs="+", default=list(DEFAULT_STOP_TYPES))
    s.add_argument("--extra-stop-types", nargs="+", default=[],
                   help="Added on top of --stop-types.")
    s.add_argument("--profile", default="default", choices=[p.id for p in ALL_PROFILES],
                   help="; ".join(f"{p.id}: {p.description}" for p in ALL_PROFILES))
    s.add_argument("--name", dest="output_name", default=None, help="Override the output name (default: document _id)")
    s.add_argument("--pretty", action="store_true")
    s.add_argument("--log-level", default="INFO")

    args = ap.parse_args(argv)
    if args.cmd == "serialize":
        cfg = SerializeConfig(
            schema_path=args.schema,
            input_path=args.input,
            output_dir=args.output,
            mode=args.mode,
            base_lang=args.base_lang,
            stop_types=list(dict.fromkeys(args.stop_types + args.extra_stop_types)),
            profile=args.profile,
            output_name=args.output_name,
            log_level=args.log_level,
            pretty=args.pretty,
        )
        serialize(cfg)

if __name__ == "__main__":
    main()
