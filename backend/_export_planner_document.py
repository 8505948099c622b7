import argparse
import json
import os
from datetime import datetime
from typing import Any, Dict

import httpx


BASE_URL = os.environ.get("PLANNER_API_BASE_URL", "http://localhost:8000")


def _export(client: httpx.Client) -> Dict[str, Any]:
    resp = client.get(f"{BASE_URL}/api/document/export")
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict) or "templates" not in data:
        raise RuntimeError("Unexpected export response format")
    return data


def _import(client: httpx.Client, path: str, *, templates_only: bool) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    endpoint = "/api/templates/import" if templates_only else "/api/document/import"
    resp = client.post(f"{BASE_URL}{endpoint}", json=payload)
    if resp.status_code == 400:
        # Rejected documents leave the planner untouched; surface the reason.
        body = resp.json()
        raise SystemExit(f"Import rejected: {body.get('message') or body}")
    resp.raise_for_status()
    return resp.json()


def main() -> None:
    parser = argparse.ArgumentParser(description="Export or import the planner document via the API.")
    parser.add_argument("--import", dest="import_path", help="JSON file to import instead of exporting")
    parser.add_argument("--templates-only", action="store_true", help="Treat --import as a template document")
    parser.add_argument("--out", help="Export path (default: outputs/planner_<timestamp>.json)")
    args = parser.parse_args()

    with httpx.Client(follow_redirects=True) as client:
        if args.import_path:
            result = _import(client, args.import_path, templates_only=args.templates_only)
            print({"imported": args.import_path, "keys": sorted(result.keys())})
            return

        doc = _export(client)
        out = args.out
        if not out:
            outputs_dir = os.path.join(os.path.dirname(__file__), "outputs")
            os.makedirs(outputs_dir, exist_ok=True)
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            out = os.path.join(outputs_dir, f"planner_{ts}.json")
        with open(out, "w", encoding="utf-8") as f:
            json.dump(doc, f, ensure_ascii=False, indent=2)
        print({
            "tasks": len(doc.get("tasks") or []),
            "placements": len(doc.get("placements") or []),
            "path": out,
        })


if __name__ == "__main__":
    main()
