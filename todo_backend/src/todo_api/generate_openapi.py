"""
Utility script to generate and write the OpenAPI schema for the Todo Service.

The schema is built from an application instance so API clients and
documentation tools can consume it without running the server.

Usage:
    python -m todo_api.generate_openapi [OUTPUT_PATH]

Notes:
- The 'health' and 'todos' tags are always present in the written schema.
- The default output path is interfaces/openapi.json under the todo_backend directory.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional

from .main import create_app, openapi_tags
from .settings import Settings


def _default_output_path() -> str:
    # <todo_backend>/interfaces/openapi.json
    src_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    backend_root = os.path.dirname(src_dir)
    return os.path.join(backend_root, "interfaces", "openapi.json")


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Add any tag from openapi_tags missing in the schema. Existing tag
    definitions are kept as they are.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(out_path: Optional[str] = None) -> str:
    """
    Write the OpenAPI schema as pretty-printed JSON and return the written path.
    Parent directories are created as needed.
    """
    path = out_path or _default_output_path()
    # The schema does not depend on stored data
    schema = create_app(Settings(seed_sample_todos=False)).openapi()
    _ensure_tags(schema)

    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    return path


def main() -> None:
    out_path = sys.argv[1] if len(sys.argv) > 1 else None
    written = generate_openapi(out_path)
    print(f"Wrote OpenAPI schema to: {written}")


if __name__ == "__main__":
    main()
