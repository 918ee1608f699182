# products_api/openapi.py
"""
Export the generated OpenAPI document.

The document is built from the route and model declarations in
``products_api.main``; this module only writes it out so it can be
published next to the service and imported into an API gateway::

    python -m products_api.openapi --output openapi.json
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI

logger = logging.getLogger(__name__)


def export_openapi(app: FastAPI, path: Union[str, Path]) -> Dict[str, Any]:
    document = app.openapi()
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    logger.info("wrote OpenAPI document %s (%d paths) to %s",
                document["info"]["version"], len(document.get("paths", {})), target)
    return document


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Write the Products API OpenAPI document")
    parser.add_argument("--output", "-o", default="openapi.json", help="Destination file")
    args = parser.parse_args(argv)

    from .main import app

    export_openapi(app, args.output)


if __name__ == "__main__":
    main()
