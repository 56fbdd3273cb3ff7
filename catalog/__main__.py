"""Walk through the catalog operations against the configured file.

Run with ``python -m catalog``. The backing file defaults to
``products.json`` in the working directory; set ``PRODUCT_FILE`` (or put it
in a ``.env`` file) to point somewhere else.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping

from commonlib.config import load_store_config
from commonlib.result import Result

from .services.product_store import ProductCatalog

logger = logging.getLogger("catalog")


def _show(label: str, result: Result) -> None:
    logger.info("%s: %s", label, json.dumps(result.to_dict(), ensure_ascii=False))


def main(base_dir: Path | str | None = None, env: Mapping[str, str] | None = None) -> int:
    config = load_store_config(Path.cwd() if base_dir is None else base_dir, env)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    catalog = ProductCatalog.from_config(config)

    _show("Empty catalog", catalog.all())
    _show(
        "Added product",
        catalog.create(
            "producto prueba",
            "Este es un producto prueba",
            200,
            "Sin imagen",
            "abc123",
            25,
        ),
    )
    _show("Catalog after add", catalog.all())
    _show("Product 1", catalog.get(1))
    _show("Product 500", catalog.get(500))
    _show("Changing the id of product 1", catalog.update(1, {"id": 2}))
    _show("Renaming product 1", catalog.update(1, {"title": "Producto modificado"}))
    _show("Catalog after update", catalog.all())
    _show("Deleting product 1", catalog.delete(1))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
