"""Write the OpenAPI schema to docs/openapi.json."""

import json
from pathlib import Path

from recipeshare.main import app


output = Path("docs/openapi.json")
output.parent.mkdir(parents=True, exist_ok=True)

with output.open("w", encoding="utf-8") as f:
    json.dump(app.openapi(), f, indent=2)
