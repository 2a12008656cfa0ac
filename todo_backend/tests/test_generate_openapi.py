import json

from todo_api.generate_openapi import generate_openapi


def test_generate_openapi_writes_schema(tmp_path):
    out = tmp_path / "nested" / "openapi.json"
    written = generate_openapi(str(out))
    assert written == str(out)

    schema = json.loads(out.read_text(encoding="utf-8"))
    assert schema["info"]["title"] == "Todo Service"
    assert "/health" in schema["paths"]
    assert "/todos" in schema["paths"]
    assert set(schema["paths"]["/todos/{todo_id}"]) == {"get", "put", "delete"}
    tag_names = {t["name"] for t in schema["tags"]}
    assert {"health", "todos"} <= tag_names
