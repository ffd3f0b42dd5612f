import json
import zipfile

import pytest


def write_xmind(path, content=None, raw=None, entry="content.json"):
    """Write a minimal .xmind archive holding content (JSON-encoded) or raw bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        if raw is not None:
            zf.writestr(entry, raw)
        elif content is not None:
            zf.writestr(entry, json.dumps(content))
        zf.writestr("metadata.json", "{}")
    return path


PLAN_SHEET = {
    "id": "sheet-1",
    "title": "Plan",
    "rootTopic": {
        "id": "root-1",
        "title": "Root",
        "children": {
            "attached": [
                {"id": "a", "title": "A"},
                {"id": "b", "title": "B"}
            ]
        }
    }
}


@pytest.fixture
def make_xmind(tmp_path):
    def _make(name="test.xmind", content=None, raw=None, entry="content.json"):
        return write_xmind(tmp_path / name, content=content, raw=raw, entry=entry)
    return _make


@pytest.fixture
def plan_content():
    return [json.loads(json.dumps(PLAN_SHEET))]


def write_deflated_xmind(path, content):
    """Write an .xmind archive whose content.json entry is deflate-compressed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("content.json", json.dumps(content))
    return path


def scramble_entry_data(path, entry="content.json"):
    """Overwrite the compressed bytes of an entry, leaving the zip directory intact."""
    with zipfile.ZipFile(path) as zf:
        info = zf.getinfo(entry)
    data = bytearray(path.read_bytes())
    name_length = int.from_bytes(data[info.header_offset + 26:info.header_offset + 28], "little")
    extra_length = int.from_bytes(data[info.header_offset + 28:info.header_offset + 30], "little")
    start = info.header_offset + 30 + name_length + extra_length
    # 0xff starts a deflate block with the reserved block type
    data[start:start + info.compress_size] = b"\xff" * info.compress_size
    path.write_bytes(bytes(data))
    return path


def flip_stored_byte(path, old=b'"Root"', new=b'"Rooq"'):
    """Change stored entry bytes so the entry no longer matches its CRC-32."""
    data = path.read_bytes()
    assert old in data
    path.write_bytes(data.replace(old, new, 1))
    return path
