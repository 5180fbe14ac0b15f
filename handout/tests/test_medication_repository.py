import json
import httpx
import pytest
from handout.infra.Medication_Repository import (
    default_medications,
    fetch_medications,
    load_medications,
    parse_medications,
    reading_from_medications,
)

FALLBACK_NAMES = ["Amoxicillin 500 mg", "Ibuprofen 200 mg", "Metformin 500 mg"]


def test_default_medications_are_the_three_built_ins():
    assert [m.name for m in default_medications()] == FALLBACK_NAMES


def test_reading_from_file(tmp_path):
    path = tmp_path / "medications.json"
    path.write_text(json.dumps([{"name": "Ibuprofen 200 mg", "aliases": ["Advil 200"]}]), encoding="utf-8")
    meds = reading_from_medications(path)
    assert [m.name for m in meds] == ["Ibuprofen 200 mg"]
    assert meds[0].aliases == ("Advil 200",)


def test_missing_file_falls_back(tmp_path):
    meds = reading_from_medications(tmp_path / "nope.json")
    assert [m.name for m in meds] == FALLBACK_NAMES


def test_invalid_json_falls_back(tmp_path):
    path = tmp_path / "medications.json"
    path.write_text("[{oops", encoding="utf-8")
    assert [m.name for m in reading_from_medications(path)] == FALLBACK_NAMES


def test_non_array_document_gives_empty_catalog():
    assert parse_medications({"name": "x"}) == []


def test_unusable_records_are_skipped():
    meds = parse_medications([{"name": "A"}, "junk", {"image": "x.png"}, {"name": "B"}])
    assert [m.name for m in meds] == ["A", "B"]


@pytest.mark.asyncio
async def test_fetch_medications_over_http():
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[{"name": "Lisinopril 10 mg", "image": "images/l.png", "aliases": []}])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        meds = await fetch_medications("http://test/data/medications.json", client=client)
    assert [m.name for m in meds] == ["Lisinopril 10 mg"]
    # cache-busting parameter
    assert "_" in seen["params"]


@pytest.mark.asyncio
async def test_fetch_non_success_status_falls_back():
    async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(404))) as client:
        meds = await fetch_medications("http://test/data/medications.json", client=client)
    assert [m.name for m in meds] == FALLBACK_NAMES


@pytest.mark.asyncio
async def test_fetch_network_error_falls_back():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        meds = await fetch_medications("http://test/data/medications.json", client=client)
    assert [m.name for m in meds] == FALLBACK_NAMES


@pytest.mark.asyncio
async def test_fetch_undecodable_body_falls_back():
    async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>"))) as client:
        meds = await fetch_medications("http://test/data/medications.json", client=client)
    assert [m.name for m in meds] == FALLBACK_NAMES


@pytest.mark.asyncio
async def test_load_medications_dispatches_on_source(tmp_path):
    path = tmp_path / "medications.json"
    path.write_text(json.dumps([{"name": "Only One"}]), encoding="utf-8")
    assert [m.name for m in await load_medications(str(path))] == ["Only One"]
