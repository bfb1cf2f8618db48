import json

import pytest

from icloud_pricing.errors import FormatError
from icloud_pricing.pricing.dataset_io import (
    dataset_to_dict,
    loads_dataset,
    read_dataset,
    write_dataset,
)


def test_write_then_read_round_trips(sample_dataset, tmp_path):
    path = tmp_path / "nested" / "prices.json"

    write_dataset(sample_dataset, path)

    assert read_dataset(path) == sample_dataset


def test_document_uses_wire_field_names(sample_dataset, tmp_path):
    path = tmp_path / "prices.json"
    write_dataset(sample_dataset, path)

    raw = json.loads(path.read_text(encoding="utf-8"))

    assert set(raw) == {"lastUpdated", "source", "regions"}
    region = raw["regions"][0]
    assert set(region) == {"CountryISO", "Country", "Currency", "Plans"}
    assert set(region["Plans"][0]) == {"Name", "Price", "PriceInCNY"}


def test_write_leaves_no_temp_files(sample_dataset, tmp_path):
    write_dataset(sample_dataset, tmp_path / "prices.json")
    write_dataset(sample_dataset, tmp_path / "prices.json")

    assert [p.name for p in tmp_path.iterdir()] == ["prices.json"]


def test_loads_rejects_malformed_json():
    with pytest.raises(FormatError):
        loads_dataset("{not json")


def test_loads_rejects_missing_fields(sample_dataset):
    raw = dataset_to_dict(sample_dataset)
    del raw["regions"][1]["Currency"]

    with pytest.raises(FormatError, match="Currency"):
        loads_dataset(json.dumps(raw))


def test_loads_rejects_wrong_types(sample_dataset):
    raw = dataset_to_dict(sample_dataset)
    raw["regions"][0]["Plans"][0]["Price"] = "6"

    with pytest.raises(FormatError):
        loads_dataset(json.dumps(raw))


def test_loads_accepts_integer_prices():
    text = json.dumps(
        {
            "lastUpdated": "2026-01-01T00:00:00.000Z",
            "source": "x",
            "regions": [
                {
                    "CountryISO": "CN",
                    "Country": "China",
                    "Currency": "CNY",
                    "Plans": [{"Name": "50GB", "Price": 6, "PriceInCNY": 6}],
                }
            ],
        }
    )

    dataset = loads_dataset(text)

    assert dataset.regions[0].plans[0].price == 6.0
    assert dataset.updated_at().year == 2026


@pytest.mark.parametrize("number", ["1" + "0" * 400, "-1", "NaN"])
def test_loads_rejects_unusable_numbers(sample_dataset, number):
    text = json.dumps(dataset_to_dict(sample_dataset)).replace('"Price": 6.0', f'"Price": {number}', 1)

    with pytest.raises(FormatError):
        loads_dataset(text)
