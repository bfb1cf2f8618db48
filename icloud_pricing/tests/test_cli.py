import json

from icloud_pricing import cli as cli_mod
from icloud_pricing.config import PricingConfig
from icloud_pricing.errors import NetworkError
from icloud_pricing.pricing import cache as cache_mod
from icloud_pricing.pricing.cache import CacheResolver
from icloud_pricing.pricing.dataset_io import write_dataset


def _resolver(tmp_path):
    return CacheResolver(
        cache_path=tmp_path / "cache" / "prices.json",
        ttl=3600,
        local_path=tmp_path / "data" / "prices.json",
        remote_url=None,
        remote_timeout=1.0,
    )


def test_help_does_not_touch_data(tmp_path):
    items = cli_mod.build_items(["help"], PricingConfig(), resolver=_resolver(tmp_path))

    assert items[0]["title"].startswith("Usage")
    assert all(item["valid"] is False for item in items)


def test_no_data_renders_error_item(tmp_path):
    items = cli_mod.build_items(["2tb"], PricingConfig(), resolver=_resolver(tmp_path))

    assert len(items) == 1
    assert items[0]["title"] == "Failed to load data"


def test_ranked_items_with_trailer(tmp_path, sample_dataset):
    write_dataset(sample_dataset, tmp_path / "data" / "prices.json")

    items = cli_mod.build_items(["2tb"], PricingConfig(), resolver=_resolver(tmp_path))

    assert [i.get("uid") for i in items[:-1]] == ["RU-2TB", "CN-2TB", "US-2TB", "JP-2TB"]
    assert items[0]["subtitle"] == "#1 | 2TB plan"
    assert items[-1]["title"] == "Data updated: 2026-10-01"


def test_unknown_region_renders_no_match(tmp_path, sample_dataset):
    write_dataset(sample_dataset, tmp_path / "data" / "prices.json")

    items = cli_mod.build_items(["zz"], PricingConfig(), resolver=_resolver(tmp_path))

    assert items[0]["title"] == "No matching region"


def test_main_prints_alfred_document(tmp_path, monkeypatch, capsys, sample_dataset):
    write_dataset(sample_dataset, tmp_path / "data" / "prices.json")
    monkeypatch.setenv("ICLOUD_PRICING_CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.setenv("ICLOUD_PRICING_LOCAL_DATA", str(tmp_path / "data" / "prices.json"))

    def no_remote(url, timeout):
        raise NetworkError("offline")

    monkeypatch.setattr(cache_mod, "fetch_text", no_remote)

    cli_mod.main(["jp"])

    doc = json.loads(capsys.readouterr().out)
    uids = [item.get("uid") for item in doc["items"]]
    assert uids[:2] == ["JP-50GB", "JP-2TB"]
    assert doc["items"][0]["subtitle"] == "#- | 50GB plan"
    assert (tmp_path / "cache" / "prices.json").exists()


def test_missing_tier_in_single_region_still_renders_results(tmp_path, sample_dataset):
    write_dataset(sample_dataset, tmp_path / "data" / "prices.json")

    items = cli_mod.build_items(["50gb", "russia"], PricingConfig(), resolver=_resolver(tmp_path))

    assert [i.get("uid") for i in items[:-1]] == ["RU-2TB"]
