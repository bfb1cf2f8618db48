from icloud_pricing.query import QueryRequest, filter_regions, parse_query, query


def test_parse_query_help_keywords():
    assert parse_query(["help"]).show_help
    assert parse_query(["?"]).show_help
    assert parse_query(["  HELP "]).show_help


def test_parse_query_extracts_plan_and_region():
    assert parse_query(["50GB", "jp"]) == QueryRequest(plan="50GB", region="jp")
    assert parse_query(["2tb japan"]) == QueryRequest(plan="2TB", region="japan")


def test_parse_query_tier_keyword_wins_over_region_text():
    request = parse_query(["6tb"])
    assert request.plan == "6TB"
    assert request.region is None


def test_parse_query_ignores_single_characters_and_keeps_last_region():
    assert parse_query(["x", "us", "cn"]) == QueryRequest(region="cn")
    assert parse_query([]) == QueryRequest()


def test_filter_regions_is_case_insensitive_on_code_and_name(sample_dataset):
    assert [r.country_iso for r in filter_regions(sample_dataset.regions, "cn")] == ["CN"]
    assert [r.country_iso for r in filter_regions(sample_dataset.regions, "us")] == ["US", "RU"]
    assert [r.country_iso for r in filter_regions(sample_dataset.regions, "JaP")] == ["JP"]
    assert len(filter_regions(sample_dataset.regions, None)) == 4


def test_default_query_ranks_by_benchmark_tier(sample_dataset):
    hits = query(sample_dataset)

    assert [(h.region.country_iso, h.plan.name, h.rank) for h in hits] == [
        ("CN", "50GB", 1),
        ("US", "50GB", 2),
        ("JP", "50GB", 3),
    ]


def test_query_by_plan_re_sorts(sample_dataset):
    hits = query(sample_dataset, plan="2TB")

    assert [h.region.country_iso for h in hits] == ["RU", "CN", "US", "JP"]
    assert [h.rank for h in hits] == [1, 2, 3, 4]


def test_single_region_lists_every_tier_unranked(sample_dataset):
    hits = query(sample_dataset, region="japan")

    assert [h.plan.name for h in hits] == ["50GB", "2TB"]
    assert all(h.rank is None for h in hits)


def test_single_region_with_explicit_plan_shows_that_tier(sample_dataset):
    hits = query(sample_dataset, plan="2TB", region="jp")

    assert [(h.region.country_iso, h.plan.name) for h in hits] == [("JP", "2TB")]


def test_multi_region_filter_is_ranked(sample_dataset):
    hits = query(sample_dataset, plan="2TB", region="us")

    assert [(h.region.country_iso, h.rank) for h in hits] == [("RU", 1), ("US", 2)]


def test_no_match_returns_empty(sample_dataset):
    assert query(sample_dataset, region="zz") == []


def test_single_region_without_requested_tier_lists_every_tier(sample_dataset):
    hits = query(sample_dataset, plan="50GB", region="russia")

    assert [(h.region.country_iso, h.plan.name, h.rank) for h in hits] == [("RU", "2TB", None)]
