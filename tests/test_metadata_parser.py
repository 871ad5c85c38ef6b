import logging

from bibshelf.metadata_parser import CustomInfoParser, parse_custom_info
from bibshelf.models import SiteMetadata


def test_parser_returns_all_valid_sites(sample_yaml):
    result = CustomInfoParser().parse(sample_yaml)

    assert set(result) == {"morita-2015", "smith-2020", "unknown-key"}
    assert set(result["morita-2015"]) == {"site_a", "site_b"}

    morita = result["morita-2015"]["site_a"]
    assert morita.tags == ("数学", "身体")
    assert morita.review == ("First paragraph.", "Second paragraph.")
    assert morita.memo == ("private note",)
    assert morita.read_date == "2026-02-08"

    assert result["morita-2015"]["site_b"] == SiteMetadata(memo=("only internal",))


def test_invalid_site_block_is_dropped_without_affecting_others(sample_yaml, caplog):
    with caplog.at_level(logging.WARNING, logger="bibshelf.metadata_parser"):
        result = parse_custom_info(sample_yaml)

    assert set(result["smith-2020"]) == {"site_a"}
    assert result["smith-2020"]["site_a"] == SiteMetadata(tags=("testing",), review="Solid overview.")
    assert "smith-2020" in caplog.text


def test_each_field_shape_is_enforced():
    text = """
bad-tags:
  s1: {tags: [1, 2]}
bad-review:
  s1: {review: 42}
bad-memo:
  s1: {memo: just a string}
bad-date:
  s1: {readDate: 20200101}
mixed-review:
  s1: {review: [ok, 3]}
good:
  s1: {tags: [a], readDate: "2020-01-01"}
"""
    result = parse_custom_info(text)

    assert list(result) == ["good"]
    assert result["good"]["s1"] == SiteMetadata(tags=("a",), read_date="2020-01-01")


def test_unquoted_dates_stay_strings():
    result = parse_custom_info("k1:\n  s1:\n    readDate: 2020-01-01\n")

    assert result["k1"]["s1"].read_date == "2020-01-01"


def test_review_string_and_list_both_accepted():
    text = "k1:\n  s1:\n    review: single\nk2:\n  s1:\n    review: [one, two]\n"

    result = parse_custom_info(text)

    assert result["k1"]["s1"].review == "single"
    assert result["k2"]["s1"].review == ("one", "two")


def test_empty_blocks_and_non_mappings_are_omitted():
    text = """
empty-block:
  s1: {}
unknown-fields-only:
  s1: {rating: 5}
null-site:
  s1:
scalar-entry: just text
list-entry: [a, b]
"""
    assert parse_custom_info(text) == {}


def test_malformed_document_returns_empty_mapping(caplog):
    with caplog.at_level(logging.ERROR, logger="bibshelf.metadata_parser"):
        result = parse_custom_info("k1: [unclosed")

    assert result == {}
    assert "Failed to parse custom info YAML" in caplog.text


def test_non_mapping_documents_return_empty_mapping():
    assert parse_custom_info("") == {}
    assert parse_custom_info("- a\n- b\n") == {}
    assert parse_custom_info("just a string") == {}


def test_site_ids_restrict_output(sample_yaml):
    result = parse_custom_info(sample_yaml, site_ids=["site_b"])

    assert result == {"morita-2015": {"site_b": SiteMetadata(memo=("only internal",))}}


def test_fields_written_without_a_value_drop_the_site_block():
    text = """
null-tags:
  s1:
    tags:
    review: r
null-review:
  s1: {review: ~, tags: [a]}
null-memo:
  s1:
    memo:
    review: r
null-date:
  s1:
    readDate:
    review: r
kept:
  s1: {review: r}
  s2:
    tags:
"""
    result = parse_custom_info(text)

    assert result == {"kept": {"s1": SiteMetadata(review="r")}}


def test_yes_no_on_off_stay_strings():
    result = parse_custom_info("k1:\n  s1:\n    tags: [on, off, yes, No]\n    review: Yes\n")

    assert result["k1"]["s1"] == SiteMetadata(tags=("on", "off", "yes", "No"), review="Yes")


def test_true_and_false_are_still_booleans():
    assert parse_custom_info("k1:\n  s1:\n    review: true\n") == {}
