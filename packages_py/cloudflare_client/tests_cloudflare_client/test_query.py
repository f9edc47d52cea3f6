"""
Tests for path and query-string construction.
"""
from datetime import datetime, timezone
from urllib.parse import unquote

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cloudflare_client.audit_logs.models import ListAuditLogsFilters, ListUserAuditLogsFilters
from cloudflare_client.core.models import ListOrderDirection
from cloudflare_client.core.query import (
    QueryBuilder,
    QueryNaming,
    build_headers,
    build_path,
    format_value,
    render_query,
)
from cloudflare_client.core.request import RequestBuilder
from cloudflare_client.dns.models import DnsRecordType, ListDnsRecordsFilters
from cloudflare_client.user.models import ListMembershipsFilters

segment_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1)


def test_build_path_encodes_each_segment():
    path = build_path("zones/{zone_id}/dns_records/{record_id}", zone_id="z1", record_id="a/b#c d")
    assert path == "zones/z1/dns_records/a%2Fb%23c%20d"


def test_build_path_missing_segment():
    with pytest.raises(KeyError):
        build_path("zones/{zone_id}", other="x")


@given(segment_text)
def test_reserved_characters_never_leak_into_path(value):
    path = build_path("zones/{zone_id}/settings", zone_id=value)
    segment = path[len("zones/"):-len("/settings")]
    for reserved in "/+&#?= ":
        assert reserved not in segment
    assert unquote(segment) == value


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(DnsRecordType.of("cname")) == "cname"
    assert format_value(ListOrderDirection.DESC) == "desc"
    assert format_value(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == "2024-01-02T03:04:05Z"
    assert format_value(25) == "25"


def test_empty_filters_build_empty_query():
    assert QueryBuilder().add_filters(ListDnsRecordsFilters()).build() == ""
    assert QueryBuilder().add_filters(ListAuditLogsFilters()).build() == ""
    assert QueryBuilder().add_filters(None).build() == ""


def test_none_values_are_skipped():
    query = QueryBuilder().add("name", None).add("page", 2).build()
    assert query == "?page=2"


def test_filters_follow_declaration_order():
    filters = ListDnsRecordsFilters(type=DnsRecordType.A, name="www.example.com", proxied=True)
    assert QueryBuilder().add_filters(filters).build() == "?type=A&name=www.example.com&proxied=true"


def test_list_filters_repeat_the_key():
    filters = ListAuditLogsFilters(actor_email=["a@example.com", "b@example.com"])
    query = QueryBuilder().add_filters(filters).build()
    assert query == "?actor_email=a%40example.com&actor_email=b%40example.com"


def test_exclusion_filters_use_dot_not_suffix():
    filters = ListAuditLogsFilters(action_type=["create"], action_type_not=["delete"])
    query = QueryBuilder().add_filters(filters).build()
    assert query == "?action_type=create&action_type.not=delete"


def test_dotted_naming():
    filters = ListUserAuditLogsFilters(actor_email="a@example.com", zone_name="example.com", hide_user_logs=True)
    query = QueryBuilder().add_filters(filters, QueryNaming.DOTTED).build()
    assert query == "?actor.email=a%40example.com&zone.name=example.com&hide_user_logs=true"


def test_alias_overrides_convention():
    filters = ListMembershipsFilters(account_name="Acme")
    assert QueryBuilder().add_filters(filters, QueryNaming.UNDERSCORE).build() == "?account.name=Acme"


def test_datetime_filter_is_encoded():
    filters = ListAuditLogsFilters(since=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert QueryBuilder().add_filters(filters).build() == "?since=2024-01-01T00%3A00%3A00Z"


def test_filter_models_reject_unknown_fields():
    with pytest.raises(ValueError):
        ListDnsRecordsFilters(page=2)


def test_render_query_encodes_values():
    assert render_query([]) == ""
    assert render_query([("name", "a b&c=d")]) == "?name=a%20b%26c%3Dd"


def test_build_headers_drops_none():
    assert build_headers({"a": "1", "b": None, "c": DnsRecordType.TXT}) == {"a": "1", "c": "TXT"}


def test_request_builder_appends_params_after_filters():
    options = (
        RequestBuilder.for_path("GET", "zones/{zone_id}/dns_records", zone_id="z 1")
        .filters(ListDnsRecordsFilters(name="x"))
        .param("page", 1)
        .param("per_page", 50)
        .build()
    )
    assert options["method"] == "GET"
    assert options["url"] == "zones/z%201/dns_records"
    assert options["query"] == [("name", "x"), ("page", "1"), ("per_page", "50")]
    assert "json" not in options


def test_request_builder_json_drops_none_fields():
    from cloudflare_client.dns.models import CreateDnsRecordRequest

    options = (
        RequestBuilder("zones/z/dns_records", "POST")
        .json(CreateDnsRecordRequest(type=DnsRecordType.A, name="a", content="1.2.3.4"))
        .build()
    )
    assert options["json"] == {"type": "A", "name": "a", "content": "1.2.3.4", "ttl": 1}
