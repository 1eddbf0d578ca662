"""Tests for the relationship line parser."""

import pytest

from edgeview.parsing.models import Edge
from edgeview.parsing.parser import (
    entity_ids,
    iter_candidates,
    iter_lines,
    parse_candidate,
    split_line,
)


class TestSplitLine:
    def test_strips_parts(self):
        assert split_line("  A   ->  B ") == ["A", "B"]

    def test_no_delimiter(self):
        assert split_line("JustText") == ["JustText"]

    def test_double_delimiter(self):
        assert split_line("A -> B -> C") == ["A", "B", "C"]


class TestParseCandidate:
    def test_simple_edge(self):
        assert parse_candidate("A -> B") == Edge("A", "B")

    def test_without_spaces(self):
        assert parse_candidate("A->B") == Edge("A", "B")

    def test_self_relation(self):
        edge = parse_candidate("Node -> Node")
        assert edge is not None
        assert edge.is_self_relation

    def test_case_sensitive(self):
        edge = parse_candidate("api -> API")
        assert edge == Edge("api", "API")
        assert not edge.is_self_relation

    def test_special_characters(self):
        assert parse_candidate("API_Gateway -> User-Service") == Edge(
            "API_Gateway", "User-Service"
        )

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "InvalidLine",
            "-> OnlyRight",
            "LeftOnly ->",
            "->",
            "A -> B -> C",
        ],
    )
    def test_malformed_lines_return_none(self, line):
        assert parse_candidate(line) is None


class TestIterCandidates:
    def test_preserves_order_and_duplicates(self):
        text = "A -> B\nbad line\nB -> C\nA -> B"
        edges = list(iter_candidates(text))
        assert edges == [Edge("A", "B"), Edge("B", "C"), Edge("A", "B")]

    def test_empty_text(self):
        assert list(iter_candidates("")) == []

    def test_windows_line_endings(self):
        edges = list(iter_candidates("A -> B\r\nB -> C\r\n"))
        assert edges == [Edge("A", "B"), Edge("B", "C")]


class TestIterLines:
    def test_mixed_line_endings(self):
        assert list(iter_lines("a\r\nb\rc\nd")) == ["a", "b", "c", "d"]

    def test_other_separators_stay_in_line(self):
        text = "A -> B\x0cC\u2028D\x85E"
        assert list(iter_lines(text)) == [text]

    def test_form_feed_does_not_start_a_new_relationship(self):
        # One line with two delimiters, so nothing is parsed
        assert list(iter_candidates("A -> B\x0cC -> D")) == []


class TestEntityIds:
    def test_first_seen_order(self, services_text):
        assert entity_ids(services_text) == [
            "User",
            "AuthService",
            "Database",
            "PaymentGateway",
            "FraudDetection",
            "LoggingService",
        ]

    def test_skips_malformed_lines(self):
        assert entity_ids("A -> B -> C\n-> D\nE -> F") == ["E", "F"]
