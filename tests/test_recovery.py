"""Tests for JSON recovery and record normalization."""

import json

from recovery import (
    Accepted,
    Fallback,
    Found,
    GraphLink,
    GraphNode,
    NotFound,
    RagRecord,
    RelationshipGraph,
    ResearchGap,
    StructuredArticle,
    normalize,
    recover_and_normalize,
    recover_json,
)
from recovery import normalizer as normalizer_module

VALID = '{"answer":"x","related_articles":[],"relationship_graph":{"nodes":[],"links":[]}}'
EMPTY_GRAPH = {"nodes": [], "links": []}


class TestRecoverJson:
    def test_direct_object(self):
        result = recover_json(VALID)
        assert result == Found(value=json.loads(VALID), strategy="direct")

    def test_direct_with_surrounding_whitespace(self):
        result = recover_json("\n  " + VALID + "\n")
        assert isinstance(result, Found)
        assert result.strategy == "direct"

    def test_fenced_block_amid_prose(self):
        text = (
            "Sure! Here is the data:\n```json\n"
            '{"answer":"y","related_articles":[],"relationship_graph":{"nodes":[],"links":[]}}'
            "\n```\nHope that helps."
        )
        result = recover_json(text)
        assert isinstance(result, Found)
        assert result.strategy == "fenced"
        assert result.value["answer"] == "y"

    def test_brace_span_in_prose(self):
        result = recover_json('Result: {"answer": "z", "n": {"k": 1}} thanks')
        assert result == Found(value={"answer": "z", "n": {"k": 1}}, strategy="braces")

    def test_no_json(self):
        assert recover_json("no json here at all") == NotFound(attempted=())

    def test_malformed_json_is_not_found(self):
        assert recover_json("{not json}") == NotFound(attempted=("direct", "braces"))

    def test_fenced_array_is_not_an_object(self):
        assert isinstance(recover_json("```json\n[1, 2]\n```"), NotFound)

    def test_oversized_integer_moves_to_next_strategy(self):
        text = '{"n": ' + "9" * 5000 + ', "note": "see"} ```json\n' + VALID + "\n``` }"
        result = recover_json(text)
        assert result == Found(value=json.loads(VALID), strategy="fenced")

    def test_deep_nesting_is_not_found(self):
        text = '{"a":' + "[" * 100000 + "]" * 100000 + "}"
        assert recover_json(text) == NotFound(attempted=("direct", "braces"))


class TestNormalize:
    def test_accepts_complete_record_unchanged(self):
        value = json.loads(VALID)
        outcome = normalize(Found(value=value, strategy="direct"), VALID)
        assert isinstance(outcome, Accepted)
        assert outcome.record is value

    def test_missing_key_falls_back(self):
        raw = '{"answer": "x"}'
        outcome = normalize(recover_json(raw), raw)

        assert isinstance(outcome, Fallback)
        assert "related_articles" in outcome.reason
        assert outcome.record["answer"] == raw
        assert outcome.record["relationship_graph"] == EMPTY_GRAPH

    def test_null_key_falls_back(self):
        raw = '{"answer": null, "related_articles": [], "relationship_graph": {}}'
        outcome = normalize(recover_json(raw), raw)
        assert isinstance(outcome, Fallback)
        assert "answer" in outcome.reason

    def test_not_found_falls_back(self):
        outcome = normalize(NotFound(), "plain")
        assert isinstance(outcome, Fallback)
        assert outcome.record["research_gaps"] == []


class TestRecoverAndNormalize:
    def test_exact_object_returned(self):
        assert recover_and_normalize(VALID) == json.loads(VALID)

    def test_fenced_object_recovered(self):
        text = (
            "Sure! Here is the data:\n```json\n"
            '{"answer":"y","related_articles":[],"relationship_graph":{"nodes":[],"links":[]}}'
            "\n```\nHope that helps."
        )
        record = recover_and_normalize(text)
        assert record == {"answer": "y", "related_articles": [], "relationship_graph": EMPTY_GRAPH}

    def test_fallback_for_plain_text(self):
        record = recover_and_normalize("no json here at all")
        assert record["answer"] == "no json here at all"
        assert record["related_articles"] == []
        assert record["relationship_graph"] == EMPTY_GRAPH

    def test_research_gaps_preserved(self):
        value = json.loads(VALID)
        value["research_gaps"] = [{"topic": "t", "description": "d"}]
        assert recover_and_normalize(json.dumps(value)) == value

    def test_oversized_integer_falls_back_to_raw_text(self):
        raw = '{"n": ' + "9" * 5000 + "}"
        record = recover_and_normalize(raw)
        assert record["answer"] == raw
        assert record["relationship_graph"] == EMPTY_GRAPH

    def test_recovery_exception_yields_explanation(self, monkeypatch):
        def explode(_text):
            raise RuntimeError("boom")

        monkeypatch.setattr(normalizer_module, "recover_json", explode)
        record = recover_and_normalize(VALID)

        assert "boom" in record["answer"]
        assert record["related_articles"] == []
        assert record["relationship_graph"] == EMPTY_GRAPH


def test_rag_record_to_dict():
    record = RagRecord(
        answer="a",
        related_articles=[StructuredArticle(title="T", year=2023, authors=["Smith, J."], tags=["x"])],
        relationship_graph=RelationshipGraph(
            nodes=[GraphNode(id="t", name="T", group="Biology")],
            links=[GraphLink(source="t", target="t", value=3)],
        ),
    )
    data = record.to_dict()

    assert data["related_articles"][0] == {"title": "T", "year": 2023, "authors": ["Smith, J."], "tags": ["x"]}
    assert data["relationship_graph"]["links"] == [{"source": "t", "target": "t", "value": 3}]
    assert "research_gaps" not in data


def test_fallback_record_matches_wire_shape():
    gaps = RagRecord(answer="a", research_gaps=[ResearchGap(topic="t", description="d")]).to_dict()
    assert gaps["research_gaps"] == [{"topic": "t", "description": "d"}]

    fallback = normalizer_module.RAG_RECORD_SHAPE.fallback("plain")
    assert fallback == {
        "answer": "plain",
        "related_articles": [],
        "relationship_graph": EMPTY_GRAPH,
        "research_gaps": [],
    }
