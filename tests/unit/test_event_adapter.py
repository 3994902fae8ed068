"""Unit tests for the create event adapter."""

from types import SimpleNamespace

import pytest
from bs4 import BeautifulSoup

from blockadapter.errors import MalformedMarkupError
from blockadapter.event_adapter import (
    adapt_create_event,
    event_block_id,
    event_markup,
    is_create_event,
)
from tests.fixtures import CHAINED, GREEN_FLAG, MALFORMED_FIELD, create_event


class TestShapeRejection:
    """Events that are not block creation events produce no result."""

    @pytest.mark.parametrize(
        "event",
        [
            None,
            "not an event",
            42,
            True,
            {},
            {"blockId": 1, "xml": {}},
            {"blockId": "a"},
            {"xml": {"outerHTML": GREEN_FLAG}},
            {"blockId": "a", "xml": GREEN_FLAG},
            {"blockId": "a", "xml": None},
            {"blockId": "a", "xml": 7},
            [],
            SimpleNamespace(blockId=None, xml={}),
        ],
    )
    def test_rejected(self, event):
        assert is_create_event(event) is False
        assert adapt_create_event(event) is None


class TestAdaptCreateEvent:
    """Tests for adapting matching events."""

    def test_mapping_event(self):
        records = adapt_create_event(create_event(GREEN_FLAG))
        assert [r.to_dict() for r in records] == [{
            "id": "a",
            "opcode": "event_whengreenflag",
            "inputs": {},
            "fields": {},
            "next": None,
            "topLevel": True,
        }]

    def test_attribute_event(self):
        event = SimpleNamespace(blockId="a", xml=SimpleNamespace(outerHTML=CHAINED))
        records = adapt_create_event(event)
        assert [r.id for r in records] == ["a", "b"]

    def test_tag_payload(self):
        soup = BeautifulSoup(CHAINED, "html.parser")
        event = {"blockId": "a", "xml": soup.find("block")}
        assert event_markup(event).startswith("<block")
        assert [r.id for r in adapt_create_event(event)] == ["a", "b"]

    def test_missing_outer_html(self):
        """An xml object without markup yields no blocks, not a rejection."""
        assert adapt_create_event({"blockId": "a", "xml": {}}) == []

    def test_forever_script(self, forever_event):
        records = adapt_create_event(forever_event)
        assert len(records) == 6
        assert [r.id for r in records if r.top_level] == ["hat"]

    def test_malformed_markup_raises(self):
        with pytest.raises(MalformedMarkupError):
            adapt_create_event(create_event(MALFORMED_FIELD))

    def test_block_id(self):
        assert event_block_id(create_event(GREEN_FLAG, block_id="xyz")) == "xyz"
        assert event_block_id({"blockId": 3}) is None
